"""Shared fixtures: a fresh indexer per test and helpers to write/parse Go snippets."""
from textwrap import dedent

import pytest

from seer.indexer import GoIndexer
from seer.tree_sitter_helpers import code_children


@pytest.fixture
def indexer():
    return GoIndexer()


@pytest.fixture
def write_go(tmp_path):
    def _write(relpath, code):
        path = tmp_path / relpath
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(dedent(code).lstrip())
        return path
    return _write


def first_function(indexer, code):
    """Parses `code` and returns (source bytes, first function/method declaration node)."""
    source = dedent(code).lstrip().encode("utf-8")
    root = indexer.parse(source).root_node
    for child in root.named_children:
        if child.type in ("function_declaration", "method_declaration"):
            return source, child
    raise AssertionError("no function in snippet")


def body_statements(indexer, code):
    """Parses `code` and returns (source bytes, statements of the first function body)."""
    source, fn = first_function(indexer, code)
    statements = []
    for child in code_children(fn.child_by_field_name("body")):
        if child.type == "statement_list":
            statements.extend(code_children(child))
        else:
            statements.append(child)
    return source, statements
