import logging
from typing import Optional, Union

import tree_sitter_go
from tree_sitter import Language, Node, Parser, Tree

from seer.models.ast_models import FunctionRecord, Signature
from seer.tree_sitter_helpers import (
    code_children,
    comment_text,
    leading_comments,
    node_point,
    node_text,
    render,
    render_field_list,
)
from seer.variables import extract_variables

logger = logging.getLogger(__name__)

FUNCTION_TYPES = ("function_declaration", "method_declaration")

# Per-file map key: the function name, or (receiver type, name) when keyed by receiver
FunctionKey = Union[str, tuple[str, str]]


class GoParseError(ValueError):
    """Raised when a file is not valid Go source."""


# --- Tree-sitter language loading -------------------------------------------

def load_go_language() -> Language:
    """
    Loads the Tree-sitter Go grammar shipped by the `tree-sitter-go` wheel.
    """
    return Language(tree_sitter_go.language())


# --- Per-file visitor --------------------------------------------------------

class FunctionAnalyzer:
    """
    Visits one parsed file and records every function and method declaration
    in `functions`.

    By default records are keyed by function name, so methods sharing a name
    on different receiver types overwrite each other (the last one wins).
    With `key_by_receiver=True` they are keyed by (receiver type, name) and
    all of them are kept.
    """

    def __init__(self, source_bytes: bytes, path: str = "", package: str = "",
                 key_by_receiver: bool = False):
        self.source_bytes = source_bytes
        self.path = path
        self.package = package
        self.key_by_receiver = key_by_receiver
        self.functions: dict[FunctionKey, FunctionRecord] = {}

    def walk(self, root: Node) -> dict[FunctionKey, FunctionRecord]:
        """
        Pre-order DFS driving `visit`. A visitor of None prunes the subtree.
        """
        stack: list[tuple[Node, "FunctionAnalyzer"]] = [(root, self)]
        while stack:
            node, visitor = stack.pop()
            child_visitor = visitor.visit(node)
            if child_visitor is None:
                continue
            stack.extend((child, child_visitor) for child in reversed(node.children))
        return self.functions

    def visit(self, node: Optional[Node]) -> Optional["FunctionAnalyzer"]:
        if node is None:
            return None
        if node.type in FUNCTION_TYPES:
            record = self._build_record(node)
            self.functions[self._key(record)] = record
        # Keep descending so every declaration is found
        return self

    def _key(self, record: FunctionRecord) -> FunctionKey:
        if self.key_by_receiver:
            return (record.recv_type, record.name)
        return record.name

    def _build_record(self, node: Node) -> FunctionRecord:
        src = self.source_bytes
        name_node = node.child_by_field_name("name")
        body = node.child_by_field_name("body")
        recv_node = node.child_by_field_name("receiver")
        line, col = node_point(node)

        return FunctionRecord(
            doc=comment_text(src, leading_comments(node)),
            recv=render_field_list(src, recv_node),
            name=node_text(src, name_node) if name_node else "<anonymous>",
            signature=self._signature(node),
            variables=extract_variables(src, body, self.path),
            body=body,
            recv_type=self._receiver_type(recv_node),
            package=self.package,
            path=self.path,
            line=line,
            col=col,
            source=src,
        )

    def _signature(self, node: Node) -> Signature:
        src = self.source_bytes
        result = node.child_by_field_name("result")
        if result is None:
            results: tuple[str, ...] = ()
        elif result.type == "parameter_list":
            # (int, error) or (n int, err error)
            results = tuple(node_text(src, r) for r in code_children(result))
        else:
            results = (node_text(src, result),)

        type_params = node.child_by_field_name("type_parameters")
        params = node.child_by_field_name("parameters")
        return Signature(
            type_parameters=tuple(node_text(src, p) for p in code_children(type_params)) if type_params else (),
            parameters=tuple(node_text(src, p) for p in code_children(params)) if params else (),
            results=results,
        )

    def _receiver_type(self, recv_node: Optional[Node]) -> str:
        if recv_node is None:
            return ""
        for param in code_children(recv_node):
            type_node = param.child_by_field_name("type")
            if type_node is not None:
                return render(self.source_bytes, type_node)
        return ""


# --- The Indexer -------------------------------------------------------------

def composite_key(record: FunctionRecord, key_by_receiver: bool = False) -> str:
    """
    "pkg.Name (path)", or "pkg.(*T).Name (path)" for methods when keyed by receiver.
    """
    qualified = record.name
    if key_by_receiver and record.recv_type:
        recv_type = record.recv_type
        if recv_type.startswith("*"):
            recv_type = f"({recv_type})"
        qualified = f"{recv_type}.{record.name}"
    return f"{record.package}.{qualified} ({record.path})"


class GoIndexer:
    """
    Parses Go files and accumulates their functions into one table:
    composite key -> FunctionRecord. One indexer is one analysis; nothing is
    shared between instances.
    """

    def __init__(self, key_by_receiver: bool = False):
        self.language = load_go_language()
        self.parser = Parser(self.language)
        self.key_by_receiver = key_by_receiver

        # In-memory index
        self.packages: set[str] = set()
        self.functions: dict[str, FunctionRecord] = {}  # composite key -> FunctionRecord

    def parse(self, source: Union[str, bytes]) -> Tree:
        """
        Parses a single source text into a Tree-sitter tree.
        """
        if isinstance(source, str):
            source = source.encode("utf-8")
        return self.parser.parse(source)

    def index_source(self, source: Union[str, bytes], file_path: str = "<source>") -> dict[str, FunctionRecord]:
        """
        Parses & indexes one Go file. Returns this file's records by composite
        key after merging them into `functions` (later keys overwrite).
        Raises GoParseError if the file is not valid Go.
        """
        source_bytes = source.encode("utf-8") if isinstance(source, str) else source
        tree = self.parse(source_bytes)
        root = tree.root_node

        if root.has_error:
            line, col = _first_error_point(root)
            raise GoParseError(f"{file_path}:{line + 1}:{col + 1}: syntax error")
        package = self._find_package(source_bytes, root)
        if package is None:
            raise GoParseError(f"{file_path}: expected 'package' clause")
        self.packages.add(package)

        analyzer = FunctionAnalyzer(source_bytes, file_path, package, self.key_by_receiver)
        found = analyzer.walk(root)

        indexed: dict[str, FunctionRecord] = {}
        for record in found.values():
            indexed[composite_key(record, self.key_by_receiver)] = record
        self.functions.update(indexed)
        logger.debug("Indexed %d function(s) from %s", len(indexed), file_path)
        return indexed

    # -- AST helpers ----------------------------------------------------------

    def _find_package(self, source_bytes: bytes, root: Node) -> Optional[str]:
        """
        Grabs the package name from the 'package_clause' node if present.
        """
        for child in root.children:
            if child.type == "package_clause":
                for part in child.named_children:
                    if part.type == "package_identifier":
                        return node_text(source_bytes, part)
        return None


def _first_error_point(root: Node) -> tuple[int, int]:
    stack = [root]
    while stack:
        node = stack.pop()
        if node.type == "ERROR" or node.is_missing:
            return node_point(node)
        stack.extend(reversed(node.children))
    return node_point(root)
