# --- Tree-sitter plumbing ----------------------------------------------------
import re
from typing import Iterable, Optional

from tree_sitter import Node

NIL = "<nil>"

# //go:generate, //line, //export ... are tool directives, not documentation
_DIRECTIVE = re.compile(r"^(line |extern |export |[a-z0-9]+:[a-z0-9])")


def node_text(source_bytes: bytes, node: Node) -> str:
    """
    Converts a node's [start_byte:end_byte] into the corresponding string.
    Tree-sitter nodes only store byte offsets, so we slice the original source.
    """
    return source_bytes[node.start_byte:node.end_byte].decode("utf-8", errors="replace")


def node_point(node: Node) -> tuple[int, int]:
    """
    Returns the (line, column) of a node's start in 0-based coordinates.
    Handy for displaying where a function/variable was found.
    """
    return (node.start_point[0], node.start_point[1])


def render(source_bytes: bytes, node: Optional[Node]) -> str:
    """
    Source text of any node, or the "<nil>" sentinel when there is no node.
    Never raises.
    """
    if node is None:
        return NIL
    return node_text(source_bytes, node)


def code_children(node: Node) -> list[Node]:
    """Named children of a node, without the comments tree-sitter attaches as extras."""
    return [child for child in node.named_children if child.type != "comment"]


def render_field_list(source_bytes: bytes, node: Optional[Node]) -> str:
    """
    Renders a receiver/parameter list without its parentheses:
    "(t *T)" -> "t *T", "(a, b int, c string)" -> "a, b int, c string".
    Empty string for a missing or empty list.
    """
    if node is None:
        return ""
    fields = code_children(node)
    if not fields:
        return ""
    return ", ".join(node_text(source_bytes, f) for f in fields)


def leading_comments(node: Node) -> list[Node]:
    """
    The comment group directly above a declaration, in source order.

    A group is a run of comments on consecutive lines whose last comment ends
    on the line right before the declaration. A comment that trails code on
    its own line belongs to that code, not to the group.
    """
    group: list[Node] = []
    next_row = node.start_point[0]
    sibling = node.prev_named_sibling
    while sibling is not None and sibling.type == "comment" and sibling.end_point[0] == next_row - 1:
        group.append(sibling)
        next_row = sibling.start_point[0]
        sibling = sibling.prev_named_sibling

    if group and sibling is not None and sibling.end_point[0] == group[-1].start_point[0]:
        group.pop()
    group.reverse()
    return group


def comment_text(source_bytes: bytes, comments: Iterable[Node]) -> str:
    """
    Text of a comment group with the comment markers removed, the way Go
    presents doc comments: directives dropped, trailing spaces stripped,
    leading/trailing blank lines removed, blank runs collapsed, and a final
    newline. Empty string if nothing is left.
    """
    lines: list[str] = []
    for comment in comments:
        text = node_text(source_bytes, comment)
        if text.startswith("//"):
            text = text[2:]
            if text.startswith(" "):
                text = text[1:]
            elif _DIRECTIVE.match(text):
                continue
        elif text.startswith("/*"):
            text = text[2:-2]
        lines.extend(line.rstrip() for line in text.split("\n"))

    out: list[str] = []
    for line in lines:
        if line or (out and out[-1]):
            out.append(line)
    while out and not out[-1]:
        out.pop()
    if not out:
        return ""
    return "\n".join(out) + "\n"
