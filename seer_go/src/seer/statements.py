"""
One-line, human-readable summaries of Go statements and function signatures.
"""
from typing import Optional

from tree_sitter import Node

from seer.models.ast_models import Signature
from seer.tree_sitter_helpers import NIL, code_children, render

ASSIGNMENT_TYPES = ("short_var_declaration", "assignment_statement")
DECLARATION_TYPES = ("var_declaration", "const_declaration", "type_declaration")


def assignment_sides(node: Node) -> tuple[list[Node], list[Node]]:
    """
    The left and right expression lists of an assignment, one node per expression.
    """
    return expression_nodes(node.child_by_field_name("left")), expression_nodes(node.child_by_field_name("right"))


def expression_nodes(node: Optional[Node]) -> list[Node]:
    if node is None:
        return []
    if node.type == "expression_list":
        return code_children(node)
    return [node]


def describe_statement(source_bytes: bytes, stmt: Optional[Node]) -> str:
    if stmt is None:
        return NIL

    if stmt.type in ASSIGNMENT_TYPES:
        lhs, rhs = assignment_sides(stmt)
        parts = ["Assignment:"]
        parts.extend(render(source_bytes, e) for e in lhs)
        parts.append("=")
        parts.extend(render(source_bytes, e) for e in rhs)
        return " ".join(parts)

    if stmt.type in DECLARATION_TYPES:
        return "Declaration: " + render(source_bytes, stmt)

    if stmt.type == "expression_statement":
        children = code_children(stmt)
        return "Expression: " + render(source_bytes, children[0] if children else None)

    if stmt.type == "if_statement":
        return "If Condition: " + render(source_bytes, stmt.child_by_field_name("condition"))

    if stmt.type == "for_statement":
        loop = _describe_for(source_bytes, stmt)
        if loop is not None:
            return loop

    # Generic print if the statement type is unhandled
    return render(source_bytes, stmt)


def _describe_for(source_bytes: bytes, stmt: Node) -> Optional[str]:
    """
    Init/Cond/Post summary of a counted or conditional loop. Range loops
    return None so the caller falls back to plain rendering.
    """
    body = stmt.child_by_field_name("body")
    header = [c for c in code_children(stmt) if body is None or c.id != body.id]

    init = cond = post = None
    if header:
        clause = header[0]
        if clause.type == "range_clause":
            return None
        if clause.type == "for_clause":
            init = clause.child_by_field_name("initializer")
            cond = clause.child_by_field_name("condition")
            post = clause.child_by_field_name("update")
        else:
            # for x < 10 { ... }
            cond = clause

    return "For Loop: Init: {}; Cond: {}; Post: {}".format(
        render(source_bytes, init),
        render(source_bytes, cond),
        render(source_bytes, post),
    )


def describe_signature(signature: Signature) -> str:
    """
    "Parameters: a int, b string | Returns: error"
    """
    text = "Parameters: " + ", ".join(signature.parameters)
    if signature.type_parameters:
        text = "Type Parameters: " + ", ".join(signature.type_parameters) + " | " + text
    if signature.results:
        text += " | Returns: " + ", ".join(signature.results)
    return text
