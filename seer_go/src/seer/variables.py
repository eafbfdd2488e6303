import logging
from typing import Optional

from tree_sitter import Node

from seer.models.ast_models import VariableRecord
from seer.statements import ASSIGNMENT_TYPES, assignment_sides, expression_nodes
from seer.tree_sitter_helpers import code_children, node_point, node_text, render

logger = logging.getLogger(__name__)

UNKNOWN = "unknown"
IDENTIFIER_TYPES = ("identifier", "blank_identifier")


def binding_sides(source_bytes: bytes, node: Node) -> Optional[tuple[list[Node], list[str]]]:
    """
    Left-hand targets and rendered right-hand values of anything that binds
    names like an assignment, or None for other nodes:

        x, y = a, b / x := a          plain assignments
        case v, ok := <-ch:           receive in a select case
        switch t := x.(type) {        the alias of a type switch
    """
    if node.type in ASSIGNMENT_TYPES:
        lhs, rhs = assignment_sides(node)
        return lhs, [render(source_bytes, e) for e in rhs]

    if node.type == "receive_statement":
        left = node.child_by_field_name("left")
        if left is None:
            # case <-ch:
            return None
        return expression_nodes(left), [render(source_bytes, node.child_by_field_name("right"))]

    # The alias is matched as its own node so it is discovered after the
    # switch initializer, in source order.
    parent = node.parent
    if node.type == "expression_list" and parent is not None and parent.type == "type_switch_statement":
        alias = parent.child_by_field_name("alias")
        if alias is not None and alias.id == node.id:
            value = render(source_bytes, parent.child_by_field_name("value"))
            return code_children(node), [value + ".(type)"]

    return None


def extract_variables(source_bytes: bytes, body: Optional[Node], path: Optional[str] = None) -> tuple[VariableRecord, ...]:
    """
    Collects every plain identifier assigned anywhere in `body`, nested blocks
    included, in pre-order discovery order. Each identifier is paired with the
    source text of the right-hand expression at the same position, or
    "unknown" when the right-hand side is shorter (e.g. `v, err := f()`).

    Field, index and pointer targets (`s.x`, `m[k]`, `*p`) are not variables
    and are skipped.
    """
    if body is None:
        return ()

    variables: list[VariableRecord] = []
    stack = [body]
    while stack:
        node = stack.pop()
        sides = binding_sides(source_bytes, node)
        if sides is not None:
            lhs, rhs = sides
            for i, expr in enumerate(lhs):
                if expr.type not in IDENTIFIER_TYPES:
                    continue
                name = node_text(source_bytes, expr)
                var_type = rhs[i] if i < len(rhs) else UNKNOWN
                line, col = node_point(expr)
                if name == "_" and var_type == UNKNOWN:
                    logger.warning(
                        "potential ignored error at %s:%d:%d", path or "<source>", line + 1, col + 1
                    )
                variables.append(VariableRecord(name=name, type=var_type, line=line, col=col))

        # Children pushed in reverse so they pop left to right
        stack.extend(reversed(node.children))

    return tuple(variables)
