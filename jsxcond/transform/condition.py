from __future__ import annotations

from typing import Optional

from ..errors import MalformedConditionError, MissingConditionError
from ..syntax.kinds import SyntaxKind
from ..syntax.nodes import SyntaxNode

CONDITION_ATTR = "condition"


def find_condition_attribute(if_node: SyntaxNode) -> Optional[SyntaxNode]:
    """First attribute named exactly `condition`; spread attributes are skipped."""
    attributes = if_node.attributes
    if attributes is None:
        return None
    # Every attribute node is examined, including ones without a name
    for attr in attributes.children:
        if attr.kind is SyntaxKind.JSX_ATTRIBUTE and attr.name == CONDITION_ATTR:
            return attr
    return None


def get_condition_expression(if_node: SyntaxNode) -> SyntaxNode:
    """
    Expression wrapped by the `condition={...}` attribute of an <If>.

    Raises:
        MissingConditionError: no `condition` attribute.
        MalformedConditionError: the value is not an expression container, or
            the container is empty.
    """
    condition_attr = find_condition_attribute(if_node)
    if condition_attr is None:
        raise MissingConditionError(f"Missing '{CONDITION_ATTR}' property")

    initializer = condition_attr.initializer
    if initializer is None or initializer.kind is not SyntaxKind.JSX_EXPRESSION:
        found = initializer.kind_name if initializer is not None else "no value"
        raise MalformedConditionError(f"'{CONDITION_ATTR}' property should be type JsxExpression, found {found}")

    expression = initializer.expression
    if expression is None:
        raise MalformedConditionError(
            f"'{CONDITION_ATTR}' property should be type JsxExpression, found empty JsxExpression"
        )
    return expression


__all__ = ["CONDITION_ATTR", "find_condition_attribute", "get_condition_expression"]
