"""
Synthesis of the two branches of the replacement ternary.
"""

from __future__ import annotations

from typing import List

from ..errors import InternalConsistencyError
from ..syntax.nodes import SyntaxNode
from ..syntax.visitor import TransformationContext
from .children import get_jsx_children
from .classify import is_else_node, is_empty_text_node, markup_parent_of


def create_jsx_opening_fragment(ctx: TransformationContext, original_node: SyntaxNode) -> SyntaxNode:
    # The opening marker is what maps the synthesized fragment back to the <If>
    return ctx.set_original_node(ctx.factory.create_jsx_opening_fragment(), original_node)


def _wrap_in_fragment(ctx: TransformationContext, original_node: SyntaxNode,
                      children: List[SyntaxNode]) -> SyntaxNode:
    # TODO: a body with exactly one child could skip the fragment
    return ctx.factory.create_jsx_fragment(
        create_jsx_opening_fragment(ctx, original_node),
        children,
        ctx.factory.create_jsx_closing_fragment(),
    )


def create_when_true_expression(ctx: TransformationContext, if_node: SyntaxNode) -> SyntaxNode:
    """Fragment holding the body of the <If>."""
    return _wrap_in_fragment(ctx, if_node, get_jsx_children(if_node))


def get_else_body(if_parent: SyntaxNode, if_node: SyntaxNode) -> List[SyntaxNode]:
    """
    Body of the <Else> following `if_node` among the children of `if_parent`,
    or an empty list when the next non-blank sibling is not an <Else>.
    """
    siblings = get_jsx_children(if_parent)
    sibling_idx = next((i for i, child in enumerate(siblings) if child is if_node), -1)
    if sibling_idx < 0:
        raise InternalConsistencyError("Inexplicable error - <If>s parent does not contain it")

    sibling_idx += 1  # Skip the <If> itself
    while sibling_idx < len(siblings):
        sibling = siblings[sibling_idx]
        if is_empty_text_node(sibling):
            sibling_idx += 1
        elif is_else_node(sibling):
            return get_jsx_children(sibling)
        else:
            break
    return []


def create_when_false_expression(ctx: TransformationContext, if_node: SyntaxNode) -> SyntaxNode:
    """Expression after the colon of the ternary: the <Else> body or `null`."""
    if_parent = markup_parent_of(if_node)
    if if_parent is not None:
        else_children = get_else_body(if_parent, if_node)
        if else_children:
            return _wrap_in_fragment(ctx, if_node, else_children)
    return ctx.factory.create_null()


__all__ = [
    "create_jsx_opening_fragment",
    "create_when_true_expression",
    "create_when_false_expression",
    "get_else_body",
]
