"""
Node classification for the If/Else construct.

Control tags are recognized by tag name only. A user component that happens
to be called `If` or `Else` is indistinguishable from the construct and will
be rewritten as one.
"""

from __future__ import annotations

from typing import Optional

from ..syntax.kinds import MARKUP_PARENT_KINDS, SyntaxKind
from ..syntax.nodes import SyntaxNode

IF_TAG = "If"
ELSE_TAG = "Else"
CONTROL_TAGS = frozenset({IF_TAG, ELSE_TAG})


def _control_tag(node: SyntaxNode) -> Optional[str]:
    if node.kind is not SyntaxKind.JSX_ELEMENT:
        return None
    tag = node.tag_name
    return tag if tag in CONTROL_TAGS else None


def is_if_node(node: SyntaxNode) -> bool:
    return _control_tag(node) == IF_TAG


def is_else_node(node: SyntaxNode) -> bool:
    return _control_tag(node) == ELSE_TAG


def is_empty_text_node(node: SyntaxNode) -> bool:
    return node.kind is SyntaxKind.JSX_TEXT and len((node.value or "").strip()) == 0


def is_markup_parent(node: Optional[SyntaxNode]) -> bool:
    return node is not None and node.kind in MARKUP_PARENT_KINDS


def markup_parent_of(node: SyntaxNode) -> Optional[SyntaxNode]:
    """Element or fragment whose body holds the node, if any."""
    body = node.parent
    if body is None or body.kind is not SyntaxKind.SYNTAX_LIST:
        return None
    owner = body.parent
    return owner if is_markup_parent(owner) else None


def tag_to_str(parent: SyntaxNode) -> str:
    if parent.kind is SyntaxKind.JSX_ELEMENT:
        return f"<{parent.tag_name} />"
    return "fragment"


__all__ = [
    "IF_TAG",
    "ELSE_TAG",
    "CONTROL_TAGS",
    "is_if_node",
    "is_else_node",
    "is_empty_text_node",
    "is_markup_parent",
    "markup_parent_of",
    "tag_to_str",
]
