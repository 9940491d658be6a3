from __future__ import annotations

from ..errors import OrphanedElseError
from ..syntax.nodes import SyntaxNode
from .classify import is_else_node, is_empty_text_node, is_if_node

ORPHANED_ELSE_MESSAGE = "<Else> has no matching <If>. Only whitespace is allowed between them."


def check_for_orphaned_else(parent: SyntaxNode) -> None:
    """
    Make sure every <Else> among the parent's children directly follows an
    <If>, whitespace-only text aside.
    """
    children = parent.body
    for idx, child in enumerate(children):
        if not is_else_node(child):
            continue
        # Walk backwards to the nearest sibling that is not blank text
        sibling_idx = idx - 1
        while sibling_idx >= 0 and is_empty_text_node(children[sibling_idx]):
            sibling_idx -= 1
        if sibling_idx < 0 or not is_if_node(children[sibling_idx]):
            raise OrphanedElseError(ORPHANED_ELSE_MESSAGE)


__all__ = ["check_for_orphaned_else", "ORPHANED_ELSE_MESSAGE"]
