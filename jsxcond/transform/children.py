"""
Validated body children of an element or fragment.
"""

from __future__ import annotations

from typing import List

from ..errors import MalformedBodyError
from ..syntax.kinds import JSX_CHILD_KINDS, SyntaxKind
from ..syntax.nodes import SyntaxNode
from .classify import tag_to_str

EXPECTED_NUM_CHILDREN = 3  # opening marker, body list, closing marker


def get_jsx_children(parent: SyntaxNode) -> List[SyntaxNode]:
    """
    Return the body children of an element or fragment.

    Raises:
        MalformedBodyError: the parent does not decompose into opening marker,
            body list and closing marker, or the body holds kinds other than
            text, expression containers, elements and fragments (all of the
            offending kinds are reported together).
    """
    children = parent.children
    if len(children) != EXPECTED_NUM_CHILDREN:
        raise MalformedBodyError(
            f"{tag_to_str(parent)} has {len(children)} children, expected {EXPECTED_NUM_CHILDREN}"
        )

    syntax_list = children[1]
    if syntax_list.kind is not SyntaxKind.SYNTAX_LIST:
        raise MalformedBodyError(f"{tag_to_str(parent)} to contain SyntaxList, found {syntax_list.kind_name}")

    mismatches = [child.kind_name for child in syntax_list.children if child.kind not in JSX_CHILD_KINDS]
    if mismatches:
        raise MalformedBodyError(
            f"Unexpected type(s) in syntax list of {tag_to_str(parent)}: " + ", ".join(mismatches)
        )

    return list(syntax_list.children)


__all__ = ["get_jsx_children", "EXPECTED_NUM_CHILDREN"]
