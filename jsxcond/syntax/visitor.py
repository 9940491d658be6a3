"""
Transformation context: node factory, child visitation and provenance.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List, Optional

from .factory import NodeFactory
from .nodes import SyntaxNode

# A visitor returns the node itself, a replacement, or None to delete it
Visitor = Callable[[SyntaxNode], Optional[SyntaxNode]]


@dataclass
class TransformationContext:
    """Per-file transformation context. Not reused across files."""
    file_name: str = ""
    factory: NodeFactory = field(default_factory=NodeFactory)

    def visit_each_child(self, node: SyntaxNode, visitor: Visitor) -> SyntaxNode:
        """
        Apply the visitor to every child of the node.

        Returns the node itself when no child changed, otherwise an updated
        copy derived from it.
        """
        changed = False
        new_children: List[SyntaxNode] = []
        for child in node.children:
            visited = visitor(child)
            if visited is not child:
                changed = True
            if visited is not None:
                new_children.append(visited)
        if not changed:
            return node
        return node.update(new_children)

    @staticmethod
    def set_original_node(node: SyntaxNode, original: SyntaxNode) -> SyntaxNode:
        """Record which node `node` was derived from (used for source mapping)."""
        node.original = original
        return node


__all__ = ["TransformationContext", "Visitor"]
