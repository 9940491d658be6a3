"""
Syntax node model.

Nodes are never edited in place: a transform either returns the node it was
given, a copy produced by ``update`` or a freshly synthesized node. Copies and
synthesized replacements keep an ``original`` link back to the node they were
derived from, which is what the printer uses to map output to source.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import List, Optional

from .kinds import SyntaxKind


@dataclass(eq=False)
class SyntaxNode:
    kind: SyntaxKind
    type_name: str = ""
    children: List[SyntaxNode] = field(default_factory=list)
    # Text, identifier name, unquoted string, tag name or module name
    value: Optional[str] = None
    # Character span in the source text, -1 for synthesized nodes
    pos: int = -1
    end: int = -1
    is_named: bool = True
    parent: Optional[SyntaxNode] = field(default=None, repr=False)
    original: Optional[SyntaxNode] = field(default=None, repr=False)
    synthesized: bool = False

    @property
    def kind_name(self) -> str:
        """Kind name used in diagnostics (grammar type for unknown nodes)."""
        if self.kind is SyntaxKind.UNKNOWN:
            return self.type_name or self.kind.value
        return self.kind.value

    @property
    def has_source(self) -> bool:
        return self.pos >= 0 and not self.synthesized

    def update(self, children: List[SyntaxNode]) -> SyntaxNode:
        """Copy of this node with new children, derived from this node."""
        return replace(self, children=list(children), original=self)

    # ---- Element / fragment accessors ----

    @property
    def opening(self) -> Optional[SyntaxNode]:
        if self.kind in (SyntaxKind.JSX_ELEMENT, SyntaxKind.JSX_FRAGMENT) and self.children:
            return self.children[0]
        if self.kind is SyntaxKind.JSX_SELF_CLOSING_ELEMENT:
            return self
        return None

    @property
    def tag_name(self) -> Optional[str]:
        """Tag name text of an element, None for fragments and other nodes."""
        opening = self.opening
        if opening is None or not opening.children:
            return None
        if opening.kind not in (SyntaxKind.JSX_OPENING_ELEMENT, SyntaxKind.JSX_SELF_CLOSING_ELEMENT):
            return None
        return opening.children[0].value

    @property
    def attributes(self) -> Optional[SyntaxNode]:
        opening = self.opening
        if opening is None:
            return None
        for child in opening.children:
            if child.kind is SyntaxKind.JSX_ATTRIBUTES:
                return child
        return None

    @property
    def body(self) -> List[SyntaxNode]:
        """Children of the body list of an element or fragment (unvalidated)."""
        if self.kind not in (SyntaxKind.JSX_ELEMENT, SyntaxKind.JSX_FRAGMENT):
            return []
        for child in self.children:
            if child.kind is SyntaxKind.SYNTAX_LIST:
                return child.children
        return []

    # ---- Attribute accessors ----

    @property
    def name(self) -> Optional[str]:
        if self.kind is SyntaxKind.JSX_ATTRIBUTE and self.children:
            return self.children[0].value
        return None

    @property
    def initializer(self) -> Optional[SyntaxNode]:
        if self.kind is SyntaxKind.JSX_ATTRIBUTE and len(self.children) > 1:
            return self.children[-1]
        return None

    # ---- Expression container accessors ----

    @property
    def expression(self) -> Optional[SyntaxNode]:
        """Wrapped expression of a JsxExpression or ParenthesizedExpression."""
        if self.kind not in (SyntaxKind.JSX_EXPRESSION, SyntaxKind.PARENTHESIZED_EXPRESSION):
            return None
        for child in self.children:
            if child.is_named and child.type_name != "comment":
                return child
        return None

    # ---- Import accessors ----

    @property
    def module_specifier(self) -> Optional[str]:
        if self.kind is SyntaxKind.IMPORT_DECLARATION:
            return self.value
        return None


def get_original_node(node: SyntaxNode) -> SyntaxNode:
    """Follow the provenance chain down to the node it started from."""
    while node.original is not None:
        node = node.original
    return node


@dataclass
class SourceFile:
    file_name: str
    text: str
    root: SyntaxNode

    def with_root(self, root: SyntaxNode) -> SourceFile:
        return SourceFile(self.file_name, self.text, root)


__all__ = ["SyntaxNode", "SourceFile", "get_original_node"]
