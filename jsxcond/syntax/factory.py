"""
Factory for synthesized nodes.

Existing nodes passed to the factory are reused as they are: their parent
links keep pointing into the source tree.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from .kinds import SyntaxKind
from .nodes import SyntaxNode

# Expressions that must be parenthesized when used as a ternary condition
_LOOSE_BINDING = frozenset({
    "sequence_expression",
    "arrow_function",
    "assignment_expression",
    "augmented_assignment_expression",
    "yield_expression",
    "ternary_expression",
})


def _synth(kind: SyntaxKind, children: Sequence[SyntaxNode] = (), value: Optional[str] = None) -> SyntaxNode:
    return SyntaxNode(
        kind=kind,
        type_name=kind.value,
        children=list(children),
        value=value,
        synthesized=True,
    )


class NodeFactory:

    def create_syntax_list(self, children: Sequence[SyntaxNode]) -> SyntaxNode:
        return _synth(SyntaxKind.SYNTAX_LIST, children)

    def create_jsx_opening_fragment(self) -> SyntaxNode:
        return _synth(SyntaxKind.JSX_OPENING_FRAGMENT)

    def create_jsx_closing_fragment(self) -> SyntaxNode:
        return _synth(SyntaxKind.JSX_CLOSING_FRAGMENT)

    def create_jsx_fragment(self, opening: SyntaxNode, children: List[SyntaxNode],
                            closing: SyntaxNode) -> SyntaxNode:
        return _synth(SyntaxKind.JSX_FRAGMENT, [opening, self.create_syntax_list(children), closing])

    def create_jsx_expression(self, expression: SyntaxNode) -> SyntaxNode:
        return _synth(SyntaxKind.JSX_EXPRESSION, [expression])

    def create_parenthesized_expression(self, expression: SyntaxNode) -> SyntaxNode:
        return _synth(SyntaxKind.PARENTHESIZED_EXPRESSION, [expression])

    def create_conditional_expression(self, condition: SyntaxNode, when_true: SyntaxNode,
                                      when_false: SyntaxNode) -> SyntaxNode:
        if condition.type_name in _LOOSE_BINDING:
            condition = self.create_parenthesized_expression(condition)
        return _synth(SyntaxKind.CONDITIONAL_EXPRESSION, [condition, when_true, when_false])

    def create_null(self) -> SyntaxNode:
        return _synth(SyntaxKind.NULL_KEYWORD, value="null")


__all__ = ["NodeFactory"]
