"""
Printer for transformed trees.

Source nodes print as their exact source text. Updated copies of source nodes
print the source text of the node they were derived from with the changed
children spliced in. Synthesized nodes print structurally.
"""

from __future__ import annotations

from typing import Dict, List

from .kinds import SyntaxKind
from .nodes import SourceFile, SyntaxNode, get_original_node
from .range_edits import RangeEditor


class Printer:

    def __init__(self, source_file: SourceFile):
        self.text = source_file.text

    def print(self, node: SyntaxNode) -> str:
        if node.synthesized:
            return self._print_synthesized(node)
        source = get_original_node(node)
        if source.synthesized or source.pos < 0:
            return self._print_synthesized(node)
        if source is node:
            return self.text[node.pos:node.end]
        return self._print_updated(node, source)

    def _print_updated(self, node: SyntaxNode, source: SyntaxNode) -> str:
        editor = RangeEditor(self.text[source.pos:source.end])
        by_origin: Dict[int, SyntaxNode] = {}
        for child in node.children:
            by_origin[id(get_original_node(child))] = child

        for old in source.children:
            new = by_origin.get(id(old))
            if new is old:
                continue
            start, end = old.pos - source.pos, old.end - source.pos
            if new is None:
                editor.add_deletion(start, end)
            else:
                editor.add_replacement(start, end, self.print(new))
        return editor.apply_edits()

    def _print_synthesized(self, node: SyntaxNode) -> str:
        kind = node.kind
        parts: List[str] = [self.print(c) for c in node.children]
        if kind is SyntaxKind.JSX_EXPRESSION:
            return "{" + "".join(parts) + "}"
        if kind is SyntaxKind.PARENTHESIZED_EXPRESSION:
            return "(" + "".join(parts) + ")"
        if kind is SyntaxKind.CONDITIONAL_EXPRESSION:
            condition, when_true, when_false = parts
            return f"{condition} ? {when_true} : {when_false}"
        if kind is SyntaxKind.JSX_OPENING_FRAGMENT:
            return "<>"
        if kind is SyntaxKind.JSX_CLOSING_FRAGMENT:
            return "</>"
        if kind is SyntaxKind.NULL_KEYWORD:
            return "null"
        # Fragments, syntax lists and anything else: children in order
        return "".join(parts)


def get_text(source_file: SourceFile, node: SyntaxNode) -> str:
    """Text of a node as it currently prints."""
    return Printer(source_file).print(node)


def print_source_file(source_file: SourceFile) -> str:
    return Printer(source_file).print(source_file.root)


__all__ = ["Printer", "get_text", "print_source_file"]
