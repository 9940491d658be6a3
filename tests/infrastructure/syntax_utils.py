"""
Helpers for parsing snippets and building syntax trees by hand.
"""

from __future__ import annotations

from typing import Callable, List, Optional

from jsxcond.engine import transform_text
from jsxcond.syntax import SourceFile, SyntaxKind, SyntaxNode, parse_source


def rewrite(code: str, file_name: str = "test.tsx") -> str:
    return transform_text(code, file_name)


def squash(code: str) -> str:
    """Collapse whitespace runs so assertions do not depend on layout."""
    return " ".join(code.split())


def parse(code: str, file_name: str = "test.tsx") -> SourceFile:
    return parse_source(code, file_name)


def find_all(node: SyntaxNode, predicate: Callable[[SyntaxNode], bool]) -> List[SyntaxNode]:
    results: List[SyntaxNode] = []

    def visit(n: SyntaxNode) -> None:
        if predicate(n):
            results.append(n)
        for child in n.children:
            visit(child)

    visit(node)
    return results


def find_first(node: SyntaxNode, predicate: Callable[[SyntaxNode], bool]) -> Optional[SyntaxNode]:
    found = find_all(node, predicate)
    return found[0] if found else None


def tag(name: str) -> Callable[[SyntaxNode], bool]:
    """Predicate matching elements with the given tag name."""
    return lambda n: n.kind is SyntaxKind.JSX_ELEMENT and n.tag_name == name


# ---- Hand-built trees ----

def _link(node: SyntaxNode) -> SyntaxNode:
    for child in node.children:
        child.parent = node
    return node


def text(value: str) -> SyntaxNode:
    return SyntaxNode(kind=SyntaxKind.JSX_TEXT, type_name="jsx_text", value=value)


def element(name: str, *children: SyntaxNode, body_kind: SyntaxKind = SyntaxKind.SYNTAX_LIST) -> SyntaxNode:
    tag_name = SyntaxNode(kind=SyntaxKind.IDENTIFIER, type_name="identifier", value=name)
    attrs = SyntaxNode(kind=SyntaxKind.JSX_ATTRIBUTES, type_name="JsxAttributes")
    opening = _link(SyntaxNode(kind=SyntaxKind.JSX_OPENING_ELEMENT, children=[tag_name, attrs]))
    body = _link(SyntaxNode(kind=body_kind, type_name=body_kind.value, children=list(children)))
    closing = SyntaxNode(kind=SyntaxKind.JSX_CLOSING_ELEMENT)
    return _link(SyntaxNode(kind=SyntaxKind.JSX_ELEMENT, children=[opening, body, closing]))


def fragment(*children: SyntaxNode) -> SyntaxNode:
    opening = SyntaxNode(kind=SyntaxKind.JSX_OPENING_FRAGMENT)
    body = _link(SyntaxNode(kind=SyntaxKind.SYNTAX_LIST, type_name="SyntaxList", children=list(children)))
    closing = SyntaxNode(kind=SyntaxKind.JSX_CLOSING_FRAGMENT)
    return _link(SyntaxNode(kind=SyntaxKind.JSX_FRAGMENT, children=[opening, body, closing]))
