"""
Syntax kinds of the JSX/TSX tree the rewrite engine works on.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict


class SyntaxKind(str, Enum):
    SOURCE_FILE = "SourceFile"
    IMPORT_DECLARATION = "ImportDeclaration"

    JSX_ELEMENT = "JsxElement"
    JSX_SELF_CLOSING_ELEMENT = "JsxSelfClosingElement"
    JSX_FRAGMENT = "JsxFragment"
    JSX_OPENING_ELEMENT = "JsxOpeningElement"
    JSX_CLOSING_ELEMENT = "JsxClosingElement"
    JSX_OPENING_FRAGMENT = "JsxOpeningFragment"
    JSX_CLOSING_FRAGMENT = "JsxClosingFragment"
    JSX_ATTRIBUTES = "JsxAttributes"
    JSX_ATTRIBUTE = "JsxAttribute"
    JSX_SPREAD_ATTRIBUTE = "JsxSpreadAttribute"
    JSX_TEXT = "JsxText"
    JSX_EXPRESSION = "JsxExpression"

    SYNTAX_LIST = "SyntaxList"
    CONDITIONAL_EXPRESSION = "ConditionalExpression"
    PARENTHESIZED_EXPRESSION = "ParenthesizedExpression"
    STRING_LITERAL = "StringLiteral"
    IDENTIFIER = "Identifier"
    NULL_KEYWORD = "NullKeyword"

    # Any grammar node the engine has no special knowledge of
    UNKNOWN = "Unknown"

    @staticmethod
    def from_grammar(type_name: str) -> SyntaxKind:
        """Map a tree-sitter node type onto a kind (UNKNOWN if not recognized)."""
        return _GRAMMAR_KINDS.get(type_name, SyntaxKind.UNKNOWN)


# Grammar types that map one-to-one. JSX elements, fragments and their
# tags are resolved structurally by the parser.
_GRAMMAR_KINDS: Dict[str, SyntaxKind] = {
    "program": SyntaxKind.SOURCE_FILE,
    "import_statement": SyntaxKind.IMPORT_DECLARATION,
    "jsx_self_closing_element": SyntaxKind.JSX_SELF_CLOSING_ELEMENT,
    "jsx_attribute": SyntaxKind.JSX_ATTRIBUTE,
    "jsx_text": SyntaxKind.JSX_TEXT,
    "jsx_expression": SyntaxKind.JSX_EXPRESSION,
    "ternary_expression": SyntaxKind.CONDITIONAL_EXPRESSION,
    "parenthesized_expression": SyntaxKind.PARENTHESIZED_EXPRESSION,
    "string": SyntaxKind.STRING_LITERAL,
    "identifier": SyntaxKind.IDENTIFIER,
    "property_identifier": SyntaxKind.IDENTIFIER,
    "null": SyntaxKind.NULL_KEYWORD,
}

MARKUP_PARENT_KINDS = frozenset({SyntaxKind.JSX_ELEMENT, SyntaxKind.JSX_FRAGMENT})

# Kinds allowed inside the body of an element or fragment
JSX_CHILD_KINDS = frozenset({
    SyntaxKind.JSX_TEXT,
    SyntaxKind.JSX_EXPRESSION,
    SyntaxKind.JSX_ELEMENT,
    SyntaxKind.JSX_SELF_CLOSING_ELEMENT,
    SyntaxKind.JSX_FRAGMENT,
})


__all__ = ["SyntaxKind", "MARKUP_PARENT_KINDS", "JSX_CHILD_KINDS"]
