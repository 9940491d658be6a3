"""
Tree-sitter front end: parses TSX/JSX/TypeScript source and converts the
concrete tree into ``SyntaxNode`` objects.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from tree_sitter import Language, Node, Parser, Tree

from .kinds import SyntaxKind
from .nodes import SourceFile, SyntaxNode

logger = logging.getLogger(__name__)

# Grammar nodes that are plain text when they appear in an element body
_TEXT_LIKE = frozenset({"jsx_text", "html_character_reference", "comment"})


def get_language(ext: str) -> Language:
    import tree_sitter_typescript as tsts
    if ext == "ts":
        # TS and TSX have two different grammars in one package
        return Language(tsts.language_typescript())
    return Language(tsts.language_tsx())


class TreeSitterDocument:
    """
    Parsed document: tree-sitter tree plus conversion helpers between byte
    offsets and character offsets.
    """

    def __init__(self, text: str, ext: str):
        self.text = text
        self.ext = ext
        self._text_bytes = text.encode("utf-8")
        self._char_offsets: Optional[List[int]] = None
        if len(self._text_bytes) != len(text):
            self._char_offsets = _build_char_offsets(text)
        self.tree: Tree = Parser(get_language(ext)).parse(self._text_bytes)

    @property
    def root_node(self) -> Node:
        return self.tree.root_node

    def has_error(self) -> bool:
        return self.root_node.has_error

    def byte_to_char_position(self, byte_pos: int) -> int:
        if self._char_offsets is None:
            return byte_pos
        if byte_pos <= 0:
            return 0
        if byte_pos >= len(self._char_offsets):
            return len(self.text)
        return self._char_offsets[byte_pos]

    def get_node_text(self, node: Node) -> str:
        return self._text_bytes[node.start_byte:node.end_byte].decode("utf-8")

    def slice_bytes(self, start_byte: int, end_byte: int) -> str:
        return self._text_bytes[start_byte:end_byte].decode("utf-8")


def _build_char_offsets(text: str) -> List[int]:
    """Table mapping every byte offset to the character it belongs to."""
    offsets: List[int] = []
    for idx, ch in enumerate(text):
        offsets.extend([idx] * len(ch.encode("utf-8")))
    offsets.append(len(text))
    return offsets


def _ext_of(file_name: str) -> str:
    _, dot, ext = file_name.rpartition(".")
    return ext.lower() if dot else "tsx"


def parse_source(text: str, file_name: str = "<input>.tsx") -> SourceFile:
    """Parse source text into a ``SourceFile``."""
    doc = TreeSitterDocument(text, _ext_of(file_name))
    if doc.has_error():
        logger.warning("Syntax errors while parsing %s; conversion continues on a partial tree", file_name)
    root = _Converter(doc).convert(doc.root_node, None)
    return SourceFile(file_name=file_name, text=text, root=root)


class _Converter:
    """Converts a tree-sitter tree into SyntaxNode objects."""

    def __init__(self, doc: TreeSitterDocument):
        self.doc = doc

    def _span(self, node: SyntaxNode, start_byte: int, end_byte: int) -> SyntaxNode:
        node.pos = self.doc.byte_to_char_position(start_byte)
        node.end = self.doc.byte_to_char_position(end_byte)
        return node

    def _make(self, kind: SyntaxKind, ts_node: Node, parent: Optional[SyntaxNode]) -> SyntaxNode:
        node = SyntaxNode(kind=kind, type_name=ts_node.type, is_named=ts_node.is_named, parent=parent)
        return self._span(node, ts_node.start_byte, ts_node.end_byte)

    def convert(self, ts_node: Node, parent: Optional[SyntaxNode]) -> SyntaxNode:
        t = ts_node.type
        if t in ("jsx_element", "jsx_fragment"):
            return self._element(ts_node, parent)
        if t == "jsx_self_closing_element":
            return self._self_closing(ts_node, parent)
        if t == "jsx_attribute":
            return self._attribute(ts_node, parent)
        if t == "import_statement":
            return self._import(ts_node, parent)

        node = self._make(SyntaxKind.from_grammar(t), ts_node, parent)
        if parent is None:
            # The root covers leading and trailing trivia too
            node.pos, node.end = 0, len(self.doc.text)
        if node.kind in (SyntaxKind.IDENTIFIER, SyntaxKind.JSX_TEXT):
            node.value = self.doc.get_node_text(ts_node)
        elif node.kind is SyntaxKind.STRING_LITERAL:
            node.value = _unquote(self.doc.get_node_text(ts_node))
        node.children = [self.convert(c, node) for c in ts_node.children]
        return node

    # ---- JSX ----

    def _element(self, ts_node: Node, parent: Optional[SyntaxNode]) -> SyntaxNode:
        open_tag = ts_node.child_by_field_name("open_tag")
        close_tag = ts_node.child_by_field_name("close_tag")
        if open_tag is None or close_tag is None:
            # Unterminated element in a broken tree; keep it generic
            node = self._make(SyntaxKind.UNKNOWN, ts_node, parent)
            node.children = [self.convert(c, node) for c in ts_node.children]
            return node

        tag_name = open_tag.child_by_field_name("name")
        is_fragment = tag_name is None
        node = self._make(SyntaxKind.JSX_FRAGMENT if is_fragment else SyntaxKind.JSX_ELEMENT, ts_node, parent)

        if is_fragment:
            opening = self._make(SyntaxKind.JSX_OPENING_FRAGMENT, open_tag, node)
            closing = self._make(SyntaxKind.JSX_CLOSING_FRAGMENT, close_tag, node)
        else:
            opening = self._make(SyntaxKind.JSX_OPENING_ELEMENT, open_tag, node)
            opening.children = self._tag_parts(open_tag, tag_name, opening)
            closing = self._make(SyntaxKind.JSX_CLOSING_ELEMENT, close_tag, node)

        body = SyntaxNode(kind=SyntaxKind.SYNTAX_LIST, type_name="SyntaxList", parent=node)
        self._span(body, open_tag.end_byte, close_tag.start_byte)
        inner = [c for c in ts_node.children if c.id not in (open_tag.id, close_tag.id)]
        body.children = self._body_children(inner, open_tag.end_byte, close_tag.start_byte, body)

        node.children = [opening, body, closing]
        return node

    def _self_closing(self, ts_node: Node, parent: Optional[SyntaxNode]) -> SyntaxNode:
        node = self._make(SyntaxKind.JSX_SELF_CLOSING_ELEMENT, ts_node, parent)
        node.children = self._tag_parts(ts_node, ts_node.child_by_field_name("name"), node)
        return node

    def _tag_parts(self, ts_tag: Node, ts_name: Optional[Node], owner: SyntaxNode) -> List[SyntaxNode]:
        """Tag name node followed by the attribute list of an opening tag."""
        if ts_name is None:
            return []
        name = self._make(SyntaxKind.IDENTIFIER, ts_name, owner)
        name.value = self.doc.get_node_text(ts_name)

        ts_attrs = ts_tag.children_by_field_name("attribute")
        attrs = SyntaxNode(kind=SyntaxKind.JSX_ATTRIBUTES, type_name="JsxAttributes", parent=owner)
        if ts_attrs:
            self._span(attrs, ts_attrs[0].start_byte, ts_attrs[-1].end_byte)
        else:
            self._span(attrs, ts_name.end_byte, ts_name.end_byte)
        for ts_attr in ts_attrs:
            if ts_attr.type == "jsx_expression":
                # {...props}
                spread = self._make(SyntaxKind.JSX_SPREAD_ATTRIBUTE, ts_attr, attrs)
                spread.children = [self.convert(c, spread) for c in ts_attr.children]
                attrs.children.append(spread)
            else:
                attrs.children.append(self.convert(ts_attr, attrs))
        return [name, attrs]

    def _attribute(self, ts_node: Node, parent: Optional[SyntaxNode]) -> SyntaxNode:
        node = self._make(SyntaxKind.JSX_ATTRIBUTE, ts_node, parent)
        named = ts_node.named_children
        if not named:
            return node
        name = self._make(SyntaxKind.IDENTIFIER, named[0], node)
        name.value = self.doc.get_node_text(named[0])
        node.children = [name]
        if len(named) > 1:
            node.children.append(self.convert(named[-1], node))
        return node

    def _body_children(self, inner: List[Node], start_byte: int, end_byte: int,
                       owner: SyntaxNode) -> List[SyntaxNode]:
        """
        Body children of an element. Text pieces, character references and the
        whitespace between children are merged into single JsxText nodes.
        """
        result: List[SyntaxNode] = []
        run_start: Optional[int] = None
        last = start_byte

        def flush(upto: int) -> None:
            nonlocal run_start
            begin = last if run_start is None else run_start
            if upto > begin:
                text = SyntaxNode(kind=SyntaxKind.JSX_TEXT, type_name="jsx_text", parent=owner)
                text.value = self.doc.slice_bytes(begin, upto)
                result.append(self._span(text, begin, upto))
            run_start = None

        for ts_child in inner:
            if ts_child.type in _TEXT_LIKE:
                if run_start is None:
                    run_start = last
            else:
                flush(ts_child.start_byte)
                result.append(self.convert(ts_child, owner))
            last = ts_child.end_byte
        flush(end_byte)
        return result

    # ---- Imports ----

    def _import(self, ts_node: Node, parent: Optional[SyntaxNode]) -> SyntaxNode:
        node = self._make(SyntaxKind.IMPORT_DECLARATION, ts_node, parent)
        node.children = [self.convert(c, node) for c in ts_node.children]
        source = ts_node.child_by_field_name("source")
        if source is not None:
            node.value = _unquote(self.doc.get_node_text(source))
        return node


def _unquote(text: str) -> str:
    if len(text) >= 2 and text[0] == text[-1] and text[0] in ("'", '"', "`"):
        return text[1:-1]
    return text


__all__ = ["TreeSitterDocument", "parse_source", "get_language"]
