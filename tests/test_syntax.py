"""
Tests for the tree-sitter front end, the visitor and the printer.
"""

import pytest

from jsxcond.syntax import (
    SyntaxKind,
    TransformationContext,
    get_original_node,
    print_source_file,
)
from jsxcond.syntax.range_edits import RangeEditor
from tests.infrastructure import find_all, find_first, parse, tag


class TestParser:

    def test_element_has_three_part_shape(self):
        sf = parse("const a = <div className=\"x\">hi</div>;")
        div = find_first(sf.root, tag("div"))
        kinds = [c.kind for c in div.children]
        assert kinds == [SyntaxKind.JSX_OPENING_ELEMENT, SyntaxKind.SYNTAX_LIST, SyntaxKind.JSX_CLOSING_ELEMENT]
        assert div.tag_name == "div"
        assert [a.name for a in div.attributes.children] == ["className"]

    def test_fragment(self):
        sf = parse("const a = <>hi</>;")
        frag = find_first(sf.root, lambda n: n.kind is SyntaxKind.JSX_FRAGMENT)
        assert frag is not None
        assert frag.tag_name is None
        assert [c.value for c in frag.body] == ["hi"]

    def test_text_with_character_reference_is_one_node(self):
        sf = parse("const a = <p>a &amp; b</p>;")
        p = find_first(sf.root, tag("p"))
        assert [(c.kind, c.value) for c in p.body] == [(SyntaxKind.JSX_TEXT, "a &amp; b")]

    def test_import_module_name(self):
        sf = parse("import { If } from 'jsx-conditionals';\n")
        imp = find_first(sf.root, lambda n: n.kind is SyntaxKind.IMPORT_DECLARATION)
        assert imp.module_specifier == "jsx-conditionals"

    def test_parent_links(self):
        sf = parse("const a = <div><span /></div>;")
        span = find_first(sf.root, lambda n: n.kind is SyntaxKind.JSX_SELF_CLOSING_ELEMENT)
        assert span.parent.kind is SyntaxKind.SYNTAX_LIST
        assert span.parent.parent is find_first(sf.root, tag("div"))

    def test_spans_are_character_offsets(self):
        code = "const s = 'ñ✓';\nconst a = <b>é</b>;"
        sf = parse(code)
        b = find_first(sf.root, tag("b"))
        assert code[b.pos:b.end] == "<b>é</b>"

    def test_typescript_file_uses_typescript_grammar(self):
        code = "const n = <number>value;\n"
        sf = parse(code, file_name="cast.ts")
        assert not find_all(sf.root, lambda n: n.type_name == "ERROR")
        assert print_source_file(sf) == code

    def test_broken_source_logs_warning(self, caplog):
        with caplog.at_level("WARNING", logger="jsxcond.syntax.parser"):
            parse("const a = <div>;")
        assert "Syntax errors" in caplog.text


class TestPrinter:

    @pytest.mark.parametrize("code", [
        "",
        "\n\n// only a comment\n",
        "  const a = <div>\n    <p>x</p>\n  </div>;  \n",
        "export default function App() {\n  return <><Item key=\"1\" /></>;\n}\n",
    ])
    def test_untouched_tree_prints_source(self, code):
        assert print_source_file(parse(code)) == code

    def test_updated_node_keeps_surrounding_text(self):
        sf = parse("const a = <div> <b>x</b> <i>y</i> </div>;")
        ctx = TransformationContext()

        def drop_bold(node):
            if node.kind is SyntaxKind.JSX_ELEMENT and node.tag_name == "b":
                return None
            return ctx.visit_each_child(node, drop_bold)

        out = sf.with_root(ctx.visit_each_child(sf.root, drop_bold))
        assert print_source_file(out) == "const a = <div>  <i>y</i> </div>;"

    def test_synthesized_replacement(self):
        sf = parse("const a = <div><b>x</b></div>;")
        ctx = TransformationContext()
        f = ctx.factory

        def replace_bold(node):
            if node.kind is SyntaxKind.JSX_ELEMENT and node.tag_name == "b":
                expr = f.create_jsx_expression(
                    f.create_conditional_expression(f.create_null(), node.body[0], f.create_null())
                )
                return ctx.set_original_node(expr, node)
            return ctx.visit_each_child(node, replace_bold)

        out = sf.with_root(ctx.visit_each_child(sf.root, replace_bold))
        assert print_source_file(out) == "const a = <div>{null ? x : null}</div>;"


class TestVisitor:

    def test_unchanged_children_keep_identity(self):
        sf = parse("const a = <div><b>x</b></div>;")
        ctx = TransformationContext()
        assert ctx.visit_each_child(sf.root, lambda n: n) is sf.root

    def test_update_links_original(self):
        sf = parse("const a = 1;\nconst b = 2;\n")
        ctx = TransformationContext()
        first = sf.root.children[0]
        updated = ctx.visit_each_child(sf.root, lambda n: None if n is first else n)
        assert updated is not sf.root
        assert updated.original is sf.root
        assert get_original_node(updated) is sf.root
        assert first not in updated.children
        # The source tree itself is untouched
        assert sf.root.children[0] is first


class TestRangeEditor:

    def test_edits_apply_in_position_order(self):
        editor = RangeEditor("abcdef")
        editor.add_replacement(4, 5, "E")
        editor.add_deletion(0, 1)
        editor.add_replacement(2, 2, "+")
        assert editor.apply_edits() == "b+cdEf"

    def test_overlapping_edits_are_rejected(self):
        editor = RangeEditor("abcdef")
        editor.add_replacement(1, 3, "x")
        with pytest.raises(ValueError):
            editor.add_replacement(2, 4, "y")

    def test_out_of_bounds(self):
        with pytest.raises(ValueError):
            RangeEditor("abc").add_deletion(2, 5)
