"""
Tests for the JSX generator and the source printer.
"""

import pytest

from default_props_codemod.generator import JSXGenerator, SourcePatch, SourcePrinter
from default_props_codemod.syntax import Span
from default_props_codemod.transformer.context import DefaultPropEntry


class TestJSXGenerator:
    def test_unstyled_component(self, tsx_parser):
        source = "x = { px: 3, items: [1, 2], tone: \"dark\" };"
        obj = tsx_parser.parse(source).body[0].expression.right
        entries = [DefaultPropEntry(p.key, p.value) for p in obj.properties]

        text = JSXGenerator().unstyled_component("UnstyledCard", "Box", entries, source)

        assert text == (
            "function UnstyledCard({ px = 3, items = [1, 2], tone = 'dark', ...props }) {\n"
            "  return <Box {...props} px={px} items={items} tone={tone} />;\n"
            "}"
        )

    def test_without_entries(self):
        text = JSXGenerator(indent="\t").unstyled_component("UnstyledCard", "Box", [], "", "\r\n")

        assert text == "function UnstyledCard({ ...props }) {\r\n\treturn <Box {...props} />;\r\n}"

    def test_styled_initializer(self, tsx_parser):
        source = "const C = styled(Box)`a: b;`;"
        quasi = tsx_parser.parse(source).body[0].declarations[0].init.quasi

        assert JSXGenerator().styled_initializer("UnstyledC", quasi, source) == "styled(UnstyledC)`a: b;`"

    def test_unknown_quote_style(self):
        with pytest.raises(ValueError):
            JSXGenerator(quote="backtick")


class TestSourcePrinter:
    def test_applies_patches_in_offset_order(self):
        printer = SourcePrinter()
        patches = [
            printer.replace(Span(4, 5), "B"),
            printer.insert(0, ">"),
            printer.insert(0, ">"),
            SourcePatch(8, 9),
        ]

        assert printer.print("one two three", patches) == ">>one Bwo hree"

    def test_no_patches_returns_source(self):
        assert SourcePrinter().print("abc", []) == "abc"

    def test_overlapping_patches(self):
        with pytest.raises(ValueError):
            SourcePrinter().print("abcdef", [SourcePatch(0, 3), SourcePatch(2, 4)])

    def test_remove_statement_takes_preceding_blank_lines(self):
        source = "a();\n\nb();\n\nc();\n"
        printer = SourcePrinter()
        patch = printer.remove_statement(source, Span(6, 10))

        assert printer.print(source, [patch]) == "a();\n\nc();\n"

    def test_remove_first_statement_takes_following_whitespace(self):
        source = "b();\n\nc();\n"
        printer = SourcePrinter()
        patch = printer.remove_statement(source, Span(0, 4))

        assert printer.print(source, [patch]) == "c();\n"
