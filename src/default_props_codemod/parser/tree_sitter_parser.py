"""
Parser backed by tree-sitter grammars.

Handles JSX together with TypeScript annotations (``tsx``), plain
TypeScript (``ts``) and modern JavaScript with JSX (``babel``).
"""

from functools import lru_cache
from typing import List, Optional

import tree_sitter_javascript
import tree_sitter_typescript
from tree_sitter import Language, Parser
from tree_sitter import Node as TSNode

from .parser_interface import ParseError, ParserInterface
from .. import syntax
from ..utils.logger import get_logger
from ..utils.string_utils import decode_escape, join_surrogates

logger = get_logger(__name__)

GRAMMARS = {
    "tsx": tree_sitter_typescript.language_tsx,
    "ts": tree_sitter_typescript.language_typescript,
    "babel": tree_sitter_javascript.language,
}

COMMENT_TYPES = {"comment", "html_comment", "hash_bang_line"}


@lru_cache(maxsize=None)
def _language(mode: str) -> Language:
    return Language(GRAMMARS[mode]())


class _Offsets:
    """Maps tree-sitter byte offsets to character offsets."""

    def __init__(self, source: str, encoded: bytes):
        self._table: Optional[List[int]] = None
        if len(encoded) == len(source):
            return

        table = [0] * (len(encoded) + 1)
        position = 0
        for index, char in enumerate(source):
            width = len(char.encode("utf-8"))
            for i in range(width):
                table[position + i] = index
            position += width
        table[position] = len(source)
        self._table = table

    def char(self, byte_offset: int) -> int:
        if self._table is None:
            return byte_offset
        return self._table[byte_offset]


class TreeSitterParser(ParserInterface):
    """tree-sitter backed parser for one grammar mode."""

    def __init__(self, mode: str = "tsx"):
        if mode not in GRAMMARS:
            raise ValueError(f"Unknown tree-sitter mode: {mode}")
        self.mode = mode
        self._parser = Parser(_language(mode))
        self._source = ""
        self._offsets: Optional[_Offsets] = None

    def parse(self, source_code: str) -> syntax.Program:
        logger.debug(f"Parsing source code with tree-sitter ({self.mode})")
        encoded = source_code.encode("utf-8")
        tree = self._parser.parse(encoded)
        root = tree.root_node

        if root.has_error:
            error = self._first_error(root)
            row, column = error.start_point if error is not None else root.start_point
            message = f"syntax error at line {row + 1}, column {column + 1}"
            logger.error(f"Parsing failed ({self.mode}): {message}")
            raise ParseError(message)

        self._source = source_code
        self._offsets = _Offsets(source_code, encoded)
        try:
            program = self._build(root)
        finally:
            self._offsets = None
            self._source = ""

        program.source = source_code
        program.span = syntax.Span(0, len(source_code))
        return program

    def _first_error(self, node: TSNode) -> Optional[TSNode]:
        if node.type == "ERROR" or node.is_missing:
            return node
        for child in node.children:
            if child.has_error or child.is_missing:
                found = self._first_error(child)
                if found is not None:
                    return found
        return None

    # -------------------------------------------------------------------------
    # Convert tree-sitter node → typed syntax node
    # -------------------------------------------------------------------------
    def _span(self, node: TSNode) -> syntax.Span:
        return syntax.Span(self._offsets.char(node.start_byte), self._offsets.char(node.end_byte))

    def _text(self, node: TSNode) -> str:
        span = self._span(node)
        return self._source[span.start:span.end]

    def _named(self, node: TSNode) -> List[TSNode]:
        return [c for c in node.named_children if c.type not in COMMENT_TYPES]

    def _build(self, node: TSNode) -> syntax.Node:
        span = self._span(node)
        node_type = node.type

        if node_type == "program":
            return syntax.Program(span, body=[self._build(c) for c in self._named(node)])

        if node_type == "import_statement":
            return syntax.ImportDeclaration(span)

        if node_type in ("lexical_declaration", "variable_declaration"):
            return syntax.VariableDeclaration(
                span,
                declaration_kind=node.children[0].type,
                declarations=[
                    self._build(c) for c in self._named(node) if c.type == "variable_declarator"
                ],
            )

        if node_type == "variable_declarator":
            target = node.child_by_field_name("name")
            value = node.child_by_field_name("value")
            return syntax.VariableDeclarator(
                span,
                name=self._text(target) if target.type == "identifier" else None,
                target=self._build(target),
                init=self._build(value) if value is not None else None,
            )

        if node_type == "expression_statement":
            return syntax.ExpressionStatement(span, expression=self._build(self._named(node)[0]))

        if node_type == "assignment_expression":
            return syntax.AssignmentExpression(
                span,
                operator="=",
                left=self._build(node.child_by_field_name("left")),
                right=self._build(node.child_by_field_name("right")),
            )

        if node_type == "member_expression":
            prop = node.child_by_field_name("property")
            return syntax.MemberExpression(
                span,
                object=self._build(node.child_by_field_name("object")),
                property=self._text(prop),
            )

        if node_type == "call_expression":
            callee = self._build(node.child_by_field_name("function"))
            arguments = node.child_by_field_name("arguments")
            if arguments.type == "template_string":
                return syntax.TaggedTemplateExpression(span, tag=callee, quasi=self._build(arguments))
            return syntax.CallExpression(
                span, callee=callee, arguments=[self._build(c) for c in self._named(arguments)]
            )

        if node_type in ("identifier", "undefined"):
            return syntax.Identifier(span, name=self._text(node))

        if node_type == "string":
            return syntax.Literal(span, value=self._string_value(node), raw=self._text(node))

        if node_type == "number":
            raw = self._text(node)
            return syntax.Literal(span, value=self._number_value(raw), raw=raw)

        if node_type in ("true", "false", "null"):
            value = {"true": True, "false": False, "null": None}[node_type]
            return syntax.Literal(span, value=value, raw=node_type)

        if node_type == "regex":
            return syntax.Literal(span, value=None, raw=self._text(node))

        if node_type == "template_string":
            return syntax.TemplateLiteral(
                span,
                expressions=[
                    self._build(self._named(c)[0])
                    for c in self._named(node)
                    if c.type == "template_substitution" and self._named(c)
                ],
            )

        if node_type == "array":
            return syntax.ArrayExpression(span, elements=[self._build(c) for c in self._named(node)])

        if node_type == "object":
            return syntax.ObjectExpression(
                span, properties=[self._build_property(c) for c in self._named(node)]
            )

        if node_type == "spread_element":
            return syntax.SpreadElement(span, argument=self._build(self._named(node)[0]))

        return syntax.Opaque(span, type=node_type, nodes=[self._build(c) for c in self._named(node)])

    def _build_property(self, node: TSNode) -> syntax.Node:
        span = self._span(node)

        if node.type == "pair":
            key = node.child_by_field_name("key")
            computed = key.type == "computed_property_name"
            return syntax.Property(
                span,
                key=None if computed else self._key_name(key),
                value=self._build(node.child_by_field_name("value")),
                computed=computed,
            )

        if node.type == "shorthand_property_identifier":
            name = self._text(node)
            return syntax.Property(
                span, key=name, value=syntax.Identifier(span, name=name), shorthand=True
            )

        if node.type == "method_definition":
            key = node.child_by_field_name("name")
            return syntax.Property(
                span,
                key=self._key_name(key) if key is not None else None,
                value=self._build(node),
                method=True,
            )

        return self._build(node)

    def _key_name(self, key: TSNode) -> Optional[str]:
        if key.type == "string":
            return self._string_value(key)
        if key.type == "computed_property_name":
            return None
        return self._text(key)

    def _string_value(self, node: TSNode) -> str:
        parts = []
        for child in node.named_children:
            text = self._text(child)
            parts.append(decode_escape(text) if child.type == "escape_sequence" else text)
        return join_surrogates("".join(parts))

    @staticmethod
    def _number_value(raw: str):
        text = raw.replace("_", "")
        try:
            return int(text, 0)
        except ValueError:
            pass
        try:
            return float(text)
        except ValueError:
            return None
