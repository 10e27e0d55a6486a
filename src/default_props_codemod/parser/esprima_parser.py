"""
JSX parser using esprima.

Converts esprima nodes to python dicts first, then to the typed syntax
tree. esprima understands ES2017 and JSX but not type annotations or
object rest patterns, so files already using ``{ ...props }`` parameters
need one of the tree-sitter modes instead.
"""

from typing import Any, Dict, List, Optional

from .parser_interface import ParseError, ParserInterface
from .. import syntax
from ..utils.logger import get_logger
from ..utils.string_utils import join_surrogates

logger = get_logger(__name__)


def _to_plain(value: Any) -> Any:
    """Turn esprima node objects into nested dicts, keeping lists and scalars."""
    if isinstance(value, list):
        return [_to_plain(item) for item in value]
    if hasattr(value, "__dict__"):
        return {key: _to_plain(item) for key, item in vars(value).items()}
    return value


class EsprimaParser(ParserInterface):
    mode = "esprima"

    def __init__(self):
        try:
            import esprima
            self._parser = esprima
            logger.debug("Using esprima for JSX parsing")
        except ImportError:
            logger.error("esprima missing, install: pip install esprima")
            self._parser = None

    def parse(self, source_code: str) -> syntax.Program:
        if not self._parser:
            raise RuntimeError("Esprima not available. Cannot parse JSX.")

        try:
            tree = self._parser.parseModule(source_code, jsx=True, range=True)
        except Exception as e:
            logger.error(f"JSX parsing failed: {e}")
            raise ParseError(str(e)) from e

        program = self._build(_to_plain(tree))
        program.source = source_code
        # esprima ranges stop at the last statement; cover the whole file
        program.span = syntax.Span(0, len(source_code))
        return program

    # -------------------------------------------------------------------------
    # Convert python dict → typed syntax node
    # -------------------------------------------------------------------------
    def _build(self, node: Dict[str, Any]) -> syntax.Node:
        span = syntax.Span(*node["range"])
        node_type = node.get("type")

        if node_type == "Program":
            return syntax.Program(span, body=self._build_all(node.get("body")))

        if node_type == "ImportDeclaration":
            return syntax.ImportDeclaration(span)

        if node_type == "VariableDeclaration":
            return syntax.VariableDeclaration(
                span,
                declaration_kind=node.get("kind", "var"),
                declarations=self._build_all(node.get("declarations")),
            )

        if node_type == "VariableDeclarator":
            target = node["id"]
            return syntax.VariableDeclarator(
                span,
                name=target.get("name") if target.get("type") == "Identifier" else None,
                target=self._build(target),
                init=self._build_optional(node.get("init")),
            )

        if node_type == "ExpressionStatement":
            return syntax.ExpressionStatement(span, expression=self._build(node["expression"]))

        if node_type == "AssignmentExpression":
            return syntax.AssignmentExpression(
                span,
                operator=node.get("operator", "="),
                left=self._build(node["left"]),
                right=self._build(node["right"]),
            )

        if node_type == "MemberExpression":
            computed = bool(node.get("computed"))
            prop = node["property"]
            return syntax.MemberExpression(
                span,
                object=self._build(node["object"]),
                property=None if computed else prop.get("name"),
                computed=computed,
            )

        if node_type == "CallExpression":
            return syntax.CallExpression(
                span,
                callee=self._build(node["callee"]),
                arguments=self._build_all(node.get("arguments")),
            )

        if node_type == "TaggedTemplateExpression":
            return syntax.TaggedTemplateExpression(
                span, tag=self._build(node["tag"]), quasi=self._build(node["quasi"])
            )

        if node_type == "TemplateLiteral":
            return syntax.TemplateLiteral(span, expressions=self._build_all(node.get("expressions")))

        if node_type == "Identifier":
            return syntax.Identifier(span, name=node["name"])

        if node_type == "Literal":
            value = node.get("value")
            if isinstance(value, str):
                value = join_surrogates(value)
            return syntax.Literal(span, value=value, raw=node.get("raw", ""))

        if node_type == "ArrayExpression":
            return syntax.ArrayExpression(
                span, elements=[self._build_optional(e) for e in node.get("elements") or []]
            )

        if node_type == "ObjectExpression":
            return syntax.ObjectExpression(span, properties=self._build_all(node.get("properties")))

        if node_type == "Property":
            computed = bool(node.get("computed"))
            return syntax.Property(
                span,
                key=None if computed else self._key_name(node["key"]),
                value=self._build(node["value"]),
                computed=computed,
                shorthand=bool(node.get("shorthand")),
                method=bool(node.get("method")) or node.get("kind") in ("get", "set"),
            )

        if node_type == "SpreadElement":
            return syntax.SpreadElement(span, argument=self._build(node["argument"]))

        return syntax.Opaque(span, type=node_type, nodes=self._opaque_children(node))

    def _build_optional(self, node: Optional[Dict[str, Any]]) -> Optional[syntax.Node]:
        return self._build(node) if isinstance(node, dict) else None

    def _build_all(self, nodes: Optional[List[Any]]) -> List[syntax.Node]:
        return [self._build(n) for n in nodes or [] if isinstance(n, dict)]

    def _opaque_children(self, node: Dict[str, Any]) -> List[syntax.Node]:
        children = []
        for key, value in node.items():
            if key in ("type", "range"):
                continue
            if isinstance(value, dict) and "range" in value:
                children.append(self._build(value))
            elif isinstance(value, list):
                children.extend(
                    self._build(v) for v in value if isinstance(v, dict) and "range" in v
                )
        children.sort(key=lambda child: child.span.start)
        return children

    @staticmethod
    def _key_name(key: Dict[str, Any]) -> Optional[str]:
        if key.get("type") == "Identifier":
            return key.get("name")
        if key.get("type") == "Literal" and key.get("value") is not None:
            raw = key.get("raw", "")
            return key["value"] if raw[:1] in ("'", '"') else raw
        return None
