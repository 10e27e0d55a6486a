"""
Typed syntax tree shared by every parser backend.

Parsers translate their library's tree into these node kinds. Only the
shapes the codemod matches on get their own class; every other node becomes
an ``Opaque`` node that still exposes its children, so scans reach calls and
assignments nested anywhere in the file.

All spans are character offsets into the parsed source, which lets the
printer splice edits into the original text without reformatting it.
"""

from dataclasses import dataclass, field, fields
from typing import Any, Iterator, List, Optional


@dataclass(frozen=True)
class Span:
    start: int
    end: int


@dataclass
class Node:
    span: Span

    @property
    def kind(self) -> str:
        return type(self).__name__

    def children(self) -> Iterator["Node"]:
        """Yield direct child nodes in source order."""
        for f in fields(self):
            if f.name == "span":
                continue
            value = getattr(self, f.name)
            if isinstance(value, Node):
                yield value
            elif isinstance(value, list):
                for item in value:
                    if isinstance(item, Node):
                        yield item


@dataclass
class Identifier(Node):
    name: str


@dataclass
class Literal(Node):
    """String, number, boolean, null or regex literal."""

    value: Any
    raw: str

    @property
    def is_string(self) -> bool:
        return isinstance(self.value, str) and self.raw[:1] in ("'", '"')


@dataclass
class TemplateLiteral(Node):
    expressions: List[Node] = field(default_factory=list)


@dataclass
class ArrayExpression(Node):
    elements: List[Optional[Node]] = field(default_factory=list)


@dataclass
class Property(Node):
    """
    One entry of an object literal.

    ``key`` holds the static key name (identifier, string or number key) and
    is None for computed keys.
    """

    key: Optional[str]
    value: Node
    computed: bool = False
    shorthand: bool = False
    method: bool = False


@dataclass
class SpreadElement(Node):
    argument: Node


@dataclass
class ObjectExpression(Node):
    properties: List[Node] = field(default_factory=list)


@dataclass
class MemberExpression(Node):
    """``object.property``; ``property`` is None for computed access."""

    object: Node
    property: Optional[str]
    computed: bool = False


@dataclass
class CallExpression(Node):
    callee: Node
    arguments: List[Node] = field(default_factory=list)


@dataclass
class TaggedTemplateExpression(Node):
    tag: Node
    quasi: TemplateLiteral


@dataclass
class AssignmentExpression(Node):
    operator: str
    left: Node
    right: Node


@dataclass
class ExpressionStatement(Node):
    expression: Node


@dataclass
class VariableDeclarator(Node):
    """``name`` is None when the target is a destructuring pattern."""

    name: Optional[str]
    target: Node
    init: Optional[Node] = None


@dataclass
class VariableDeclaration(Node):
    declaration_kind: str
    declarations: List[VariableDeclarator] = field(default_factory=list)


@dataclass
class ImportDeclaration(Node):
    pass


@dataclass
class Opaque(Node):
    """Any node kind the codemod does not match on."""

    type: str
    nodes: List[Node] = field(default_factory=list)


@dataclass
class Program(Node):
    body: List[Node] = field(default_factory=list)
    source: str = field(default="", repr=False)


class SyntaxVisitor:
    """
    Walks a syntax tree, dispatching on node kind.

    Subclasses define ``visit_<Kind>`` methods; a method that wants the walk
    to continue below its node calls ``generic_visit``.
    """

    def visit(self, node: Node) -> Any:
        method = getattr(self, f"visit_{node.kind}", self.generic_visit)
        return method(node)

    def generic_visit(self, node: Node) -> None:
        for child in node.children():
            self.visit(child)


def source_of(node: Node, source: str) -> str:
    """Return the source text a node was parsed from."""
    return source[node.span.start:node.span.end]


def describe_tree(node: Node, indent: int = 0) -> Iterator[str]:
    """Yield one readable line per node, for debug output."""
    label = ""
    if isinstance(node, Identifier):
        label = f" ({node.name})"
    elif isinstance(node, Literal):
        label = f" ({node.raw})"
    elif isinstance(node, MemberExpression) and node.property:
        label = f" (.{node.property})"
    elif isinstance(node, Opaque):
        label = f" <{node.type}>"

    yield f"{'   ' * indent}- {node.kind}{label}"
    for child in node.children():
        yield from describe_tree(child, indent + 1)
