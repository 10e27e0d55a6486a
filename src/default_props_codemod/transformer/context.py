"""
Lookups derived from one file during a single transform pass.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from ..syntax import (
    AssignmentExpression,
    ExpressionStatement,
    ImportDeclaration,
    Literal,
    Node,
    Program,
    TemplateLiteral,
    VariableDeclaration,
    VariableDeclarator,
)


class RewriteSkipped(Exception):
    """Raised while planning a rewrite that has to leave the component alone."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(reason)


@dataclass
class StyledBinding:
    """A ``const Component = styled(Base)`...`;`` declaration."""

    component: str
    base: str
    template: TemplateLiteral
    declarator: VariableDeclarator
    declaration: VariableDeclaration


@dataclass
class DefaultPropEntry:
    name: str
    value: Node


@dataclass
class DefaultPropsAssignment:
    """
    An assignment to ``<target>.defaultProps``.

    ``component`` is None when the target is not a plain identifier and
    ``statement`` is None when the assignment is nested in a larger
    expression; neither case can be rewritten.
    """

    component: Optional[str]
    label: str
    assignment: AssignmentExpression
    statement: Optional[ExpressionStatement] = None

    @property
    def value(self) -> Node:
        return self.assignment.right


@dataclass
class FileContext:
    """
    Per-file scan results, computed once and passed to every rewrite.

    ``styled_component_name`` and ``styled_template`` are the file-wide
    lookups (the last ``styled(X)`` call wins). ``bindings`` keeps every
    styled declaration so each component resolves its own base.
    """

    program: Program
    styled_component_name: Optional[str] = None
    styled_template: Optional[TemplateLiteral] = None
    imports: List[ImportDeclaration] = field(default_factory=list)
    bindings: Dict[str, List[StyledBinding]] = field(default_factory=dict)

    @property
    def source(self) -> str:
        return self.program.source

    def resolve(self, component: str, offset: int) -> Optional[StyledBinding]:
        """
        Find the styled declaration for a component.

        Prefers the nearest declaration before offset, otherwise the first
        one after it.
        """
        candidates = self.bindings.get(component, [])
        preceding = [b for b in candidates if b.declaration.span.start < offset]
        if preceding:
            return preceding[-1]
        return candidates[0] if candidates else None

    def directives(self) -> List[ExpressionStatement]:
        """Leading string statements such as ``'use client';``."""
        prologue = []
        for statement in self.program.body:
            if not (
                isinstance(statement, ExpressionStatement)
                and isinstance(statement.expression, Literal)
                and statement.expression.is_string
            ):
                break
            prologue.append(statement)
        return prologue

    def header_end(self) -> Optional[int]:
        """End of the last import or directive, None when the file has neither."""
        header = self.imports + self.directives()
        if not header:
            return None
        return max(node.span.end for node in header)

    def insertion_offset(self) -> int:
        """Offset new top-level declarations are inserted at."""
        header_end = self.header_end()
        if header_end is not None:
            return header_end
        if self.program.body:
            return self.program.body[0].span.start
        return 0


@dataclass
class SkippedComponent:
    name: str
    reason: str


@dataclass
class TransformResult:
    """Rendered output of one file plus what happened to each component."""

    source: str
    program: Program
    rewritten: List[str] = field(default_factory=list)
    skipped: List[SkippedComponent] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        return self.source != self.program.source
