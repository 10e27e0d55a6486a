"""
Rules for finding styled-component declarations.

Collects, in one walk over the file:
- the base identifier of every ``styled(X)`` call (the last one is the
  file-wide StyledComponentName)
- the template tagged onto each ``styled(X)`` call
- every ``const C = styled(X)`...`;`` declaration, per component name
"""

from typing import List, Optional, Tuple

from ..context import FileContext, StyledBinding
from ...mappings import StyledMappings
from ...syntax import (
    CallExpression,
    Identifier,
    ImportDeclaration,
    Program,
    SyntaxVisitor,
    TaggedTemplateExpression,
    TemplateLiteral,
    VariableDeclaration,
)
from ...utils.logger import get_logger

logger = get_logger(__name__)


def styled_base(node) -> Optional[str]:
    """Return X for a ``styled(X)`` call with a single identifier argument."""
    if not isinstance(node, CallExpression):
        return None
    callee = node.callee
    if not isinstance(callee, Identifier) or callee.name != StyledMappings.STYLED_CALLEE:
        return None
    if len(node.arguments) != 1 or not isinstance(node.arguments[0], Identifier):
        return None
    return node.arguments[0].name


class StyledRules(SyntaxVisitor):
    """Builds the FileContext for a program."""

    def __init__(self):
        self._calls: List[str] = []
        self._templates: List[Tuple[str, TemplateLiteral]] = []
        self._context: Optional[FileContext] = None

    def collect(self, program: Program) -> FileContext:
        logger.debug("Applying styled declaration rules")
        self._calls = []
        self._templates = []
        self._context = FileContext(
            program=program,
            imports=[n for n in program.body if isinstance(n, ImportDeclaration)],
        )
        self.visit(program)

        context = self._context
        self._context = None

        if self._calls:
            context.styled_component_name = self._calls[-1]
            for base, template in self._templates:
                if base == context.styled_component_name:
                    context.styled_template = template

        logger.debug(
            f"Found {len(self._calls)} styled call(s), "
            f"{sum(len(b) for b in context.bindings.values())} styled declaration(s); "
            f"file-wide base: {context.styled_component_name}"
        )
        return context

    # ------------------------------------------------------------
    # Visitors
    # ------------------------------------------------------------
    def visit_CallExpression(self, node: CallExpression):
        base = styled_base(node)
        if base:
            self._calls.append(base)
        self.generic_visit(node)

    def visit_TaggedTemplateExpression(self, node: TaggedTemplateExpression):
        base = styled_base(node.tag)
        if base:
            self._templates.append((base, node.quasi))
        self.generic_visit(node)

    def visit_VariableDeclaration(self, node: VariableDeclaration):
        if len(node.declarations) == 1:
            declarator = node.declarations[0]
            init = declarator.init
            if declarator.name and isinstance(init, TaggedTemplateExpression):
                base = styled_base(init.tag)
                if base:
                    binding = StyledBinding(
                        component=declarator.name,
                        base=base,
                        template=init.quasi,
                        declarator=declarator,
                        declaration=node,
                    )
                    self._context.bindings.setdefault(declarator.name, []).append(binding)
        self.generic_visit(node)
