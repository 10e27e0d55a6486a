"""
Rules for finding ``Component.defaultProps = {...}`` assignments and
turning their object literal into default parameter entries.
"""

from typing import Dict, List, Optional

from ..context import DefaultPropEntry, DefaultPropsAssignment, RewriteSkipped
from ...mappings import StyledMappings
from ...syntax import (
    AssignmentExpression,
    ExpressionStatement,
    Identifier,
    MemberExpression,
    Node,
    ObjectExpression,
    Program,
    Property,
    SyntaxVisitor,
    source_of,
)
from ...utils.logger import get_logger
from ...utils.string_utils import is_bindable_name

logger = get_logger(__name__)


def is_default_props_target(node: Node) -> bool:
    return (
        isinstance(node, MemberExpression)
        and not node.computed
        and node.property == StyledMappings.DEFAULT_PROPS_PROPERTY
    )


class DefaultPropsRules(SyntaxVisitor):
    """Collects defaultProps assignments in document order."""

    def __init__(self):
        self._found: List[DefaultPropsAssignment] = []
        self._source = ""

    def collect(self, program: Program) -> List[DefaultPropsAssignment]:
        logger.debug("Applying defaultProps rules")
        self._found = []
        self._source = program.source
        self.visit(program)
        logger.debug(f"Found {len(self._found)} defaultProps assignment(s)")
        return list(self._found)

    def visit_ExpressionStatement(self, node: ExpressionStatement):
        expression = node.expression
        if (
            isinstance(expression, AssignmentExpression)
            and expression.operator == "="
            and is_default_props_target(expression.left)
        ):
            self._record(expression, node)
            self.visit(expression.right)
            return
        self.generic_visit(node)

    def visit_AssignmentExpression(self, node: AssignmentExpression):
        # Only reached for assignments that are not a statement of their own
        if is_default_props_target(node.left):
            self._record(node, None)
        self.generic_visit(node)

    def _record(self, assignment: AssignmentExpression, statement: Optional[ExpressionStatement]):
        target = assignment.left.object
        component = target.name if isinstance(target, Identifier) else None
        self._found.append(
            DefaultPropsAssignment(
                component=component,
                label=component or source_of(target, self._source),
                assignment=assignment,
                statement=statement,
            )
        )

    # ------------------------------------------------------------
    # Entries
    # ------------------------------------------------------------
    def extract_entries(self, value: Node) -> List[DefaultPropEntry]:
        """
        Convert the assigned object literal into ordered entries.

        Duplicate keys keep the last value at the first key's position.

        Raises:
            RewriteSkipped: If an entry cannot become a default parameter
        """
        if not isinstance(value, ObjectExpression):
            raise RewriteSkipped("defaultProps is not assigned an object literal")

        entries: Dict[str, Node] = {}
        for prop in value.properties:
            if not isinstance(prop, Property):
                raise RewriteSkipped("defaultProps object contains a spread entry")
            if prop.computed or prop.key is None:
                raise RewriteSkipped("defaultProps object contains a computed key")
            if prop.method:
                raise RewriteSkipped(f"defaultProps entry '{prop.key}' is a method")
            if prop.shorthand:
                raise RewriteSkipped(
                    f"defaultProps entry '{prop.key}' is shorthand for a local binding"
                )
            if not is_bindable_name(prop.key):
                raise RewriteSkipped(f"defaultProps key '{prop.key}' is not a valid parameter name")
            if prop.key == StyledMappings.REST_BINDING:
                raise RewriteSkipped(
                    f"defaultProps key '{prop.key}' clashes with the rest binding"
                )
            entries[prop.key] = prop.value

        return [DefaultPropEntry(name=name, value=node) for name, node in entries.items()]
