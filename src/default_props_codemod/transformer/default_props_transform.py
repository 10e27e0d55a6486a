"""
Rewrites ``Component.defaultProps = {...}`` on styled components into
default parameters of a generated wrapper function.

Given

    const Container = styled(Box)`max-width: 1024px;`;
    Container.defaultProps = { px: 3 };

the file becomes

    function UnstyledContainer({ px = 3, ...props }) {
      return <Box {...props} px={px} />;
    }

    const Container = styled(UnstyledContainer)`max-width: 1024px;`;

The wrapper is inserted after the last top-level import, the styled call is
re-pointed at it and the defaultProps statement is removed. A component is
either rewritten completely or left exactly as it was.
"""

from typing import List, Set

from .context import (
    DefaultPropsAssignment,
    FileContext,
    RewriteSkipped,
    SkippedComponent,
    TransformResult,
)
from .rules.default_props_rules import DefaultPropsRules
from .rules.styled_rules import StyledRules
from ..generator.jsx_generator import JSXGenerator
from ..generator.source_printer import SourcePatch, SourcePrinter
from ..mappings import StyledMappings
from ..syntax import Program
from ..utils.logger import get_logger

logger = get_logger(__name__)


class DefaultPropsToParametersTransform:
    """Transforms one parsed file."""

    def __init__(self, quote: str = "single", indent: str = "  "):
        self.mappings = StyledMappings()
        self.styled_rules = StyledRules()
        self.default_props_rules = DefaultPropsRules()
        self.generator = JSXGenerator(quote=quote, indent=indent)
        self.printer = SourcePrinter()

    # ---------------------------------------------------------
    # MAIN TRANSFORM
    # ---------------------------------------------------------
    def transform(self, program: Program) -> TransformResult:
        logger.debug("Starting defaultProps transformation")
        source = program.source
        result = TransformResult(source=source, program=program)

        assignments = self.default_props_rules.collect(program)
        if not assignments:
            logger.debug("No defaultProps assignments found")
            return result

        context = self.styled_rules.collect(program)
        newline = "\r\n" if "\r\n" in source else "\n"

        patches: List[SourcePatch] = []
        functions: List[str] = []
        done: Set[str] = set()

        for assignment in assignments:
            try:
                function_text, component_patches = self._rewrite(assignment, context, done, newline)
            except RewriteSkipped as e:
                logger.warning(f"Skipping {assignment.label}: {e.reason}")
                result.skipped.append(SkippedComponent(assignment.label, e.reason))
                continue

            functions.append(function_text)
            patches.extend(component_patches)
            done.add(assignment.component)
            result.rewritten.append(assignment.component)
            logger.info(f"Rewrote {assignment.component}.defaultProps as default parameters")

        if not functions:
            return result

        patches.append(self._insertion_patch(context, functions, patches, newline))
        result.source = self.printer.print(source, patches)

        logger.debug("Completed defaultProps transformation")
        return result

    # ---------------------------------------------------------
    # One component
    # ---------------------------------------------------------
    def _rewrite(self, assignment: DefaultPropsAssignment, context: FileContext, done: Set[str], newline: str):
        """Plan the rewrite of one assignment; raises RewriteSkipped to leave it alone."""
        if assignment.statement is None:
            raise RewriteSkipped("defaultProps assignment is not a standalone statement")
        if assignment.component is None:
            raise RewriteSkipped("defaultProps is assigned on an expression, not a component name")

        component = assignment.component
        if component in done:
            raise RewriteSkipped("defaultProps of this component was already rewritten")

        binding = context.resolve(component, assignment.statement.span.start)
        if binding is None:
            raise RewriteSkipped(f"no styled(...) declaration found for {component}")

        if context.styled_component_name and binding.base != context.styled_component_name:
            logger.debug(
                f"{component} wraps {binding.base} while the last styled call in the file "
                f"wraps {context.styled_component_name}; using the declaration of {component}"
            )

        entries = self.default_props_rules.extract_entries(assignment.value)

        source = context.source
        function_name = self.mappings.unstyled_name(component)
        function_text = self.generator.unstyled_component(
            function_name, binding.base, entries, source, newline
        )

        patches = [
            self.printer.replace(
                binding.declarator.init.span,
                self.generator.styled_initializer(function_name, binding.template, source),
            ),
            self.printer.remove_statement(source, assignment.statement.span),
        ]
        return function_text, patches

    def _insertion_patch(
        self, context: FileContext, functions: List[str], patches: List[SourcePatch], newline: str
    ) -> SourcePatch:
        """Insert the generated functions after the imports and directives, or at the top of the file."""
        separator = newline * 2
        offset = context.insertion_offset()
        # never land inside text another patch removes
        for patch in patches:
            if patch.start < offset < patch.end:
                offset = patch.start
        if context.header_end() is not None:
            return self.printer.insert(offset, separator + separator.join(functions))
        return self.printer.insert(offset, separator.join(functions) + separator)
