"""
JSX generator for the unstyled wrapper function.
"""

from typing import TYPE_CHECKING, List

from ..mappings import StyledMappings
from ..syntax import Literal, Node, TemplateLiteral, source_of
from ..utils.logger import get_logger
from ..utils.string_utils import QUOTES, quote_string

if TYPE_CHECKING:
    from ..transformer.context import DefaultPropEntry

logger = get_logger(__name__)


class JSXGenerator:
    """Renders the code that replaces a defaultProps assignment."""

    def __init__(self, quote: str = "single", indent: str = "  "):
        if quote not in QUOTES:
            raise ValueError(f"Unknown quote style: {quote}")
        self.quote = quote
        self.indent = indent

    def default_value(self, node: Node, source: str) -> str:
        """
        Render the default for one entry.

        String literals are re-quoted, other literals keep their literal
        text, anything else (arrays included) is copied verbatim.
        """
        if isinstance(node, Literal):
            if node.is_string:
                return quote_string(node.value, self.quote)
            return node.raw
        return source_of(node, source)

    def unstyled_component(
        self,
        function_name: str,
        base_name: str,
        entries: List["DefaultPropEntry"],
        source: str,
        newline: str = "\n",
    ) -> str:
        """
        Generate the wrapper function declaration:

            function UnstyledC({ a = 1, ...props }) {
              return <Base {...props} a={a} />;
            }
        """
        logger.debug(f"Generating {function_name} wrapping <{base_name}>")
        rest = StyledMappings.REST_BINDING

        params = [f"{e.name} = {self.default_value(e.value, source)}" for e in entries]
        params.append(f"...{rest}")

        attributes = [f"{{...{rest}}}"]
        attributes.extend(f"{e.name}={{{e.name}}}" for e in entries)

        return (
            f"function {function_name}({{ {', '.join(params)} }}) {{{newline}"
            f"{self.indent}return <{base_name} {' '.join(attributes)} />;{newline}"
            f"}}"
        )

    def styled_initializer(self, function_name: str, template: TemplateLiteral, source: str) -> str:
        """Generate ``styled(UnstyledC)`...``` reusing the original template text."""
        return f"{StyledMappings.STYLED_CALLEE}({function_name}){source_of(template, source)}"
