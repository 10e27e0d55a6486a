"""
Names the defaultProps rewrite matches on and emits.
"""


class StyledMappings:
    """Identifiers involved in the styled-component defaultProps rewrite."""

    # Callee of the wrapping call: styled(Base)`...`
    STYLED_CALLEE = "styled"

    # Member assigned on the component: Component.defaultProps = {...}
    DEFAULT_PROPS_PROPERTY = "defaultProps"

    # Rest binding collecting every prop without a default
    REST_BINDING = "props"

    # Generated wrapper is named <prefix><Component>
    UNSTYLED_PREFIX = "Unstyled"

    def unstyled_name(self, component_name: str) -> str:
        """Get the generated function name for a component."""
        return f"{self.UNSTYLED_PREFIX}{component_name}"
