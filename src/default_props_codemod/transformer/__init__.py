"""Transformer module rewriting styled-component defaultProps."""

from .context import (
    DefaultPropEntry,
    DefaultPropsAssignment,
    FileContext,
    SkippedComponent,
    StyledBinding,
    TransformResult,
)
from .default_props_transform import DefaultPropsToParametersTransform

__all__ = [
    "DefaultPropEntry",
    "DefaultPropsAssignment",
    "FileContext",
    "SkippedComponent",
    "StyledBinding",
    "TransformResult",
    "DefaultPropsToParametersTransform",
]
