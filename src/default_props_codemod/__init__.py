"""Codemod rewriting styled-component defaultProps into default parameters."""

from .codemod import DefaultPropsCodemod, FileReport, main, transform
from .config import CodemodOptions
from .parser import ParseError, get_parser
from .transformer import DefaultPropsToParametersTransform, TransformResult

__version__ = "0.1.0"

__all__ = [
    "DefaultPropsCodemod",
    "DefaultPropsToParametersTransform",
    "CodemodOptions",
    "FileReport",
    "ParseError",
    "TransformResult",
    "get_parser",
    "main",
    "transform",
]
