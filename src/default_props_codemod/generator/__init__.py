"""Code generation and source printing."""

from .jsx_generator import JSXGenerator
from .source_printer import SourcePatch, SourcePrinter

__all__ = ["JSXGenerator", "SourcePatch", "SourcePrinter"]
