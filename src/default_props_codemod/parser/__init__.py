"""Parser module for parsing JSX/TSX source into the typed syntax tree."""

from .parser_interface import ParseError, ParserInterface
from .esprima_parser import EsprimaParser
from .tree_sitter_parser import TreeSitterParser

PARSER_MODES = ("tsx", "ts", "babel", "esprima")


def get_parser(mode: str = "tsx") -> ParserInterface:
    """
    Create the parser for a parser mode.

    Args:
        mode: One of PARSER_MODES

    Returns:
        Parser instance

    Raises:
        ValueError: If the mode is unknown
    """
    if mode == "esprima":
        return EsprimaParser()
    if mode in PARSER_MODES:
        return TreeSitterParser(mode)
    raise ValueError(f"Unknown parser mode: {mode} (expected one of {', '.join(PARSER_MODES)})")


__all__ = [
    "ParseError",
    "ParserInterface",
    "EsprimaParser",
    "TreeSitterParser",
    "PARSER_MODES",
    "get_parser",
]
