"""
Abstract parser interface.
"""

from abc import ABC, abstractmethod
from typing import Optional

from ..syntax import Program


class ParseError(ValueError):
    """Raised when source code cannot be parsed."""

    def __init__(self, message: str, path: Optional[str] = None):
        self.message = message
        self.path = path
        super().__init__(f"{path}: {message}" if path else message)


class ParserInterface(ABC):
    """Abstract interface for parsers."""

    #: Name used to select this parser on the command line.
    mode: str = ""

    @abstractmethod
    def parse(self, source_code: str) -> Program:
        """
        Parse source code into a typed syntax tree.

        Args:
            source_code: The source code to parse

        Returns:
            Program node whose spans index into source_code

        Raises:
            ParseError: If the source is not valid for this parser
        """

    def validate(self, source_code: str) -> bool:
        """
        Validate that source code is valid.

        Args:
            source_code: The source code to validate

        Returns:
            True if valid, False otherwise
        """
        try:
            self.parse(source_code)
            return True
        except ParseError:
            return False
