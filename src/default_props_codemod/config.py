"""
Run options for the codemod.
"""

from dataclasses import dataclass
from typing import Tuple

from .parser import PARSER_MODES
from .utils.string_utils import QUOTES

DEFAULT_EXTENSIONS = ("tsx", "ts", "jsx", "js")


def parse_extensions(value: str) -> Tuple[str, ...]:
    """Split a comma separated extension list such as "tsx,.ts"."""
    return tuple(ext.strip().lstrip(".") for ext in value.split(",") if ext.strip())


@dataclass
class CodemodOptions:
    """Options shared by every file in a run."""

    parser: str = "tsx"
    extensions: Tuple[str, ...] = DEFAULT_EXTENSIONS
    quote: str = "single"
    indent: str = "  "
    dry_run: bool = False

    def __post_init__(self):
        if self.parser not in PARSER_MODES:
            raise ValueError(f"Unknown parser mode: {self.parser}")
        if self.quote not in QUOTES:
            raise ValueError(f"Unknown quote style: {self.quote}")
        if not self.extensions:
            raise ValueError("At least one file extension is required")

    @classmethod
    def from_args(cls, args) -> "CodemodOptions":
        """Build options from parsed command line arguments."""
        return cls(
            parser=args.parser,
            extensions=parse_extensions(args.extensions),
            quote=args.quote,
            indent=" " * args.tab_width,
            dry_run=args.dry_run,
        )
