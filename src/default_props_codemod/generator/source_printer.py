"""
Source printer that splices edits into the original text.

Untouched code keeps its exact formatting, so a file without matches comes
back byte for byte.
"""

from dataclasses import dataclass
from typing import Iterable

from ..syntax import Span
from ..utils.logger import get_logger

logger = get_logger(__name__)

WHITESPACE = " \t\r\n"


@dataclass(frozen=True)
class SourcePatch:
    """Replace source[start:end] with text."""

    start: int
    end: int
    text: str = ""


class SourcePrinter:
    """Applies SourcePatch edits to source text."""

    def insert(self, offset: int, text: str) -> SourcePatch:
        return SourcePatch(offset, offset, text)

    def replace(self, span: Span, text: str) -> SourcePatch:
        return SourcePatch(span.start, span.end, text)

    def remove_statement(self, source: str, span: Span) -> SourcePatch:
        """
        Remove a statement together with the whitespace separating it from
        the code before it. A statement at the top of the file takes the
        whitespace after it instead.
        """
        start = span.start
        while start > 0 and source[start - 1] in WHITESPACE:
            start -= 1

        if start > 0:
            return SourcePatch(start, span.end)

        end = span.end
        while end < len(source) and source[end] in WHITESPACE:
            end += 1
        return SourcePatch(0, end)

    def print(self, source: str, patches: Iterable[SourcePatch]) -> str:
        """
        Render source with patches applied.

        Raises:
            ValueError: If two patches overlap
        """
        ordered = sorted(patches, key=lambda p: (p.start, p.end))
        if not ordered:
            return source

        output = []
        cursor = 0
        for patch in ordered:
            if patch.start < cursor:
                raise ValueError(
                    f"Overlapping source patches at offset {patch.start} (previous ends at {cursor})"
                )
            output.append(source[cursor:patch.start])
            output.append(patch.text)
            cursor = patch.end
        output.append(source[cursor:])

        logger.debug(f"Applied {len(ordered)} source patch(es)")
        return "".join(output)
