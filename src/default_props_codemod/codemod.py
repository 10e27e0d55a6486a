"""
Main codemod class that runs the defaultProps rewrite over files.
"""

import argparse
import logging
import os
import sys
from dataclasses import dataclass
from typing import Iterable, List, Optional

from .config import DEFAULT_EXTENSIONS, CodemodOptions
from .parser import PARSER_MODES, ParseError, ParserInterface, get_parser
from .syntax import describe_tree
from .transformer import DefaultPropsToParametersTransform, TransformResult
from .utils.file_utils import iter_source_files, read_file, write_file
from .utils.logger import get_logger, set_log_level
from .utils.string_utils import QUOTES

logger = get_logger(__name__)

STATUS_OK = "ok"
STATUS_UNMODIFIED = "unmodified"
STATUS_ERROR = "error"


@dataclass
class FileReport:
    """Outcome of running the codemod on one file."""

    path: str
    status: str
    result: Optional[TransformResult] = None
    error: Optional[str] = None


# ---------------------------
# Codemod Class
# ---------------------------

class DefaultPropsCodemod:
    """Parses files, applies DefaultPropsToParametersTransform and writes them back."""

    def __init__(self, options: Optional[CodemodOptions] = None, parser: Optional[ParserInterface] = None):
        """
        Initialize the codemod.

        Args:
            options: Run options. Defaults to CodemodOptions().
            parser: Parser instance to use. Defaults to the parser for options.parser.
        """
        self.options = options or CodemodOptions()
        self.parser = parser or get_parser(self.options.parser)
        self.transformer = DefaultPropsToParametersTransform(
            quote=self.options.quote, indent=self.options.indent
        )

    def transform_source(self, source_code: str, path: Optional[str] = None) -> TransformResult:
        """
        Transform one file's source text.

        Raises:
            ParseError: If the source cannot be parsed
        """
        try:
            program = self.parser.parse(source_code)
        except ParseError as e:
            if path and not e.path:
                raise ParseError(e.message, path) from e
            raise

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Syntax tree:\n" + "\n".join(describe_tree(program)))

        return self.transformer.transform(program)

    def transform_file(self, path: str) -> FileReport:
        """Transform a file in place (unless dry_run is set)."""
        logger.debug(f"Processing {path}")

        source_code = read_file(path)
        if source_code is None:
            return FileReport(path, STATUS_ERROR, error="could not read file")

        try:
            result = self.transform_source(source_code, path)
        except ParseError as e:
            logger.error(f"Transform failed: {e}")
            return FileReport(path, STATUS_ERROR, error=str(e))

        if not result.changed:
            return FileReport(path, STATUS_UNMODIFIED, result)

        if not self.options.dry_run and not write_file(path, result.source):
            return FileReport(path, STATUS_ERROR, result, error="could not write file")

        logger.info(f"Rewrote {path}: {', '.join(result.rewritten)}")
        return FileReport(path, STATUS_OK, result)

    def transform_paths(self, paths: Iterable[str]) -> List[FileReport]:
        """Transform files and every matching file under directories."""
        reports = []
        for path in paths:
            if os.path.isdir(path):
                files = list(iter_source_files(path, self.options.extensions))
                logger.debug(f"Found {len(files)} file(s) under {path}")
                reports.extend(self.transform_file(f) for f in files)
            elif os.path.isfile(path):
                reports.append(self.transform_file(path))
            else:
                logger.error(f"No such file or directory: {path}")
                reports.append(FileReport(path, STATUS_ERROR, error="no such file or directory"))
        return reports


def transform(source_code: str, parser: str = "tsx", quote: str = "single") -> str:
    """
    Transform source text and return the rewritten text.

    Raises:
        ParseError: If the source cannot be parsed
    """
    codemod = DefaultPropsCodemod(CodemodOptions(parser=parser, quote=quote))
    return codemod.transform_source(source_code).source


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="default-props-codemod",
        description="Rewrite styled-component defaultProps into default parameters",
    )
    parser.add_argument("paths", nargs="+", help="Files or directories to transform")
    parser.add_argument("--parser", choices=PARSER_MODES, default="tsx", help="Parser mode (default: tsx)")
    parser.add_argument(
        "--extensions",
        default=",".join(DEFAULT_EXTENSIONS),
        help="Comma separated extensions to pick up in directories",
    )
    parser.add_argument("--quote", choices=sorted(QUOTES), default="single", help="Quote style for generated strings")
    parser.add_argument("--tab-width", type=int, default=2, help="Indent width of generated code")
    parser.add_argument("-d", "--dry-run", action="store_true", help="Do not write files")
    parser.add_argument("-p", "--print", dest="print_output", action="store_true", help="Print transformed files to stdout")
    parser.add_argument("--log-level", default="INFO", help="Logging level (DEBUG, INFO, WARNING, ERROR)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point."""
    args = build_arg_parser().parse_args(argv)

    try:
        set_log_level(args.log_level)
        options = CodemodOptions.from_args(args)
    except ValueError as e:
        logger.error(str(e))
        return 2

    codemod = DefaultPropsCodemod(options)
    reports = codemod.transform_paths(args.paths)

    if args.print_output:
        for report in reports:
            if report.result is not None:
                sys.stdout.write(report.result.source)

    counts = {status: 0 for status in (STATUS_OK, STATUS_UNMODIFIED, STATUS_ERROR)}
    for report in reports:
        counts[report.status] += 1
    logger.info(
        f"{counts[STATUS_OK]} rewritten, {counts[STATUS_UNMODIFIED]} unmodified, "
        f"{counts[STATUS_ERROR]} errors"
    )

    return 1 if counts[STATUS_ERROR] else 0


if __name__ == "__main__":
    sys.exit(main())
