"""
File utility functions.
"""

import os
from typing import Iterable, Iterator, Optional
from .logger import get_logger

logger = get_logger(__name__)

SKIPPED_DIRECTORIES = {"node_modules"}


def read_file(file_path: str) -> Optional[str]:
    """
    Read content from a file.

    Args:
        file_path: Path to the file

    Returns:
        File content as string, or None if error
    """
    try:
        with open(file_path, "r", encoding="utf-8", newline="") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Failed to read file {file_path}: {e}")
        return None


def write_file(file_path: str, content: str) -> bool:
    """
    Write content to a file.

    Args:
        file_path: Path to the file
        content: Content to write

    Returns:
        True if successful, False otherwise
    """
    try:
        with open(file_path, "w", encoding="utf-8", newline="") as f:
            f.write(content)
        logger.debug(f"Successfully wrote file: {file_path}")
        return True
    except (OSError, UnicodeError) as e:
        logger.error(f"Failed to write file {file_path}: {e}")
        return False


def iter_source_files(directory: str, extensions: Iterable[str]) -> Iterator[str]:
    """
    Walk a directory tree and yield files with one of the given extensions.

    Hidden directories and node_modules are not descended into. Paths are
    yielded in sorted order so runs are reproducible.
    """
    suffixes = tuple("." + ext.lstrip(".") for ext in extensions)
    for root, dirs, files in os.walk(directory):
        dirs[:] = sorted(
            d for d in dirs if not d.startswith(".") and d not in SKIPPED_DIRECTORIES
        )
        for name in sorted(files):
            if name.endswith(suffixes) and not name.endswith(".d.ts"):
                yield os.path.join(root, name)
