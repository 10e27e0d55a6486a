"""Utility modules for the codemod."""

from .string_utils import is_identifier, is_bindable_name, quote_string, decode_escape
from .file_utils import read_file, write_file, iter_source_files
from .logger import get_logger, set_log_level

__all__ = [
    "is_identifier",
    "is_bindable_name",
    "quote_string",
    "decode_escape",
    "read_file",
    "write_file",
    "iter_source_files",
    "get_logger",
    "set_log_level",
]
