"""
String utility functions for emitting JavaScript source.
"""

import codecs
import re

_IDENTIFIER_RE = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")
_UNICODE_ESCAPE_RE = re.compile(r"\\u\{([0-9a-fA-F]+)\}")
_SIMPLE_ESCAPES = "bfnrtv0xu'\"\\"
_LINE_TERMINATORS = "\r\n\u2028\u2029"
_SURROGATE_PAIR_RE = re.compile("[\ud800-\udbff][\udc00-\udfff]")
_LONE_SURROGATE_RE = re.compile("[\ud800-\udfff]")

# Words that cannot be used as a binding name in module code.
RESERVED_WORDS = frozenset(
    """
    arguments await break case catch class const continue debugger default
    delete do else enum eval export extends false finally for function if
    implements import in instanceof interface let new null package private
    protected public return static super switch this throw true try typeof
    undefined var void while with yield
    """.split()
)

QUOTES = {"single": "'", "double": '"'}


def is_identifier(name: str) -> bool:
    """Return True if name is a plain ASCII JavaScript identifier."""
    return bool(name) and _IDENTIFIER_RE.match(name) is not None


def is_bindable_name(name: str) -> bool:
    """Return True if name can be used as a destructured parameter binding."""
    return is_identifier(name) and name not in RESERVED_WORDS


def quote_string(value: str, quote: str = "single") -> str:
    """
    Render a string value as a JavaScript string literal.

    Args:
        value: The decoded string value
        quote: "single" or "double"

    Returns:
        The quoted, escaped literal
    """
    mark = QUOTES[quote]
    escaped = (
        value.replace("\\", "\\\\")
        .replace(mark, "\\" + mark)
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
        .replace("\u2028", "\\u2028")
        .replace("\u2029", "\\u2029")
    )
    # a surrogate without its partner cannot be written as UTF-8
    escaped = _LONE_SURROGATE_RE.sub(
        lambda m: f"\\u{ord(m.group()):04x}", join_surrogates(escaped)
    )
    return f"{mark}{escaped}{mark}"


def decode_escape(sequence: str) -> str:
    """Decode a single JavaScript escape sequence such as \\n or \\u{1F600}."""
    match = _UNICODE_ESCAPE_RE.fullmatch(sequence)
    if match:
        return chr(int(match.group(1), 16))
    if len(sequence) < 2 or sequence[1] in _LINE_TERMINATORS:
        # line continuation
        return ""
    if sequence[1] not in _SIMPLE_ESCAPES:
        return sequence[1:]
    try:
        return codecs.decode(sequence, "unicode_escape")
    except UnicodeDecodeError:
        return sequence[1:]


def join_surrogates(value: str) -> str:
    """
    Combine UTF-16 surrogate pairs such as the decoded ``\\uD83D\\uDE00``
    into the single code point they encode. Lone surrogates are kept.
    """
    return _SURROGATE_PAIR_RE.sub(
        lambda m: m.group().encode("utf-16", "surrogatepass").decode("utf-16"), value
    )
