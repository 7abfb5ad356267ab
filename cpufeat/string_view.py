"""Small string helpers used to parse ``/proc/cpuinfo`` style text."""

from __future__ import annotations

_WHITESPACE = " \t\n\v\f\r"
_HEX_PREFIX = "0x"


def _until_nul(text: str) -> str:
    """Return the part of ``text`` before the first NUL character."""
    return text.split("\0", 1)[0]


def index_of_char(text: str, char: str) -> int:
    """Return the index of ``char`` in ``text``, or -1.

    The search stops at the first NUL character.
    """
    if not text:
        return -1
    return _until_nul(text).find(char)


def index_of(text: str, sub: str) -> int:
    """Return the index of the first occurrence of ``sub`` in ``text``, or -1.

    An empty ``sub`` is never found. The search stops at the first NUL.
    """
    if not sub:
        return -1
    return _until_nul(text).find(sub)


def has_word(line: str, word: str, separator: str) -> bool:
    """Tell whether ``word`` occurs in ``line`` delimited by ``separator``.

    The word counts when it is preceded by the start of the line or the
    separator, and followed by the end of the line or the separator.
    """
    if not word:
        return False
    haystack = _until_nul(line)
    start = haystack.find(word)
    while start >= 0:
        end = start + len(word)
        valid_before = start == 0 or haystack[start - 1] == separator
        valid_after = end == len(haystack) or haystack[end] == separator
        if valid_before and valid_after:
            return True
        start = haystack.find(word, start + 1)
    return False


def trim_whitespace(text: str) -> str:
    """Strip ASCII whitespace from both ends of ``text``."""
    return text.strip(_WHITESPACE)


def get_attribute_key_value(line: str) -> tuple[str, str] | None:
    """Split a ``key : value`` line into its trimmed key and value.

    The separator is the first ``": "`` in the line. Returns ``None`` when
    the line holds no separator.
    """
    separator = ": "
    index = index_of(line, separator)
    if index < 0:
        return None
    key = trim_whitespace(line[:index])
    value = trim_whitespace(line[index + len(separator):])
    return key, value


def _digit_value(char: str) -> int:
    if "0" <= char <= "9":
        return ord(char) - ord("0")
    if "a" <= char <= "f":
        return ord(char) - ord("a") + 10
    if "A" <= char <= "F":
        return ord(char) - ord("A") + 10
    return -1


def _parse_with_base(text: str, base: int, original: str) -> int:
    result = 0
    for char in text:
        value = _digit_value(char)
        if value < 0 or value >= base:
            raise ValueError(f"not a positive number: {original!r}")
        result = result * base + value
    return result


def parse_positive_number(text: str) -> int:
    """Parse a decimal or ``0x``-prefixed hexadecimal non-negative number.

    Raises ``ValueError`` for an empty string or one holding other characters.
    """
    if not text:
        raise ValueError("empty string is not a number")
    if text.startswith(_HEX_PREFIX):
        return _parse_with_base(text[len(_HEX_PREFIX):], 16, text)
    return _parse_with_base(text, 10, text)


def truncate(text: str, size: int) -> str:
    """Return ``text`` as it fits in a zero terminated buffer of ``size``.

    At most ``size - 1`` characters are kept; a size of zero keeps nothing.
    """
    if size <= 0:
        return ""
    return text[: size - 1]