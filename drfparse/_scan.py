"""Lexical helpers shared by the fragment parsers.

Every helper takes ``(text, pos)`` and returns ``(value, new_pos)``. Nothing
here keeps state between calls.
"""

import re
from typing import Optional, Type

from .errors import DRFParseError

MAX_U16 = 0xFFFF
MAX_U32 = 0xFFFFFFFF

_DIGITS = re.compile(r"[0-9]+")
_HEX_DIGITS = re.compile(r"[0-9A-Fa-f]+")
# letters and underscore, no digits
_NAME = re.compile(r"[^\W\d]+")


def scan_digits(text: str, pos: int) -> tuple[Optional[str], int]:
    """Consume a run of ASCII digits, or nothing."""
    m = _DIGITS.match(text, pos)
    if m is None:
        return None, pos
    return m.group(), m.end()


def scan_hex(text: str, pos: int) -> tuple[Optional[str], int]:
    m = _HEX_DIGITS.match(text, pos)
    if m is None:
        return None, pos
    return m.group(), m.end()


def scan_name(text: str, pos: int) -> tuple[Optional[str], int]:
    m = _NAME.match(text, pos)
    if m is None:
        return None, pos
    return m.group(), m.end()


def parse_uint(
    text: str,
    pos: int,
    maximum: int,
    error: Type[DRFParseError],
    what: str,
) -> tuple[int, int]:
    """Consume an unsigned decimal integer no larger than ``maximum``.

    Raises ``error`` when no digits are present or the value is too wide.
    """
    digits, end = scan_digits(text, pos)
    if digits is None:
        raise error(f"Expected {what}", text, pos, text[pos : pos + 1] or None)
    value = int(digits)
    if value > maximum:
        raise error(f"{what.capitalize()} out of range (max {maximum})", text, pos, digits)
    return value, end


def expect(text: str, pos: int, char: str, error: Type[DRFParseError], what: str) -> int:
    """Consume exactly ``char`` or raise ``error``."""
    if text.startswith(char, pos):
        return pos + len(char)
    raise error(f"Expected {what}", text, pos, text[pos : pos + 1] or None)
