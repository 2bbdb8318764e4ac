"""
DRF ranges.

``[start:end]`` selects array elements (16-bit indices), ``{offset:length}``
selects bytes (32-bit). With no range at all the request targets the default
element, ``ArrayRange(0, 0)``, which renders as nothing.
"""

from dataclasses import dataclass
from typing import Optional

from ._scan import MAX_U16, MAX_U32, scan_digits
from .errors import RangeError


class DRF_RANGE:
    """Base class of all ranges. ``str(range)`` is the canonical form."""

    @property
    def canonical(self) -> str:
        return str(self)


@dataclass(frozen=True)
class FullRange(DRF_RANGE):
    """The entire value."""

    def __str__(self):
        return "[]"


@dataclass(frozen=True)
class ArrayRange(DRF_RANGE):
    """Element range; ``end`` None means open-ended."""

    start: int = 0
    end: Optional[int] = 0

    def __str__(self):
        if self.end is None:
            return f"[{self.start}:]"
        if self.start == 0 and self.end == 0:
            return ""
        if self.start == self.end:
            return f"[{self.start}]"
        return f"[{self.start}:{self.end}]"


@dataclass(frozen=True)
class ByteRange(DRF_RANGE):
    """Byte range; ``length`` None means to the end of the value."""

    offset: int = 0
    length: Optional[int] = None

    def __str__(self):
        if self.length is None:
            return f"{{{self.offset}:}}"
        if self.length == 1:
            return f"{{{self.offset}}}"
        return f"{{{self.offset}:{self.length}}}"


DEFAULT_RANGE = ArrayRange(0, 0)


def _scan_index(text: str, pos: int, maximum: int) -> tuple[Optional[int], int]:
    digits, end = scan_digits(text, pos)
    if digits is None:
        return None, pos
    value = int(digits)
    if value > maximum:
        raise RangeError(f"Range value out of range (max {maximum})", text, pos, digits)
    return value, end


def _expect_close(text: str, pos: int, close: str) -> int:
    if not text.startswith(close, pos):
        raise RangeError(f"Expected '{close}'", text, pos, text[pos : pos + 1] or None)
    return pos + 1


def _array_range(text: str, pos: int, start: Optional[int], end: Optional[int]) -> DRF_RANGE:
    if end is None and (start is None or start == 0):
        return FullRange()
    if end is None:
        return ArrayRange(start, None)
    if start is None:
        return ArrayRange(0, end)
    if start > end:
        raise RangeError(f"Range start {start} is past end {end}", text, pos)
    return ArrayRange(start, end)


def _byte_range(text: str, pos: int, offset: Optional[int], length: Optional[int]) -> DRF_RANGE:
    if length is None and (offset is None or offset == 0):
        return FullRange()
    if length is None:
        return ByteRange(offset, None)
    if length == 0:
        raise RangeError("Byte range length must be at least 1", text, pos)
    offset = offset or 0
    if offset > MAX_U32 - length:
        raise RangeError(f"Byte range {offset}+{length} overflows 32 bits", text, pos)
    return ByteRange(offset, length)


def scan_range(text: str, pos: int) -> tuple[DRF_RANGE, int]:
    """Consume an optional range at ``pos``; returns (range, new_pos)."""
    if text.startswith("[", pos):
        close, maximum, build = "]", MAX_U16, _array_range
    elif text.startswith("{", pos):
        close, maximum, build = "}", MAX_U32, _byte_range
    else:
        return DEFAULT_RANGE, pos

    open_pos = pos
    pos += 1
    if text.startswith(close, pos):
        return FullRange(), pos + 1

    first, pos = _scan_index(text, pos, maximum)
    if first is not None and text.startswith(close, pos):
        if close == "]":
            return ArrayRange(first, first), pos + 1
        return ByteRange(first, 1), pos + 1
    if not text.startswith(":", pos):
        raise RangeError(f"Expected ':' or '{close}'", text, pos, text[pos : pos + 1] or None)

    second, pos = _scan_index(text, pos + 1, maximum)
    pos = _expect_close(text, pos, close)
    return build(text, open_pos, first, second), pos


def parse_range(raw_string: str | None) -> tuple[DRF_RANGE, str]:
    """Parse a leading range of ``raw_string``.

    Returns:
        (range, remainder); DEFAULT_RANGE if no range is present

    Raises:
        RangeError: If the range is malformed or violates its bounds
    """
    if not raw_string:
        return DEFAULT_RANGE, ""
    rng, end = scan_range(raw_string, 0)
    return rng, raw_string[end:]
