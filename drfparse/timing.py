"""
Time/rate scaling for event periods and delays.

A time-frequency value is a run of digits followed by an optional unit:

    S   seconds       value * 1,000,000
    M   milliseconds  value * 1,000 (also used when no unit is given)
    U   microseconds  value
    K   kilohertz     1,000 / value
    H   hertz         1,000,000 / value

Results are microseconds in the unsigned 32-bit domain. Arithmetic saturates
instead of failing: overflow clips to MAX_PERIOD, a zero frequency clips to
MAX_PERIOD and a frequency that rounds down to 0 us clips to 1 us.
"""

import logging
from typing import Optional

from ._scan import MAX_U32, scan_digits
from .errors import EventSyntaxError

logger = logging.getLogger(__name__)

MAX_PERIOD = MAX_U32
DEFAULT_PERIOD = 1_000_000

_MULTIPLIERS = {"S": 1_000_000, "M": 1_000, "U": 1}
_DIVIDENDS = {"K": 1_000, "H": 1_000_000}
UNIT_SUFFIXES = frozenset("SsMmUuKkHh")


def _saturating_mul(value: int, factor: int) -> int:
    if factor and value > MAX_PERIOD // factor:
        logger.debug("Period %d * %d saturated to %d", value, factor, MAX_PERIOD)
        return MAX_PERIOD
    return value * factor


def _saturating_div(dividend: int, value: int) -> int:
    if value == 0:
        logger.debug("Zero frequency saturated to %d", MAX_PERIOD)
        return MAX_PERIOD
    return max(dividend // value, 1)


def scale_rate(digits: str, suffix: Optional[str] = None) -> int:
    """Convert ``digits`` with an optional unit suffix to microseconds.

    Args:
        digits: Decimal digits (e.g. "10")
        suffix: One of S, M, U, K, H (either case) or None for milliseconds

    Returns:
        Period in microseconds, saturated to [1, MAX_PERIOD] where applicable

    Raises:
        ValueError: If digits is not a decimal number or suffix is unknown
    """
    if not digits or not digits.isascii() or not digits.isdigit():
        raise ValueError(f"Rate must be decimal digits, got {digits!r}")
    unit = "M" if suffix is None else suffix.upper()
    # clip the raw value first so huge digit strings behave like MAX_PERIOD
    value = min(int(digits), MAX_PERIOD)
    if unit in _MULTIPLIERS:
        return _saturating_mul(value, _MULTIPLIERS[unit])
    if unit in _DIVIDENDS:
        return _saturating_div(_DIVIDENDS[unit], value)
    raise ValueError(f"Unknown rate unit {suffix!r}")


def parse_time_freq(text: str, pos: int) -> tuple[int, int]:
    """Consume ``digits[unit]`` at ``pos`` and return (microseconds, new_pos)."""
    digits, end = scan_digits(text, pos)
    if digits is None:
        raise EventSyntaxError("Expected time value", text, pos, text[pos : pos + 1] or None)
    suffix = None
    if end < len(text) and text[end].isalpha():
        if text[end] not in UNIT_SUFFIXES:
            raise EventSyntaxError("Unknown unit suffix", text, end, text[end])
        suffix = text[end]
        end += 1
    return scale_rate(digits, suffix), end


def format_period(microseconds: int) -> str:
    """Canonical rendering of a period or delay."""
    return f"{microseconds}U"
