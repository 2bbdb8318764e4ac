"""
DRF events: when and how often data should be sampled.

    @N                          never
    @I                          immediately, once
    @P[,rate[,imm]]             periodically
    @Q[,rate[,imm]]             periodically, skipping unchanged values
    @E,id[,type][,delay]        on a clock event (hex id, type E/H/S)
    @S,dev,value,delay,op       on a state transition of another device

No ``@`` at all means the system default event. Letters are
case-insensitive. Times go through drfparse.timing and saturate rather
than fail.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ._config import get_periodic_immediate_default
from ._scan import MAX_U16, MAX_U32, expect, parse_uint, scan_hex
from .errors import EventSyntaxError
from .timing import DEFAULT_PERIOD, format_period, parse_time_freq


class ClockType(Enum):
    HARDWARE = "H"
    SOFTWARE = "S"
    EITHER = "E"


class StateOp(Enum):
    EQ = "="
    NEQ = "!="
    GT = ">"
    LT = "<"
    LEQ = "<="
    GEQ = ">="
    ALL = "*"


# two-character operators first so "<=" never parses as "<"
_STATE_OPS = sorted(StateOp, key=lambda op: len(op.value), reverse=True)

_IMMEDIATE_FLAGS = (("TRUE", True), ("FALSE", False), ("T", True), ("F", False))


class DRF_EVENT:
    """Base class of all events. ``str(event)`` is the canonical form."""

    mode = ""

    @property
    def canonical(self) -> str:
        raise NotImplementedError

    def __str__(self):
        return self.canonical


@dataclass(frozen=True)
class DefaultEvent(DRF_EVENT):
    mode = "U"

    @property
    def canonical(self) -> str:
        return ""


@dataclass(frozen=True)
class NeverEvent(DRF_EVENT):
    mode = "N"

    @property
    def canonical(self) -> str:
        return "@N"


@dataclass(frozen=True)
class ImmediateEvent(DRF_EVENT):
    mode = "I"

    @property
    def canonical(self) -> str:
        return "@I"


@dataclass(frozen=True)
class PeriodicEvent(DRF_EVENT):
    period: int = DEFAULT_PERIOD  # microseconds
    immediate: bool = True
    skip_dups: bool = False

    @property
    def mode(self) -> str:
        return "Q" if self.skip_dups else "P"

    @property
    def canonical(self) -> str:
        imm = "TRUE" if self.immediate else "FALSE"
        return f"@{self.mode},{format_period(self.period)},{imm}"


@dataclass(frozen=True)
class ClockEvent(DRF_EVENT):
    event: int
    clock_type: ClockType = ClockType.EITHER
    delay: int = 0  # microseconds

    mode = "E"

    @property
    def canonical(self) -> str:
        return f"@E,{self.event:X},{self.clock_type.value},{format_period(self.delay)}"


@dataclass(frozen=True)
class StateEvent(DRF_EVENT):
    device: int
    value: int
    delay: int
    expr: StateOp

    mode = "S"

    @property
    def canonical(self) -> str:
        return f"@S,{self.device},{self.value},{format_period(self.delay)},{self.expr.value}"


def _scan_immediate_flag(text: str, pos: int) -> tuple[bool, int]:
    for token, flag in _IMMEDIATE_FLAGS:
        if text[pos : pos + len(token)].upper() == token:
            return flag, pos + len(token)
    raise EventSyntaxError("Expected TRUE or FALSE", text, pos, text[pos : pos + 1] or None)


def _scan_periodic(text: str, pos: int, skip_dups: bool, immediate: bool) -> tuple[PeriodicEvent, int]:
    period = DEFAULT_PERIOD
    if text.startswith(",", pos):
        period, pos = parse_time_freq(text, pos + 1)
        if text.startswith(",", pos):
            immediate, pos = _scan_immediate_flag(text, pos + 1)
    return PeriodicEvent(period=period, immediate=immediate, skip_dups=skip_dups), pos


def _scan_clock(text: str, pos: int) -> tuple[ClockEvent, int]:
    pos = expect(text, pos, ",", EventSyntaxError, "',' before clock event id")
    digits, end = scan_hex(text, pos)
    if digits is None:
        raise EventSyntaxError("Expected hex clock event id", text, pos, text[pos : pos + 1] or None)
    if len(digits) > 4:
        raise EventSyntaxError("Clock event id exceeds 16 bits", text, pos, digits)
    event = int(digits, 16)
    pos = end

    clock_type = ClockType.EITHER
    delay = 0
    if text.startswith(",", pos) and text[pos + 1 : pos + 2].isalpha():
        token = text[pos + 1]
        try:
            clock_type = ClockType(token.upper())
        except ValueError:
            raise EventSyntaxError("Unknown clock type", text, pos + 1, token) from None
        pos += 2
    if text.startswith(",", pos):
        delay, pos = parse_time_freq(text, pos + 1)
    return ClockEvent(event=event, clock_type=clock_type, delay=delay), pos


def _scan_state(text: str, pos: int) -> tuple[StateEvent, int]:
    pos = expect(text, pos, ",", EventSyntaxError, "',' before state device")
    device, pos = parse_uint(text, pos, MAX_U32, EventSyntaxError, "state device id")
    pos = expect(text, pos, ",", EventSyntaxError, "',' before state value")
    value, pos = parse_uint(text, pos, MAX_U16, EventSyntaxError, "state value")
    pos = expect(text, pos, ",", EventSyntaxError, "',' before state delay")
    delay, pos = parse_time_freq(text, pos)
    pos = expect(text, pos, ",", EventSyntaxError, "',' before state comparison")
    for op in _STATE_OPS:
        if text.startswith(op.value, pos):
            return StateEvent(device=device, value=value, delay=delay, expr=op), pos + len(op.value)
    raise EventSyntaxError("Unknown comparison", text, pos, text[pos : pos + 2] or None)


def scan_event(text: str, pos: int, immediate_default: Optional[bool] = None) -> tuple[DRF_EVENT, int]:
    """Consume an optional ``@...`` event at ``pos``; returns (event, new_pos)."""
    if not text.startswith("@", pos):
        return DefaultEvent(), pos
    pos += 1
    if pos >= len(text):
        raise EventSyntaxError("Missing event type", text, pos)
    kind = text[pos].upper()
    pos += 1
    if kind == "N":
        return NeverEvent(), pos
    if kind == "I":
        return ImmediateEvent(), pos
    if kind in ("P", "Q"):
        if immediate_default is None:
            immediate_default = get_periodic_immediate_default()
        return _scan_periodic(text, pos, kind == "Q", immediate_default)
    if kind == "E":
        return _scan_clock(text, pos)
    if kind == "S":
        return _scan_state(text, pos)
    raise EventSyntaxError("Unknown event type", text, pos - 1, text[pos - 1])


def parse_event(raw_string: str | None, immediate_default: Optional[bool] = None) -> tuple[DRF_EVENT, str]:
    """Parse a leading event of ``raw_string``.

    Args:
        raw_string: Text starting with ``@`` (anything else yields DefaultEvent)
        immediate_default: Periodic immediate flag when ``,imm`` is absent
            (default: drfparse configuration)

    Returns:
        (event, remainder)

    Raises:
        EventSyntaxError: If the event is malformed
    """
    if not raw_string:
        return DefaultEvent(), ""
    event, end = scan_event(raw_string, 0, immediate_default)
    return event, raw_string[end:]
