"""Tests for drfparse.event - event grammar and canonical rendering."""

import pytest

from drfparse import configure
from drfparse.errors import EventSyntaxError
from drfparse.event import (
    ClockEvent,
    ClockType,
    DefaultEvent,
    ImmediateEvent,
    NeverEvent,
    PeriodicEvent,
    StateEvent,
    StateOp,
    parse_event,
)
from drfparse.timing import MAX_PERIOD


class TestSimpleEvents:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("@N", NeverEvent()),
            ("@n", NeverEvent()),
            ("@I", ImmediateEvent()),
            ("@i", ImmediateEvent()),
        ],
    )
    def test_parse(self, text, expected):
        assert parse_event(text) == (expected, "")

    def test_default_without_at(self):
        assert parse_event("") == (DefaultEvent(), "")
        assert parse_event(None) == (DefaultEvent(), "")
        assert parse_event("P,1000") == (DefaultEvent(), "P,1000")

    def test_modes(self):
        assert DefaultEvent().mode == "U"
        assert NeverEvent().mode == "N"
        assert ImmediateEvent().mode == "I"
        assert PeriodicEvent().mode == "P"
        assert PeriodicEvent(skip_dups=True).mode == "Q"
        assert ClockEvent(2).mode == "E"
        assert StateEvent(1, 2, 3, StateOp.EQ).mode == "S"


class TestPeriodicEvent:
    @pytest.mark.parametrize(
        "text,period,skip_dups,rest",
        [
            ("@P", 1_000_000, False, ""),
            ("@PD", 1_000_000, False, "D"),
            ("@P,1000", 1_000_000, False, ""),
            ("@P,1S", 1_000_000, False, ""),
            ("@P,10S", 10_000_000, False, ""),
            ("@P,1U", 1, False, ""),
            ("@P,1K", 1_000, False, ""),
            ("@P,2K", 500, False, ""),
            ("@P,1H", 1_000_000, False, ""),
            ("@P,10H", 100_000, False, ""),
            ("@p,500", 500_000, False, ""),
            ("@Q", 1_000_000, True, ""),
            ("@QD", 1_000_000, True, "D"),
            ("@Q,1000", 1_000_000, True, ""),
            ("@Q,1S", 1_000_000, True, ""),
            ("@Q,10S", 10_000_000, True, ""),
            ("@Q,1U", 1, True, ""),
            ("@Q,1K", 1_000, True, ""),
            ("@Q,2K", 500, True, ""),
            ("@Q,1H", 1_000_000, True, ""),
            ("@q,10H", 100_000, True, ""),
        ],
    )
    def test_rates(self, text, period, skip_dups, rest):
        expected = PeriodicEvent(period=period, immediate=False, skip_dups=skip_dups)
        assert parse_event(text, immediate_default=False) == (expected, rest)

    @pytest.mark.parametrize(
        "text,immediate",
        [
            ("@P,1S,TRUE", True),
            ("@P,1S,T", True),
            ("@P,1S,true", True),
            ("@P,1S,t", True),
            ("@P,1S,FALSE", False),
            ("@P,1S,F", False),
            ("@P,1S,false", False),
            ("@Q,1S,f", False),
        ],
    )
    def test_immediate_flag(self, text, immediate):
        event, rest = parse_event(text, immediate_default=not immediate)
        assert event.immediate is immediate
        assert rest == ""

    def test_immediate_default_from_config(self):
        assert parse_event("@P")[0].immediate is True
        assert parse_event("@P,1S")[0].immediate is True
        configure(periodic_immediate=False)
        assert parse_event("@P")[0].immediate is False
        assert parse_event("@P,1S")[0].immediate is False

    def test_explicit_flag_beats_config(self):
        configure(periodic_immediate=False)
        assert parse_event("@P,1S,TRUE")[0].immediate is True

    def test_saturated_rate(self):
        assert parse_event("@P,4295S")[0].period == MAX_PERIOD
        assert parse_event("@P,0H")[0].period == MAX_PERIOD
        assert parse_event("@P,1000001H")[0].period == 1

    @pytest.mark.parametrize(
        "text,match",
        [
            ("@P,", "Expected time value"),
            ("@P,S", "Expected time value"),
            ("@P,1X", "Unknown unit suffix"),
            ("@P,1S,", "Expected TRUE or FALSE"),
            ("@P,1S,MAYBE", "Expected TRUE or FALSE"),
        ],
    )
    def test_invalid(self, text, match):
        with pytest.raises(EventSyntaxError, match=match):
            parse_event(text)

    @pytest.mark.parametrize(
        "event,expected",
        [
            (PeriodicEvent(1_000_000, True, False), "@P,1000000U,TRUE"),
            (PeriodicEvent(500, False, True), "@Q,500U,FALSE"),
        ],
    )
    def test_canonical(self, event, expected):
        assert event.canonical == expected
        assert str(event) == expected


class TestClockEvent:
    @pytest.mark.parametrize(
        "text,event,clock_type,delay",
        [
            ("@e,02", 0x02, ClockType.EITHER, 0),
            ("@E,0F", 0x0F, ClockType.EITHER, 0),
            ("@E,AE,e,1000", 0xAE, ClockType.EITHER, 1_000_000),
            ("@E,ae,H", 0xAE, ClockType.HARDWARE, 0),
            ("@E,12,s,5U", 0x12, ClockType.SOFTWARE, 5),
            ("@E,FFFF", 0xFFFF, ClockType.EITHER, 0),
            ("@E,1,100", 0x1, ClockType.EITHER, 100_000),
        ],
    )
    def test_parse(self, text, event, clock_type, delay):
        assert parse_event(text) == (ClockEvent(event=event, clock_type=clock_type, delay=delay), "")

    @pytest.mark.parametrize(
        "text,match",
        [
            ("@E", "',' before clock event id"),
            ("@E,", "Expected hex clock event id"),
            ("@E,G", "Expected hex clock event id"),
            ("@E,10000", "exceeds 16 bits"),
            ("@E,1,X", "Unknown clock type"),
            ("@E,1,E,", "Expected time value"),
        ],
    )
    def test_invalid(self, text, match):
        with pytest.raises(EventSyntaxError, match=match):
            parse_event(text)

    @pytest.mark.parametrize(
        "event,expected",
        [
            (ClockEvent(2), "@E,2,E,0U"),
            (ClockEvent(0xAE, ClockType.HARDWARE, 1_000_000), "@E,AE,H,1000000U"),
            (ClockEvent(0x1F, ClockType.SOFTWARE, 7), "@E,1F,S,7U"),
        ],
    )
    def test_canonical(self, event, expected):
        assert event.canonical == expected
        assert parse_event(expected)[0] == event


class TestStateEvent:
    @pytest.mark.parametrize(
        "token,op",
        [
            ("=", StateOp.EQ),
            ("!=", StateOp.NEQ),
            (">", StateOp.GT),
            ("<", StateOp.LT),
            ("<=", StateOp.LEQ),
            (">=", StateOp.GEQ),
            ("*", StateOp.ALL),
        ],
    )
    def test_comparisons(self, token, op):
        event, rest = parse_event(f"@S,1234,5,1s,{token}")
        assert event == StateEvent(device=1234, value=5, delay=1_000_000, expr=op)
        assert rest == ""

    def test_longest_match(self):
        assert parse_event("@S,1,2,3,<=")[0].expr is StateOp.LEQ
        assert parse_event("@S,1,2,3,<>") == (StateEvent(1, 2, 3_000, StateOp.LT), ">")

    def test_lower_case(self):
        assert parse_event("@s,7,8,9u,>=")[0] == StateEvent(7, 8, 9, StateOp.GEQ)

    def test_canonical(self):
        event, _ = parse_event("@S,1234,0,1s,=")
        assert event.canonical == "@S,1234,0,1000000U,="

    @pytest.mark.parametrize(
        "text,match",
        [
            ("@S", "',' before state device"),
            ("@S,", "Expected state device id"),
            ("@S,1234", "',' before state value"),
            ("@S,4294967296,0,1,=", "out of range"),
            ("@S,1,65536,1,=", "out of range"),
            ("@S,1,2,=", "Expected time value"),
            ("@S,1,2,3", "',' before state comparison"),
            ("@S,1,2,3,?", "Unknown comparison"),
            ("@S,1,2,3,", "Unknown comparison"),
        ],
    )
    def test_invalid(self, text, match):
        with pytest.raises(EventSyntaxError, match=match):
            parse_event(text)


class TestUnknownEvents:
    @pytest.mark.parametrize("text,match", [("@", "Missing event type"), ("@X", "Unknown event type")])
    def test_invalid(self, text, match):
        with pytest.raises(EventSyntaxError, match=match):
            parse_event(text)
