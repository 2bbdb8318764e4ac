"""
DRF string utilities using proper parsing.

These functions provide safe DRF manipulation using the drfparse parser
instead of fragile string splitting.
"""

from drfparse.event import NeverEvent, parse_event
from drfparse.extra import HISTORICAL_EXTRAS
from drfparse.property import DRF_PROPERTY
from drfparse.request import parse_request


def canonicalize(drf: str) -> str:
    """Canonical form of a DRF string.

    Args:
        drf: DRF string in any accepted form (e.g., "M|OUTTMP[]")

    Returns:
        Canonical DRF (e.g., "M:OUTTMP.STATUS[].ALL")
    """
    return parse_request(drf).canonical


def ensure_immediate_event(drf: str) -> str:
    """Ensure DRF has immediate event (@I) if no event specified.

    Args:
        drf: DRF string (e.g., "M:OUTTMP" or "M:OUTTMP@p,1000")

    Returns:
        DRF with @I appended if no event was present.
        Preserves the original form (doesn't canonicalize).
        Requests for historical data (e.g. "<-LOGGER") are returned unchanged.
    """
    request = parse_request(drf)
    if request.extra in HISTORICAL_EXTRAS:
        return drf
    if request.event.mode == "U":
        if request.extra is not None:
            # event goes before the extra
            idx = drf.find("<-")
            return f"{drf[:idx]}@I{drf[idx:]}"
        # Append @I to original string (preserves original format)
        return f"{drf}@I"
    return drf


def get_device_name(drf: str) -> str:
    """Extract just the device name from a DRF string.

    Args:
        drf: Full DRF string (e.g., "M:OUTTMP.SETTING[0:10]@p,1000")

    Returns:
        Device name only (e.g., "M:OUTTMP")
    """
    request = parse_request(drf)
    return request.device


def replace_event(drf: str, event_str: str) -> str:
    """Replace or add event in a DRF string.

    Args:
        drf: DRF string
        event_str: New event, with or without the leading '@' (e.g., "p,1000", "I", "@E,0F")

    Returns:
        Canonical DRF with the new event
    """
    request = parse_request(drf)
    if not event_str.startswith("@"):
        event_str = f"@{event_str}"
    new_event, rest = parse_event(event_str)
    if rest:
        raise ValueError(f"Invalid event {event_str!r}: unexpected {rest!r}")
    return request.to_canonical(event=new_event)


def strip_event(drf: str) -> str:
    """Remove event from DRF string.

    Args:
        drf: DRF string with or without event

    Returns:
        Canonical DRF without event portion
    """
    request = parse_request(drf)
    out = request.device + request.property.keyword + str(request.range)
    if request.field is not None:
        out += request.field.keyword
    return out


def has_event(drf: str) -> bool:
    """Check if DRF has an explicit event.

    Args:
        drf: DRF string

    Returns:
        True if DRF has an event specified (not default 'U')
    """
    request = parse_request(drf)
    return request.event.mode != "U"


def has_explicit_property(drf: str) -> bool:
    """Check if DRF has an explicit property (e.g., .SETTING, .READING).

    Qualifier characters (M_OUTTMP) are NOT considered explicit - only
    dotted property names (.SETTING, .READING, etc.) count.

    Args:
        drf: DRF string

    Returns:
        True if DRF has an explicit property specified
    """
    request = parse_request(drf)
    return request.property_explicit


def is_setting_property(drf: str) -> bool:
    """Check if DRF is for the SETTING property.

    Args:
        drf: DRF string

    Returns:
        True if DRF's property is SETTING (explicit or via qualifier char)
    """
    request = parse_request(drf)
    return request.property == DRF_PROPERTY.SETTING


# Map read properties to their writable counterparts
_WRITE_PROPERTY = {
    DRF_PROPERTY.READING: DRF_PROPERTY.SETTING,
    DRF_PROPERTY.STATUS: DRF_PROPERTY.CONTROL,
}


def prepare_for_write(drf: str) -> str:
    """Prepare a DRF string for write operations.

    Converts properties to their writable counterparts and forces @N (never)
    event - writes should never request data back.

    Property conversions:
        READING     -> SETTING   (read value -> write setpoint)
        STATUS      -> CONTROL   (read status -> write control bits)
        SETTING     -> preserved
        CONTROL     -> preserved
        ANALOG/DIGITAL -> preserved (alarm block writes)

    Args:
        drf: DRF string (any form: "Z:ACLTST", "Z_ACLTST", "Z:ACLTST.READING", etc.)

    Returns:
        Canonical DRF ready for write operation (e.g. "Z:ACLTST.SETTING.SCALED@N")
    """
    request = parse_request(drf)
    new_property = _WRITE_PROPERTY.get(request.property, request.property)
    return request.to_canonical(property=new_property, event=NeverEvent())
