import re

from .errors import DeviceSyntaxError, UnknownQualifierError
from .field import DRF_FIELD, get_default_field
from .property import DRF_PROPERTY, PROPERTY_FOR_QUALIFIER

PATTERN_DI_NAME = re.compile("[0-9]+")
# word characters plus the punctuation allowed inside device names
PATTERN_NAME_BODY = re.compile(r"[\w\-:<>;]+")


class Device:
    def __init__(self, raw_string: str, canonical_string: str, qualifier: str = ":"):
        self.raw_string = raw_string
        self.canonical_string = canonical_string
        self.qualifier = qualifier

    def __eq__(self, other):
        if not isinstance(other, Device):
            return NotImplemented
        return self.canonical_string == other.canonical_string

    def __hash__(self):
        return hash(self.canonical_string)

    def __repr__(self):
        return f"Device({self.canonical_string!r})"

    def __str__(self):
        return self.canonical_string

    @property
    def canonical(self) -> str:
        return self.canonical_string

    @property
    def default_property(self) -> DRF_PROPERTY:
        return PROPERTY_FOR_QUALIFIER[self.qualifier]

    @property
    def default_field(self) -> DRF_FIELD | None:
        return get_default_field(self.default_property)

    def qualified_name(self, prop: DRF_PROPERTY) -> str:
        return get_qualified_device(self.canonical_string, prop)


def get_qualified_device(device_str: str, prop: DRF_PROPERTY) -> str:
    """Replace the qualifier of ``device_str`` with the one selecting ``prop``."""
    if len(device_str) < 3:
        raise ValueError(f"{device_str} is too short for device")
    if prop not in DRF_PROPERTY:
        raise ValueError(f"prop must be a DRF_PROPERTY member, got {prop!r}")
    ext = prop.qualifier
    if ext is None:
        raise ValueError(
            f"Property {prop.name} has no qualifier character and cannot be used in qualified device names"
        )
    ld = list(device_str)
    ld[1] = ext
    return "".join(ld)


def scan_device(text: str, pos: int = 0) -> tuple[Device, int]:
    """Consume a device name starting at ``pos``; returns (device, new_pos)."""
    if pos >= len(text):
        raise DeviceSyntaxError("Empty device", text, pos)
    first = text[pos]
    if first == "0":
        body = PATTERN_DI_NAME
    elif first.isalpha():
        body = PATTERN_NAME_BODY
    else:
        raise DeviceSyntaxError("Device must start with a letter or '0'", text, pos, first)

    qpos = pos + 1
    if qpos >= len(text):
        raise DeviceSyntaxError("Missing qualifier", text, qpos)
    qualifier = text[qpos]
    if qualifier not in PROPERTY_FOR_QUALIFIER:
        if qualifier.isalnum():
            raise DeviceSyntaxError("Missing qualifier", text, qpos, qualifier)
        raise UnknownQualifierError("Unknown qualifier", text, qpos, qualifier)

    m = body.match(text, qpos + 1)
    if m is None:
        raise DeviceSyntaxError("Empty device name", text, qpos + 1, text[qpos + 1 : qpos + 2] or None)
    raw = text[pos : m.end()]
    device = Device(raw_string=raw, canonical_string=f"{first}:{m.group()}", qualifier=qualifier)
    return device, m.end()


def parse_device(raw_string: str) -> tuple[Device, str]:
    """Parse the leading device of ``raw_string``.

    Returns:
        (device, remainder) where remainder is the unconsumed input

    Raises:
        DeviceSyntaxError: If the string does not start with a valid device
    """
    if raw_string is None:
        raise ValueError("raw_string must not be None")
    device, end = scan_device(raw_string)
    return device, raw_string[end:]
