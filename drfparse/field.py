"""
DRF fields: sub-selectors that refine a property.

READING and SETTING choose between raw, primary and scaled data; STATUS,
ANALOG and DIGITAL address individual members of their structures. The other
properties have no fields at all, in which case the field is None.
"""

from enum import Enum
from types import MappingProxyType

from .errors import FieldlessPropertyError, UnknownNameError
from .property import DRF_PROPERTY


class DRF_FIELD(Enum):
    RAW = "RAW"
    PRIMARY = "PRIMARY"
    SCALED = "SCALED"
    ALL = "ALL"
    TEXT = "TEXT"
    EXTENDED_TEXT = "EXTENDED_TEXT"
    ON = "ON"
    READY = "READY"
    REMOTE = "REMOTE"
    POSITIVE = "POSITIVE"
    RAMP = "RAMP"
    MIN = "MIN"
    MAX = "MAX"
    NOM = "NOM"
    TOL = "TOL"
    RAW_MIN = "RAW_MIN"
    RAW_MAX = "RAW_MAX"
    RAW_NOM = "RAW_NOM"
    RAW_TOL = "RAW_TOL"
    MASK = "MASK"
    ALARM_ENABLE = "ALARM_ENABLE"
    ALARM_STATUS = "ALARM_STATUS"
    TRIES_NEEDED = "TRIES_NEEDED"
    TRIES_NOW = "TRIES_NOW"
    ALARM_FTD = "ALARM_FTD"
    ABORT = "ABORT"
    ABORT_INHIBIT = "ABORT_INHIBIT"
    FLAGS = "FLAGS"

    @property
    def keyword(self) -> str:
        return f".{self.value}"


_SCALED_FIELDS = MappingProxyType(
    {
        "COMMON": DRF_FIELD.SCALED,
        "PRIMARY": DRF_FIELD.PRIMARY,
        "RAW": DRF_FIELD.RAW,
        "SCALED": DRF_FIELD.SCALED,
        "VOLTS": DRF_FIELD.PRIMARY,
    }
)

_STATUS_FIELDS = MappingProxyType(
    {
        "RAW": DRF_FIELD.RAW,
        "ALL": DRF_FIELD.ALL,
        "TEXT": DRF_FIELD.TEXT,
        "EXTENDED_TEXT": DRF_FIELD.EXTENDED_TEXT,
        "ON": DRF_FIELD.ON,
        "READY": DRF_FIELD.READY,
        "REMOTE": DRF_FIELD.REMOTE,
        "POSITIVE": DRF_FIELD.POSITIVE,
        "RAMP": DRF_FIELD.RAMP,
    }
)

# Alarm block members shared by analog and digital alarms
_ALARM_COMMON = {
    "RAW": DRF_FIELD.RAW,
    "ALL": DRF_FIELD.ALL,
    "TEXT": DRF_FIELD.TEXT,
    "ALARM_ENABLE": DRF_FIELD.ALARM_ENABLE,
    "ENABLE": DRF_FIELD.ALARM_ENABLE,
    "ALARM_STATUS": DRF_FIELD.ALARM_STATUS,
    "STATUS": DRF_FIELD.ALARM_STATUS,
    "TRIES_NEEDED": DRF_FIELD.TRIES_NEEDED,
    "TRIES_NOW": DRF_FIELD.TRIES_NOW,
    "ALARM_FTD": DRF_FIELD.ALARM_FTD,
    "FTD": DRF_FIELD.ALARM_FTD,
    "ABORT": DRF_FIELD.ABORT,
    "ABORT_INHIBIT": DRF_FIELD.ABORT_INHIBIT,
    "FLAGS": DRF_FIELD.FLAGS,
    "NOM": DRF_FIELD.NOM,
    "NOMINAL": DRF_FIELD.NOM,
}

_ANALOG_FIELDS = MappingProxyType(
    {
        **_ALARM_COMMON,
        "MIN": DRF_FIELD.MIN,
        "MINIMUM": DRF_FIELD.MIN,
        "MAX": DRF_FIELD.MAX,
        "MAXIMUM": DRF_FIELD.MAX,
        "TOL": DRF_FIELD.TOL,
        "TOLERANCE": DRF_FIELD.TOL,
        "RAW_MIN": DRF_FIELD.RAW_MIN,
        "RAW_MINIMUM": DRF_FIELD.RAW_MIN,
        "RAW_MAX": DRF_FIELD.RAW_MAX,
        "RAW_MAXIMUM": DRF_FIELD.RAW_MAX,
        "RAW_NOM": DRF_FIELD.RAW_NOM,
        "RAW_NOMINAL": DRF_FIELD.RAW_NOM,
        "RAW_TOL": DRF_FIELD.RAW_TOL,
        "RAW_TOLERANCE": DRF_FIELD.RAW_TOL,
    }
)

_DIGITAL_FIELDS = MappingProxyType(
    {
        **_ALARM_COMMON,
        "MASK": DRF_FIELD.MASK,
    }
)

# Alias tables per property; properties without an entry have no fields
FIELD_ALIASES_FOR_PROPERTY = MappingProxyType(
    {
        DRF_PROPERTY.READING: _SCALED_FIELDS,
        DRF_PROPERTY.SETTING: _SCALED_FIELDS,
        DRF_PROPERTY.STATUS: _STATUS_FIELDS,
        DRF_PROPERTY.ANALOG: _ANALOG_FIELDS,
        DRF_PROPERTY.DIGITAL: _DIGITAL_FIELDS,
    }
)

FIELDS_FOR_PROPERTY = MappingProxyType(
    {prop: frozenset(table.values()) for prop, table in FIELD_ALIASES_FOR_PROPERTY.items()}
)

DEFAULT_FIELD_FOR_PROPERTY = MappingProxyType(
    {
        DRF_PROPERTY.READING: DRF_FIELD.SCALED,
        DRF_PROPERTY.SETTING: DRF_FIELD.SCALED,
        DRF_PROPERTY.STATUS: DRF_FIELD.ALL,
        DRF_PROPERTY.CONTROL: None,
        DRF_PROPERTY.ANALOG: DRF_FIELD.ALL,
        DRF_PROPERTY.DIGITAL: DRF_FIELD.ALL,
        DRF_PROPERTY.DESCRIPTION: None,
        DRF_PROPERTY.INDEX: None,
        DRF_PROPERTY.LONG_NAME: None,
        DRF_PROPERTY.ALARM_LIST_NAME: None,
    }
)


def has_fields(prop: DRF_PROPERTY) -> bool:
    return prop in FIELD_ALIASES_FOR_PROPERTY


def get_default_field(prop: DRF_PROPERTY) -> DRF_FIELD | None:
    """Default field of ``prop``, or None if the property has no fields."""
    return DEFAULT_FIELD_FOR_PROPERTY[prop]


def lookup_field(prop: DRF_PROPERTY, name: str) -> DRF_FIELD | None:
    """Resolve an upper-case field alias for ``prop``; None if it is not one."""
    table = FIELD_ALIASES_FOR_PROPERTY.get(prop)
    if table is None:
        return None
    return table.get(name)


def parse_field(raw_string: str, prop: DRF_PROPERTY) -> DRF_FIELD:
    """Resolve a field alias (case-insensitive) for ``prop``.

    Raises:
        FieldlessPropertyError: If ``prop`` has no fields
        UnknownNameError: If the name is not a field of ``prop``
    """
    if not has_fields(prop):
        raise FieldlessPropertyError(f"Property {prop.name} has no fields", raw_string, 0, raw_string)
    field = lookup_field(prop, raw_string.upper())
    if field is None:
        raise UnknownNameError(f"Unknown field for {prop.name}", raw_string, 0, raw_string)
    return field
