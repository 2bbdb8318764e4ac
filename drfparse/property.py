from enum import Enum
from types import MappingProxyType

from .errors import UnknownNameError


class DRF_PROPERTY(Enum):
    READING = "READING"
    SETTING = "SETTING"
    STATUS = "STATUS"
    CONTROL = "CONTROL"
    ANALOG = "ANALOG"
    DIGITAL = "DIGITAL"
    DESCRIPTION = "DESCRIPTION"
    INDEX = "INDEX"
    LONG_NAME = "LONG_NAME"
    ALARM_LIST_NAME = "ALARM_LIST_NAME"

    @property
    def qualifier(self) -> str | None:
        """Qualifier character that selects this property, if any."""
        return QUALIFIER_FOR_PROPERTY.get(self)

    @property
    def keyword(self) -> str:
        return f".{self.value}"


# ':' and '?' both mean READING; ':' is the canonical one
PROPERTY_FOR_QUALIFIER = MappingProxyType(
    {
        ":": DRF_PROPERTY.READING,
        "?": DRF_PROPERTY.READING,
        "_": DRF_PROPERTY.SETTING,
        "|": DRF_PROPERTY.STATUS,
        "&": DRF_PROPERTY.CONTROL,
        "@": DRF_PROPERTY.ANALOG,
        "$": DRF_PROPERTY.DIGITAL,
        "~": DRF_PROPERTY.DESCRIPTION,
    }
)

QUALIFIER_FOR_PROPERTY = MappingProxyType(
    {
        DRF_PROPERTY.READING: ":",
        DRF_PROPERTY.SETTING: "_",
        DRF_PROPERTY.STATUS: "|",
        DRF_PROPERTY.CONTROL: "&",
        DRF_PROPERTY.ANALOG: "@",
        DRF_PROPERTY.DIGITAL: "$",
        DRF_PROPERTY.DESCRIPTION: "~",
    }
)

DRF_PROPERTY_ALIASES = MappingProxyType(
    {
        "AA": DRF_PROPERTY.ANALOG,
        "ALARM_LIST_NAME": DRF_PROPERTY.ALARM_LIST_NAME,
        "ANALOG_ALARM": DRF_PROPERTY.ANALOG,
        "ANALOG": DRF_PROPERTY.ANALOG,
        "BASIC_CONTROL": DRF_PROPERTY.CONTROL,
        "BASIC_STATUS": DRF_PROPERTY.STATUS,
        "CONTROL": DRF_PROPERTY.CONTROL,
        "CTRL": DRF_PROPERTY.CONTROL,
        "DA": DRF_PROPERTY.DIGITAL,
        "DESC": DRF_PROPERTY.DESCRIPTION,
        "DESCRIPTION": DRF_PROPERTY.DESCRIPTION,
        "DIGITAL_ALARM": DRF_PROPERTY.DIGITAL,
        "DIGITAL": DRF_PROPERTY.DIGITAL,
        "INDEX": DRF_PROPERTY.INDEX,
        "LNGNAM": DRF_PROPERTY.LONG_NAME,
        "LONG_NAME": DRF_PROPERTY.LONG_NAME,
        "LSTNAM": DRF_PROPERTY.ALARM_LIST_NAME,
        "PRALNM": DRF_PROPERTY.ALARM_LIST_NAME,
        "PRANAB": DRF_PROPERTY.ANALOG,
        "PRBCTL": DRF_PROPERTY.CONTROL,
        "PRBSTS": DRF_PROPERTY.STATUS,
        "PRDABL": DRF_PROPERTY.DIGITAL,
        "PRDESC": DRF_PROPERTY.DESCRIPTION,
        "PRLNAM": DRF_PROPERTY.LONG_NAME,
        "PRREAD": DRF_PROPERTY.READING,
        "PRSET": DRF_PROPERTY.SETTING,
        "READ": DRF_PROPERTY.READING,
        "READING": DRF_PROPERTY.READING,
        "SET": DRF_PROPERTY.SETTING,
        "SETTING": DRF_PROPERTY.SETTING,
        "STATUS": DRF_PROPERTY.STATUS,
        "STS": DRF_PROPERTY.STATUS,
    }
)


def get_default_property(qualifier: str) -> DRF_PROPERTY:
    """Property implied by a device qualifier character."""
    try:
        return PROPERTY_FOR_QUALIFIER[qualifier]
    except KeyError:
        raise ValueError(f"{qualifier!r} is not a property qualifier") from None


def parse_property(raw_string: str) -> DRF_PROPERTY:
    """Look up a property alias (case-insensitive)."""
    upper = raw_string.upper()
    if upper not in DRF_PROPERTY_ALIASES:
        raise UnknownNameError("Unknown property", raw_string, 0, raw_string)
    return DRF_PROPERTY_ALIASES[upper]


def is_compatible(implied: DRF_PROPERTY, override: DRF_PROPERTY) -> bool:
    """Whether an explicit property may replace the qualifier-implied one.

    READING accepts any override; every other property only itself.
    """
    return implied is DRF_PROPERTY.READING or implied is override
