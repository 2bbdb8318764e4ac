import dataclasses
import logging

from .device import get_qualified_device, scan_device
from .errors import TrailingInputError
from .event import DRF_EVENT, DefaultEvent, scan_event
from .extra import DRF_EXTRA, split_extra
from .field import DEFAULT_FIELD_FOR_PROPERTY, DRF_FIELD, FIELDS_FOR_PROPERTY, get_default_field
from .prop_field import PropField, scan_property_field, scan_trailing_field
from .property import DRF_PROPERTY
from .range import DEFAULT_RANGE, DRF_RANGE, scan_range

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True, repr=False)
class DataRequest:
    device: str
    property: DRF_PROPERTY
    range: DRF_RANGE = DEFAULT_RANGE
    field: DRF_FIELD | None = None
    event: DRF_EVENT = DefaultEvent()
    extra: DRF_EXTRA | None = None
    raw_string: str = dataclasses.field(default="", compare=False)
    property_explicit: bool = dataclasses.field(default=False, compare=False)

    def __post_init__(self):
        assert isinstance(self.device, str)
        if not isinstance(self.property, DRF_PROPERTY):
            raise ValueError(f"property must be a DRF_PROPERTY member, got {self.property!r}")
        if not isinstance(self.range, DRF_RANGE):
            raise ValueError(f"range must be a DRF_RANGE, got {self.range!r}")
        if not isinstance(self.event, DRF_EVENT):
            raise ValueError(f"event must be a DRF_EVENT, got {self.event!r}")
        if self.extra is not None and not isinstance(self.extra, DRF_EXTRA):
            raise ValueError(f"extra must be a DRF_EXTRA member, got {self.extra!r}")
        if self.field is None:
            object.__setattr__(self, "field", get_default_field(self.property))
        elif self.field not in FIELDS_FOR_PROPERTY.get(self.property, ()):
            raise ValueError(f"Field {self.field.name} is not valid for property {self.property.name}")

    def __str__(self):
        return (
            f"DataRequest[{self.raw_string}] = [{self.device=}] [{self.property=}]"
            f" [{self.range=}]"
            f" [{self.field=}]"
            f" [{self.event=}]"
            f" [{self.extra=}]"
        )

    def __repr__(self):
        return self.__str__()

    @property
    def is_reading(self):
        return self.property == DRF_PROPERTY.READING

    @property
    def is_setting(self):
        return self.property == DRF_PROPERTY.SETTING

    @property
    def is_status(self):
        return self.property == DRF_PROPERTY.STATUS

    @property
    def is_control(self):
        return self.property == DRF_PROPERTY.CONTROL

    @property
    def parts(self):
        return self.device, self.property, self.range, self.field, self.event

    @property
    def canonical(self) -> str:
        return self.to_canonical()

    def _resolve(self, property, field) -> tuple[DRF_PROPERTY, DRF_FIELD | None]:
        p = property or self.property
        if field is not None:
            return p, field
        if self.field in FIELDS_FOR_PROPERTY.get(p, ()):
            return p, self.field
        return p, get_default_field(p)

    def to_canonical(
        self,
        device: str | None = None,
        property: DRF_PROPERTY | None = None,
        range: DRF_RANGE | None = None,
        field: DRF_FIELD | None = None,
        event: DRF_EVENT | None = None,
        extra: DRF_EXTRA | None = None,
    ) -> str:
        """Canonical text, optionally with some parts replaced."""
        out = ""
        out += device or self.device
        p, f = self._resolve(property, field)
        out += p.keyword
        r = range or self.range
        out += str(r)
        if f is not None:
            out += f.keyword
        e = event or self.event
        out += e.canonical
        ex = extra or self.extra
        if ex is not None:
            out += ex.canonical
        return out

    def to_qualified(
        self,
        device: str | None = None,
        property: DRF_PROPERTY | None = None,
        range: DRF_RANGE | None = None,
        field: DRF_FIELD | None = None,
        event: DRF_EVENT | None = None,
        extra: DRF_EXTRA | None = None,
    ) -> str:
        """Short form: property folded into the qualifier, default field omitted."""
        out = ""
        d = device or self.device
        p, f = self._resolve(property, field)
        out += get_qualified_device(d, p)
        r = range or self.range
        out += str(r)
        if f is not None and DEFAULT_FIELD_FOR_PROPERTY[p] != f:
            out += f.keyword
        e = event or self.event
        out += e.canonical
        ex = extra or self.extra
        if ex is not None:
            out += ex.canonical
        return out

    def name_as(self, property: DRF_PROPERTY):
        return get_qualified_device(self.device, property)

    def pretty_print(self):
        return (
            f"DataRequest[{self.raw_string}]\n [{self.device=}]\n [{self.property=}]\n"
            f" [{self.range=}]\n"
            f" [{self.field=}]\n"
            f" [{self.event=}]\n"
            f" [{self.extra=}]\n"
        )


Request = DataRequest


def parse_request(device_str: str, immediate_default: bool | None = None) -> DataRequest:
    """Parse a complete DRF string.

    Args:
        device_str: DRF string (e.g. "M:OUTTMP[0:3]@P,1S")
        immediate_default: Periodic immediate flag when ``,imm`` is absent
            (default: drfparse configuration)

    Returns:
        The parsed request

    Raises:
        DRFParseError: If any part of the string is malformed
    """
    if device_str is None:
        raise ValueError("device_str must not be None")
    text, extra_obj = split_extra(device_str)

    dev_obj, pos = scan_device(text, 0)
    prop_field = PropField(dev_obj.default_property, dev_obj.default_field)
    prop_field, pos = scan_property_field(text, pos, prop_field)
    rng, pos = scan_range(text, pos)
    prop_field, pos = scan_trailing_field(text, pos, prop_field)
    event_obj, pos = scan_event(text, pos, immediate_default)
    if pos != len(text):
        raise TrailingInputError("Unexpected input", text, pos, text[pos:])

    req = DataRequest(
        device=dev_obj.canonical_string,
        property=prop_field.property,
        range=rng,
        field=prop_field.field,
        event=event_obj,
        extra=extra_obj,
        raw_string=device_str,
        property_explicit=prop_field.property_explicit,
    )
    logger.debug("Parsed %r as %s", device_str, req.canonical)
    return req
