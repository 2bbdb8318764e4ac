"""
drfparse - parser and canonicalizer for Device Request Format (DRF) strings.

Quick start:
    import drfparse
    req = drfparse.parse_request("M:OUTTMP[0:3]@P,1S")
    req.device         # 'M:OUTTMP'
    req.canonical      # 'M:OUTTMP.READING[0:3].SCALED@P,1000000U,TRUE'

Fragment parsers (parse_device, parse_range, parse_event,
parse_property_field) return the parsed value together with the
unconsumed remainder of their input.
"""

from ._config import configure as configure, reset_config as reset_config
from .device import Device as Device, get_qualified_device as get_qualified_device, parse_device as parse_device
from .errors import (
    DRFParseError as DRFParseError,
    DeviceSyntaxError as DeviceSyntaxError,
    DuplicateFieldError as DuplicateFieldError,
    EventSyntaxError as EventSyntaxError,
    FieldlessPropertyError as FieldlessPropertyError,
    PropertyMismatchError as PropertyMismatchError,
    RangeError as RangeError,
    TrailingInputError as TrailingInputError,
    UnknownExtraError as UnknownExtraError,
    UnknownNameError as UnknownNameError,
    UnknownQualifierError as UnknownQualifierError,
)
from .event import (
    DRF_EVENT as DRF_EVENT,
    ClockEvent as ClockEvent,
    ClockType as ClockType,
    DefaultEvent as DefaultEvent,
    ImmediateEvent as ImmediateEvent,
    NeverEvent as NeverEvent,
    PeriodicEvent as PeriodicEvent,
    StateEvent as StateEvent,
    StateOp as StateOp,
    parse_event as parse_event,
)
from .extra import DRF_EXTRA as DRF_EXTRA, parse_extra as parse_extra
from .field import DRF_FIELD as DRF_FIELD, get_default_field as get_default_field, parse_field as parse_field
from .prop_field import PropField as PropField, parse_property_field as parse_property_field
from .property import DRF_PROPERTY as DRF_PROPERTY, parse_property as parse_property
from .range import (
    DEFAULT_RANGE as DEFAULT_RANGE,
    DRF_RANGE as DRF_RANGE,
    ArrayRange as ArrayRange,
    ByteRange as ByteRange,
    FullRange as FullRange,
    parse_range as parse_range,
)
from .request import DataRequest as DataRequest, Request as Request, parse_request as parse_request
from .timing import MAX_PERIOD as MAX_PERIOD, scale_rate as scale_rate

__version__ = "0.1.0"
