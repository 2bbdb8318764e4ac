"""
Resolution of ``.NAME`` suffixes into a property and field.

A request may carry up to two names: one right after the device, which can
name either a property or a field, and one after the range, which can only
name a field. Canonical strings use both (``M:OUTTMP.READING[0:3].SCALED``).

Resolution of the first name, against the property implied so far:
  1. a field of that property only changes the field
  2. otherwise a property alias replaces the property, provided the two are
     compatible (READING accepts anything, others only themselves)
  3. anything else is an error
"""

from typing import NamedTuple

from ._scan import scan_name
from .errors import DuplicateFieldError, FieldlessPropertyError, PropertyMismatchError, UnknownNameError
from .field import DRF_FIELD, get_default_field, has_fields, lookup_field
from .property import DRF_PROPERTY, DRF_PROPERTY_ALIASES, is_compatible


class PropField(NamedTuple):
    property: DRF_PROPERTY
    field: DRF_FIELD | None
    property_explicit: bool = False
    field_explicit: bool = False


def _scan_dotted_name(text: str, pos: int) -> tuple[str, int]:
    name, end = scan_name(text, pos + 1)
    if name is None:
        raise UnknownNameError("Expected property or field name", text, pos + 1, text[pos + 1 : pos + 2] or None)
    return name, end


def scan_property_field(text: str, pos: int, current: PropField) -> tuple[PropField, int]:
    """Resolve an optional ``.NAME`` at ``pos`` following the device."""
    if not text.startswith(".", pos):
        return current, pos
    name, end = _scan_dotted_name(text, pos)
    upper = name.upper()
    prop = current.property

    field = lookup_field(prop, upper)
    if field is not None:
        return current._replace(field=field, field_explicit=True), end

    override = DRF_PROPERTY_ALIASES.get(upper)
    if override is not None:
        if not is_compatible(prop, override):
            raise PropertyMismatchError(
                f"Property {override.name} conflicts with qualifier property {prop.name}", text, pos + 1, name
            )
        return PropField(override, get_default_field(override), property_explicit=True), end

    if not has_fields(prop):
        raise FieldlessPropertyError(f"Property {prop.name} has no fields", text, pos + 1, name)
    raise UnknownNameError(f"Unknown property or field for {prop.name}", text, pos + 1, name)


def scan_trailing_field(text: str, pos: int, current: PropField) -> tuple[PropField, int]:
    """Resolve an optional ``.FIELD`` at ``pos`` following the range."""
    if not text.startswith(".", pos):
        return current, pos
    name, end = _scan_dotted_name(text, pos)
    prop = current.property
    if not has_fields(prop):
        raise FieldlessPropertyError(f"Property {prop.name} has no fields", text, pos + 1, name)
    if current.field_explicit:
        raise DuplicateFieldError("Field given twice", text, pos + 1, name)
    field = lookup_field(prop, name.upper())
    if field is None:
        raise UnknownNameError(f"Unknown field for {prop.name}", text, pos + 1, name)
    return current._replace(field=field, field_explicit=True), end


def parse_property_field(
    raw_string: str,
    prop: DRF_PROPERTY = DRF_PROPERTY.READING,
    field: DRF_FIELD | None = None,
) -> tuple[PropField, str]:
    """Resolve a leading ``.NAME`` of ``raw_string`` against ``prop``.

    Args:
        raw_string: Text starting where the device name ended
        prop: Property implied by the device qualifier
        field: Current field (default: the default field of ``prop``)

    Returns:
        (resolved, remainder)
    """
    if field is None:
        field = get_default_field(prop)
    resolved, end = scan_property_field(raw_string, 0, PropField(prop, field))
    return resolved, raw_string[end:]
