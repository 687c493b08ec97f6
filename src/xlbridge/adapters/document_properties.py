"""Native core and custom document properties."""

from __future__ import annotations

import datetime

from openpyxl.packaging.custom import (
    BoolProperty,
    DateTimeProperty,
    FloatProperty,
    IntProperty,
    StringProperty,
)

from xlbridge.adapters.helpers import book, not_found
from xlbridge.adapters.registry import NativeFault, native
from xlbridge.contracts.results import OK

# public name -> openpyxl core property attribute
TEXT_FIELDS = {
    "title": "title",
    "description": "description",
    "subject": "subject",
    "keywords": "keywords",
    "creator": "creator",
    "last_modified_by": "lastModifiedBy",
    "category": "category",
}
DATE_FIELDS = ("created", "modified")


def _typed(name, value):
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return BoolProperty(name=name, value=value)
    if isinstance(value, int):
        return IntProperty(name=name, value=value)
    if isinstance(value, float):
        return FloatProperty(name=name, value=value)
    if isinstance(value, datetime.datetime):
        return DateTimeProperty(name=name, value=value)
    if isinstance(value, datetime.date):
        return DateTimeProperty(name=name, value=datetime.datetime.combine(value, datetime.time()))
    if isinstance(value, str):
        return StringProperty(name=name, value=value)
    raise NativeFault(f"unsupported custom property type: {type(value).__name__}")


def _parse_date(value) -> datetime.datetime:
    if isinstance(value, datetime.datetime):
        return value.replace(tzinfo=None)
    try:
        parsed = datetime.datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    except ValueError as exc:
        raise NativeFault(f"invalid date: {value}") from exc
    return parsed.replace(tzinfo=None)


def _date_text(value) -> str:
    return value.strftime("%Y-%m-%dT%H:%M:%SZ") if value else ""


def get_core(wb, field):
    if field in DATE_FIELDS:
        return _date_text(getattr(wb.properties, field))
    return getattr(wb.properties, TEXT_FIELDS[field]) or ""


def set_core(wb, field, value):
    if field in DATE_FIELDS:
        setattr(wb.properties, field, _parse_date(value))
    elif field in TEXT_FIELDS:
        setattr(wb.properties, TEXT_FIELDS[field], str(value))
    else:
        raise NativeFault(f"unknown document property: {field}")


@native
def get_custom_property(ident, name):
    props = book(ident).wb.custom_doc_props
    if name not in props.names:
        raise not_found("Custom property", name)
    return (OK, props[name].value)


@native
def set_custom_property(ident, name, value):
    props = book(ident).wb.custom_doc_props
    if name in props.names:
        del props[name]
    props.append(_typed(name, value))
    return (OK, OK)


@native
def remove_custom_property(ident, name):
    props = book(ident).wb.custom_doc_props
    if name not in props.names:
        raise not_found("Custom property", name)
    del props[name]
    return (OK, OK)


@native
def get_custom_property_names(ident):
    return (OK, list(book(ident).wb.custom_doc_props.names))


@native
def has_custom_property(ident, name):
    return (OK, name in book(ident).wb.custom_doc_props.names)


@native
def get_custom_properties_count(ident):
    return (OK, len(book(ident).wb.custom_doc_props))


@native
def clear_custom_properties(ident):
    book(ident).wb.custom_doc_props.props = []
    return OK


def _getter(field):
    def getter(ident):
        return (OK, get_core(book(ident).wb, field))

    getter.__name__ = getter.__qualname__ = f"get_{field}"
    return getter


def _setter(field):
    def setter(ident, value):
        set_core(book(ident).wb, field, value)
        return (OK, OK)

    setter.__name__ = setter.__qualname__ = f"set_{field}"
    return setter


for _field in (*TEXT_FIELDS, *DATE_FIELDS):
    globals()[f"get_{_field}"] = native(_getter(_field))
    globals()[f"set_{_field}"] = native(_setter(_field))
del _field


@native
def set_properties(ident, mapping):
    wb = book(ident).wb
    unknown = [k for k in mapping if k not in TEXT_FIELDS and k not in DATE_FIELDS]
    if unknown:
        raise NativeFault(f"unknown document properties: {', '.join(sorted(unknown))}")
    for field, value in mapping.items():
        set_core(wb, field, value)
    return (OK, OK)


@native
def get_all_properties(ident):
    wb = book(ident).wb
    return (OK, {field: get_core(wb, field) for field in (*TEXT_FIELDS, *DATE_FIELDS)})
