"""Core and custom document properties.

Core text properties read back as ``""`` when unset.  ``created`` and
``modified`` are UTC timestamps formatted ``YYYY-MM-DDTHH:MM:SSZ``; setters
take a ``datetime`` or an ISO 8601 string.
"""

from __future__ import annotations

import datetime
from typing import Any

from xlbridge.contracts.common import ArgumentError
from xlbridge.contracts.handles import Handle
from xlbridge.engine.boundary import call
from xlbridge.engine.operation import command, query
from xlbridge.validation.arguments import check_name, check_text

TEXT_PROPERTIES = ("title", "description", "subject", "keywords", "creator", "last_modified_by", "category")
DATE_PROPERTIES = ("created", "modified")
CUSTOM_TYPES = (str, bool, int, float, datetime.datetime, datetime.date)


def _timestamp(value: Any, name: str) -> str | datetime.datetime:
    if isinstance(value, datetime.datetime):
        return value
    if isinstance(value, str):
        try:
            datetime.datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError as exc:
            raise ArgumentError(f"{name} must be an ISO 8601 timestamp, got {value!r}") from exc
        return value
    raise ArgumentError(f"{name} must be a datetime or ISO 8601 string, got {type(value).__name__}")


# custom properties

@query("failed to read custom property")
def get_custom_property(book: Handle, name: str):
    return call("get_custom_property", book, check_name(name))


@command("failed to set custom property")
def set_custom_property(book: Handle, name: str, value: str | int | float | bool | datetime.datetime):
    """Create or replace a custom property; its type follows ``value``."""
    check_name(name)
    if not isinstance(value, CUSTOM_TYPES):
        raise ArgumentError(f"unsupported custom property type: {type(value).__name__}")
    return call("set_custom_property", book, name, value)


@command("failed to remove custom property")
def remove_custom_property(book: Handle, name: str):
    return call("remove_custom_property", book, check_name(name))


@query("failed to list custom properties")
def get_custom_property_names(book: Handle):
    return call("get_custom_property_names", book)


@query("failed to check custom property")
def has_custom_property(book: Handle, name: str):
    return call("has_custom_property", book, check_name(name))


@query("failed to count custom properties")
def get_custom_properties_count(book: Handle):
    return call("get_custom_properties_count", book)


@command("failed to clear custom properties")
def clear_custom_properties(book: Handle):
    return call("clear_custom_properties", book)


# core properties

@query("failed to read title")
def get_title(book: Handle):
    return call("get_title", book)


@command("failed to set title")
def set_title(book: Handle, value: str):
    return call("set_title", book, check_text(value, "title"))


@query("failed to read description")
def get_description(book: Handle):
    return call("get_description", book)


@command("failed to set description")
def set_description(book: Handle, value: str):
    return call("set_description", book, check_text(value, "description"))


@query("failed to read subject")
def get_subject(book: Handle):
    return call("get_subject", book)


@command("failed to set subject")
def set_subject(book: Handle, value: str):
    return call("set_subject", book, check_text(value, "subject"))


@query("failed to read keywords")
def get_keywords(book: Handle):
    return call("get_keywords", book)


@command("failed to set keywords")
def set_keywords(book: Handle, value: str):
    return call("set_keywords", book, check_text(value, "keywords"))


@query("failed to read creator")
def get_creator(book: Handle):
    return call("get_creator", book)


@command("failed to set creator")
def set_creator(book: Handle, value: str):
    return call("set_creator", book, check_text(value, "creator"))


@query("failed to read last modified by")
def get_last_modified_by(book: Handle):
    return call("get_last_modified_by", book)


@command("failed to set last modified by")
def set_last_modified_by(book: Handle, value: str):
    return call("set_last_modified_by", book, check_text(value, "last_modified_by"))


@query("failed to read category")
def get_category(book: Handle):
    return call("get_category", book)


@command("failed to set category")
def set_category(book: Handle, value: str):
    return call("set_category", book, check_text(value, "category"))


@query("failed to read creation time")
def get_created(book: Handle):
    return call("get_created", book)


@command("failed to set creation time")
def set_created(book: Handle, value: str | datetime.datetime):
    return call("set_created", book, _timestamp(value, "created"))


@query("failed to read modification time")
def get_modified(book: Handle):
    return call("get_modified", book)


@command("failed to set modification time")
def set_modified(book: Handle, value: str | datetime.datetime):
    return call("set_modified", book, _timestamp(value, "modified"))


@command("failed to set document properties")
def set_properties(book: Handle, properties: dict[str, Any]):
    """Set several core properties at once; unknown keys are rejected."""
    if not isinstance(properties, dict) or not properties:
        raise ArgumentError("properties must be a non-empty mapping")
    unknown = sorted(set(properties) - set(TEXT_PROPERTIES) - set(DATE_PROPERTIES))
    if unknown:
        raise ArgumentError(f"unknown document properties: {', '.join(unknown)}")
    clean = {}
    for key, value in properties.items():
        clean[key] = _timestamp(value, key) if key in DATE_PROPERTIES else check_text(value, key)
    return call("set_properties", book, clean)


@query("failed to read document properties")
def get_all_properties(book: Handle):
    return call("get_all_properties", book)
