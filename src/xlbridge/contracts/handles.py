"""Opaque handles addressing native-resident objects."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel


class HandleKind(str, Enum):
    """Which native resource kind a handle addresses."""

    SPREADSHEET = "spreadsheet"
    RICH_TEXT = "rich_text"
    TEXT_ELEMENT = "text_element"
    OLE_OBJECT = "ole_object"
    OLE_OBJECTS = "ole_objects"
    EMBEDDED_OBJECT_PROPERTIES = "embedded_object_properties"


class Handle(BaseModel):
    """A live binding to one native object.

    The identifier is whatever the native side minted; this layer never
    interprets it, counts references to it, or frees it.
    """

    model_config = {"frozen": True}

    kind: HandleKind
    ident: Any

    def __repr__(self) -> str:
        return f"Handle({self.kind.value}#{self.ident})"


def wrap(ident: Any, kind: HandleKind) -> Handle:
    """Tag a raw native identifier. Never fails, never validates."""
    return Handle.model_construct(kind=HandleKind(kind), ident=ident)


def unwrap(handle: Handle) -> Any:
    """Project the raw native identifier back out of a handle."""
    return handle.ident
