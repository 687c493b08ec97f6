"""Metadata models describing the operation surface."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from xlbridge.contracts.results import Convention


class OperationSpec(BaseModel):
    """Declared contract of one public operation."""

    model_config = {"frozen": True}

    name: str
    group: str
    convention: Convention
    generic_reason: str | None = None
    summary: str = ""


class PropertyDefault(BaseModel):
    """Literal returned when a queried property was never set."""

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    operation: str
    sentinel: Any
    default: Any
    ambiguous: bool = False  # sentinel is also a legal explicit value


class GroupMeta(BaseModel):
    """One domain group and the operations routed to it."""

    name: str
    module: str
    operations: list[str] = Field(default_factory=list)
