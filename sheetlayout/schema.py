"""Shared schemas for sheet layout configuration."""

# Module responsibilities:
# - Provide typed containers describing the configuration table shape.
# - Keep the type tag vocabulary in one place; tags are metadata only.

from __future__ import annotations

from typing import Dict, Mapping, NotRequired, TypedDict

KNOWN_FIELD_TYPES = frozenset({"string", "number", "date"})
DEFAULT_FIELD_TYPE = "string"


class FieldDeclaration(TypedDict):
    """Column letter position and semantic type tag of one named field."""

    col: str
    type: str


class SheetDescriptor(TypedDict):
    """Layout declaration for a single sheet."""

    header_rows: NotRequired[int]
    variable_names: NotRequired[Mapping[str, FieldDeclaration]]


ConfigTable = Mapping[str, SheetDescriptor]
DataMap = Dict[str, int]
