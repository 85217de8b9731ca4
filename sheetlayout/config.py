"""Loading and validation of sheet layout configuration tables.

Builds the process-wide table from an in-memory payload or a YAML file,
checks every descriptor and column label up front, and hands back a deeply
frozen table that layouts can share without coordination.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Mapping

import yaml

from .columns import column_index_from_letter
from .errors import ConfigError, InvalidColumnLabel
from .freeze import freeze_deep
from .schema import DEFAULT_FIELD_TYPE, KNOWN_FIELD_TYPES, ConfigTable, FieldDeclaration, SheetDescriptor
from .utils.log import get_logger

logger = get_logger("config")


def load_config_table(path: Path) -> ConfigTable:
    """Load, validate and freeze a configuration table from a YAML file.

    Raises:
        ConfigError: When the file is missing, unreadable as YAML, or malformed.
    """

    path = Path(path)
    if not path.exists():
        raise ConfigError(f"Layout configuration not found: {path}")
    with path.open("r", encoding="utf-8") as handle:
        try:
            payload = yaml.safe_load(handle) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(payload, Mapping):
        raise ConfigError("Layout configuration must be a mapping of sheet id to descriptor")
    table = build_config_table(payload)
    logger.info("Layout configuration loaded", extra={"path": str(path), "sheets": len(table)})
    return table


def build_config_table(payload: Mapping[str, Any]) -> ConfigTable:
    """Validate ``payload`` and return it as a normalized, frozen table."""

    if not isinstance(payload, Mapping):
        raise ConfigError("Layout configuration must be a mapping of sheet id to descriptor")
    table: Dict[str, SheetDescriptor] = {}
    for sheet_id, descriptor in payload.items():
        table[str(sheet_id)] = _build_descriptor(str(sheet_id), descriptor)
    return freeze_deep(table)


def _build_descriptor(sheet_id: str, raw: Any) -> SheetDescriptor:
    if raw is None:
        raw = {}
    if not isinstance(raw, Mapping):
        raise ConfigError(f"Sheet '{sheet_id}': descriptor must be a mapping")

    header_rows = raw.get("header_rows")
    if header_rows is None:
        header_rows = 0
    if isinstance(header_rows, bool) or not isinstance(header_rows, int) or header_rows < 0:
        raise ConfigError(f"Sheet '{sheet_id}': header_rows must be a non-negative integer")

    fields = raw.get("variable_names")
    if fields is None:
        fields = {}
    if not isinstance(fields, Mapping):
        raise ConfigError(f"Sheet '{sheet_id}': variable_names must be a mapping")

    return {
        "header_rows": header_rows,
        "variable_names": {
            str(name): _build_field(sheet_id, str(name), declaration)
            for name, declaration in fields.items()
        },
    }


def _build_field(sheet_id: str, name: str, raw: Any) -> FieldDeclaration:
    if not isinstance(raw, Mapping) or "col" not in raw:
        raise ConfigError(f"Sheet '{sheet_id}', field '{name}': declaration needs a 'col' entry")
    col = raw["col"]
    try:
        column_index_from_letter(col)
    except InvalidColumnLabel as exc:
        raise ConfigError(f"Sheet '{sheet_id}', field '{name}': {exc}") from exc

    field_type = raw.get("type")
    field_type = DEFAULT_FIELD_TYPE if field_type is None else str(field_type)
    if field_type not in KNOWN_FIELD_TYPES:
        logger.debug(
            "Unrecognized field type tag kept as metadata",
            extra={"sheet": sheet_id, "field": name, "type_tag": field_type},
        )
    return {"col": col, "type": field_type}
