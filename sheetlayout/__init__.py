"""`sheetlayout` maps semantic field names onto spreadsheet column positions."""

# Module responsibilities:
# - Re-export the converter, layout resolver, freezing helper and config loaders
#   so consumers have a stable API surface.
# - Provide the package version.

from __future__ import annotations

from .columns import column_index_from_letter, column_letter_from_index
from .config import build_config_table, load_config_table
from .errors import ConfigError, InvalidColumnLabel, MutationRejected, SheetLayoutError
from .freeze import FrozenMapping, FrozenSequence, freeze_deep, is_frozen
from .layout import SheetLayout
from .schema import ConfigTable, DataMap, FieldDeclaration, SheetDescriptor

__all__ = [
    "column_index_from_letter",
    "column_letter_from_index",
    "build_config_table",
    "load_config_table",
    "SheetLayoutError",
    "InvalidColumnLabel",
    "MutationRejected",
    "ConfigError",
    "FrozenMapping",
    "FrozenSequence",
    "freeze_deep",
    "is_frozen",
    "SheetLayout",
    "ConfigTable",
    "DataMap",
    "FieldDeclaration",
    "SheetDescriptor",
]

__version__ = "0.1.0"
