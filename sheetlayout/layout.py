"""Named column layouts for a single sheet."""

# Module responsibilities:
# - Resolve one sheet's descriptor from the shared configuration table.
# - Translate field declarations into 1-indexed column numbers.
# - Offer a tabular preview of the layout for diagnostics.

from __future__ import annotations

from typing import Mapping, Optional

import pandas as pd

from .columns import column_index_from_letter
from .freeze import FrozenMapping, freeze_deep
from .schema import ConfigTable, DataMap, FieldDeclaration, SheetDescriptor
from .utils.log import get_logger

logger = get_logger("layout")

_EMPTY: Mapping[str, FieldDeclaration] = FrozenMapping()


class SheetLayout:
    """Field-name to column-index resolver for one sheet.

    The layout only keeps the sheet identifier and a reference to the
    configuration table; every call reads the table again, so layouts are
    cheap to build per access and hold no state of their own.
    """

    def __init__(self, sheet_id: str, config: ConfigTable) -> None:
        self._sheet_id = sheet_id
        self._config = config
        if not isinstance(config, FrozenMapping):
            logger.debug(
                "Layout built over a mutable configuration table",
                extra={"sheet": sheet_id},
            )

    def __repr__(self) -> str:
        return f"SheetLayout({self._sheet_id!r})"

    @property
    def sheet_id(self) -> str:
        return self._sheet_id

    def _descriptor(self) -> Optional[SheetDescriptor]:
        if self._sheet_id not in self._config:
            return None
        descriptor = self._config[self._sheet_id]
        if not isinstance(descriptor, Mapping):
            return None
        return descriptor

    def get_header_row_count(self) -> int:
        """Return the configured header rows, or 0 when the sheet or value is absent."""

        descriptor = self._descriptor()
        if descriptor is None or descriptor.get("header_rows") is None:
            return 0
        return descriptor["header_rows"]

    def get_first_data_row(self) -> int:
        """Return the 1-indexed row where data starts below the header rows."""

        return self.get_header_row_count() + 1

    def get_data_config(self) -> Mapping[str, FieldDeclaration]:
        """Return the field declarations for this sheet as a read-only mapping.

        An unconfigured sheet yields an empty mapping. Frozen tables are
        returned as-is; a mutable table is frozen into a detached copy so the
        caller cannot reach the shared declarations.
        """

        descriptor = self._descriptor()
        if descriptor is None:
            return _EMPTY
        fields = descriptor.get("variable_names")
        if not isinstance(fields, Mapping):
            return _EMPTY
        return freeze_deep(fields)

    def get_data_map(self) -> DataMap:
        """Return ``field name -> column index`` for every declared field.

        Raises:
            InvalidColumnLabel: When a declaration carries a malformed column label.
        """

        data_map = {
            name: column_index_from_letter(_column_label(declaration))
            for name, declaration in self.get_data_config().items()
        }
        logger.debug(
            "Resolved data map",
            extra={"sheet": self._sheet_id, "fields": len(data_map)},
        )
        return data_map

    def get_column_index(self, name: str) -> Optional[int]:
        """Return the column index of one field, or None when it is not declared."""

        declaration = self.get_data_config().get(name)
        if declaration is None:
            return None
        return column_index_from_letter(_column_label(declaration))

    def describe(self) -> pd.DataFrame:
        """Return one row per field (``field``, ``col``, ``index``, ``type``) sorted by index."""

        rows = []
        for name, declaration in self.get_data_config().items():
            index = column_index_from_letter(_column_label(declaration))
            rows.append(
                {
                    "field": name,
                    "col": declaration["col"].upper(),
                    "index": index,
                    "type": declaration.get("type"),
                }
            )
        frame = pd.DataFrame(rows, columns=["field", "col", "index", "type"])
        return frame.sort_values(["index", "field"], kind="stable").reset_index(drop=True)


def _column_label(declaration: object) -> object:
    # Anything that is not a declaration mapping yields None, which the converter rejects.
    if not isinstance(declaration, Mapping):
        return None
    return declaration.get("col")
