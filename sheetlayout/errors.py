"""Custom exceptions used across sheetlayout."""


class SheetLayoutError(Exception):
    """Base error for the package."""


class InvalidColumnLabel(SheetLayoutError, ValueError):
    """Raised when a column label is empty, non-alphabetic or not a string."""

    def __init__(self, label: object, reason: str = "expected letters A-Z") -> None:
        self.label = label
        super().__init__(f"Invalid column label {label!r}: {reason}")


class MutationRejected(SheetLayoutError, TypeError):
    """Raised when frozen configuration data is written to."""


class ConfigError(SheetLayoutError):
    """Configuration table is malformed."""
