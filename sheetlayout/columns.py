"""Spreadsheet column label arithmetic."""

# Module responsibilities:
# - Convert base-26 column labels ("A", "AA", "BA") into 1-indexed column numbers.
# - Offer the inverse conversion for previews and diagnostics.

from __future__ import annotations

from openpyxl.utils import get_column_letter

from .errors import InvalidColumnLabel

_ALPHABET_SIZE = 26


def column_index_from_letter(letter: str) -> int:
    """Return the 1-indexed column number for a spreadsheet column label.

    Args:
        letter: Column label made of letters A-Z, case-insensitive.

    Returns:
        Column index where ``"A"`` is 1, ``"Z"`` is 26 and ``"AA"`` is 27.

    Raises:
        InvalidColumnLabel: When the label is not a string, is empty, or holds
            anything besides ASCII letters.
    """

    if not isinstance(letter, str):
        raise InvalidColumnLabel(letter, "label must be a string")
    if not letter:
        raise InvalidColumnLabel(letter, "label is empty")

    total = 0
    for char in letter:
        if not ("A" <= char <= "Z" or "a" <= char <= "z"):
            raise InvalidColumnLabel(letter)
        total = total * _ALPHABET_SIZE + (ord(char.upper()) - ord("A") + 1)
    return total


def column_letter_from_index(index: int) -> str:
    """Return the column label for a 1-indexed column number."""

    if isinstance(index, bool) or not isinstance(index, int) or index < 1:
        raise InvalidColumnLabel(index, "column index must be an integer >= 1")
    try:
        return get_column_letter(index)
    except ValueError as exc:
        # openpyxl caps labels at XFD (16384), the Excel column limit.
        raise InvalidColumnLabel(index, str(exc)) from exc
