"""
Helpers for A1-style cell references (e.g. 'K57', 'AA12').
"""
import re
from typing import Any, Dict, Iterable, List, Tuple

from erc_sheets.exceptions import InvalidCellReferenceError

CELL_REF_PATTERN = re.compile(r'^([A-Z]+)([1-9][0-9]*)$')


def is_valid_cell_ref(cell: Any) -> bool:
    """Check that a value is an upper-case A1 reference with a row of 1 or more."""
    return isinstance(cell, str) and CELL_REF_PATTERN.match(cell) is not None


def split_cell_ref(cell: str) -> Tuple[str, int]:
    """
    Split a cell reference into its column letters and row number.
    Example: 'AA12' -> ('AA', 12)
    """
    match = CELL_REF_PATTERN.match(cell) if isinstance(cell, str) else None
    if not match:
        raise InvalidCellReferenceError(f"Invalid cell reference: {cell!r}")
    return match.group(1), int(match.group(2))


def column_to_index(letters: str) -> int:
    """Convert column letters to a zero-based index ('A' -> 0, 'AA' -> 26)."""
    index = 0
    for letter in letters:
        index = index * 26 + (ord(letter) - ord('A') + 1)
    return index - 1


def index_to_column(index: int) -> str:
    """Convert a zero-based column index back to letters."""
    if index < 0:
        raise InvalidCellReferenceError(f"Invalid column index: {index}")
    letters = ''
    index += 1
    while index:
        index, remainder = divmod(index - 1, 26)
        letters = chr(ord('A') + remainder) + letters
    return letters


def cell_to_indices(cell: str) -> Tuple[int, int]:
    """Convert a cell reference to zero-based (row, column) indices."""
    letters, row = split_cell_ref(cell)
    return row - 1, column_to_index(letters)


def indices_to_cell(row_index: int, column_index: int) -> str:
    """Convert zero-based (row, column) indices to a cell reference."""
    if row_index < 0:
        raise InvalidCellReferenceError(f"Invalid row index: {row_index}")
    return f"{index_to_column(column_index)}{row_index + 1}"


def bounding_range(cells: Iterable[str]) -> str:
    """
    Return the A1-anchored range covering every given cell.
    Example: ['B31', 'K57', 'D108'] -> 'A1:K108'
    """
    max_row = 0
    max_column = 0
    for cell in cells:
        row_index, column_index = cell_to_indices(cell)
        max_row = max(max_row, row_index)
        max_column = max(max_column, column_index)
    return f"A1:{indices_to_cell(max_row, max_column)}"


def grid_from_cells(values_by_cell: Dict[str, Any]) -> List[List[Any]]:
    """
    Build an A1-anchored grid from sparse cell values.

    Cells not named in ``values_by_cell`` are None. Rows are only as long as
    their right-most value, the way the Sheets API trims trailing blanks.
    """
    grid: List[List[Any]] = []
    for cell, value in values_by_cell.items():
        row_index, column_index = cell_to_indices(cell)
        while len(grid) <= row_index:
            grid.append([])
        row = grid[row_index]
        while len(row) <= column_index:
            row.append(None)
        row[column_index] = value
    return grid


def read_grid_value(grid: List[List[Any]], cell: str, origin: str = 'A1') -> Any:
    """
    Return the raw value of a sheet cell from a grid whose [0][0] is ``origin``.

    Cells left of or above the origin, or beyond the rows and columns the grid
    holds, read as None.
    """
    origin_row, origin_column = cell_to_indices(origin)
    row_index, column_index = cell_to_indices(cell)
    row_index -= origin_row
    column_index -= origin_column
    if row_index < 0 or column_index < 0 or row_index >= len(grid):
        return None
    row = grid[row_index]
    if not row or column_index >= len(row):
        return None
    return row[column_index]
