"""A simple row-based table of strings, with the first row as heading."""

from __future__ import annotations

import enum
from typing import Iterable, Optional, Union

_USER_ROLE = 0x0100


class TableRole(enum.IntEnum):
    """Roles under which a cell can be queried."""

    TABLE_DATA = _USER_ROLE + 1
    HEADING = _USER_ROLE + 2


class TableModel:
    """Rows of strings; row 0 is the heading row."""

    def __init__(self) -> None:
        self._table: list[list[str]] = []
        self.add_row(["col0", "col1", "col2", "col3"])
        self.add_row(["data0", "data1", "data2", "data3"])

    def clear(self) -> None:
        """Remove every row."""
        self._table.clear()

    def add_row(self, row: Iterable[str]) -> None:
        """Append a row at the end of the table."""
        self._table.append(list(row))

    def row_count(self) -> int:
        """Return the number of rows."""
        return len(self._table)

    def column_count(self) -> int:
        """Return the width of the first row; raises IndexError on an empty table."""
        return len(self._table[0])

    def data(self, row: int, column: int, role: Union[int, TableRole]) -> Optional[Union[str, bool]]:
        """Return the cell text, whether the row is the heading, or None for other roles."""
        if role == TableRole.TABLE_DATA:
            return self._table[row][column]
        if role == TableRole.HEADING:
            return row == 0
        return None

    def role_names(self) -> dict[TableRole, str]:
        """Return the name under which each role is exposed."""
        return {TableRole.TABLE_DATA: "tabledata", TableRole.HEADING: "heading"}