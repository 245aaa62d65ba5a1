"""SummaryTable - DataTable for read-only summary rows.

CSS Classes: widget-summary-table
"""

from __future__ import annotations

from collections.abc import Sequence
from contextlib import suppress
from typing import Any, ClassVar

from textual.coordinate import Coordinate
from textual.widgets import DataTable


class SummaryTable(DataTable):
    """Read-only table that is fully replaced on each refresh."""

    _DEFAULT_CLASSES: ClassVar[str] = "widget-summary-table"

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        if "classes" not in kwargs or not kwargs.get("classes"):
            kwargs["classes"] = self._DEFAULT_CLASSES
        kwargs.setdefault("zebra_stripes", True)
        kwargs.setdefault("cursor_type", "row")
        super().__init__(*args, **kwargs)

    def clear_safe(self) -> None:
        """Safely clear rows and columns, resetting cursor position."""
        with suppress(Exception):
            self.cursor_coordinate = Coordinate(0, 0)
        self.clear(columns=True)

    def set_rows(
        self,
        columns: Sequence[str],
        rows: Sequence[Sequence[str]],
    ) -> None:
        """Replace table content with the given columns and rows."""
        self.clear_safe()
        self.add_columns(*columns)
        for row in rows:
            self.add_row(*row)
