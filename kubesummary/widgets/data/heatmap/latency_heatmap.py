"""LatencyHeatmap - grid rendering of the node latency matrix.

Cells are shaded by relative RTT between the matrix minimum and maximum and
show the value in milliseconds. Unmeasured cells stay blank. Column labels
sit below the grid, row labels on the left.
"""

from __future__ import annotations

from rich import box
from rich.color import Color, blend_rgb
from rich.color_triplet import ColorTriplet
from rich.style import Style
from rich.table import Table
from rich.text import Text
from textual.widgets import Static

from kubesummary.models.core.latency_info import LatencyMatrix
from kubesummary.utils.formatting import format_latency_cell, latency_intensity

_CELL_BASE = ColorTriplet(128, 142, 255)
_CELL_HOT = ColorTriplet(0, 151, 230)
_CELL_TEXT = Color.from_rgb(0x44, 0x44, 0x44)
_EMPTY_TEXT = "No latency data"


def cell_style(intensity: float) -> Style:
    """Background style for a cell with the given intensity in [0, 1]."""
    triplet = blend_rgb(_CELL_BASE, _CELL_HOT, max(0.0, min(1.0, intensity)))
    return Style(color=_CELL_TEXT, bgcolor=Color.from_triplet(triplet))


def build_heatmap_table(matrix: LatencyMatrix, title: str | None = None) -> Table:
    """Render a latency matrix as a rich Table."""
    table = Table(
        title=title,
        box=box.SIMPLE,
        show_header=False,
        show_footer=True,
        pad_edge=False,
    )
    table.add_column("", footer="", style="bold", no_wrap=True)
    for label in matrix.x_labels:
        table.add_column(footer=label, justify="center", min_width=8)

    minimum, maximum = matrix.value_range()
    for row_label, row in zip(matrix.y_labels, matrix.data):
        cells: list[Text] = [Text(row_label)]
        for value in row:
            cells.append(
                Text(
                    format_latency_cell(value),
                    style=cell_style(latency_intensity(value, minimum, maximum)),
                )
            )
        table.add_row(*cells)
    return table


class LatencyHeatmap(Static):
    """Static widget that renders a LatencyMatrix."""

    DEFAULT_CSS = """
    LatencyHeatmap {
        height: auto;
        padding: 0 1;
    }
    """

    def update_matrix(self, matrix: LatencyMatrix) -> None:
        if matrix.is_empty():
            self.update(_EMPTY_TEXT)
            return
        self.update(build_heatmap_table(matrix))
