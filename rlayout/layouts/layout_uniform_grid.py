"""
Uniform Grid Layout

Views arranged in a grid of equally sized cells. The grid grows one row or
column at a time, whichever keeps the cells closest to a target aspect
ratio, and views fill it in snake order.
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Optional, Tuple

from .layout_base import Layout, check_views
from ..config import UniformGridConfig
from ..protocol import GeneratedLayout, Rectangle, truncate_i32


def _divide(numerator: float, denominator: float) -> float:
    """Float division yielding inf/nan instead of raising on zero."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


@dataclass(frozen=True)
class GridLayout:
    """Cell geometry of a grid on a particular output."""

    offset: Tuple[float, float]
    stride: Tuple[float, float]
    view_size: Tuple[int, int]

    @property
    def aspect_ratio(self) -> float:
        return _divide(self.view_size[0], self.view_size[1])

    def efficiency(self, target_aspect: float) -> float:
        """
        How far the cell aspect ratio is from the target.

        Always >= 1.0 for valid cells, 1.0 being a perfect match.
        """
        arr = self.aspect_ratio / target_aspect
        if arr > 1.0:
            return arr
        return _divide(1.0, arr)

    def at(self, column: int, row: int) -> Rectangle:
        """Rectangle of the cell at a grid position."""
        return Rectangle(
            truncate_i32(self.offset[0] + self.stride[0] * column),
            truncate_i32(self.offset[1] + self.stride[1] * row),
            self.view_size[0],
            self.view_size[1],
        )


@dataclass(frozen=True)
class Grid:
    """Grid shape in cells."""

    columns: int = 1
    rows: int = 1

    @property
    def total_cells(self) -> int:
        return self.columns * self.rows

    def grow_columns(self) -> "Grid":
        return Grid(self.columns + 1, self.rows)

    def grow_rows(self) -> "Grid":
        return Grid(self.columns, self.rows + 1)

    def layout(
        self, config: UniformGridConfig, output_width: int, output_height: int
    ) -> GridLayout:
        offset = float(config.outer_padding)
        padded_width = output_width - 2.0 * offset
        padded_height = output_height - 2.0 * offset

        stride = (
            (padded_width + config.view_padding) / self.columns,
            (padded_height + config.view_padding) / self.rows,
        )
        view_size = (
            truncate_i32(stride[0]) - config.view_padding,
            truncate_i32(stride[1]) - config.view_padding,
        )
        return GridLayout(offset=(offset, offset), stride=stride, view_size=view_size)


def grid_score(
    grid: Grid, config: UniformGridConfig, output_width: int, output_height: int
) -> int:
    """Efficiency of a grid, quantized to millionths for comparison."""
    efficiency = grid.layout(config, output_width, output_height).efficiency(
        config.target_aspect
    )
    return truncate_i32(efficiency * 1000000.0)


def find_grid(
    config: UniformGridConfig, view_count: int, output_width: int, output_height: int
) -> Grid:
    """
    Find a grid with room for view_count views.

    Starting from 1x1, repeatedly adds either a column or a row, keeping
    whichever candidate scores better. On a tie the extra column wins.
    """
    grid = Grid()
    while grid.total_cells < view_count:
        grid = min(
            (grid.grow_columns(), grid.grow_rows()),
            key=lambda candidate: grid_score(
                candidate, config, output_width, output_height
            ),
        )
    return grid


def snake_position(index: int, columns: int) -> Tuple[int, int]:
    """
    Grid position of the index-th view, as (column, row).

    Even rows run left to right, odd rows right to left.
    """
    row, column = divmod(index, columns)
    if row % 2 == 1:
        column = columns - 1 - column
    return column, row


class UniformGridLayout(Layout):
    """
    Uniform grid layout.

    Holds no state between demands: the grid shape is recomputed from the
    view count every time.
    """

    NAMESPACE = "uniform-grid"

    def __init__(
        self, config: Optional[UniformGridConfig] = None, debug: bool = False
    ):
        super().__init__(debug=debug)
        self.config = config or UniformGridConfig()

    def generate_layout(
        self,
        view_count: int,
        usable_width: int,
        usable_height: int,
        tags: int = 0,
        output: str = "",
    ) -> GeneratedLayout:
        grid = find_grid(self.config, view_count, usable_width, usable_height)

        # Generate cell views in a snaking layout
        layout = grid.layout(self.config, usable_width, usable_height)
        views = [
            layout.at(*snake_position(i, grid.columns)) for i in range(view_count)
        ]
        check_views(views)
        self._debug_views(views)

        return GeneratedLayout(
            layout_name=f"{self.NAMESPACE}: {grid.rows}x{grid.columns}",
            views=views,
        )
