from dataclasses import replace
from pyrsistent import pvector
from pyrsistent.typing import PVector

from identicon.components import FilteredGrid, GridCell, PixelRect, Point
from identicon.state import ImageState
from identicon.types import CELL_SIZE


def cell_to_rect(cell: GridCell) -> PixelRect:
    """Map a cell's row-major index to its 50x50 square on the canvas."""
    horizontal = cell.column * CELL_SIZE
    vertical = cell.row * CELL_SIZE
    return PixelRect(
        top_left=Point(horizontal, vertical),
        bottom_right=Point(horizontal + CELL_SIZE, vertical + CELL_SIZE),
    )


def build_pixel_map(grid: FilteredGrid) -> PVector[PixelRect]:
    return pvector(cell_to_rect(cell) for cell in grid.cells)


def build_pixel_map_system(state: ImageState) -> ImageState:
    if not isinstance(state.grid, FilteredGrid):
        raise ValueError(
            "State has no filtered grid; run filter_odd_cells_system first"
        )
    return replace(state, pixel_map=build_pixel_map(state.grid))
