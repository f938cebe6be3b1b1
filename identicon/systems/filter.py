from dataclasses import replace
from pyrsistent import pvector

from identicon.components import FilteredGrid, Grid, GridCell
from identicon.state import ImageState


def is_painted(cell: GridCell) -> bool:
    """Even-valued cells are painted; odd ones stay background."""
    return cell.value % 2 == 0


def filter_odd_cells(grid: Grid) -> FilteredGrid:
    return FilteredGrid(cells=pvector(cell for cell in grid.cells if is_painted(cell)))


def filter_odd_cells_system(state: ImageState) -> ImageState:
    if not isinstance(state.grid, Grid):
        raise ValueError("State has no unfiltered grid; run build_grid_system first")
    return replace(state, grid=filter_odd_cells(state.grid))
