"""State invariant helpers.

Predicates that describe a well-formed :class:`ImageState` and a checker that
fails fast when one is violated. A violation means a broken system, not bad
input, so nothing in the package catches these errors.
"""

from identicon.components import FilteredGrid, Grid
from identicon.state import ImageState
from identicon.systems.pixel_map import cell_to_rect
from identicon.types import DIGEST_SIZE, GRID_CELLS


def is_valid_digest(state: ImageState) -> bool:
    """Digest has exactly 16 byte values."""
    return state.digest is not None and len(state.digest) == DIGEST_SIZE and all(
        0 <= value < 256 for value in state.digest.values
    )


def is_valid_grid(grid: Grid) -> bool:
    """Unfiltered grid has 25 cells indexed ``0..24`` in order."""
    return list(grid.indices) == list(range(GRID_CELLS))


def is_valid_filtered_grid(grid: FilteredGrid) -> bool:
    """Only even values, indices strictly increasing within ``[0, 25)``."""
    indices = list(grid.indices)
    return (
        all(cell.value % 2 == 0 for cell in grid.cells)
        and all(0 <= index < GRID_CELLS for index in indices)
        and all(a < b for a, b in zip(indices, indices[1:]))
    )


def is_aligned_pixel_map(state: ImageState) -> bool:
    """``pixel_map[i]`` is the rectangle of filtered cell ``i``."""
    if not isinstance(state.grid, FilteredGrid) or state.pixel_map is None:
        return False
    return list(state.pixel_map) == [cell_to_rect(cell) for cell in state.grid.cells]


def check_state(state: ImageState) -> ImageState:
    """Raise ``ValueError`` if any populated field breaks its invariant.

    Returns:
        ImageState: The same state, to allow chaining.
    """
    if state.digest is not None and not is_valid_digest(state):
        raise ValueError(f"Digest must have {DIGEST_SIZE} byte values: {state.digest}")
    if isinstance(state.grid, Grid) and not is_valid_grid(state.grid):
        raise ValueError(f"Grid must have {GRID_CELLS} cells: {state.grid}")
    if isinstance(state.grid, FilteredGrid) and not is_valid_filtered_grid(
        state.grid
    ):
        raise ValueError(f"Filtered grid has odd or unordered cells: {state.grid}")
    if state.pixel_map is not None and not is_aligned_pixel_map(state):
        raise ValueError("Pixel map does not match the filtered grid")
    return state
