from dataclasses import replace
from typing import List, Sequence, Tuple

from pyrsistent import pvector

from identicon.components import Digest, FilteredGrid, Grid, GridCell
from identicon.state import ImageState
from identicon.systems.color import pick_color_system
from identicon.systems.filter import filter_odd_cells_system
from identicon.systems.grid import build_grid_system
from identicon.systems.pixel_map import build_pixel_map_system

TEST_DIGEST: List[int] = [
    9, 143, 107, 205, 70, 33, 211, 115, 202, 222, 78, 131, 38, 39, 180, 246,
]  # fmt: skip

TEST_GRID: List[Tuple[int, int]] = [
    (9, 0), (143, 1), (107, 2), (143, 3), (9, 4),
    (205, 5), (70, 6), (33, 7), (70, 8), (205, 9),
    (211, 10), (115, 11), (202, 12), (115, 13), (211, 14),
    (222, 15), (78, 16), (131, 17), (78, 18), (222, 19),
    (38, 20), (39, 21), (180, 22), (39, 23), (38, 24),
]  # fmt: skip

TEST_FILTERED_GRID: List[Tuple[int, int]] = [
    (70, 6), (70, 8), (202, 12), (222, 15), (78, 16),
    (78, 18), (222, 19), (38, 20), (180, 22), (38, 24),
]  # fmt: skip

TEST_COLOR: Tuple[int, int, int] = (9, 143, 107)

# Every byte odd: no cell survives the filter.
ALL_ODD_DIGEST: List[int] = [1, 3, 5, 7, 9, 11, 13, 15, 17, 19, 21, 23, 25, 27, 29, 31]
# Every byte even: all 25 cells are painted.
ALL_EVEN_DIGEST: List[int] = [2 * i for i in range(16)]


def make_digest(values: Sequence[int]) -> Digest:
    return Digest(values=pvector(values))


def make_cells(pairs: Sequence[Tuple[int, int]]) -> List[GridCell]:
    return [GridCell(value=value, index=index) for value, index in pairs]


def make_grid(pairs: Sequence[Tuple[int, int]]) -> Grid:
    return Grid(cells=pvector(make_cells(pairs)))


def make_filtered_grid(pairs: Sequence[Tuple[int, int]]) -> FilteredGrid:
    return FilteredGrid(cells=pvector(make_cells(pairs)))


def make_digest_state(values: Sequence[int], data: bytes = b"") -> ImageState:
    """State as left by the digest system, with a chosen digest."""
    return replace(ImageState(input=data), digest=make_digest(values))


def run_from_digest(values: Sequence[int]) -> ImageState:
    """Run every system after hashing on a hand-picked digest."""
    state = make_digest_state(values)
    for system in (
        pick_color_system,
        build_grid_system,
        filter_odd_cells_system,
        build_pixel_map_system,
    ):
        state = system(state)
    return state
