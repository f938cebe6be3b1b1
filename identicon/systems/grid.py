"""Grid builder system.

Expands the digest into a horizontally symmetric 5x5 grid:

1. Split the digest into consecutive groups of three bytes, dropping a final
   incomplete group. For a 16-byte digest this gives five rows and the last
   byte never reaches the grid. Do not pad: existing identicons depend on it.
2. Mirror each group ``[a, b, c]`` into ``[a, b, c, b, a]``.
3. Flatten the rows in order and tag each value with its row-major index.
"""

from dataclasses import replace
from typing import List, Sequence, TypeVar
from pyrsistent import pvector
from pyrsistent.typing import PVector

from identicon.components import Digest, Grid, GridCell
from identicon.state import ImageState
from identicon.types import ROW_SEED_SIZE

T = TypeVar("T")


def chunk(values: Sequence[T], size: int) -> List[List[T]]:
    """Split ``values`` into consecutive lists of ``size``, discarding the remainder."""
    if size <= 0:
        raise ValueError("Chunk size must be positive")
    complete = len(values) - len(values) % size
    return [list(values[i : i + size]) for i in range(0, complete, size)]


def mirror_row(row: Sequence[T]) -> List[T]:
    """Reflect a row around its last element: ``[1, 2, 3] -> [1, 2, 3, 2, 1]``."""
    first, second = row[0], row[1]
    return list(row) + [second, first]


def build_grid(digest: Digest) -> Grid:
    values = [
        value
        for row in chunk(digest.values, ROW_SEED_SIZE)
        for value in mirror_row(row)
    ]
    cells: PVector[GridCell] = pvector(
        GridCell(value=value, index=index) for index, value in enumerate(values)
    )
    return Grid(cells=cells)


def build_grid_system(state: ImageState) -> ImageState:
    if state.digest is None:
        raise ValueError("State has no digest; run hash_input_system first")
    return replace(state, grid=build_grid(state.digest))
