"""Grid components.

A ``GridCell`` pairs a digest-derived value with its row-major index in the
5x5 grid. ``Grid`` holds all 25 cells as built; ``FilteredGrid`` holds only
the cells that will be painted. Keeping the two as distinct types lets the
pixel mapper refuse an unfiltered grid.
"""

from dataclasses import dataclass
from pyrsistent import pvector
from pyrsistent.typing import PVector

from identicon.types import Byte, GRID_SIZE


@dataclass(frozen=True)
class GridCell:
    """Single grid value and its position.

    Attributes:
        value: Digest byte mirrored into this cell.
        index: Row-major position in ``[0, 25)``.
    """

    value: Byte
    index: int

    @property
    def row(self) -> int:
        return self.index // GRID_SIZE

    @property
    def column(self) -> int:
        return self.index % GRID_SIZE


@dataclass(frozen=True)
class Grid:
    """Complete mirrored grid, 25 cells in index order."""

    cells: PVector[GridCell]

    def __len__(self) -> int:
        return len(self.cells)

    @property
    def indices(self) -> PVector[int]:
        return pvector(cell.index for cell in self.cells)


@dataclass(frozen=True)
class FilteredGrid:
    """Order-preserving subsequence of a ``Grid`` with even-valued cells only."""

    cells: PVector[GridCell]

    def __len__(self) -> int:
        return len(self.cells)

    @property
    def indices(self) -> PVector[int]:
        return pvector(cell.index for cell in self.cells)
