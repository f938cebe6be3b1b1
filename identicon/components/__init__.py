"""Component aggregates.

This module re-exports the immutable value records that each pipeline stage
produces: the :class:`Digest` of the input, the fill :class:`Color`, the
mirrored :class:`Grid` and its painted subset :class:`FilteredGrid`, and the
:class:`PixelRect` geometry handed to the rasterizer.

Every record is a frozen dataclass; stages express change by building a new
record and replacing the matching field of
:class:`identicon.state.ImageState`.
"""

from .color import Color
from .digest import Digest
from .grid import FilteredGrid, Grid, GridCell
from .pixel_rect import PixelRect, Point

__all__ = [
    "Color",
    "Digest",
    "FilteredGrid",
    "Grid",
    "GridCell",
    "PixelRect",
    "Point",
]
