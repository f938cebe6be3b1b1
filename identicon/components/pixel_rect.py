"""Pixel geometry components.

Integer canvas coordinates. A ``PixelRect`` spans one 50x50 grid cell; its
corners are multiples of the cell size in ``[0, 250]``.
"""

from dataclasses import dataclass

from identicon.types import Box


@dataclass(frozen=True)
class Point:
    """Canvas coordinate.

    Attributes:
        x: Horizontal pixel offset (0 at left).
        y: Vertical pixel offset (0 at top).
    """

    x: int
    y: int


@dataclass(frozen=True)
class PixelRect:
    """Axis-aligned rectangle for one painted cell.

    Attributes:
        top_left: Upper-left corner.
        bottom_right: Lower-right corner.
    """

    top_left: Point
    bottom_right: Point

    def as_box(self) -> Box:
        """Return ``(x0, y0, x1, y1)`` as accepted by ``ImageDraw.rectangle``."""
        return (
            self.top_left.x,
            self.top_left.y,
            self.bottom_right.x,
            self.bottom_right.y,
        )

    @property
    def width(self) -> int:
        return self.bottom_right.x - self.top_left.x

    @property
    def height(self) -> int:
        return self.bottom_right.y - self.top_left.y
