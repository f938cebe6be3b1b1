"""Common type aliases and fixed image constants.

The identicon geometry is not configurable: a 5x5 grid of 50px cells on a
250x250 canvas, colored from a 16-byte MD5 digest.
"""

from typing import Callable, Tuple, TYPE_CHECKING


# Forward declaration for SystemFn typing to avoid circular imports:
if TYPE_CHECKING:
    from identicon.state import ImageState

Byte = int
RGB = Tuple[int, int, int]
Box = Tuple[int, int, int, int]

SystemFn = Callable[["ImageState"], "ImageState"]

DIGEST_SIZE: int = 16
ROW_SEED_SIZE: int = 3
GRID_SIZE: int = 5
GRID_CELLS: int = GRID_SIZE * GRID_SIZE
CELL_SIZE: int = 50
CANVAS_SIZE: int = GRID_SIZE * CELL_SIZE
BACKGROUND_COLOR: RGB = (255, 255, 255)
IMAGE_MODE: str = "RGB"
IMAGE_FORMAT: str = "PNG"
