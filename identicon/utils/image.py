import io
import numpy as np
import numpy.typing as npt
from PIL import Image
from typing import Tuple

from identicon.types import BACKGROUND_COLOR, CELL_SIZE, GRID_SIZE, IMAGE_MODE, RGB

# Type aliases for clarity
UInt8Array = npt.NDArray[np.uint8]
BoolArray = npt.NDArray[np.bool_]


def decode_image(data: bytes) -> Image.Image:
    """
    Decode encoded image bytes into an RGB PIL image.
    """
    with Image.open(io.BytesIO(data)) as image:
        return image.convert(IMAGE_MODE)


def image_to_array(image: Image.Image) -> UInt8Array:
    """
    Return an (H, W, 3) uint8 array of the image's RGB channels.
    """
    if image.mode != IMAGE_MODE:
        image = image.convert(IMAGE_MODE)
    return np.array(image, dtype=np.uint8)


def cell_centers() -> Tuple[npt.NDArray[np.intp], npt.NDArray[np.intp]]:
    """
    Pixel coordinates (rows, cols) of the center of every grid cell.
    """
    centers = np.arange(GRID_SIZE, dtype=np.intp) * CELL_SIZE + CELL_SIZE // 2
    return np.meshgrid(centers, centers, indexing="ij")


def painted_mask(pixels: UInt8Array, background: RGB = BACKGROUND_COLOR) -> BoolArray:
    """
    Sample each cell's center and return a (5, 5) mask of cells whose pixel
    differs from ``background``. Row-major, so ``mask.ravel()[i]`` is grid
    index ``i``. A fill color equal to the background reads as unpainted.
    """
    rows, cols = cell_centers()
    samples: UInt8Array = pixels[rows, cols]
    target: UInt8Array = np.asarray(background, dtype=np.uint8)
    return np.any(samples != target, axis=-1)


def is_horizontally_symmetric(mask: BoolArray) -> bool:
    """
    True if every row of ``mask`` reads the same left to right and right to left.
    """
    return bool(np.array_equal(mask, mask[:, ::-1]))
