import io
import logging
from typing import Iterable
from PIL import Image, ImageDraw

from identicon.components import Color, PixelRect
from identicon.state import ImageState
from identicon.types import BACKGROUND_COLOR, CANVAS_SIZE, IMAGE_FORMAT, IMAGE_MODE


logger = logging.getLogger(__name__)


def new_canvas() -> Image.Image:
    return Image.new(IMAGE_MODE, (CANVAS_SIZE, CANVAS_SIZE), BACKGROUND_COLOR)


def draw_image(color: Color, pixel_map: Iterable[PixelRect]) -> Image.Image:
    """
    Paints each rectangle of ``pixel_map`` onto a blank canvas in ``color``.
    Boxes include both corners; neighbouring cells share an edge line of the
    same color, so paint order does not change the result.
    """
    image = new_canvas()
    draw = ImageDraw.Draw(image)
    fill = color.as_tuple()
    for rect in pixel_map:
        draw.rectangle(rect.as_box(), fill=fill)
    return image


def encode_png(image: Image.Image) -> bytes:
    """
    Encodes ``image`` as PNG without ancillary chunks, so equal canvases
    always produce equal bytes.
    """
    buffer = io.BytesIO()
    image.save(buffer, format=IMAGE_FORMAT, optimize=False)
    return buffer.getvalue()


def render_image(state: ImageState) -> Image.Image:
    """
    Renders a fully built state as a PIL Image.
    """
    if state.color is None or state.pixel_map is None:
        raise ValueError("State is not ready for rendering: missing color or pixel map")
    logger.debug("pixel map: %s", state.pixel_map)
    return draw_image(state.color, state.pixel_map)


def render(state: ImageState) -> bytes:
    """
    Renders a fully built state as encoded PNG bytes.
    """
    return encode_png(render_image(state))
