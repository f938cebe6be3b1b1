"""Pipeline orchestration.

This module wires the systems together in their fixed order and exposes the
public entry point :func:`generate`. Like every system it is pure: the same
input always yields byte-identical PNG output, and no process-wide state is
touched, so calls on different inputs may run concurrently.

Order:

1. ``hash_input_system`` hashes the input bytes into a 16-byte digest.
2. ``pick_color_system`` takes the first three digest bytes as RGB.
3. ``build_grid_system`` mirrors the digest into a 25-cell grid.
4. ``filter_odd_cells_system`` keeps only even-valued cells.
5. ``build_pixel_map_system`` maps each kept cell to a canvas rectangle.

Rendering then paints the rectangles and encodes a PNG.
"""

import logging
from typing import List, Union

from identicon.renderer.raster import render
from identicon.state import ImageState
from identicon.systems.color import pick_color_system
from identicon.systems.digest import hash_input_system
from identicon.systems.filter import filter_odd_cells_system
from identicon.systems.grid import build_grid_system
from identicon.systems.pixel_map import build_pixel_map_system
from identicon.types import SystemFn
from identicon.utils.invariants import check_state


logger = logging.getLogger(__name__)

SYSTEMS: List[SystemFn] = [
    hash_input_system,
    pick_color_system,
    build_grid_system,
    filter_odd_cells_system,
    build_pixel_map_system,
]


def to_bytes(data: Union[bytes, str]) -> bytes:
    """Encode ``str`` input as UTF-8; copy bytes-like input untouched."""
    if isinstance(data, str):
        return data.encode("utf-8")
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    raise TypeError(f"Input must be str or bytes, got {type(data).__name__}")


def build_state(data: Union[bytes, str]) -> ImageState:
    """Run every system on ``data`` and return the finished state.

    Args:
        data (bytes | str): Identicon key. Strings are UTF-8 encoded; no
            trimming or case folding is applied.

    Returns:
        ImageState: State with digest, color, filtered grid and pixel map set.

    Raises:
        TypeError: If ``data`` is neither ``str`` nor bytes-like.
        ValueError: If a system produced a state that breaks an invariant.
    """
    state = ImageState(input=to_bytes(data))
    for system in SYSTEMS:
        state = check_state(system(state))
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("built state: %s", state.description)
    return state


def generate(data: Union[bytes, str]) -> bytes:
    """Return the PNG identicon for ``data``."""
    return render(build_state(data))
