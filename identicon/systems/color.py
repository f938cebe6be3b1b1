from dataclasses import replace

from identicon.components import Color, Digest
from identicon.state import ImageState


def pick_color(digest: Digest) -> Color:
    """Use the first three digest bytes as red, green and blue."""
    red, green, blue = digest.values[:3]
    return Color(red=red, green=green, blue=blue)


def pick_color_system(state: ImageState) -> ImageState:
    if state.digest is None:
        raise ValueError("State has no digest; run hash_input_system first")
    return replace(state, color=pick_color(state.digest))
