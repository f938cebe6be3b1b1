import streamlit as st

from dataclasses import asdict
from typing import Any, Dict, List

from identicon.pipeline import build_state
from identicon.renderer.raster import encode_png, render_image
from identicon.state import ImageState
from identicon.utils.image import UInt8Array, image_to_array, painted_mask

st.set_page_config(layout="centered", page_title="Identicon")


def describe(state: ImageState) -> Dict[str, Any]:
    """JSON-friendly view of a finished state."""
    return {
        "input": state.input.decode("utf-8", errors="replace"),
        "digest": list(state.digest.values) if state.digest is not None else None,
        "color": asdict(state.color) if state.color is not None else None,
        "grid": [asdict(cell) for cell in state.grid.cells] if state.grid is not None else None,
        "pixel_map": (
            [asdict(rect) for rect in state.pixel_map]
            if state.pixel_map is not None
            else None
        ),
    }


def mask_rows(pixels: UInt8Array) -> List[str]:
    mask = painted_mask(pixels)
    return ["".join("■" if cell else "□" for cell in row) for row in mask]


# --------- Main App ---------

text: str = st.text_input("Key", value="identicon", key="identicon_key")

state = build_state(text)
assert state.color is not None
image = render_image(state)
color = state.color.as_tuple()

tab_image, tab_state = st.tabs(["Image", "State"])

with tab_image:
    left_col, right_col = st.columns([0.6, 0.4])

    with left_col:
        st.image(image, use_container_width=True)
        st.download_button(
            "⬇️ Download PNG",
            data=encode_png(image),
            file_name=f"{text}.png",
            mime="image/png",
            use_container_width=True,
        )

    with right_col:
        st.color_picker("Color", value="#{:02x}{:02x}{:02x}".format(*color), disabled=True)
        st.code("\n".join(mask_rows(image_to_array(image))), language=None)

with tab_state:
    st.json(describe(state), expanded=1)
