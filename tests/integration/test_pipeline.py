import logging
import threading
from typing import Dict, List

import pytest

from identicon import generate
from identicon.components import FilteredGrid
from identicon.pipeline import build_state, to_bytes
from identicon.state import ImageState
from identicon.utils.image import (
    decode_image,
    image_to_array,
    is_horizontally_symmetric,
    painted_mask,
)
from tests.test_utils import TEST_COLOR, TEST_DIGEST, TEST_FILTERED_GRID, make_cells


def test_build_state_for_test_input() -> None:
    state = build_state("test")
    assert state.input == b"test"
    assert state.digest is not None and list(state.digest.values) == TEST_DIGEST
    assert state.color is not None and state.color.as_tuple() == TEST_COLOR
    assert isinstance(state.grid, FilteredGrid)
    assert list(state.grid.cells) == make_cells(TEST_FILTERED_GRID)
    assert state.pixel_map is not None and len(state.pixel_map) == 10


@pytest.mark.parametrize("data", ["", "test", "alice", "Alice", " alice ", "日本語"])
def test_generate_is_deterministic(data: str) -> None:
    assert generate(data) == generate(data)


def test_str_and_utf8_bytes_agree() -> None:
    assert generate("ünïcødé") == generate("ünïcødé".encode("utf-8"))


def test_input_is_not_normalized() -> None:
    assert generate("alice") != generate("Alice")
    assert generate("alice") != generate(" alice")


@pytest.mark.parametrize("data", [b"", b"test", b"alice", b"\x00\x01\x02"])
def test_generated_image_is_symmetric(data: bytes) -> None:
    pixels = image_to_array(decode_image(generate(data)))
    mask = painted_mask(pixels)
    assert is_horizontally_symmetric(mask)


def test_to_bytes() -> None:
    assert to_bytes("test") == b"test"
    assert to_bytes(b"test") == b"test"
    assert to_bytes(bytearray(b"ab")) == b"ab"
    assert to_bytes(memoryview(b"ab")) == b"ab"


@pytest.mark.parametrize("data", [5, [1, 2], [116, 101, 115, 116], None, 1.5])
def test_non_bytes_input_is_rejected(data: object) -> None:
    with pytest.raises(TypeError):
        generate(data)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        build_state(data)  # type: ignore[arg-type]


def test_concurrent_generation_matches_sequential() -> None:
    inputs: List[str] = [f"user-{i}" for i in range(16)]
    expected: Dict[str, bytes] = {name: generate(name) for name in inputs}
    results: Dict[str, bytes] = {}

    def worker(name: str) -> None:
        results[name] = generate(name)

    threads = [threading.Thread(target=worker, args=(name,)) for name in inputs]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert results == expected


def test_state_description_only_built_for_debug_logging(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    calls: List[int] = []

    def counting_description(self: ImageState) -> str:
        calls.append(1)
        return "described"

    monkeypatch.setattr(ImageState, "description", property(counting_description))

    with caplog.at_level(logging.WARNING, logger="identicon.pipeline"):
        build_state("test")
    assert calls == []

    with caplog.at_level(logging.DEBUG, logger="identicon.pipeline"):
        build_state("test")
    assert calls == [1]
    assert "built state: described" in caplog.text
