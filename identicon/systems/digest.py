import hashlib
from dataclasses import replace
from pyrsistent import pvector

from identicon.components import Digest
from identicon.state import ImageState


def hash_input(data: bytes) -> Digest:
    """Return the MD5 digest of ``data`` as 16 unsigned byte values."""
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f"Input must be bytes, got {type(data).__name__}")
    return Digest(values=pvector(hashlib.md5(data, usedforsecurity=False).digest()))


def hash_input_system(state: ImageState) -> ImageState:
    return replace(state, digest=hash_input(state.input))
