"""Deterministic identicon generation.

``generate("alice")`` hashes the key, mirrors the digest into a symmetric
5x5 grid, and returns a 250x250 PNG as bytes. Equal keys give equal bytes.
"""

from identicon.pipeline import build_state, generate

__all__ = ["build_state", "generate"]
