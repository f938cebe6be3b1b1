"""Digest component.

Fixed-length byte values produced once from the input by the digest system.
"""

from dataclasses import dataclass
from pyrsistent.typing import PVector

from identicon.types import Byte


@dataclass(frozen=True)
class Digest:
    """Hash output as unsigned 8-bit integers.

    Attributes:
        values: Digest bytes in order (16 for MD5).
    """

    values: PVector[Byte]

    def __len__(self) -> int:
        return len(self.values)
