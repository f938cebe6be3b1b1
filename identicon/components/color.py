"""Color component.

Foreground color of every painted cell, read from the first three digest
bytes.
"""

from dataclasses import dataclass

from identicon.types import RGB


@dataclass(frozen=True)
class Color:
    """RGB fill color.

    Attributes:
        red: Red channel in ``[0, 256)``.
        green: Green channel in ``[0, 256)``.
        blue: Blue channel in ``[0, 256)``.
    """

    red: int
    green: int
    blue: int

    def as_tuple(self) -> RGB:
        return (self.red, self.green, self.blue)
