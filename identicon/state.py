"""Core immutable ``ImageState`` dataclass.

This module defines the frozen :class:`ImageState` object threaded through the
identicon pipeline. Every system is a pure function that takes the previous
``ImageState`` and returns a *new* one with exactly one field populated or
replaced; no mutation happens in-place. This keeps generation deterministic
and makes each stage testable on hand-built states.

Design notes:

* Fields are filled in pipeline order: ``digest`` -> ``color`` -> ``grid``
    -> ``pixel_map``. A ``None`` field means the owning system has not run yet.
* ``grid`` is the only field written twice: the grid builder stores a full
    :class:`~identicon.components.Grid`, and the cell filter narrows it to a
    :class:`~identicon.components.FilteredGrid`.
* ``pixel_map`` is a persistent vector aligned one to one with the filtered
    grid's cells.

See :mod:`identicon.pipeline` for how the systems are chained.
"""

from dataclasses import dataclass
from typing import Any, Optional, Union
from pyrsistent import pmap
from pyrsistent.typing import PMap, PVector

from identicon.components import Color, Digest, FilteredGrid, Grid, PixelRect


@dataclass(frozen=True)
class ImageState:
    """Immutable identicon pipeline state.

    Attributes:
        input (bytes): Raw input bytes, set once at pipeline entry.
        digest (Digest | None): 16-byte hash of ``input``.
        color (Color | None): Fill color taken from the first three digest bytes.
        grid (Grid | FilteredGrid | None): Mirrored 5x5 grid, later narrowed to
            the painted cells.
        pixel_map (PVector[PixelRect] | None): Canvas rectangle per painted cell.
    """

    input: bytes
    digest: Optional[Digest] = None
    color: Optional[Color] = None
    grid: Optional[Union[Grid, FilteredGrid]] = None
    pixel_map: Optional[PVector[PixelRect]] = None

    @property
    def description(self) -> PMap[str, Any]:
        """Sparse serialization of populated fields.

        Returns:
            PMap[str, Any]: Persistent map of field name to value for every
            field that is not ``None``.
        """
        description: PMap[str, Any] = pmap()
        for field in self.__dataclass_fields__:
            value = getattr(self, field)
            if value is None:
                continue
            description = description.set(field, value)
        return description
