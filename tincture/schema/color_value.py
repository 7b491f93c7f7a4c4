# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""
ColorValue: the record every operation consumes and produces.

Design principles:
- Immutable: operations return new values, never mutate their input
- Explicit "none": a missing coordinate is None, never a magic number
- Self-describing: the value holds its space descriptor, not just an id

A coordinate is either a finite float or None ("none" in CSS). None means
the component carries no information, e.g. the hue of a gray.
"""

from __future__ import annotations

import json
import math
from dataclasses import dataclass, replace
from typing import Optional, Sequence

from tincture.errors import InvalidColorInputError
from tincture.schema.space import SpaceDescriptor


Coord = Optional[float]


def normalize_coord(value: object) -> Coord:
    """Coerce a coordinate to float or None. NaN becomes None."""
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        try:
            value = float(value)  # numpy scalars
        except (TypeError, ValueError):
            raise InvalidColorInputError(
                f"Coordinate must be a number or None, got {value!r}", value
            ) from None
    value = float(value)
    if math.isnan(value):
        return None
    if math.isinf(value):
        raise InvalidColorInputError(f"Coordinate must be finite, got {value}", value)
    return value


@dataclass(frozen=True, slots=True)
class ColorValue:
    """
    A color in a specific space.

    Attributes:
        space: Space descriptor the coordinates belong to
        coords: One coordinate per space dimension, float or None
        alpha: Opacity in [0, 1], or None
    """
    space: SpaceDescriptor
    coords: tuple[Coord, ...]
    alpha: Coord = 1.0

    def __post_init__(self) -> None:
        """Validate dimensionality and ranges, normalize NaN to None."""
        if not isinstance(self.space, SpaceDescriptor):
            raise InvalidColorInputError(
                f"space must be a SpaceDescriptor, got {type(self.space).__name__}",
                self.space,
            )
        try:
            coords = tuple(normalize_coord(c) for c in self.coords)
        except TypeError:
            raise InvalidColorInputError(
                f"coords must be a sequence, got {self.coords!r}", self.coords
            ) from None
        if len(coords) != self.space.dimensions:
            raise InvalidColorInputError(
                f"Space {self.space.id!r} has {self.space.dimensions} coordinates, "
                f"got {len(coords)}",
                self.coords,
            )
        alpha = normalize_coord(self.alpha)
        if alpha is not None and not 0.0 <= alpha <= 1.0:
            raise InvalidColorInputError(f"Alpha must be 0-1, got {alpha}", alpha)
        object.__setattr__(self, "coords", coords)
        object.__setattr__(self, "alpha", alpha)

    @property
    def space_id(self) -> str:
        return self.space.id

    def with_coords(self, coords: Sequence[Coord]) -> ColorValue:
        """Copy with new coordinates, same space and alpha."""
        return replace(self, coords=tuple(coords))

    def with_alpha(self, alpha: Coord) -> ColorValue:
        """Copy with a new alpha."""
        return replace(self, alpha=alpha)

    def to_dict(self) -> dict:
        """Serialize to dictionary (None stays None)."""
        return {
            "spaceId": self.space.id,
            "coords": list(self.coords),
            "alpha": self.alpha,
        }

    def to_json(self) -> str:
        """Serialize to compact JSON. None is written as null."""
        return json.dumps(self.to_dict(), separators=(",", ":"))

    @classmethod
    def from_dict(cls, data: dict, *, registry=None) -> ColorValue:
        """
        Deserialize from dictionary.

        Accepts ``spaceId`` or ``space`` (id, alias or descriptor).
        """
        from tincture.spaces import resolve_registry

        space = data.get("space", data.get("spaceId"))
        if space is None:
            raise InvalidColorInputError("Color data has no space", data)
        if "coords" not in data:
            raise InvalidColorInputError("Color data has no coords", data)
        alpha = data.get("alpha", 1.0)
        return cls(
            space=resolve_registry(registry).lookup(space),
            coords=tuple(data["coords"]),
            alpha=alpha,
        )
