# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""
Space descriptors.

A space is a node in the conversion graph. It declares its coordinates
(with gamut and reference ranges), its conversion edges to adjacent spaces,
and its format catalog. Descriptors are created once at startup and never
mutated.

Edge transforms take and return float arrays of shape (..., 3). The "none"
coordinate travels through them as NaN.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Callable, Mapping, Optional

import numpy as np
from numpy.typing import NDArray

from tincture.schema.format import Format, FunctionalFormat


Transform = Callable[[NDArray[np.float64]], NDArray[np.float64]]


@dataclass(frozen=True, slots=True)
class CoordMeta:
    """
    Metadata for one coordinate of a space.

    Attributes:
        name: Coordinate name (e.g. "l", "c", "h")
        range: Gamut bounds. None for unbounded coordinates.
        ref_range: Reference range that percentages are relative to.
            Defaults to ``range``, then to 0-360 for angles and 0-1 otherwise.
        type: "number" or "angle". Angles wrap and are never range-checked.
    """
    name: str
    range: Optional[tuple[float, float]] = None
    ref_range: Optional[tuple[float, float]] = None
    type: str = "number"

    def __post_init__(self) -> None:
        if self.type not in ("number", "angle"):
            raise ValueError(f"Coordinate type must be number or angle, got {self.type!r}")
        if self.ref_range is None:
            if self.range is not None:
                ref = self.range
            elif self.type == "angle":
                ref = (0.0, 360.0)
            else:
                ref = (0.0, 1.0)
            object.__setattr__(self, "ref_range", ref)

    @property
    def is_angle(self) -> bool:
        return self.type == "angle"

    @property
    def is_bounded(self) -> bool:
        """True if the coordinate takes part in gamut checks."""
        return self.range is not None and not self.is_angle


@dataclass(frozen=True, slots=True)
class ConversionEdge:
    """
    Directed edge of the conversion graph.

    Attributes:
        target: Id of the adjacent space
        forward: Transform from the owning space to ``target``
        inverse: Transform from ``target`` back to the owning space
    """
    target: str
    forward: Transform
    inverse: Transform


@dataclass(frozen=True, eq=False)
class SpaceDescriptor:
    """
    A color space: coordinates, conversion edges and formats.

    The first edge is the base edge. Following base edges from any space
    must lead to the registry's hub space.

    Equality is identity: two descriptors are the same space only if they
    are the same object.

    Attributes:
        id: Unique identifier (e.g. "srgb")
        coords: Coordinate metadata, one entry per dimension
        edges: Conversion edges, base edge first. Empty only for the hub.
        formats: Format catalog keyed by format id. Every space also gets a
            generic "color" format unless it declares one.
        name: Human-readable name, defaults to ``id``
        css_id: Identifier used inside CSS color(), if different from ``id``
        aliases: Other names accepted by lookups
        default_format: Format id used for "default". Falls back to the
            first format in the catalog.
        gamut_method: Preferred gamut-mapping strategy for this space
    """
    id: str
    coords: tuple[CoordMeta, ...]
    edges: tuple[ConversionEdge, ...] = ()
    formats: Mapping[str, Format] = field(default_factory=dict)
    name: Optional[str] = None
    css_id: Optional[str] = None
    aliases: tuple[str, ...] = ()
    default_format: Optional[str] = None
    gamut_method: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Space id cannot be empty")
        if not self.coords:
            raise ValueError(f"Space {self.id!r} must declare its coordinates")
        if self.name is None:
            object.__setattr__(self, "name", self.id)
        object.__setattr__(self, "coords", tuple(self.coords))
        object.__setattr__(self, "edges", tuple(self.edges))
        object.__setattr__(self, "aliases", tuple(self.aliases))

        # Bind each format to its catalog id and owning space
        bound: dict[str, Format] = {
            format_id: dataclasses.replace(fmt, id=format_id, space=self.id)
            for format_id, fmt in self.formats.items()
        }
        if "color" not in bound:
            bound["color"] = FunctionalFormat(name="color", id="color", space=self.id)
        object.__setattr__(self, "formats", MappingProxyType(bound))

        if self.default_format is not None and self.default_format not in bound:
            raise ValueError(
                f"Default format {self.default_format!r} is not in the "
                f"catalog of {self.id!r}"
            )

    def __repr__(self) -> str:
        return f"SpaceDescriptor({self.id!r})"

    @property
    def dimensions(self) -> int:
        return len(self.coords)

    @property
    def base(self) -> Optional[str]:
        """Id of the next space towards the hub, None for the hub itself."""
        return self.edges[0].target if self.edges else None

    @property
    def display_id(self) -> str:
        """Identifier written inside color()."""
        return self.css_id or self.id

    @property
    def names(self) -> tuple[str, ...]:
        """Every name this space answers to."""
        names = [self.id]
        if self.css_id and self.css_id != self.id:
            names.append(self.css_id)
        names.extend(self.aliases)
        return tuple(names)

    def get_format(self, format_id: str) -> Optional[Format]:
        """
        Look up a format in this space's catalog.

        "default" resolves to a format literally named "default", then to
        ``default_format``, then to the first format in the catalog.
        """
        fmt = self.formats.get(format_id)
        if fmt is not None or format_id != "default":
            return fmt
        if self.default_format is not None:
            return self.formats[self.default_format]
        return next(iter(self.formats.values()), None)

    def coord_index(self, name: str) -> int:
        """Index of the coordinate called ``name`` (case-insensitive)."""
        wanted = name.lower()
        for i, meta in enumerate(self.coords):
            if meta.name.lower() == wanted:
                return i
        raise KeyError(f"Space {self.id!r} has no coordinate {name!r}")
