# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""
Public color API.

Every function accepts anything get_color() does (ColorValue, string,
dict) and returns new values; inputs are never modified.
"""

from __future__ import annotations

import math
from typing import Any, Callable, Optional, Sequence, Union

from tincture.gamut import ToGamutOptions, check_in_gamut
from tincture.gamut import delta_e_ok as _delta_e_ok
from tincture.gamut import to_gamut as _to_gamut
from tincture.runtime import get_color
from tincture.schema import ColorValue, Coord, SpaceDescriptor
from tincture.spaces import resolve_registry

SpaceRef = Union[str, SpaceDescriptor]


def color(
    space: SpaceRef,
    coords: Sequence[Coord],
    alpha: Coord = 1.0,
    *,
    registry=None,
) -> ColorValue:
    """Create a ColorValue from a space id (or descriptor) and coordinates."""
    return ColorValue(resolve_registry(registry).lookup(space), tuple(coords), alpha)


def to(
    color: Any,
    space: SpaceRef,
    *,
    in_gamut: Union[bool, str] = False,
    registry=None,
) -> ColorValue:
    """
    Convert a color to another space.

    Args:
        color: Color input
        space: Target space id, alias or descriptor
        in_gamut: Gamut-map the result. A string names the strategy.

    Raises:
        NoConversionPathError: If the spaces are not connected.
    """
    registry = resolve_registry(registry)
    result = registry.convert(get_color(color, registry=registry), space)
    if in_gamut:
        method = None if in_gamut is True else in_gamut
        result = _to_gamut(result, method, registry=registry)
    return result


def in_gamut(
    color: Any,
    space: Optional[SpaceRef] = None,
    *,
    epsilon: Optional[float] = None,
    registry=None,
) -> bool:
    """
    Check whether a color is within gamut.

    Args:
        color: Color input
        space: Check against this space's gamut (default: the color's own)
        epsilon: Tolerance (default: Defaults.gamut_epsilon)
    """
    registry = resolve_registry(registry)
    value = get_color(color, registry=registry)
    if space is not None:
        value = registry.convert(value, space)
    return check_in_gamut(value, epsilon)


def to_gamut(
    color: Any,
    method: Union[str, ToGamutOptions, None] = None,
    space: Optional[SpaceRef] = None,
    *,
    registry=None,
) -> ColorValue:
    """
    Map a color into gamut. The result stays in the color's space.

    Args:
        color: Color input
        method: Strategy name ("clip", "css") or ToGamutOptions
        space: Space whose gamut to target (default: the color's own)
    """
    registry = resolve_registry(registry)
    return _to_gamut(get_color(color, registry=registry), method, space, registry=registry)


def equals(a: Any, b: Any, *, registry=None) -> bool:
    """True if both colors have the same space, coordinates and alpha."""
    return get_color(a, registry=registry) == get_color(b, registry=registry)


def distance(a: Any, b: Any, space: SpaceRef = "oklab", *, registry=None) -> float:
    """
    Euclidean distance between two colors in ``space``.

    "none" coordinates count as 0.
    """
    registry = resolve_registry(registry)
    coords = [
        [0.0 if c is None else c for c in registry.convert(get_color(v, registry=registry), space).coords]
        for v in (a, b)
    ]
    return math.dist(coords[0], coords[1])


def delta_e_ok(a: Any, b: Any, *, registry=None) -> float:
    """Perceptual difference (Euclidean distance in OKLab, 0-1 scale)."""
    return _delta_e_ok(
        get_color(a, registry=registry), get_color(b, registry=registry), registry=registry
    )


def _resolve_ref(value: ColorValue, ref: str, registry) -> tuple[SpaceDescriptor, int]:
    """Resolve ``"coord"`` or ``"space.coord"`` to (space, index)."""
    space_name, dot, coord_name = ref.rpartition(".")
    space = registry.lookup(space_name) if dot else value.space
    return space, space.coord_index(coord_name)


def get_coord(color: Any, ref: str, *, registry=None) -> Coord:
    """
    Read one coordinate.

    Args:
        color: Color input
        ref: Coordinate name in the color's space (``"r"``) or in another
            space (``"oklch.l"``)

    Raises:
        KeyError: If the space has no such coordinate.
    """
    registry = resolve_registry(registry)
    value = get_color(color, registry=registry)
    space, index = _resolve_ref(value, ref, registry)
    return registry.convert(value, space).coords[index]


def set_coord(
    color: Any,
    ref: str,
    new: Union[Coord, Callable[[Coord], Coord]],
    *,
    registry=None,
) -> ColorValue:
    """
    Return a copy with one coordinate replaced.

    ``new`` may be a callable receiving the current coordinate. When
    ``ref`` names another space the color round-trips through it.
    """
    registry = resolve_registry(registry)
    value = get_color(color, registry=registry)
    space, index = _resolve_ref(value, ref, registry)
    working = registry.convert(value, space)
    coords = list(working.coords)
    coords[index] = new(coords[index]) if callable(new) else new
    return registry.convert(working.with_coords(coords), value.space)
