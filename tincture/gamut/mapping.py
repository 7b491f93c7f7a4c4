# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""
Gamut mapping.

Strategies:
- "clip": clamp each coordinate to its range.
- "css": reduce OKLCh chroma at constant lightness and hue until the
  clipped color is within a just-noticeable difference (ΔE OK) of the
  unclipped one (CSS Color 4 gamut mapping).

Mapping never fails. The chroma search has a hard iteration cap and
always returns a clipped color, and to_gamut() clips once more if a
strategy's result is still out of gamut.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Union

import numpy as np

from tincture.config import get_defaults
from tincture.errors import UnsupportedOperationError
from tincture.gamut.check import check_in_gamut, clip
from tincture.schema import ColorValue, SpaceDescriptor
from tincture.spaces.colorspace import delta_e_oklab

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ToGamutOptions:
    """
    Gamut mapping options.

    Attributes:
        method: Strategy name. None uses the target space's preferred
            strategy, then Defaults.gamut_method.
        space: Space whose gamut to map into. None means the color's own.
    """
    method: Optional[str] = None
    space: Union[str, SpaceDescriptor, None] = None


def _resolve(registry):
    from tincture.spaces import resolve_registry

    return resolve_registry(registry)


def clip_method(value: ColorValue, *, registry=None) -> ColorValue:
    """Per-coordinate clipping strategy."""
    return clip(value)


def delta_e_ok(a: ColorValue, b: ColorValue, *, registry=None) -> float:
    """Euclidean distance between two colors in OKLab. NaN if a "none" is involved."""
    registry = _resolve(registry)
    labs = [
        [np.nan if c is None else c for c in registry.convert(v, "oklab").coords]
        for v in (a, b)
    ]
    return float(delta_e_oklab(np.array(labs[0]), np.array(labs[1])))


def css_method(value: ColorValue, *, registry=None) -> ColorValue:
    """
    Chroma-reduction strategy (CSS Color 4).

    Binary search on OKLCh chroma. The result is the clipped color at the
    last chroma tried, so it is always in gamut even if the search runs out
    of iterations.
    """
    registry = _resolve(registry)
    defaults = get_defaults()
    jnd = defaults.gamut_jnd
    epsilon = defaults.gamut_chroma_epsilon
    dest = value.space

    oklch = registry.lookup("oklch")
    origin = registry.convert(value, oklch)
    L, C, H = origin.coords

    if L is None or C is None:
        return clip(value)
    if L >= 1.0:
        white = ColorValue(oklch, (1.0, 0.0, None), value.alpha)
        return clip(registry.convert(white, dest))
    if L <= 0.0:
        black = ColorValue(oklch, (0.0, 0.0, None), value.alpha)
        return clip(registry.convert(black, dest))
    if check_in_gamut(value):
        return value

    clipped = clip(value)
    if delta_e_ok(clipped, origin, registry=registry) < jnd:
        return clipped

    lo, hi = 0.0, C
    lo_in_gamut = True
    for _ in range(defaults.gamut_max_iterations):
        if hi - lo <= epsilon:
            break
        chroma = (lo + hi) / 2
        current = origin.with_coords((L, chroma, H))
        candidate = registry.convert(current, dest)

        if lo_in_gamut and check_in_gamut(candidate):
            lo = chroma
            continue

        clipped = clip(candidate)
        error = delta_e_ok(clipped, current, registry=registry)
        if error < jnd:
            if jnd - error < epsilon:
                break
            lo_in_gamut = False
            lo = chroma
        else:
            hi = chroma
    else:
        logger.debug(
            "Chroma search for %s did not converge after %d iterations, using clipped result",
            dest.id, defaults.gamut_max_iterations,
        )

    return clipped


def to_gamut(
    value: ColorValue,
    method: Union[str, ToGamutOptions, None] = None,
    space: Union[str, SpaceDescriptor, None] = None,
    *,
    registry=None,
) -> ColorValue:
    """
    Map a color into a gamut.

    The input is never modified. The result is in the input's space and
    passes check_in_gamut() in the target space.

    Args:
        value: Color to map
        method: Strategy name, or ToGamutOptions
        space: Space whose gamut to target (default: the value's own)
        registry: Registry to use (default: the process-wide one)

    Raises:
        UnsupportedOperationError: If the strategy name is unknown.
        NoConversionPathError: If the target space is unreachable.
    """
    registry = _resolve(registry)
    if isinstance(method, ToGamutOptions):
        space = method.space if space is None else space
        method = method.method

    target = registry.lookup(space) if space is not None else value.space
    working = registry.convert(value, target)
    if check_in_gamut(working):
        return value.with_coords(value.coords)

    name = method or target.gamut_method or get_defaults().gamut_method
    if name == "clip":
        strategy = clip_method
    else:
        try:
            strategy = registry.gamut_method(name)
        except KeyError:
            raise UnsupportedOperationError(
                f"Unknown gamut mapping method {name!r} for space {target.id!r}"
            ) from None

    mapped = strategy(working, registry=registry)
    if not check_in_gamut(mapped):
        logger.debug("Gamut method %s left %s out of gamut, clipping", name, target.id)
        mapped = clip(mapped)

    if target is value.space:
        return mapped
    return registry.convert(mapped, value.space)
