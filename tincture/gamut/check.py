# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""
Gamut checking and clipping.

Both functions look only at the value's own space. Coordinates that are
"none", angles, and unbounded coordinates never violate a bound.
"""

from __future__ import annotations

from typing import Optional

from tincture.config import get_defaults
from tincture.schema import ColorValue


def check_in_gamut(value: ColorValue, epsilon: Optional[float] = None) -> bool:
    """
    True if every bounded coordinate lies within its range.

    Args:
        value: Color to check
        epsilon: Tolerance absorbing floating-point noise
            (default: Defaults.gamut_epsilon)
    """
    if epsilon is None:
        epsilon = get_defaults().gamut_epsilon

    for meta, c in zip(value.space.coords, value.coords):
        if c is None or not meta.is_bounded:
            continue
        lo, hi = meta.range
        if c < lo - epsilon or c > hi + epsilon:
            return False
    return True


def clip(value: ColorValue) -> ColorValue:
    """Clamp every bounded coordinate to its range. Returns a new value."""
    coords = []
    for meta, c in zip(value.space.coords, value.coords):
        if c is None or not meta.is_bounded:
            coords.append(c)
        else:
            lo, hi = meta.range
            coords.append(min(max(c, lo), hi))
    return value.with_coords(coords)
