# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""
Process-wide defaults.

Like the space registry, defaults belong to the initialization phase:
call configure() before any conversion or serialization depends on them.
"""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Defaults:
    """Default settings shared by the serializer and the gamut mapper."""

    # Significant digits for serialized numbers
    precision: int = 5

    # Tolerance for in-gamut checks, absorbs floating-point noise
    gamut_epsilon: float = 0.000075

    # Strategy used when neither the caller nor the space names one
    gamut_method: str = "clip"

    # Chroma-reduction search (OKLab ΔE scale, 0-1)
    # 0.02 = just noticeable difference
    gamut_jnd: float = 0.02
    gamut_chroma_epsilon: float = 0.0001
    gamut_max_iterations: int = 40

    # Chroma below which hue carries no information
    achromatic_epsilon: float = 0.000004


_defaults = Defaults()


def get_defaults() -> Defaults:
    """Return the active defaults."""
    return _defaults


def configure(**changes) -> Defaults:
    """
    Replace selected defaults.

    Raises:
        TypeError: If a keyword does not name a Defaults field.
    """
    global _defaults
    _defaults = replace(_defaults, **changes)
    return _defaults
