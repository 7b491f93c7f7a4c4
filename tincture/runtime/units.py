# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""
Unit mapping shared by the serializer and the parser.

Percentages are relative to a coordinate's reference range: 0-100%, or
-100%-100% for ranges that extend below zero (e.g. OKLab a/b).
"""

from __future__ import annotations

import math

# Degrees per unit
ANGLE_UNITS = {
    "deg": 1.0,
    "rad": 180.0 / math.pi,
    "grad": 0.9,
    "turn": 360.0,
}


def percent_range(ref_range: tuple[float, float]) -> tuple[float, float]:
    """Percentage range matching a reference range."""
    return (-100.0, 100.0) if ref_range[0] < 0 else (0.0, 100.0)


def map_range(
    value: float,
    from_range: tuple[float, float],
    to_range: tuple[float, float],
) -> float:
    """Linearly map ``value`` from one range onto another."""
    lo, hi = from_range
    out_lo, out_hi = to_range
    return out_lo + (value - lo) * (out_hi - out_lo) / (hi - lo)
