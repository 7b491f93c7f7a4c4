# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""
Gamut checking and mapping.

check_in_gamut() is a pure predicate over a value's own space.
to_gamut() returns an in-gamut approximation and never raises for
numeric reasons.
"""

from tincture.gamut.check import check_in_gamut, clip
from tincture.gamut.mapping import (
    ToGamutOptions,
    clip_method,
    css_method,
    delta_e_ok,
    to_gamut,
)

__all__ = [
    "check_in_gamut",
    "clip",
    "to_gamut",
    "ToGamutOptions",
    "clip_method",
    "css_method",
    "delta_e_ok",
]
