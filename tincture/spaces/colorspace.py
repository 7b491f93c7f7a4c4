# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""
Color space transforms.

Conversion graph edges used by the built-in catalog:

    sRGB → Linear sRGB → XYZ (D65)
    OKLCH → OKLab → Linear sRGB
    HSL → sRGB
    Display P3 → XYZ (D65)

References:
- OKLab: https://bottosson.github.io/posts/oklab/
- sRGB / Display P3 primaries: CSS Color Module Level 4

Every function takes and returns float arrays of shape (..., 3).
Out-of-range inputs are extended, never clipped: gamut handling belongs to
tincture.gamut. A "none" coordinate arrives as NaN and either passes
through unchanged (elementwise transforms) or poisons the outputs that
depend on it (matrix transforms).
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from tincture.config import get_defaults


def _apply_matrix(m: NDArray[np.float64], values: NDArray[np.float64]) -> NDArray[np.float64]:
    return np.einsum('...j,ij->...i', values, m)


# =============================================================================
# sRGB ↔ Linear RGB
# =============================================================================


def srgb_to_linear(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert gamma-encoded sRGB to linear RGB.

    sRGB uses a piecewise gamma curve:
    - For |value| <= 0.04045: value/12.92
    - Otherwise: sign(value) * ((|value| + 0.055) / 1.055) ^ 2.4

    The curve is mirrored for negative values so that out-of-gamut colors
    survive a round trip.
    """
    srgb = np.asarray(srgb, dtype=np.float64)
    magnitude = np.abs(srgb)
    linear = np.where(
        magnitude <= 0.04045,
        srgb / 12.92,
        np.sign(srgb) * np.power((magnitude + 0.055) / 1.055, 2.4)
    )
    return linear


def linear_to_srgb(linear: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert linear RGB to gamma-encoded sRGB.

    Inverse of srgb_to_linear.
    """
    linear = np.asarray(linear, dtype=np.float64)
    magnitude = np.abs(linear)
    srgb = np.where(
        magnitude <= 0.0031308,
        linear * 12.92,
        np.sign(linear) * (1.055 * np.power(magnitude, 1.0 / 2.4) - 0.055)
    )
    return srgb


# =============================================================================
# Linear RGB ↔ XYZ (D65)
# =============================================================================

_SRGB_TO_XYZ = np.array([
    [0.41239079926595934, 0.357584339383878, 0.1804807884018343],
    [0.21263900587151027, 0.715168678767756, 0.07219231536073371],
    [0.01933081871559182, 0.11919477979462598, 0.9505321522496607],
], dtype=np.float64)

_P3_TO_XYZ = np.array([
    [0.4865709486482162, 0.26566769316909306, 0.1982172852343625],
    [0.2289745640697488, 0.6917385218365064, 0.079286914093745],
    [0.0000000000000000, 0.04511338185890264, 1.043944368900976],
], dtype=np.float64)

_XYZ_TO_SRGB = np.linalg.inv(_SRGB_TO_XYZ)
_XYZ_TO_P3 = np.linalg.inv(_P3_TO_XYZ)


def linear_srgb_to_xyz(rgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """Convert linear sRGB to CIE XYZ (D65 white)."""
    return _apply_matrix(_SRGB_TO_XYZ, np.asarray(rgb, dtype=np.float64))


def xyz_to_linear_srgb(xyz: NDArray[np.float64]) -> NDArray[np.float64]:
    """Convert CIE XYZ (D65 white) to linear sRGB."""
    return _apply_matrix(_XYZ_TO_SRGB, np.asarray(xyz, dtype=np.float64))


def display_p3_to_xyz(p3: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert gamma-encoded Display P3 to CIE XYZ (D65 white).

    Display P3 shares the sRGB transfer curve, with wider primaries.
    """
    return _apply_matrix(_P3_TO_XYZ, srgb_to_linear(p3))


def xyz_to_display_p3(xyz: NDArray[np.float64]) -> NDArray[np.float64]:
    """Convert CIE XYZ (D65 white) to gamma-encoded Display P3."""
    return linear_to_srgb(_apply_matrix(_XYZ_TO_P3, np.asarray(xyz, dtype=np.float64)))


# =============================================================================
# Linear RGB ↔ OKLab
# =============================================================================

# Matrices from https://bottosson.github.io/posts/oklab/

# Linear sRGB to LMS (cone responses)
_M1 = np.array([
    [0.4122214708, 0.5363325363, 0.0514459929],
    [0.2119034982, 0.6806995451, 0.1073969566],
    [0.0883024619, 0.2817188376, 0.6299787005],
], dtype=np.float64)

# LMS to OKLab
_M2 = np.array([
    [0.2104542553, 0.7936177850, -0.0040720468],
    [1.9779984951, -2.4285922050, 0.4505937099],
    [0.0259040371, 0.7827717662, -0.8086757660],
], dtype=np.float64)

# Inverse matrices
_M1_INV = np.linalg.inv(_M1)
_M2_INV = np.linalg.inv(_M2)


def linear_rgb_to_oklab(rgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert linear sRGB to OKLab.

    Args:
        rgb: Array of shape (..., 3) with linear RGB values

    Returns:
        Array of shape (..., 3) with OKLab values (L, a, b)
    """
    rgb = np.asarray(rgb, dtype=np.float64)

    # RGB to LMS
    lms = _apply_matrix(_M1, rgb)

    # Cube root (handle negative values for out-of-gamut colors)
    lms_cbrt = np.cbrt(lms)

    # LMS to OKLab
    return _apply_matrix(_M2, lms_cbrt)


def oklab_to_linear_rgb(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert OKLab to linear sRGB.

    Args:
        lab: Array of shape (..., 3) with OKLab values (L, a, b)

    Returns:
        Array of shape (..., 3) with linear RGB values
    """
    lab = np.asarray(lab, dtype=np.float64)

    lms_cbrt = _apply_matrix(_M2_INV, lab)
    lms = lms_cbrt ** 3

    return _apply_matrix(_M1_INV, lms)


# =============================================================================
# OKLab ↔ OKLCH
# =============================================================================


def oklab_to_oklch(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert OKLab to OKLCH (cylindrical coordinates).

    Args:
        lab: Array of shape (..., 3) with OKLab values (L, a, b)

    Returns:
        Array of shape (..., 3) with OKLCH values (L, C, H).
        H is in degrees [0, 360), NaN ("none") for achromatic colors.
    """
    lab = np.asarray(lab, dtype=np.float64)

    L = lab[..., 0]
    a = lab[..., 1]
    b = lab[..., 2]

    C = np.sqrt(a**2 + b**2)
    H = np.degrees(np.arctan2(b, a)) % 360.0
    H = np.where(C < get_defaults().achromatic_epsilon, np.nan, H)

    return np.stack([L, C, H], axis=-1)


def oklch_to_oklab(lch: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert OKLCH to OKLab.

    A "none" hue with (near) zero chroma contributes nothing to a and b.
    With non-zero chroma it poisons both.

    Args:
        lch: Array of shape (..., 3) with OKLCH values (L, C, H), H in degrees

    Returns:
        Array of shape (..., 3) with OKLab values (L, a, b)
    """
    lch = np.asarray(lch, dtype=np.float64)

    L = lch[..., 0]
    C = lch[..., 1]
    H = lch[..., 2]

    powerless = np.isnan(H) & (np.abs(C) < get_defaults().achromatic_epsilon)
    H_rad = np.radians(np.where(powerless, 0.0, H))

    a = np.where(powerless, 0.0, C * np.cos(H_rad))
    b = np.where(powerless, 0.0, C * np.sin(H_rad))

    return np.stack([L, a, b], axis=-1)


# =============================================================================
# sRGB ↔ HSL
# =============================================================================


def srgb_to_hsl(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert gamma-encoded sRGB [0,1] to HSL.

    Returns:
        Array of shape (..., 3) with (H degrees, S 0-100, L 0-100).
        H is NaN ("none") for grays.
    """
    srgb = np.asarray(srgb, dtype=np.float64)
    r = srgb[..., 0]
    g = srgb[..., 1]
    b = srgb[..., 2]

    mx = np.max(srgb, axis=-1)
    mn = np.min(srgb, axis=-1)
    lightness = (mx + mn) / 2
    d = mx - mn

    with np.errstate(divide="ignore", invalid="ignore"):
        denom = np.minimum(lightness, 1 - lightness)
        s = np.where((d == 0) | (denom == 0), 0.0, (mx - lightness) / denom)

        h = np.where(
            mx == r,
            (g - b) / d + np.where(g < b, 6.0, 0.0),
            np.where(mx == g, (b - r) / d + 2.0, (r - g) / d + 4.0),
        ) * 60.0
    h = np.where(d == 0, np.nan, h)

    # Negative saturation (out-of-gamut input) flips the hue
    h = np.where(s < 0, h + 180.0, h)
    s = np.abs(s)
    h = np.mod(h, 360.0)

    return np.stack([h, s * 100.0, lightness * 100.0], axis=-1)


def hsl_to_srgb(hsl: NDArray[np.float64]) -> NDArray[np.float64]:
    """Convert HSL (H degrees, S 0-100, L 0-100) to gamma-encoded sRGB."""
    hsl = np.asarray(hsl, dtype=np.float64)
    h = hsl[..., 0]
    s = hsl[..., 1] / 100.0
    lightness = hsl[..., 2] / 100.0

    h = np.where(np.isnan(h) & (np.abs(s) < get_defaults().achromatic_epsilon), 0.0, h)
    h = np.mod(h, 360.0)
    chroma = s * np.minimum(lightness, 1 - lightness)

    def channel(n: float) -> NDArray[np.float64]:
        k = np.mod(n + h / 30.0, 12.0)
        return lightness - chroma * np.maximum(-1.0, np.minimum(np.minimum(k - 3.0, 9.0 - k), 1.0))

    return np.stack([channel(0.0), channel(8.0), channel(4.0)], axis=-1)


# =============================================================================
# ΔE Distance (Perceptual Color Difference)
# =============================================================================


def delta_e_oklab(
    lab1: NDArray[np.float64],
    lab2: NDArray[np.float64],
) -> NDArray[np.float64]:
    """
    Euclidean distance in OKLab, vectorized over (..., 3).

    Reference thresholds (OKLab Euclidean, 0-1 scale):
    - ΔE ≈ 0.02: barely perceptible (expert eye)
    - ΔE ≈ 0.04: noticeable difference
    - ΔE ≈ 0.08+: clearly different colors
    """
    delta = np.asarray(lab1, dtype=np.float64) - np.asarray(lab2, dtype=np.float64)
    return np.sqrt(np.sum(delta ** 2, axis=-1))
