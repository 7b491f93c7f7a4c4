# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""
Built-in color spaces.

Conversion graph (arrows point at the base space, XYZ D65 is the hub):

    hsl → srgb → srgb-linear → xyz-d65
    oklch → oklab → srgb-linear
    display-p3 → xyz-d65
"""

from __future__ import annotations

from tincture.gamut.mapping import clip_method, css_method
from tincture.schema import (
    ConversionEdge,
    CoordMeta,
    CustomFormat,
    FunctionalFormat,
    SpaceDescriptor,
)
from tincture.spaces import colorspace
from tincture.spaces.hex import parse_hex, serialize_hex
from tincture.spaces.registry import SpaceRegistry


_RGB_COORDS = (
    CoordMeta("r", range=(0.0, 1.0)),
    CoordMeta("g", range=(0.0, 1.0)),
    CoordMeta("b", range=(0.0, 1.0)),
)

_RGB_GRAMMAR = ("<number>[0,255] | <percentage>",) * 3


XYZ_D65 = SpaceDescriptor(
    id="xyz-d65",
    name="XYZ D65",
    coords=(CoordMeta("x"), CoordMeta("y"), CoordMeta("z")),
    aliases=("xyz",),
)

SRGB_LINEAR = SpaceDescriptor(
    id="srgb-linear",
    name="Linear sRGB",
    coords=_RGB_COORDS,
    edges=(
        ConversionEdge(
            "xyz-d65", colorspace.linear_srgb_to_xyz, colorspace.xyz_to_linear_srgb
        ),
    ),
    gamut_method="css",
)

SRGB = SpaceDescriptor(
    id="srgb",
    name="sRGB",
    coords=_RGB_COORDS,
    edges=(
        ConversionEdge("srgb-linear", colorspace.srgb_to_linear, colorspace.linear_to_srgb),
    ),
    formats={
        "color": FunctionalFormat(),
        "rgb": FunctionalFormat(name="rgb", coords=_RGB_GRAMMAR),
        "rgba": FunctionalFormat(name="rgba", coords=_RGB_GRAMMAR, commas=True, alpha=True),
        "hex": CustomFormat(
            serialize=serialize_hex, parse=parse_hex, prefix="#", to_gamut=True
        ),
    },
    gamut_method="css",
)

HSL = SpaceDescriptor(
    id="hsl",
    name="HSL",
    coords=(
        CoordMeta("h", type="angle"),
        CoordMeta("s", range=(0.0, 100.0)),
        CoordMeta("l", range=(0.0, 100.0)),
    ),
    edges=(ConversionEdge("srgb", colorspace.hsl_to_srgb, colorspace.srgb_to_hsl),),
    formats={
        "hsl": FunctionalFormat(
            name="hsl",
            coords=("<number> | <angle>", "<percentage> | <number>", "<percentage> | <number>"),
        ),
        "hsla": FunctionalFormat(
            name="hsla",
            coords=("<number> | <angle>", "<percentage> | <number>", "<percentage> | <number>"),
            commas=True,
            alpha=True,
        ),
    },
    css_id="--hsl",
)

DISPLAY_P3 = SpaceDescriptor(
    id="display-p3",
    name="Display P3",
    coords=_RGB_COORDS,
    edges=(
        ConversionEdge("xyz-d65", colorspace.display_p3_to_xyz, colorspace.xyz_to_display_p3),
    ),
    aliases=("p3",),
    gamut_method="css",
)

OKLAB = SpaceDescriptor(
    id="oklab",
    name="OKLab",
    coords=(
        CoordMeta("l", ref_range=(0.0, 1.0)),
        CoordMeta("a", ref_range=(-0.4, 0.4)),
        CoordMeta("b", ref_range=(-0.4, 0.4)),
    ),
    edges=(
        ConversionEdge(
            "srgb-linear", colorspace.oklab_to_linear_rgb, colorspace.linear_rgb_to_oklab
        ),
    ),
    formats={
        "oklab": FunctionalFormat(
            name="oklab",
            coords=("<percentage> | <number>", "<number> | <percentage>", "<number> | <percentage>"),
        ),
    },
)

OKLCH = SpaceDescriptor(
    id="oklch",
    name="OKLCh",
    coords=(
        CoordMeta("l", ref_range=(0.0, 1.0)),
        CoordMeta("c", ref_range=(0.0, 0.4)),
        CoordMeta("h", type="angle"),
    ),
    edges=(ConversionEdge("oklab", colorspace.oklch_to_oklab, colorspace.oklab_to_oklch),),
    formats={
        "oklch": FunctionalFormat(
            name="oklch",
            coords=("<percentage> | <number>", "<number> | <percentage>", "<number> | <angle>"),
        ),
    },
)

BUILTIN_SPACES = (XYZ_D65, SRGB_LINEAR, SRGB, HSL, DISPLAY_P3, OKLAB, OKLCH)


def register_builtin_spaces(registry: SpaceRegistry) -> SpaceRegistry:
    """Register the built-in spaces and gamut methods, hub first."""
    for space in BUILTIN_SPACES:
        registry.register(space)
    registry.register_gamut_method("clip", clip_method)
    registry.register_gamut_method("css", css_method)
    return registry
