# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""
Tincture -- Color conversion, gamut mapping and CSS color serialization.

Converts colors across a graph of color spaces, maps them into gamut, and
reads and writes CSS-style text.

Quick start::

    import tincture

    red = tincture.parse("color(srgb 1 0 0)")
    tincture.serialize(red)                     # 'color(srgb 1 0 0)'
    tincture.serialize(red, format="hex")       # '#f00'
    tincture.serialize(tincture.to(red, "oklch"), precision=3)
    # 'oklch(62.8% 0.258 29.2)'

Register custom spaces on ``tincture.registry`` at startup, then call
``tincture.seal()``.
"""

from __future__ import annotations

import logging

__version__ = "1.0.0"

# Spaces first: the catalog pulls in the gamut strategies
from tincture.spaces import default_registry as registry
from tincture.api import (
    color,
    delta_e_ok,
    distance,
    equals,
    get_coord,
    in_gamut,
    set_coord,
    to,
    to_gamut,
)
from tincture.config import Defaults, configure, get_defaults
from tincture.errors import (
    ColorError,
    DuplicateSpaceError,
    InvalidColorInputError,
    NoConversionPathError,
    RegistrySealedError,
    UnknownSpaceError,
    UnrecognizedFormatError,
    UnsupportedOperationError,
)
from tincture.gamut import ToGamutOptions
from tincture.runtime import get_color, parse, serialize
from tincture.schema import (
    ColorValue,
    ConversionEdge,
    CoordMeta,
    CustomFormat,
    FunctionalFormat,
    SpaceDescriptor,
)
from tincture.spaces import SpaceRegistry

logging.getLogger(__name__).addHandler(logging.NullHandler())


def seal() -> None:
    """End the registration phase of the default registry."""
    registry.seal()


__all__ = [
    # Core API
    "color",
    "to",
    "in_gamut",
    "to_gamut",
    "serialize",
    "parse",
    "get_color",
    # Extras
    "equals",
    "distance",
    "delta_e_ok",
    "get_coord",
    "set_coord",
    # Registry
    "registry",
    "seal",
    "SpaceRegistry",
    # Types
    "ColorValue",
    "SpaceDescriptor",
    "CoordMeta",
    "ConversionEdge",
    "FunctionalFormat",
    "CustomFormat",
    "ToGamutOptions",
    # Configuration
    "Defaults",
    "configure",
    "get_defaults",
    # Errors
    "ColorError",
    "InvalidColorInputError",
    "UnknownSpaceError",
    "DuplicateSpaceError",
    "NoConversionPathError",
    "UnsupportedOperationError",
    "UnrecognizedFormatError",
    "RegistrySealedError",
    # Version
    "__version__",
]
