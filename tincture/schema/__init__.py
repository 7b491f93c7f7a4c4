# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""
Schema definitions for colors, spaces and formats.

All types in this module are immutable (frozen dataclasses).
Operations never modify a value; they return a new one.
"""

from tincture.schema.color_value import Coord, ColorValue, normalize_coord
from tincture.schema.format import (
    DEFAULT_COORD_GRAMMAR,
    DEFAULT_FORMAT,
    CoordType,
    CustomFormat,
    Format,
    FormatKind,
    FunctionalFormat,
    parse_grammar,
)
from tincture.schema.space import (
    ConversionEdge,
    CoordMeta,
    SpaceDescriptor,
    Transform,
)

__all__ = [
    # Color values
    "ColorValue",
    "Coord",
    "normalize_coord",
    # Spaces
    "SpaceDescriptor",
    "CoordMeta",
    "ConversionEdge",
    "Transform",
    # Formats (closed variant: functional | custom)
    "Format",
    "FormatKind",
    "FunctionalFormat",
    "CustomFormat",
    "CoordType",
    "DEFAULT_FORMAT",
    "DEFAULT_COORD_GRAMMAR",
    "parse_grammar",
]
