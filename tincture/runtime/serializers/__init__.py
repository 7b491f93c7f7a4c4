# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""
Serializers for color values.

serialize() resolves a format, converts and gamut-maps as needed, then
renders functional notation or hands off to a custom format hook.
"""

from tincture.runtime.serializers.base import (
    AlphaFormat,
    SerializeOptions,
    format_number,
    serialize_number,
    to_precision,
)
from tincture.runtime.serializers.functional import (
    serialize_coords,
    serialize_functional,
)
from tincture.runtime.serializers.serialize import resolve_format, serialize

__all__ = [
    "serialize",
    "resolve_format",
    "SerializeOptions",
    "AlphaFormat",
    "serialize_coords",
    "serialize_functional",
    "serialize_number",
    "format_number",
    "to_precision",
]
