# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""
Text runtime for Tincture.

Input normalization, parsing and serialization:

1. get_color -- Normalize any supported input into a ColorValue
2. parse -- Text to ColorValue
3. serialize -- ColorValue to text

Parsing is the inverse of serialization: parse(serialize(c)) recovers c
within the precision used.
"""

from tincture.runtime.normalize import get_color
from tincture.runtime.parse import parse
from tincture.runtime.serializers import (
    AlphaFormat,
    SerializeOptions,
    resolve_format,
    serialize,
)

__all__ = [
    "get_color",
    "parse",
    "serialize",
    "resolve_format",
    "SerializeOptions",
    "AlphaFormat",
]
