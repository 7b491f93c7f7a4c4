# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""Input normalization: everything the public API accepts becomes a ColorValue."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from tincture.errors import InvalidColorInputError, UnknownSpaceError
from tincture.runtime.parse import parse
from tincture.schema import ColorValue


def get_color(color: Any, *, registry=None) -> ColorValue:
    """
    Normalize a color input.

    Accepts:
        - ColorValue (returned as-is)
        - str (parsed)
        - Mapping with ``space`` or ``spaceId`` (id, alias or descriptor),
          ``coords`` and optional ``alpha``

    Raises:
        InvalidColorInputError: If the input has the wrong shape or names
            an unknown space.
        UnrecognizedFormatError: If a string cannot be parsed.
    """
    if isinstance(color, ColorValue):
        return color
    if isinstance(color, str):
        return parse(color, registry=registry)
    if isinstance(color, Mapping):
        try:
            return ColorValue.from_dict(color, registry=registry)
        except UnknownSpaceError as e:
            raise InvalidColorInputError(str(e), color) from e
    raise InvalidColorInputError(
        f"Cannot interpret {type(color).__name__} as a color", color
    )
