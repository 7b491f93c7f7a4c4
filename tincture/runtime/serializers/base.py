# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""Base types and number formatting for serializers."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Sequence, Union

import numpy as np


AlphaOption = Union[bool, str, Mapping[str, Any], "AlphaFormat", None]


@dataclass(frozen=True)
class AlphaFormat:
    """
    Alpha serialization request.

    Attributes:
        type: "<number>" or "<percentage>"
        include: True forces alpha out, False suppresses it, None leaves
            it to the format and the default rule (alpha < 1).
    """
    type: str = "<number>"
    include: Optional[bool] = None

    @classmethod
    def coerce(cls, option: AlphaOption) -> AlphaFormat:
        """Accept a bool (include), a string (type) or a mapping."""
        if option is None:
            return cls()
        if isinstance(option, AlphaFormat):
            return option
        if isinstance(option, bool):
            return cls(include=option)
        if isinstance(option, str):
            return cls(type=option)
        return cls(
            type=option.get("type") or "<number>",
            include=option.get("include"),
        )


@dataclass(frozen=True)
class SerializeOptions:
    """
    Options passed through serialize(), and to custom serialize hooks.

    Attributes:
        precision: Significant digits, None for raw values
        format: Requested format id
        in_gamut: Gamut-map first. A string names the strategy.
        coords: Per-coordinate type override (e.g. ["<percentage>", None, None])
        alpha: Alpha request as given by the caller
        extras: Format-specific options (e.g. ``collapse`` for hex)
    """
    precision: Optional[int] = 5
    format: str = "default"
    in_gamut: Union[bool, str] = True
    coords: Optional[Sequence[Optional[str]]] = None
    alpha: AlphaOption = None
    extras: Mapping[str, Any] = field(default_factory=dict)

    @property
    def alpha_format(self) -> AlphaFormat:
        return AlphaFormat.coerce(self.alpha)


def to_precision(n: float, precision: int) -> float:
    """
    Round to ``precision`` significant digits, half up.

    Zero and a precision of 0 return ``n`` unchanged.

    >>> to_precision(0.123456, 5)
    0.12346
    >>> to_precision(123456.7, 3)
    123000.0
    """
    if n == 0 or not precision:
        return n
    integer = math.trunc(n)
    digits = len(str(abs(integer))) if integer else 0
    exponent = precision - digits
    if exponent >= 0:
        scale = 10 ** exponent
        return math.floor(n * scale + 0.5) / scale
    scale = 10 ** -exponent
    return float(math.floor(n / scale + 0.5) * scale)


def format_number(n: float) -> str:
    """Shortest plain decimal text for a float: 1.0 -> "1", no exponent."""
    n = float(n) + 0.0  # -0.0 -> 0.0
    return np.format_float_positional(n, trim="-")


def serialize_number(
    n: Optional[float],
    *,
    precision: Optional[int] = None,
    unit: str = "",
) -> str:
    """Format a coordinate or alpha value. None becomes "none"."""
    if n is None:
        return "none"
    if precision is not None:
        n = to_precision(n, precision)
    return f"{format_number(n)}{unit}"
