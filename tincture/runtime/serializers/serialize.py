# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""
Color serializer.

Turns any supported color input into text, in the space's own notation,
a registered format, or generic ``color()``.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence, Union

from tincture.config import get_defaults
from tincture.errors import UnsupportedOperationError
from tincture.gamut import check_in_gamut, to_gamut
from tincture.runtime.normalize import get_color
from tincture.runtime.serializers.base import AlphaOption, SerializeOptions
from tincture.runtime.serializers.functional import serialize_functional
from tincture.schema import DEFAULT_FORMAT, Format, FormatKind, SpaceDescriptor

_UNSET: Any = object()


def resolve_format(space: SpaceDescriptor, format_id: str, registry) -> Format:
    """
    Find the format to serialize with. Never fails.

    Order: the space's own catalog, any registered space's catalog, the
    space's default format, then the built-in color() fallback.
    """
    return (
        space.get_format(format_id)
        or registry.find_format(format_id)
        or space.get_format("default")
        or DEFAULT_FORMAT
    )


def serialize(
    color: Any,
    *,
    precision: Optional[int] = _UNSET,
    format: str = "default",
    in_gamut: Union[bool, str] = True,
    coords: Union[str, Sequence[Optional[str]], None] = None,
    alpha: AlphaOption = None,
    registry=None,
    **extras: Any,
) -> str:
    """Serialize a color to text.

    Args:
        color: Any input accepted by get_color() (ColorValue, string, dict).
        precision: Significant digits (default: Defaults.precision).
            None writes raw, unrounded values.
        format: Format id. Unknown ids fall back to the space's default
            format, then to color().
        in_gamut: Gamut-map out-of-gamut colors first. A string names the
            strategy ("clip", "css").
        coords: Coordinate type override, e.g. ``["<percentage>", None, None]``.
        alpha: True/False forces alpha in or out, a string sets its type
            ("<percentage>"), a mapping sets both (``{"type", "include"}``).
        registry: Registry to use (default: the process-wide one).
        **extras: Format-specific options passed to custom hooks
            (e.g. ``collapse=False`` for hex).

    Returns:
        Serialized color string.

    Raises:
        UnsupportedOperationError: If the format can only parse.

    Example::

        >>> serialize({"space": "srgb", "coords": [1, 0, 0]})
        'color(srgb 1 0 0)'
        >>> serialize({"space": "srgb", "coords": [1, 0, 0]}, alpha=True)
        'color(srgb 1 0 0 / 1)'
    """
    from tincture.spaces import resolve_registry

    registry = resolve_registry(registry)
    if precision is _UNSET:
        precision = get_defaults().precision
    options = SerializeOptions(
        precision=precision,
        format=format,
        in_gamut=in_gamut,
        coords=coords,
        alpha=alpha,
        extras=extras,
    )

    value = get_color(color, registry=registry)

    fmt = resolve_format(value.space, format, registry)
    if fmt.space is not None and fmt.space != value.space.id:
        # Format belongs to another space, convert first
        value = registry.convert(value, fmt.space)

    # Gamut check must run on the converted value
    working = value.coords
    gamut_flag = in_gamut or fmt.to_gamut
    if gamut_flag and not check_in_gamut(value):
        method = None if gamut_flag is True else gamut_flag
        working = to_gamut(value, method, registry=registry).coords

    if fmt.kind is FormatKind.CUSTOM:
        if fmt.serialize is None:
            raise UnsupportedOperationError(
                f"Format {fmt.id!r} can only be used to parse colors, "
                f"not for serialization",
                fmt.id,
            )
        return fmt.serialize(working, value.alpha, options)

    return serialize_functional(fmt, value.space, working, value.alpha, options)
