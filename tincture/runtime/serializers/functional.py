# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""
Functional notation: ``name(c1 c2 c3 / alpha)`` and ``name(c1, c2, c3, alpha)``.

Coordinates are stored in the space's own units. Percentages are relative
to the coordinate's reference range (0-100%, or -100%-100% for ranges that
extend below zero). Ranged numbers such as rgb()'s 0-255 map linearly onto
the reference range.
"""

from __future__ import annotations

from typing import Optional, Sequence, Union

from tincture.schema import Coord, FunctionalFormat, SpaceDescriptor
from tincture.runtime.serializers.base import SerializeOptions, serialize_number
from tincture.runtime.units import map_range, percent_range


def serialize_coords(
    fmt: FunctionalFormat,
    space: SpaceDescriptor,
    coords: Sequence[Coord],
    precision: Optional[int],
    types: Union[str, Sequence[Optional[str]], None] = None,
) -> list[str]:
    """
    Render each coordinate with its format grammar.

    Args:
        fmt: Functional format providing the per-coordinate grammar
        space: Space the coordinates belong to
        coords: Coordinates to render
        precision: Significant digits, None for raw values
        types: Requested type per coordinate (or one type for all).
            A type the grammar does not allow falls back to the default.
    """
    if isinstance(types, str):
        types = [types] * len(coords)

    args = []
    for i, (meta, c) in enumerate(zip(space.coords, coords)):
        grammar = fmt.coord_grammar(i)
        chosen = grammar[0]
        requested = types[i] if types is not None and i < len(types) else None
        if requested:
            chosen = next(
                (t for t in grammar if requested in (t.type, str(t))), chosen
            )

        if c is None:
            args.append("none")
            continue

        unit = ""
        value = c
        if chosen.type == "<percentage>":
            value = map_range(c, meta.ref_range, percent_range(meta.ref_range))
            unit = "%"
        elif chosen.type == "<angle>":
            unit = "deg"
        elif chosen.range is not None:
            value = map_range(c, meta.ref_range, chosen.range)
        args.append(serialize_number(value, precision=precision, unit=unit))
    return args


def serialize_functional(
    fmt: FunctionalFormat,
    space: SpaceDescriptor,
    coords: Sequence[Coord],
    alpha: Coord,
    options: SerializeOptions,
) -> str:
    """Render a color in functional notation."""
    precision = options.precision
    name = fmt.name or "color"

    args = serialize_coords(fmt, space, coords, precision, options.coords)
    if name == "color":
        # color() takes the space id as its first argument
        args.insert(0, fmt.css_id or space.display_id)

    alpha_format = options.alpha_format
    include = (
        alpha_format.include is True
        or fmt.alpha is True
        or (
            alpha_format.include is not False
            and fmt.alpha is not False
            and alpha is not None
            and alpha < 1
        )
    )

    str_alpha = ""
    if include:
        if precision is not None:
            unit = ""
            if alpha_format.type == "<percentage>" and alpha is not None:
                unit = "%"
                alpha = alpha * 100
            text = serialize_number(alpha, precision=precision, unit=unit)
        else:
            text = serialize_number(alpha)
        str_alpha = f"{',' if fmt.commas else ' /'} {text}"

    separator = ", " if fmt.commas else " "
    return f"{name}({separator.join(args)}{str_alpha})"
