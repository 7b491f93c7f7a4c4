# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""
Color parser.

Recognition order:
    1. Custom format hooks, longest prefix first (e.g. "#" for hex).
    2. Functional notation: ``name(a b c [/ alpha])``.
    3. Legacy comma notation: ``name(a, b, c[, alpha])``.

``color(<space> a b c)`` resolves the space by css id, id or alias.
Any other function name is resolved through the registry's functional
formats.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from tincture.errors import (
    InvalidColorInputError,
    UnknownSpaceError,
    UnrecognizedFormatError,
)
from tincture.runtime.units import ANGLE_UNITS, map_range, percent_range
from tincture.schema import (
    DEFAULT_FORMAT,
    ColorValue,
    Coord,
    CoordMeta,
    CoordType,
    FunctionalFormat,
)

_FUNCTION_RE = re.compile(r"^([a-z][a-z0-9-]*)\((.*)\)$", re.IGNORECASE | re.DOTALL)

_TOKEN_RE = re.compile(
    r"^([-+]?(?:\d+\.?\d*|\.\d+)(?:e[-+]?\d+)?)(%|deg|rad|grad|turn)?$",
    re.IGNORECASE,
)


@dataclass(frozen=True, slots=True)
class Token:
    """A parsed argument. ``type`` is a grammar type or "none"."""
    value: Optional[float]
    type: str


def tokenize(arg: str, text: str) -> Token:
    """Classify one argument as number, percentage, angle or none."""
    if arg.lower() == "none":
        return Token(None, "none")
    m = _TOKEN_RE.match(arg)
    if not m:
        raise UnrecognizedFormatError(text, f"invalid argument {arg!r}")
    number = float(m.group(1))
    unit = (m.group(2) or "").lower()
    if unit == "%":
        return Token(number, "<percentage>")
    if unit:
        return Token(number * ANGLE_UNITS[unit], "<angle>")
    return Token(number, "<number>")


def _split_args(body: str, text: str) -> tuple[list[str], Optional[str], bool]:
    """Split the argument list. Returns (coords, alpha, legacy)."""
    if "," in body:
        if "/" in body:
            raise UnrecognizedFormatError(text, "cannot mix commas and '/'")
        return [part.strip() for part in body.split(",")], None, True

    main, slash, alpha = body.partition("/")
    if not slash:
        return main.split(), None, False
    alpha_parts = alpha.split()
    if len(alpha_parts) != 1:
        raise UnrecognizedFormatError(text, "expected a single alpha value after '/'")
    return main.split(), alpha_parts[0], False


def _coord_value(token: Token, meta: CoordMeta, grammar: tuple[CoordType, ...], text: str) -> Coord:
    if token.type == "none":
        return None
    allowed = next((t for t in grammar if t.type == token.type), None)
    if allowed is None:
        raise UnrecognizedFormatError(
            text,
            f"{token.type} is not allowed for coordinate {meta.name!r} "
            f"(expected {' | '.join(str(t) for t in grammar)})",
        )
    if token.type == "<percentage>":
        return map_range(token.value, percent_range(meta.ref_range), meta.ref_range)
    if token.type == "<number>" and allowed.range is not None:
        return map_range(token.value, allowed.range, meta.ref_range)
    return token.value


def _alpha_value(token: Token, text: str) -> Coord:
    if token.type == "none":
        return None
    if token.type == "<angle>":
        raise UnrecognizedFormatError(text, "alpha cannot be an angle")
    alpha = token.value / 100 if token.type == "<percentage>" else token.value
    return min(max(alpha, 0.0), 1.0)


def _build(space, coords, alpha, text: str) -> ColorValue:
    try:
        return ColorValue(space, coords, alpha)
    except InvalidColorInputError as e:
        raise UnrecognizedFormatError(text, str(e)) from e


def parse(text: str, *, registry=None) -> ColorValue:
    """
    Parse a color string.

    Args:
        text: Color text, e.g. ``"color(srgb 1 0 0)"``, ``"oklch(70% 0.1 200)"``,
            ``"rgba(255, 0, 0, 0.5)"`` or ``"#f00"``.
        registry: Registry to use (default: the process-wide one).

    Returns:
        ColorValue in the space the text names.

    Raises:
        UnrecognizedFormatError: If no format matches. The error's ``text``
            attribute holds the input.
    """
    from tincture.spaces import resolve_registry

    registry = resolve_registry(registry)
    if not isinstance(text, str):
        raise UnrecognizedFormatError(repr(text), "expected a string")
    source = text.strip()
    lowered = source.lower()

    for space, fmt in registry.custom_formats():
        if fmt.prefix and not lowered.startswith(fmt.prefix.lower()):
            continue
        result = fmt.parse(source)
        if result is not None:
            coords, alpha = result
            return _build(space, tuple(coords), alpha, text)

    m = _FUNCTION_RE.match(source)
    if not m:
        raise UnrecognizedFormatError(text)

    name = m.group(1).lower()
    args, alpha_arg, legacy = _split_args(m.group(2), text)

    if name == "color":
        if not args:
            raise UnrecognizedFormatError(text, "color() needs a color space")
        space_name = args.pop(0)
        try:
            space = registry.lookup(space_name)
        except UnknownSpaceError as e:
            raise UnrecognizedFormatError(text, f"unknown color space {space_name!r}") from e
        fmt = space.formats.get("color")
        if not isinstance(fmt, FunctionalFormat):
            fmt = DEFAULT_FORMAT
    else:
        found = registry.find_function(name)
        if found is None:
            raise UnrecognizedFormatError(text, f"unknown function {name}()")
        space, fmt = found

    if legacy and alpha_arg is None and len(args) == space.dimensions + 1:
        alpha_arg = args.pop()
    if len(args) != space.dimensions:
        raise UnrecognizedFormatError(
            text, f"{space.id} expects {space.dimensions} coordinates, got {len(args)}"
        )

    coords = tuple(
        _coord_value(tokenize(arg, text), meta, fmt.coord_grammar(i), text)
        for i, (arg, meta) in enumerate(zip(args, space.coords))
    )
    alpha = 1.0 if alpha_arg is None else _alpha_value(tokenize(alpha_arg, text), text)
    return _build(space, coords, alpha, text)
