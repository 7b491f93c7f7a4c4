# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""
Format descriptors.

A format is a named textual syntax for the values of one space. Formats are
a closed tagged variant:

- FunctionalFormat: CSS-style ``name(a b c / alpha)`` notation, rendered from
  a per-coordinate grammar.
- CustomFormat: arbitrary text handled by parse/serialize hooks
  (e.g. ``#ff0000``).

Coordinate grammar strings follow CSS value syntax, e.g.
``"<number>[0,255] | <percentage>"``. The first type listed is the one used
for output unless the caller asks for another allowed type.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, ClassVar, Optional, Union


class FormatKind(Enum):
    """Format variant tag."""

    FUNCTIONAL = "functional"
    CUSTOM = "custom"


COORD_TYPES = ("<number>", "<percentage>", "<angle>")

_COORD_TYPE_RE = re.compile(
    r"^\s*(<number>|<percentage>|<angle>)"
    r"(?:\[\s*([-+\d.eE]+)\s*,\s*([-+\d.eE]+)\s*\])?\s*$"
)


@dataclass(frozen=True, slots=True)
class CoordType:
    """
    One allowed type for a serialized coordinate.

    Attributes:
        type: "<number>", "<percentage>" or "<angle>"
        range: Output range for ranged numbers (e.g. 0-255 in rgb()).
            The coordinate's reference range is mapped onto it.
    """
    type: str
    range: Optional[tuple[float, float]] = None

    def __post_init__(self) -> None:
        if self.type not in COORD_TYPES:
            raise ValueError(f"Unknown coordinate type {self.type!r}")

    @classmethod
    def parse(cls, text: str) -> CoordType:
        """Parse a single grammar term like ``<number>[0,255]``."""
        m = _COORD_TYPE_RE.match(text)
        if not m:
            raise ValueError(f"Invalid coordinate grammar {text!r}")
        if m.group(2) is None:
            return cls(m.group(1))
        return cls(m.group(1), (float(m.group(2)), float(m.group(3))))

    def __str__(self) -> str:
        if self.range is None:
            return self.type
        lo, hi = self.range
        return f"{self.type}[{lo:g},{hi:g}]"


CoordGrammar = tuple[CoordType, ...]

# Grammar used when a format does not declare one
DEFAULT_COORD_GRAMMAR: CoordGrammar = (CoordType("<number>"), CoordType("<percentage>"))


def parse_grammar(grammar: Union[str, CoordGrammar]) -> CoordGrammar:
    """Turn ``"<number> | <percentage>"`` into a tuple of CoordType."""
    if isinstance(grammar, str):
        return tuple(CoordType.parse(part) for part in grammar.split("|"))
    return tuple(grammar)


@dataclass(frozen=True)
class FunctionalFormat:
    """
    CSS functional notation, e.g. ``oklch(62.8% 0.25768 29.234 / 0.5)``.

    Attributes:
        name: Function name. "color" is the generic wrapper that takes the
            space id as its first argument.
        coords: Per-coordinate grammar. Empty means ``<number> | <percentage>``
            for every coordinate.
        commas: Legacy comma-separated form (``rgba(255, 0, 0, 0.5)``).
        alpha: True always serializes alpha, False never does, None leaves
            it to the default rule (alpha < 1).
        to_gamut: Gamut-map before serializing even if the caller does not
            ask for it. A string names the strategy.
        aliases: Other function names accepted when parsing.
        css_id: Overrides the space id written inside color().
        id: Catalog id, bound when the owning space is constructed.
        space: Owning space id, bound when the owning space is constructed.
    """
    name: str = "color"
    coords: tuple[Any, ...] = ()
    commas: bool = False
    alpha: Optional[bool] = None
    to_gamut: Union[bool, str] = False
    aliases: tuple[str, ...] = ()
    css_id: Optional[str] = None
    id: Optional[str] = None
    space: Optional[str] = None

    kind: ClassVar[FormatKind] = FormatKind.FUNCTIONAL

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "coords", tuple(parse_grammar(c) for c in self.coords)
        )

    @property
    def names(self) -> tuple[str, ...]:
        """Function names recognized by the parser."""
        return (self.name, *self.aliases)

    def coord_grammar(self, index: int) -> CoordGrammar:
        """Allowed types for coordinate ``index``."""
        if index < len(self.coords):
            return self.coords[index]
        return DEFAULT_COORD_GRAMMAR


SerializeHook = Callable[..., str]
ParseHook = Callable[[str], Optional[tuple]]


@dataclass(frozen=True)
class CustomFormat:
    """
    Format handled entirely by hooks.

    Attributes:
        serialize: ``(coords, alpha, options) -> str``. None for parse-only
            formats.
        parse: ``(text) -> (coords, alpha)`` or None when the text is not
            this format. None for serialize-only formats.
        prefix: Literal prefix of the syntax (e.g. "#"). Parse hooks are
            tried longest prefix first.
        to_gamut: Gamut-map before serializing. A string names the strategy.
        id: Catalog id, bound when the owning space is constructed.
        space: Owning space id, bound when the owning space is constructed.
    """
    serialize: Optional[SerializeHook] = None
    parse: Optional[ParseHook] = None
    prefix: str = ""
    to_gamut: Union[bool, str] = False
    id: Optional[str] = None
    space: Optional[str] = None

    kind: ClassVar[FormatKind] = FormatKind.CUSTOM


Format = Union[FunctionalFormat, CustomFormat]

# Last-resort format: color(<space> c1 c2 c3)
DEFAULT_FORMAT = FunctionalFormat(name="color", id="default")
