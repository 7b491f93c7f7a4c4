# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""
Space registry and converter.

The registry maps space ids and aliases to descriptors, owns the format
lookup across spaces, and walks the conversion graph.

Lifecycle:
    1. Registration phase: register() spaces and gamut methods. Not
       reentrant, not thread-safe.
    2. seal(): the registry becomes read-only.
    3. Operation phase: lookups and conversions, safe to call from any
       number of independent call sites.

Path selection is deterministic:
    1. A direct edge from source to target.
    2. A direct edge from target to source, applied in reverse.
    3. Base edges up from both ends, joined at their nearest common
       ancestor. Every base chain ends at the hub, so the hub is the
       common ancestor of last resort.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterator, Optional, Union

import numpy as np

from tincture.errors import (
    DuplicateSpaceError,
    InvalidColorInputError,
    NoConversionPathError,
    RegistrySealedError,
    UnknownSpaceError,
)
from tincture.schema import (
    ColorValue,
    CustomFormat,
    Format,
    FunctionalFormat,
    SpaceDescriptor,
    Transform,
)

logger = logging.getLogger(__name__)


SpaceRef = Union[str, SpaceDescriptor]
GamutMethod = Callable[..., ColorValue]


@dataclass(frozen=True, slots=True)
class ConversionStep:
    """One hop of a conversion path."""
    source: str
    target: str
    transform: Transform


class SpaceRegistry:
    """Process-wide mapping of space ids to descriptors."""

    def __init__(self) -> None:
        self._spaces: dict[str, SpaceDescriptor] = {}
        self._names: dict[str, str] = {}
        self._gamut_methods: dict[str, GamutMethod] = {}
        self._paths: dict[tuple[str, str], tuple[ConversionStep, ...]] = {}
        self._hub: Optional[str] = None
        self._sealed = False

    # -------------------------------------------------------------------------
    # Registration phase
    # -------------------------------------------------------------------------

    def _check_writable(self) -> None:
        if self._sealed:
            raise RegistrySealedError("Registry is sealed; register before sealing")

    def register(self, space: SpaceDescriptor) -> SpaceDescriptor:
        """
        Add a space to the registry.

        Edge targets must already be registered, which keeps base chains
        acyclic. The first space without edges becomes the hub.

        Raises:
            DuplicateSpaceError: If the id or any alias is taken.
            UnknownSpaceError: If an edge targets an unregistered space.
            NoConversionPathError: If the space has no edges but a hub
                already exists.
            RegistrySealedError: If the registry is sealed.
        """
        self._check_writable()

        for name in space.names:
            existing = self._names.get(name.lower())
            if existing is not None:
                raise DuplicateSpaceError(space.id, name, existing)

        for edge in space.edges:
            if edge.target.lower() not in self._names:
                raise UnknownSpaceError(edge.target)

        if not space.edges:
            if self._hub is not None:
                raise NoConversionPathError(
                    space.id, self._hub, "only the hub space may have no edges"
                )
            self._hub = space.id

        self._spaces[space.id] = space
        for name in space.names:
            self._names[name.lower()] = space.id
        self._paths.clear()

        logger.debug("Registered space %s (base: %s)", space.id, space.base)
        return space

    def register_gamut_method(self, name: str, method: GamutMethod) -> None:
        """
        Register a gamut-mapping strategy.

        ``method(value, *, registry)`` receives a value in the target gamut
        space and returns a value in the same space.
        """
        self._check_writable()
        self._gamut_methods[name] = method
        logger.debug("Registered gamut method %s", name)

    def seal(self) -> None:
        """End the registration phase. Further registration raises."""
        self._sealed = True

    @property
    def sealed(self) -> bool:
        return self._sealed

    # -------------------------------------------------------------------------
    # Lookups
    # -------------------------------------------------------------------------

    @property
    def hub(self) -> Optional[SpaceDescriptor]:
        """Canonical space every base chain leads to."""
        return self._spaces[self._hub] if self._hub is not None else None

    def lookup(self, space: SpaceRef) -> SpaceDescriptor:
        """
        Get a space by id, css id or alias (case-insensitive).

        A descriptor is returned as-is if it is the registered one.

        Raises:
            UnknownSpaceError: If nothing matches.
        """
        if isinstance(space, SpaceDescriptor):
            if self._spaces.get(space.id) is space:
                return space
            raise UnknownSpaceError(space.id)
        if not isinstance(space, str):
            raise UnknownSpaceError(space)
        space_id = self._names.get(space.lower())
        if space_id is None:
            raise UnknownSpaceError(space)
        return self._spaces[space_id]

    def __contains__(self, space: object) -> bool:
        if isinstance(space, SpaceDescriptor):
            return self._spaces.get(space.id) is space
        return isinstance(space, str) and space.lower() in self._names

    def __iter__(self) -> Iterator[SpaceDescriptor]:
        return iter(self._spaces.values())

    def __len__(self) -> int:
        return len(self._spaces)

    def find_format(self, format_id: str) -> Optional[Format]:
        """First format called ``format_id`` in registration order, or None."""
        for space in self._spaces.values():
            fmt = space.formats.get(format_id)
            if fmt is not None:
                return fmt
        return None

    def find_function(self, name: str) -> Optional[tuple[SpaceDescriptor, FunctionalFormat]]:
        """
        Find the space and functional format that own a function name.

        The generic "color" wrapper is excluded: its space comes from its
        first argument.
        """
        wanted = name.lower()
        if wanted == "color":
            return None
        for space in self._spaces.values():
            for fmt in space.formats.values():
                if isinstance(fmt, FunctionalFormat) and wanted in fmt.names:
                    return space, fmt
        return None

    def custom_formats(self) -> list[tuple[SpaceDescriptor, CustomFormat]]:
        """Custom formats that can parse, longest prefix first."""
        found = [
            (space, fmt)
            for space in self._spaces.values()
            for fmt in space.formats.values()
            if isinstance(fmt, CustomFormat) and fmt.parse is not None
        ]
        # sorted() is stable: equal prefixes keep registration order
        return sorted(found, key=lambda pair: len(pair[1].prefix), reverse=True)

    def gamut_method(self, name: str) -> GamutMethod:
        """
        Get a gamut-mapping strategy by name.

        Raises:
            KeyError: If no strategy has that name.
        """
        try:
            return self._gamut_methods[name]
        except KeyError:
            raise KeyError(f"Unknown gamut mapping method {name!r}") from None

    # -------------------------------------------------------------------------
    # Conversion
    # -------------------------------------------------------------------------

    def _base_chain(self, space: SpaceDescriptor) -> list[SpaceDescriptor]:
        """Spaces from ``space`` up to the end of its base chain."""
        chain = [space]
        current = space
        # Bounded walk: a chain can never be longer than the registry
        for _ in range(len(self._spaces)):
            if current.base is None:
                return chain
            current = self.lookup(current.base)
            chain.append(current)
        raise NoConversionPathError(space.id, None, "base chain does not terminate")

    def get_path(self, source: SpaceRef, target: SpaceRef) -> tuple[ConversionStep, ...]:
        """
        Resolve the conversion path between two spaces.

        Raises:
            NoConversionPathError: If either space is unregistered or the
                spaces are not connected.
        """
        try:
            src = self.lookup(source)
            dst = self.lookup(target)
        except UnknownSpaceError as e:
            raise NoConversionPathError(
                getattr(source, "id", source), getattr(target, "id", target),
                f"unknown space {e.space_id!r}",
            ) from e

        key = (src.id, dst.id)
        cached = self._paths.get(key)
        if cached is None:
            cached = self._resolve_path(src, dst)
            self._paths[key] = cached
            logger.debug(
                "Conversion path %s: %s",
                key, " -> ".join([src.id] + [step.target for step in cached]),
            )
        return cached

    def _resolve_path(
        self, src: SpaceDescriptor, dst: SpaceDescriptor
    ) -> tuple[ConversionStep, ...]:
        if src is dst:
            return ()

        for edge in src.edges:
            if edge.target == dst.id:
                return (ConversionStep(src.id, dst.id, edge.forward),)
        for edge in dst.edges:
            if edge.target == src.id:
                return (ConversionStep(src.id, dst.id, edge.inverse),)

        up = self._base_chain(src)
        down = self._base_chain(dst)
        up_ids = [space.id for space in up]

        for j, meeting in enumerate(down):
            if meeting.id in up_ids:
                i = up_ids.index(meeting.id)
                break
        else:
            raise NoConversionPathError(src.id, dst.id, "spaces are not connected")

        steps = [
            ConversionStep(space.id, space.base, space.edges[0].forward)
            for space in up[:i]
        ]
        steps.extend(
            ConversionStep(space.base, space.id, space.edges[0].inverse)
            for space in reversed(down[:j])
        )
        return tuple(steps)

    def convert(self, value: ColorValue, target: SpaceRef) -> ColorValue:
        """
        Convert a color to another space.

        Converting to the value's own space returns an equal copy without
        touching the coordinates. Alpha is passed through unchanged.

        Coordinates must stay within float range along the whole path.

        Raises:
            NoConversionPathError: If no path exists.
            InvalidColorInputError: If a coordinate overflows during the
                conversion. The message names both spaces.
        """
        try:
            dst = self.lookup(target)
        except UnknownSpaceError as e:
            raise NoConversionPathError(
                value.space.id, getattr(target, "id", target),
                f"unknown space {e.space_id!r}",
            ) from e

        if dst is value.space:
            return value.with_coords(value.coords)

        path = self.get_path(value.space, dst)
        coords = np.array(
            [np.nan if c is None else c for c in value.coords], dtype=np.float64
        )
        for step in path:
            with np.errstate(over="ignore"):
                coords = np.asarray(step.transform(coords), dtype=np.float64)
            if np.isinf(coords).any():
                raise InvalidColorInputError(
                    f"Coordinates {value.coords} overflow converting from "
                    f"{value.space.id!r} to {dst.id!r} (at {step.target!r})",
                    value,
                )
        return ColorValue(dst, tuple(coords[: dst.dimensions].tolist()), value.alpha)
