# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""
Error taxonomy for Tincture.

Every error derives from ColorError and from the closest builtin exception,
so callers can catch either. All errors carry the identifiers needed to
diagnose them (space id, format id, offending text).
"""

from __future__ import annotations

from typing import Any, Optional


class ColorError(Exception):
    """Base class for all Tincture errors."""


class InvalidColorInputError(ColorError, ValueError):
    """Input could not be normalized into a ColorValue."""

    def __init__(self, message: str, value: Any = None) -> None:
        super().__init__(message)
        self.value = value


class UnknownSpaceError(ColorError, KeyError):
    """No registered space matches the given id or alias."""

    def __init__(self, space_id: Any) -> None:
        super().__init__(space_id)
        self.space_id = space_id

    def __str__(self) -> str:
        return f"Unknown color space: {self.space_id!r}"


class DuplicateSpaceError(ColorError, ValueError):
    """A space id or alias collides with one already registered."""

    def __init__(self, space_id: str, name: str, existing: str) -> None:
        super().__init__(
            f"Cannot register space {space_id!r}: name {name!r} "
            f"is already taken by {existing!r}"
        )
        self.space_id = space_id
        self.name = name
        self.existing = existing


class NoConversionPathError(ColorError, LookupError):
    """The conversion graph has no path between two spaces."""

    def __init__(self, source: str, target: Optional[str], reason: str = "") -> None:
        message = f"No conversion path from {source!r} to {target!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.source = source
        self.target = target


class UnsupportedOperationError(ColorError, TypeError):
    """A format does not support the requested direction (parse/serialize)."""

    def __init__(self, message: str, format_id: Optional[str] = None) -> None:
        super().__init__(message)
        self.format_id = format_id


class UnrecognizedFormatError(ColorError, ValueError):
    """Text did not match any registered format."""

    def __init__(self, text: str, reason: str = "") -> None:
        message = f"Cannot parse color {text!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.text = text


class RegistrySealedError(ColorError, RuntimeError):
    """The registry was sealed; no further registration is allowed."""
