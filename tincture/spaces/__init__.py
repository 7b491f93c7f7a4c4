# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""
Color spaces: registry, conversion graph and built-in catalog.

The default registry is created and populated at import time. Register
additional spaces before converting or serializing with them, then call
``default_registry.seal()`` to end the registration phase.
"""

from __future__ import annotations

from typing import Optional

from tincture.spaces.catalog import BUILTIN_SPACES, register_builtin_spaces
from tincture.spaces.registry import ConversionStep, SpaceRegistry

default_registry = register_builtin_spaces(SpaceRegistry())


def resolve_registry(custom: Optional[SpaceRegistry] = None) -> SpaceRegistry:
    """Return ``custom`` if given, else the default registry."""
    return custom if custom is not None else default_registry


__all__ = [
    "default_registry",
    "resolve_registry",
    "SpaceRegistry",
    "ConversionStep",
    "BUILTIN_SPACES",
    "register_builtin_spaces",
]
