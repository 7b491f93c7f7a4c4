# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""
Hex notation for sRGB: ``#rgb``, ``#rgba``, ``#rrggbb``, ``#rrggbbaa``.

Registered as a custom format of the srgb space.
"""

from __future__ import annotations

import re
from typing import Optional, Sequence

_HEX_RE = re.compile(r"^#([0-9a-f]{3,4}|[0-9a-f]{6}|[0-9a-f]{8})$", re.IGNORECASE)


def parse_hex(text: str) -> Optional[tuple[tuple[float, ...], float]]:
    """
    Parse a hex color string.

    Returns:
        ``((r, g, b), alpha)`` with channels in [0, 1], or None if ``text``
        is not hex notation.
    """
    m = _HEX_RE.match(text.strip())
    if not m:
        return None
    digits = m.group(1)
    if len(digits) <= 4:
        digits = "".join(ch * 2 for ch in digits)
    values = [int(digits[i:i + 2], 16) / 255 for i in range(0, len(digits), 2)]
    alpha = values[3] if len(values) == 4 else 1.0
    return tuple(values[:3]), alpha


def serialize_hex(coords: Sequence[Optional[float]], alpha: Optional[float], options) -> str:
    """
    Format sRGB channels as hex.

    "none" channels are written as 0. Alpha is written when below 1 unless
    the caller's alpha option says otherwise. ``collapse`` (default True)
    shortens ``#ff0000`` to ``#f00`` when possible.
    """
    collapse = options.extras.get("collapse", True)
    include = options.alpha_format.include
    if include is None:
        include = alpha is not None and alpha < 1

    channels = [0.0 if c is None else min(max(c, 0.0), 1.0) for c in coords]
    if include:
        channels.append(1.0 if alpha is None else alpha)

    digits = "".join(f"{int(c * 255 + 0.5):02x}" for c in channels)
    if collapse and all(digits[i] == digits[i + 1] for i in range(0, len(digits), 2)):
        digits = digits[::2]
    return f"#{digits}"
