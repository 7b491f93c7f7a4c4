# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""Shared fixtures: a small isolated registry with linear transforms."""

import numpy as np
import pytest

from tincture.schema import ConversionEdge, CoordMeta, SpaceDescriptor
from tincture.spaces import SpaceRegistry


def scale(factor):
    return lambda v: np.asarray(v, dtype=np.float64) * factor


def offset(delta):
    return lambda v: np.asarray(v, dtype=np.float64) + delta


def xyz_coords(bounded=False):
    return tuple(
        CoordMeta(name, range=(0.0, 1.0) if bounded else None) for name in "xyz"
    )


@pytest.fixture
def toy_registry():
    """
    lin (hub) <- double        (double = 2 * lin)
    lin       <- shift         (shift = lin + 1, bounded 0-1)
    shift     <- shift-double  (shift-double = 2 * shift)
    """
    registry = SpaceRegistry()
    registry.register(SpaceDescriptor(id="lin", coords=xyz_coords()))
    registry.register(SpaceDescriptor(
        id="double",
        coords=xyz_coords(),
        edges=(ConversionEdge("lin", scale(0.5), scale(2.0)),),
        aliases=("Twice",),
    ))
    registry.register(SpaceDescriptor(
        id="shift",
        coords=xyz_coords(bounded=True),
        edges=(ConversionEdge("lin", offset(-1.0), offset(1.0)),),
    ))
    registry.register(SpaceDescriptor(
        id="shift-double",
        coords=xyz_coords(),
        edges=(ConversionEdge("shift", scale(0.5), scale(2.0)),),
    ))
    return registry
