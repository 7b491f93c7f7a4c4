# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""Tests for the space registry: registration, lookups and path selection."""

import logging

import pytest

from tincture.errors import (
    DuplicateSpaceError,
    NoConversionPathError,
    RegistrySealedError,
    UnknownSpaceError,
)
from tincture.schema import (
    ColorValue,
    ConversionEdge,
    CustomFormat,
    FunctionalFormat,
    SpaceDescriptor,
)
from tincture.spaces import SpaceRegistry, default_registry, register_builtin_spaces

from conftest import offset, scale, xyz_coords


class TestRegistration:
    """Registration phase rules."""

    def test_first_space_without_edges_is_hub(self, toy_registry):
        assert toy_registry.hub.id == "lin"
        assert len(toy_registry) == 4

    def test_second_hub_rejected(self, toy_registry):
        with pytest.raises(NoConversionPathError):
            toy_registry.register(SpaceDescriptor(id="island", coords=xyz_coords()))

    def test_duplicate_id(self, toy_registry):
        with pytest.raises(DuplicateSpaceError) as exc:
            toy_registry.register(SpaceDescriptor(
                id="double", coords=xyz_coords(),
                edges=(ConversionEdge("lin", scale(1.0), scale(1.0)),),
            ))
        assert exc.value.space_id == "double"

    def test_alias_collision_is_case_insensitive(self, toy_registry):
        with pytest.raises(DuplicateSpaceError):
            toy_registry.register(SpaceDescriptor(
                id="other", coords=xyz_coords(), aliases=("TWICE",),
                edges=(ConversionEdge("lin", scale(1.0), scale(1.0)),),
            ))

    def test_failed_registration_leaves_registry_unchanged(self, toy_registry):
        with pytest.raises(DuplicateSpaceError):
            toy_registry.register(SpaceDescriptor(
                id="fresh", coords=xyz_coords(), aliases=("lin",),
                edges=(ConversionEdge("lin", scale(1.0), scale(1.0)),),
            ))
        assert "fresh" not in toy_registry
        assert len(toy_registry) == 4

    def test_edge_to_unknown_space(self, toy_registry):
        with pytest.raises(UnknownSpaceError):
            toy_registry.register(SpaceDescriptor(
                id="orphan", coords=xyz_coords(),
                edges=(ConversionEdge("missing", scale(1.0), scale(1.0)),),
            ))

    def test_sealed_registry_rejects_registration(self, toy_registry):
        toy_registry.seal()
        assert toy_registry.sealed
        with pytest.raises(RegistrySealedError):
            toy_registry.register(SpaceDescriptor(
                id="late", coords=xyz_coords(),
                edges=(ConversionEdge("lin", scale(1.0), scale(1.0)),),
            ))
        with pytest.raises(RegistrySealedError):
            toy_registry.register_gamut_method("late", lambda value, *, registry=None: value)

    def test_sealed_registry_still_converts(self, toy_registry):
        toy_registry.seal()
        path = toy_registry.get_path("double", "shift")
        assert [step.target for step in path] == ["lin", "shift"]

    def test_registration_is_logged(self, caplog):
        caplog.set_level(logging.DEBUG, logger="tincture.spaces.registry")
        register_builtin_spaces(SpaceRegistry())
        assert "Registered space oklch (base: oklab)" in caplog.text


class TestLookup:
    """Lookups by id, css id and alias."""

    def test_by_id(self, toy_registry):
        assert toy_registry.lookup("shift").id == "shift"

    @pytest.mark.parametrize("name", ["twice", "Twice", "TWICE", "DOUBLE"])
    def test_case_insensitive(self, toy_registry, name):
        assert toy_registry.lookup(name).id == "double"

    def test_unknown(self, toy_registry):
        with pytest.raises(UnknownSpaceError) as exc:
            toy_registry.lookup("nope")
        assert exc.value.space_id == "nope"
        assert isinstance(exc.value, KeyError)

    def test_registered_descriptor(self, toy_registry):
        space = toy_registry.lookup("lin")
        assert toy_registry.lookup(space) is space

    def test_foreign_descriptor(self, toy_registry):
        with pytest.raises(UnknownSpaceError):
            toy_registry.lookup(default_registry.lookup("srgb"))

    def test_contains(self, toy_registry):
        assert "Twice" in toy_registry
        assert "srgb" not in toy_registry
        assert default_registry.lookup("srgb") not in toy_registry

    def test_builtin_css_ids_and_aliases(self):
        assert default_registry.lookup("xyz").id == "xyz-d65"
        assert default_registry.lookup("p3").id == "display-p3"
        assert default_registry.lookup("--hsl").id == "hsl"

    def test_registries_are_isolated(self, toy_registry):
        assert "double" not in default_registry


class TestFormatLookup:
    """Format catalog queries across spaces."""

    def test_find_format_uses_registration_order(self, toy_registry):
        fmt = toy_registry.find_format("color")
        assert fmt.space == "lin"

    def test_find_format_missing(self, toy_registry):
        assert toy_registry.find_format("nope") is None

    def test_find_function(self):
        space, fmt = default_registry.find_function("RGBA")
        assert space.id == "srgb"
        assert fmt.commas

    def test_find_function_skips_color(self):
        assert default_registry.find_function("color") is None

    def test_custom_formats_longest_prefix_first(self, toy_registry):
        toy_registry.register(SpaceDescriptor(
            id="hooks", coords=xyz_coords(),
            edges=(ConversionEdge("lin", scale(1.0), scale(1.0)),),
            formats={
                "short": CustomFormat(parse=lambda text: None, prefix="#"),
                "none": CustomFormat(parse=lambda text: None),
                "long": CustomFormat(parse=lambda text: None, prefix="##"),
                "write-only": CustomFormat(serialize=lambda c, a, o: ""),
            },
        ))
        assert [fmt.id for _, fmt in toy_registry.custom_formats()] == ["long", "short", "none"]

    def test_function_aliases(self, toy_registry):
        toy_registry.register(SpaceDescriptor(
            id="fn", coords=xyz_coords(),
            edges=(ConversionEdge("lin", scale(1.0), scale(1.0)),),
            formats={"fn": FunctionalFormat(name="fn", aliases=("fna",))},
        ))
        space, fmt = toy_registry.find_function("fna")
        assert space.id == "fn"
        assert fmt.id == "fn"


class TestGamutMethods:
    def test_builtin_methods(self):
        assert callable(default_registry.gamut_method("clip"))
        assert callable(default_registry.gamut_method("css"))

    def test_unknown_method(self):
        with pytest.raises(KeyError, match="nope"):
            default_registry.gamut_method("nope")


class TestPathSelection:
    """Direct edge, reverse edge, then base chains joined at the common ancestor."""

    def test_same_space_is_empty(self, toy_registry):
        assert toy_registry.get_path("double", "double") == ()

    def test_direct_edge(self, toy_registry):
        path = toy_registry.get_path("shift-double", "shift")
        assert [(s.source, s.target) for s in path] == [("shift-double", "shift")]

    def test_reverse_edge(self, toy_registry):
        path = toy_registry.get_path("shift", "shift-double")
        assert [(s.source, s.target) for s in path] == [("shift", "shift-double")]

    def test_through_hub(self, toy_registry):
        path = toy_registry.get_path("shift-double", "double")
        assert [s.target for s in path] == ["shift", "lin", "double"]

    def test_common_ancestor_below_hub(self):
        path = default_registry.get_path("hsl", "oklch")
        assert [s.target for s in path] == ["srgb", "srgb-linear", "oklab", "oklch"]

    def test_builtin_path_via_hub(self):
        path = default_registry.get_path("oklch", "display-p3")
        assert [s.target for s in path] == ["oklab", "srgb-linear", "xyz-d65", "display-p3"]

    def test_direct_edge_beats_hub(self, toy_registry):
        toy_registry.register(SpaceDescriptor(
            id="shortcut", coords=xyz_coords(),
            edges=(
                ConversionEdge("lin", scale(1.0), scale(1.0)),
                ConversionEdge("double", offset(100.0), offset(-100.0)),
            ),
        ))
        value = toy_registry.convert(_value(toy_registry, "shortcut", (1, 2, 3)), "double")
        assert value.coords == (101.0, 102.0, 103.0)
        back = toy_registry.convert(_value(toy_registry, "double", (101, 102, 103)), "shortcut")
        assert back.coords == (1.0, 2.0, 3.0)

    def test_paths_are_cached(self, toy_registry):
        first = toy_registry.get_path("double", "shift")
        assert toy_registry.get_path("double", "shift") is first

    def test_registration_clears_cache(self, toy_registry):
        first = toy_registry.get_path("double", "shift")
        toy_registry.register(SpaceDescriptor(
            id="late", coords=xyz_coords(),
            edges=(ConversionEdge("lin", scale(1.0), scale(1.0)),),
        ))
        assert toy_registry.get_path("double", "shift") is not first

    def test_unknown_space(self, toy_registry):
        with pytest.raises(NoConversionPathError) as exc:
            toy_registry.get_path("double", "nope")
        assert exc.value.target == "nope"


def _value(registry, space_id, coords):
    return ColorValue(registry.lookup(space_id), coords)
