# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""Tests for serialization to functional notation, hex and custom formats."""

import re
from types import SimpleNamespace

import pytest

from tincture import color, serialize, to, to_gamut
from tincture import config
from tincture.config import Defaults
from tincture.errors import (
    InvalidColorInputError,
    UnrecognizedFormatError,
    UnsupportedOperationError,
)
from tincture.runtime import resolve_format
from tincture.runtime.serializers import serialize_number, to_precision
from tincture.schema import (
    DEFAULT_FORMAT,
    ColorValue,
    ConversionEdge,
    CustomFormat,
    SpaceDescriptor,
)
from tincture.spaces import SpaceRegistry

from conftest import scale, xyz_coords


RED = color("srgb", [1, 0, 0])


class TestNumbers:
    """Significant-digit rounding and number text."""

    @pytest.mark.parametrize("value,precision,expected", [
        (0.123456, 5, 0.12346),
        (0.123456, 3, 0.123),
        (123456.7, 3, 123000.0),
        (62.7955, 3, 62.8),
        (0.5, 0, 0.5),
        (0.123, 0, 0.123),
        (-0.1, 5, -0.1),
        (0.0, 5, 0.0),
    ])
    def test_to_precision(self, value, precision, expected):
        assert to_precision(value, precision) == pytest.approx(expected)

    @pytest.mark.parametrize("value,kwargs,expected", [
        (1.0, {}, "1"),
        (0.5, {"unit": "%"}, "0.5%"),
        (-0.0, {}, "0"),
        (None, {"precision": 3}, "none"),
        (1e-7, {}, "0.0000001"),
        (0.123456, {"precision": 2}, "0.12"),
    ])
    def test_serialize_number(self, value, kwargs, expected):
        assert serialize_number(value, **kwargs) == expected


class TestDefaultFormat:
    def test_color_function(self):
        assert serialize(RED) == "color(srgb 1 0 0)"

    def test_forced_alpha(self):
        assert serialize(RED, alpha=True) == "color(srgb 1 0 0 / 1)"

    def test_other_spaces(self):
        assert serialize(color("xyz", [0.1, 0.2, 0.3])) == "color(xyz-d65 0.1 0.2 0.3)"
        assert serialize(color("p3", [1, 0, 0])) == "color(display-p3 1 0 0)"

    def test_space_own_notation(self):
        assert serialize(color("oklch", [0.5, 0.1, 200])) == "oklch(50% 0.1 200)"
        assert serialize(color("hsl", [120, 100, 50])) == "hsl(120 100% 50%)"
        assert serialize(color("oklab", [0.5, -0.1, 0.1])) == "oklab(50% -0.1 0.1)"

    def test_css_id_inside_color(self):
        assert serialize(color("hsl", [120, 100, 50]), format="color") == "color(--hsl 120 100 50)"

    def test_none_coordinate(self):
        assert serialize(color("hsl", [None, 0, 50])) == "hsl(none 0% 50%)"

    def test_accepts_strings_and_dicts(self):
        assert serialize("#f00") == "color(srgb 1 0 0)"
        assert serialize({"space": "srgb", "coords": [1, 0, 0]}) == "color(srgb 1 0 0)"

    def test_invalid_input(self):
        with pytest.raises(InvalidColorInputError):
            serialize(42)
        with pytest.raises(UnrecognizedFormatError):
            serialize("not a color")


class TestAlpha:
    def test_included_below_one(self):
        assert serialize(RED.with_alpha(0.5)) == "color(srgb 1 0 0 / 0.5)"

    def test_percentage(self):
        assert serialize(RED.with_alpha(0.5), alpha="<percentage>") == "color(srgb 1 0 0 / 50%)"

    def test_suppressed(self):
        assert serialize(RED.with_alpha(0.5), alpha=False) == "color(srgb 1 0 0)"

    def test_mapping(self):
        options = {"type": "<percentage>", "include": True}
        assert serialize(RED, alpha=options) == "color(srgb 1 0 0 / 100%)"

    def test_none_alpha(self):
        value = RED.with_alpha(None)
        assert serialize(value) == "color(srgb 1 0 0)"
        assert serialize(value, alpha=True) == "color(srgb 1 0 0 / none)"

    def test_raw_alpha_without_precision(self):
        value = RED.with_alpha(0.123456789)
        assert serialize(value, precision=None) == "color(srgb 1 0 0 / 0.123456789)"
        assert serialize(value, precision=None, alpha="<percentage>") == "color(srgb 1 0 0 / 0.123456789)"


class TestPrecision:
    def test_significant_digits(self):
        value = color("srgb", [0.123456, 0.5, 1])
        assert serialize(value, precision=3) == "color(srgb 0.123 0.5 1)"

    def test_raw(self):
        value = color("srgb", [0.123456, 0.5, 1])
        assert serialize(value, precision=None) == "color(srgb 0.123456 0.5 1)"

    def test_zero_precision_keeps_raw_values(self):
        value = color("srgb", [0.123, 0.5, 0.25])
        assert serialize(value, precision=0) == "color(srgb 0.123 0.5 0.25)"

    def test_configured_default(self, monkeypatch):
        monkeypatch.setattr(config, "_defaults", Defaults(precision=2))
        assert serialize(color("srgb", [0.123456, 0.5, 1])) == "color(srgb 0.12 0.5 1)"

    def test_oklch_of_red(self):
        assert serialize(to(RED, "oklch"), precision=3) == "oklch(62.8% 0.258 29.2)"


class TestFunctionalFormats:
    def test_rgb(self):
        assert serialize(color("srgb", [1, 0.5, 0]), format="rgb") == "rgb(255 127.5 0)"

    def test_rgba_commas_and_alpha(self):
        assert serialize(RED, format="rgba") == "rgba(255, 0, 0, 1)"
        assert serialize(RED.with_alpha(0.5), format="rgba") == "rgba(255, 0, 0, 0.5)"

    def test_hsla(self):
        assert serialize(color("hsl", [120, 100, 50]), format="hsla") == "hsla(120, 100%, 50%, 1)"

    def test_coords_override(self):
        value = color("srgb", [1, 0.5, 0])
        assert serialize(value, format="rgb", coords="<percentage>") == "rgb(100% 50% 0%)"

    def test_per_coordinate_override(self):
        value = color("oklch", [0.5, 0.1, 200])
        assert serialize(value, coords=["<number>", None, "<angle>"]) == "oklch(0.5 0.1 200deg)"

    def test_disallowed_override_falls_back(self):
        assert serialize(RED, format="rgb", coords="<angle>") == "rgb(255 0 0)"

    def test_format_of_another_space_converts(self):
        assert serialize(RED, format="hsl") == "hsl(0 100% 50%)"
        assert serialize(RED, format="oklch", precision=3) == "oklch(62.8% 0.258 29.2)"

    def test_unknown_format_falls_back_to_default(self):
        assert serialize(RED, format="nope") == "color(srgb 1 0 0)"


class TestHex:
    def test_collapsed(self):
        assert serialize(RED, format="hex") == "#f00"
        assert serialize(color("srgb", [0.2, 0.4, 0.6]), format="hex") == "#369"

    def test_full(self):
        assert serialize(RED, format="hex", collapse=False) == "#ff0000"

    def test_alpha(self):
        assert serialize(RED.with_alpha(0.5), format="hex") == "#ff000080"
        assert serialize(RED.with_alpha(0.5), format="hex", alpha=False) == "#f00"

    def test_from_other_space(self):
        assert serialize(to(RED, "oklch"), format="hex") == "#f00"

    def test_always_gamut_maps(self):
        value = color("srgb", [1.2, -0.1, 0.5])
        expected = serialize(to_gamut(value), format="hex")
        assert serialize(value, format="hex", in_gamut=False) == expected

    def test_wide_gamut_input(self):
        text = serialize(color("display-p3", [1, 0, 0]), format="hex")
        assert re.fullmatch(r"#[0-9a-f]{3}(?:[0-9a-f]{3})?", text)


class TestGamut:
    def test_mapped_by_default(self):
        text = serialize(color("srgb", [1.2, -0.1, 0.5]))
        assert text != "color(srgb 1.2 -0.1 0.5)"
        assert text.startswith("color(srgb ")

    def test_verbatim_when_disabled(self):
        value = color("srgb", [1.2, -0.1, 0.5])
        assert serialize(value, in_gamut=False) == "color(srgb 1.2 -0.1 0.5)"

    def test_named_strategy(self):
        value = color("srgb", [1.2, -0.1, 0.5])
        assert serialize(value, in_gamut="clip") == "color(srgb 1 0 0.5)"

    def test_unknown_strategy(self):
        with pytest.raises(UnsupportedOperationError, match="bogus"):
            serialize(color("srgb", [1.2, -0.1, 0.5]), in_gamut="bogus")

    def test_checked_after_format_conversion(self):
        # oklch is unbounded; the rgb() target is not
        value = color("oklch", [0.7, 0.4, 150])
        text = serialize(value, format="rgb", in_gamut="clip", precision=3)
        numbers = [float(n) for n in text[4:-1].split()]
        assert all(0.0 <= n <= 255.0 for n in numbers)


class TestCustomFormats:
    @pytest.fixture
    def hooks_registry(self, toy_registry):
        toy_registry.register(SpaceDescriptor(
            id="hooks",
            coords=xyz_coords(),
            edges=(ConversionEdge("lin", scale(1.0), scale(1.0)),),
            formats={
                "read-only": CustomFormat(parse=lambda text: None, prefix="ro:"),
                "tagged": CustomFormat(
                    serialize=lambda coords, alpha, options: (
                        f"{options.precision}|{options.extras['tag']}|{list(coords)}|{alpha}"
                    ),
                ),
            },
        ))
        return toy_registry

    def test_parse_only_format(self, hooks_registry):
        value = ColorValue(hooks_registry.lookup("hooks"), (1.0, 2.0, 3.0))
        with pytest.raises(UnsupportedOperationError) as exc:
            serialize(value, format="read-only", registry=hooks_registry)
        assert exc.value.format_id == "read-only"

    def test_hook_receives_options(self, hooks_registry):
        value = ColorValue(hooks_registry.lookup("hooks"), (1.0, 2.0, 3.0), 0.5)
        text = serialize(value, format="tagged", precision=3, tag="x", registry=hooks_registry)
        assert text == "3|x|[1.0, 2.0, 3.0]|0.5"


class TestResolveFormat:
    def test_own_catalog_first(self):
        from tincture.spaces import default_registry

        srgb = default_registry.lookup("srgb")
        assert resolve_format(srgb, "rgb", default_registry) is srgb.formats["rgb"]

    def test_last_resort(self):
        space = SimpleNamespace(get_format=lambda format_id: None)
        assert resolve_format(space, "anything", SpaceRegistry()) is DEFAULT_FORMAT
