"""Tests for color normalization."""

import json
import numpy as np
import pandas as pd
from bangle_storefront.colors.normalizer import (
    ColorSwatch,
    parse_color,
    parse_colors,
    get_color_hex,
    is_valid_hex,
    lighten_color,
    get_swatch_style,
    default_palette,
    merge_palette,
    normalize_board_colors
)
from bangle_storefront.config.palette_config import DEFAULT_COLORS


def test_object_with_canonical_hex_is_unchanged():
    swatch = parse_color({"name": "Red", "hex": "#dc2626"})
    assert swatch.name == "Red"
    assert swatch.hex == "#dc2626"
    assert swatch.swatch_image is None
    assert swatch.active is True


def test_canonical_name_overrides_supplied_hex():
    assert parse_color({"name": "Red", "hex": "#000000"}).hex == "#dc2626"
    assert parse_color({"name": "NAVY BLUE", "hex": "123456"}).hex == "#1d3557"


def test_unknown_name_keeps_supplied_hex_with_hash():
    swatch = parse_color({"name": "Sunset", "hex": "ff8800"})
    assert swatch.name == "Sunset"
    assert swatch.hex == "#ff8800"


def test_object_swatch_image_and_active_flag():
    multi = parse_color({"name": "Dark multi color", "hex": "#4b5563"})
    assert multi.swatch_image == "/DarkMulti.jpg"

    custom_image = parse_color({"name": "Sunset", "hex": "#ff8800", "swatchImage": "/sunset.png"})
    assert custom_image.swatch_image == "/sunset.png"

    inactive = parse_color({"name": "Red", "hex": "#dc2626", "active": False})
    assert inactive.active is False
    assert inactive.to_dict() == {"name": "Red", "hex": "#dc2626", "active": False}


def test_object_with_only_hex_is_custom():
    swatch = parse_color({"hex": "abcdef"})
    assert swatch.name == "Custom"
    assert swatch.hex == "#abcdef"


def test_json_string_object():
    swatch = parse_color('{"name": "Blue", "hex": "#000000"}')
    assert swatch.name == "Blue"
    assert swatch.hex == "#2563eb"


def test_broken_json_string_falls_back_to_plain_string():
    swatch = parse_color('{"name": "Blue"')
    assert swatch.name == '{"name": "Blue"'
    assert swatch.hex == "#888888"


def test_plain_hex_string_is_custom():
    swatch = parse_color("#FF0000")
    assert swatch.name == "Custom"
    assert swatch.hex == "#FF0000"


def test_plain_name_lookup():
    swatch = parse_color("blue")
    assert swatch.name == "blue"
    assert swatch.hex == "#2563eb"

    assert parse_color("  Light multi color ").swatch_image == "/LightMulti.jpg"
    assert parse_color("Mystery").hex == "#888888"


def test_none_and_nameless_objects_degrade_to_custom_gray():
    assert parse_color(None) == ColorSwatch("Custom", "#888888")
    assert parse_color({}) == ColorSwatch("Custom", "#888888")
    assert parse_color({"name": "Green"}).hex == "#16a34a"


def test_parse_colors_accepts_lists_and_json_lists():
    colors = ["Red", {"name": "Blue", "hex": "#2563eb"}, "#123456"]
    from_list = parse_colors(colors)
    from_json = parse_colors(json.dumps(colors))

    assert [c.name for c in from_list] == ["Red", "Blue", "Custom"]
    assert from_json == from_list


def test_parse_colors_returns_empty_for_other_shapes():
    assert parse_colors(None) == []
    assert parse_colors("") == []
    assert parse_colors("not json") == []
    assert parse_colors('{"name": "Red"}') == []
    assert parse_colors(42) == []


def test_parse_colors_drops_only_custom_gray_noise():
    colors = ["Red", "red", {"hex": "#888888"}, "#888888", "Mystery"]
    parsed = parse_colors(colors)
    # Duplicate names are kept; only entries that are both "Custom" and gray go
    assert [c.name for c in parsed] == ["Red", "red", "Mystery"]
    assert parsed[2].hex == "#888888"


def test_get_color_hex():
    assert get_color_hex("Rose Gold") == "#ff9500"
    assert get_color_hex("unknown") == "#888888"
    assert get_color_hex(None) == "#888888"


def test_is_valid_hex():
    assert is_valid_hex("#abc")
    assert is_valid_hex("#A1B2C3")
    assert not is_valid_hex("abc123")
    assert not is_valid_hex("#abcd")
    assert not is_valid_hex("#ggg")
    assert not is_valid_hex(None)


def test_lighten_color():
    assert lighten_color("#000000", 20) == "#333333"
    assert lighten_color("#f0f0f0", 20) == "#ffffff"
    assert lighten_color("#102030", 0) == "#102030"
    assert lighten_color("#000", 20) == "#333333"
    assert lighten_color("not a color") == "not a color"


def test_swatch_style():
    assert get_swatch_style(ColorSwatch("Red", "#dc2626")) == {"background-color": "#dc2626"}

    style = get_swatch_style(ColorSwatch("Dark multi color", "#4b5563"))
    assert style["background-image"] == "url(/DarkMulti.jpg)"
    assert style["background-size"] == "cover"
    assert style["background-position"] == "center"
    assert style["background-repeat"] == "no-repeat"


def test_default_palette_matches_reference_table():
    palette = default_palette()
    assert len(palette) == len(DEFAULT_COLORS)
    assert palette[0] == ColorSwatch("Red", "#dc2626")
    assert palette[-1].swatch_image == "/LightMulti.jpg"


def test_merge_palette_orders_defaults_first_then_extras_alphabetically():
    defaults = [{"name": "Red", "hex": "#dc2626"}, {"name": "Blue", "hex": "#2563eb"}]
    merged = merge_palette(
        [{"name": "Zebra", "hex": "#111111"}, {"name": "blue", "hex": "#2563eb", "active": False},
         {"name": "Apple", "hex": "#222222"}],
        defaults=defaults
    )

    assert [c.name for c in merged] == ["Red", "blue", "Apple", "Zebra"]
    # The configured entry replaced the palette entry with the same key
    assert merged[1].active is False


def test_merge_palette_never_duplicates_names():
    merged = merge_palette(["Red", "RED", "Sunset", "sunset"])
    keys = [c.key for c in merged]
    assert len(keys) == len(set(keys))
    assert merged[0].name == "RED"
    assert merged[-1].name == "sunset"


def test_normalize_board_colors_first_wins_and_falls_back():
    colors = normalize_board_colors(["Red", {"name": "red", "hex": "#dc2626"}, "Blue"])
    assert [c.name for c in colors] == ["Red", "Blue"]
    assert normalize_board_colors([]) == default_palette()
    assert normalize_board_colors(None) == default_palette()


def test_json_string_keeps_active_flag_and_swatch_image():
    inactive = parse_color('{"name": "Red", "hex": "#dc2626", "active": false}')
    assert inactive.active is False

    swatch = parse_color('{"name": "Sunset", "hex": "#ff8800", "swatchImage": "/sunset.png"}')
    assert swatch.swatch_image == "/sunset.png"
    assert swatch.hex == "#ff8800"


def test_deeply_nested_json_never_raises():
    nested_object = '{"a":' * 100000
    swatch = parse_color(nested_object)
    assert swatch.hex == "#888888"
    assert swatch.name == nested_object.strip()

    assert parse_colors("[" * 100000) == []


def test_parse_colors_accepts_arrays_and_series():
    expected = [ColorSwatch("Red", "#dc2626"), ColorSwatch("Blue", "#2563eb")]
    assert parse_colors(np.array(["Red", "Blue"])) == expected
    assert parse_colors(pd.Series(["Red", "Blue"])) == expected
    assert parse_colors(np.array([], dtype=object)) == []
    assert parse_colors(pd.Series([], dtype=object)) == []
    assert parse_colors(np.array("Red")) == []
    assert parse_colors("   ") == []
