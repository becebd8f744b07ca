from __future__ import annotations

import pytest

from util.color import (
    clamp_cmyk,
    clamp_rgb,
    parse_hex_rgb,
    rgb_to_hex,
    swatch_name_cmyk,
    swatch_name_rgb,
)


def test_parse_hex_rgb_valid_variants() -> None:
    assert parse_hex_rgb("#FF0000") == (255, 0, 0)
    assert parse_hex_rgb("0x112233") == (0x11, 0x22, 0x33)
    assert parse_hex_rgb("00ff80") == (0, 255, 128)
    assert parse_hex_rgb("  #abcdef ") == (0xAB, 0xCD, 0xEF)


def test_parse_hex_rgb_invalid() -> None:
    with pytest.raises(ValueError):
        parse_hex_rgb("#123")
    with pytest.raises(ValueError):
        parse_hex_rgb("#GG0000")
    with pytest.raises(ValueError):
        parse_hex_rgb("#FF000080")


def test_rgb_to_hex_round_trip_and_clamp() -> None:
    assert rgb_to_hex(255, 0, 128) == "#FF0080"
    assert parse_hex_rgb(rgb_to_hex(18, 52, 86)) == (18, 52, 86)
    assert rgb_to_hex(300, -4, 127.5) == "#FF0080"


def test_clamp_rgb_rounds_half_up_and_clamps() -> None:
    assert clamp_rgb(254.5, -10, 300) == (255, 0, 255)
    assert clamp_rgb(0.5, 1.49, 126.5) == (1, 1, 127)


def test_clamp_cmyk() -> None:
    assert clamp_cmyk(-1, 50.4, 100.2, 120) == (0, 50, 100, 100)


def test_swatch_names_use_clamped_values() -> None:
    assert swatch_name_rgb(255, 0, 0) == "RGB_255_0_0"
    assert swatch_name_rgb(256, 12.6, -3) == "RGB_255_13_0"
    assert swatch_name_cmyk(0, 100, 0, 0) == "CMYK_0_100_0_0"
    assert swatch_name_cmyk(0, 150, 49.5, 0) == "CMYK_0_100_50_0"
