from __future__ import annotations

import pytest

from engine.core.lerp import DegenerateRangeError, lerp, lerp_color, map_range


def test_lerp_midpoint_and_endpoints() -> None:
    assert lerp(0, 100, 0.5) == 50
    assert lerp(10, 20, 0.0) == 10
    assert lerp(10, 20, 1.0) == 20


def test_lerp_extrapolates_without_clamping() -> None:
    assert lerp(0, 100, 1.5) == 150
    assert lerp(0, 100, -0.25) == -25


def test_lerp_color_rounds_half_up() -> None:
    assert lerp_color([255, 0, 0], [0, 0, 255], 0.5) == (128, 0, 128)
    # 126.5 は偶数丸めなら 126 だが四捨五入で 127
    assert lerp_color([253, 0, 0], [0, 0, 0], 0.5) == (127, 0, 0)


def test_lerp_color_does_not_clamp() -> None:
    # CMYK(0–100) や外挿にも使えるようクランプしない
    assert lerp_color([0, 50, 100], [100, 100, 100], 2.0) == (200, 150, 100)
    assert lerp_color([0, 0, 0], [255, 255, 255], -1.0) == (-255, -255, -255)


def test_lerp_color_requires_three_channels() -> None:
    with pytest.raises(ValueError):
        lerp_color([1, 2], [3, 4, 5], 0.5)
    # 4 チャンネル目を黙って捨てない
    with pytest.raises(ValueError):
        lerp_color([1, 2, 3, 4], [5, 6, 7], 0.5)
    with pytest.raises(ValueError):
        lerp_color([1, 2, 3], [5, 6, 7, 8], 0.5)


def test_map_range() -> None:
    assert map_range(50, 0, 100, 0, 1) == 0.5
    assert map_range(0.5, 0, 1, 0, 100) == 50
    assert map_range(150, 0, 100, 0, 10) == 15
    assert map_range(2, 0, 4, 10, 0) == 5


def test_map_range_degenerate_input_raises() -> None:
    with pytest.raises(DegenerateRangeError):
        map_range(5, 10, 10, 0, 1)
    with pytest.raises(ValueError):
        map_range(0, 0, 0, 0, 1)
