from __future__ import annotations

import numpy as np
import pytest

from common.types import Box
from engine.core.geometry import Geometry
from engine.core.transform_utils import (
    AnchorPoint,
    FlipDirection,
    InvalidFlipDirectionError,
    anchor_point,
    flip_box,
    flip_geometry,
    rotate_geometry,
    rotated_bounds,
)


@pytest.fixture()
def box() -> Box:
    return Box.from_xywh(10.0, 20.0, 100.0, 50.0)


def test_anchor_points(box: Box) -> None:
    assert anchor_point(box) == (60.0, 45.0)
    assert anchor_point(box, AnchorPoint.TOP_LEFT) == (10.0, 20.0)
    assert anchor_point(box, AnchorPoint.BOTTOM_RIGHT) == (110.0, 70.0)
    assert anchor_point(box, AnchorPoint.RIGHT_CENTER) == (110.0, 45.0)


def test_flip_box_about_center_keeps_position(box: Box) -> None:
    assert flip_box(box, "horizontal") == box
    assert flip_box(box, FlipDirection.VERTICAL) == box


def test_flip_box_about_edge_anchor(box: Box) -> None:
    h = flip_box(box, "Horizontal", AnchorPoint.TOP_LEFT)
    assert h == Box(top=20.0, left=-90.0, bottom=70.0, right=10.0)
    v = flip_box(box, "vertical", AnchorPoint.BOTTOM_LEFT)
    assert v == Box(top=70.0, left=10.0, bottom=120.0, right=110.0)


def test_flip_invalid_direction_raises(box: Box) -> None:
    with pytest.raises(InvalidFlipDirectionError):
        flip_box(box, "diagonal")


def test_rotated_bounds_quarter_turn_swaps_extents(box: Box) -> None:
    got = rotated_bounds(box, 90.0)
    assert got.width == pytest.approx(50.0)
    assert got.height == pytest.approx(100.0)
    assert got.center == pytest.approx(box.center)


def test_rotated_bounds_45_degrees_grows(box: Box) -> None:
    got = rotated_bounds(box, 45.0)
    expected = (100.0 + 50.0) / np.sqrt(2.0)
    assert got.width == pytest.approx(expected)
    assert got.height == pytest.approx(expected)


def test_rotated_bounds_about_top_left_anchor(box: Box) -> None:
    # 左上基準で 90°（反時計回り）: 右方向の辺が上方向へ
    got = rotated_bounds(box, 90.0, AnchorPoint.TOP_LEFT)
    assert got.left == pytest.approx(10.0)
    assert got.right == pytest.approx(60.0)
    assert got.bottom == pytest.approx(20.0)
    assert got.top == pytest.approx(-80.0)


def test_flip_and_rotate_geometry_use_own_bounds() -> None:
    g = Geometry.from_lines([[[0.0, 0.0], [10.0, 0.0], [10.0, 4.0]]])
    f = flip_geometry(g, "horizontal")
    np.testing.assert_allclose(f.coords, [[10.0, 0.0], [0.0, 0.0], [0.0, 4.0]])
    assert f.bounds() == g.bounds()
    r = rotate_geometry(g, 180.0)
    np.testing.assert_allclose(r.coords, [[10.0, 4.0], [0.0, 4.0], [0.0, 0.0]], atol=1e-12)


def test_transforms_on_empty_geometry() -> None:
    e = Geometry.from_lines([])
    assert flip_geometry(e, "vertical").is_empty
    assert rotate_geometry(e, 30.0).is_empty
