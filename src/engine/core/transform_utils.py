"""
エンジン層の変換ユーティリティ関数群（基準点つきの反転・回転）。

基本方針:
- 基準点（`AnchorPoint`）は対象の境界矩形上の 9 点のいずれか。既定は中心。
- `Box` に対しては「変換後の境界矩形」を返す。ホストへは角度/方向をそのまま渡し、
  ここで得た矩形は配置の事前計算（はみ出し確認など）に使う。
- `Geometry` に対しては頂点そのものを変換する（`Geometry.rotate/flip` に委譲）。
"""

from __future__ import annotations

from enum import Enum

import numpy as np

from common.types import Box, Vec2

from .geometry import Geometry


class InvalidFlipDirectionError(ValueError):
    """未知の反転方向が渡された場合に送出される例外。"""


class AnchorPoint(Enum):
    """境界矩形上の基準点。値は (x 比率, y 比率)。"""

    TOP_LEFT = (0.0, 0.0)
    TOP_CENTER = (0.5, 0.0)
    TOP_RIGHT = (1.0, 0.0)
    LEFT_CENTER = (0.0, 0.5)
    CENTER = (0.5, 0.5)
    RIGHT_CENTER = (1.0, 0.5)
    BOTTOM_LEFT = (0.0, 1.0)
    BOTTOM_CENTER = (0.5, 1.0)
    BOTTOM_RIGHT = (1.0, 1.0)


class FlipDirection(Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"

    @classmethod
    def parse(cls, value: "FlipDirection | str") -> "FlipDirection":
        """`FlipDirection` または "horizontal"/"vertical"（大文字小文字不問）から解決。"""
        if isinstance(value, FlipDirection):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for member in cls:
                if key == member.value:
                    return member
        raise InvalidFlipDirectionError(f"invalid flip direction: {value!r}")


def anchor_point(box: Box, anchor: AnchorPoint = AnchorPoint.CENTER) -> Vec2:
    """`box` 上の基準点 `(x, y)` を返す。"""
    fx, fy = anchor.value
    return (box.left + box.width * fx, box.top + box.height * fy)


def flip_box(
    box: Box,
    direction: FlipDirection | str,
    anchor: AnchorPoint = AnchorPoint.CENTER,
) -> Box:
    """基準点を通る軸で反転したときの境界矩形。中心基準なら元と同じ位置になる。"""
    d = FlipDirection.parse(direction)
    ax, ay = anchor_point(box, anchor)
    if d is FlipDirection.HORIZONTAL:
        left = 2.0 * ax - box.right
        return Box(top=box.top, left=left, bottom=box.bottom, right=left + box.width)
    top = 2.0 * ay - box.bottom
    return Box(top=top, left=box.left, bottom=top + box.height, right=box.right)


def rotated_bounds(
    box: Box,
    angle_deg: float,
    anchor: AnchorPoint = AnchorPoint.CENTER,
) -> Box:
    """`box` を基準点回りに回転したときの 4 隅を囲む境界矩形。"""
    corners = np.array(
        [
            [box.left, box.top],
            [box.right, box.top],
            [box.right, box.bottom],
            [box.left, box.bottom],
        ],
        dtype=np.float64,
    )
    g = Geometry.from_lines([corners]).rotate(angle_deg, center=anchor_point(box, anchor))
    return g.bounds()


def flip_geometry(
    g: Geometry,
    direction: FlipDirection | str,
    anchor: AnchorPoint = AnchorPoint.CENTER,
) -> Geometry:
    """ジオメトリを自身の境界矩形上の基準点で反転する。空なら空を返す。"""
    d = FlipDirection.parse(direction)
    if g.is_empty:
        return g.translate()
    center = anchor_point(g.bounds(), anchor)
    return g.flip(horizontal=d is FlipDirection.HORIZONTAL, center=center)


def rotate_geometry(
    g: Geometry,
    angle_deg: float,
    anchor: AnchorPoint = AnchorPoint.CENTER,
) -> Geometry:
    """ジオメトリを自身の境界矩形上の基準点回りに回転する（度、ページ上で反時計回り）。"""
    if g.is_empty:
        return g.translate()
    return g.rotate(angle_deg, center=anchor_point(g.bounds(), anchor))


__all__ = [
    "InvalidFlipDirectionError",
    "AnchorPoint",
    "FlipDirection",
    "anchor_point",
    "flip_box",
    "rotated_bounds",
    "flip_geometry",
    "rotate_geometry",
]
