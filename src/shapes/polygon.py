from __future__ import annotations

from typing import Sequence

import numpy as np

from common.types import Box
from engine.core.geometry import Geometry

from .registry import shape

MIN_SIDES = 3


def _polygon_unit(sides: int, star_inset: float) -> np.ndarray:
    """単位円上の正多角形（星形）の頂点配列を生成します。

    引数:
        sides: 辺の数（星形では尖りの数）。
        star_inset: 0–100。0 より大きいと内側頂点を挟んだ星形になる。

    返り値:
        上端の頂点から時計回り（ページ上）の頂点配列。閉ループ化はしない。
    """
    if star_inset > 0:
        n = sides * 2
        radii = np.tile([1.0, 1.0 - star_inset / 100.0], sides)
    else:
        n = sides
        radii = np.ones(n)
    t = -0.5 * np.pi + np.arange(n) * (2.0 * np.pi / n)
    return np.stack([np.cos(t) * radii, np.sin(t) * radii], axis=1)


def _fit_to_box(vertices: np.ndarray, box: Box) -> np.ndarray:
    """頂点群の外接矩形が `box` に一致するよう拡大・移動します。"""
    mins = vertices.min(axis=0)
    maxs = vertices.max(axis=0)
    extent = maxs - mins
    target_min = np.array([box.left, box.top])
    target_extent = np.array([box.width, box.height])
    return (vertices - mins) / extent * target_extent + target_min


def _closed(vertices: np.ndarray) -> np.ndarray:
    return np.append(vertices, vertices[0:1], axis=0)


@shape
def polygon(
    x: float,
    y: float,
    width: float,
    height: float,
    sides: int = 6,
    star_inset: float = 0.0,
    reversed: bool = False,
) -> Geometry:
    """矩形 `(x, y, width, height)` に外接する正多角形（または星形）を生成します。

    引数:
        sides: 辺の数（3 以上）。
        star_inset: 0–100（%）。0 より大きいと星形。100 で内側頂点が中心に一致。
        reversed: True で上下反転（三角形なら頂点が下を向く）。

    例外:
        ValueError: 辺数/寸法/インセットが範囲外の場合。
    """
    n_sides = int(sides)
    if n_sides < MIN_SIDES:
        raise ValueError("Number of sides must be 3 or greater")
    if width <= 0 or height <= 0:
        raise ValueError("Width and height must be greater than 0")
    if star_inset < 0 or star_inset > 100:
        raise ValueError("Star inset must be between 0 and 100")

    unit = _polygon_unit(n_sides, float(star_inset))
    if reversed:
        unit = unit * np.array([1.0, -1.0])
    vertices = _fit_to_box(unit, Box.from_xywh(x, y, width, height))
    return Geometry.from_lines([_closed(vertices)])


@shape
def polygon_custom(points: Sequence[Sequence[float]]) -> Geometry:
    """任意の頂点列 `[[x, y], ...]` から閉じた多角形を生成します（3 点以上）。"""
    arr = np.asarray(points, dtype=np.float64)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"points must be a sequence of [x, y] pairs: shape={arr.shape}")
    if arr.shape[0] < 3:
        raise ValueError("A polygon must have at least 3 points")
    return Geometry.from_lines([_closed(arr)])


@shape
def triangle(x: float, y: float, size: float, reversed: bool = False) -> Geometry:
    """`size x size` の矩形に外接する二等辺三角形（上向き、`reversed` で下向き）。"""
    return polygon(x, y, size, size, sides=3, reversed=reversed)


@shape
def right_angle_triangle(x: float, y: float, width: float, height: float) -> Geometry:
    """直角三角形。頂点は `(x, y)`, `(x+width, y)`, `(x+width, y+height)`（直角は右上）。"""
    return polygon_custom([[x, y], [x + width, y], [x + width, y + height]])
