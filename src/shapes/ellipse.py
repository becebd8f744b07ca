from __future__ import annotations

import numpy as np

from engine.core.geometry import Geometry

from .registry import shape

MIN_SEGMENTS = 3


def _ellipse_vertices(cx: float, cy: float, rx: float, ry: float, segments: int) -> np.ndarray:
    """楕円の頂点配列（閉ループ、上端から時計回り）。"""
    # 上端（-90°）から開始
    t = np.linspace(-0.5 * np.pi, 1.5 * np.pi, segments, endpoint=False)
    vertices = np.stack([cx + rx * np.cos(t), cy + ry * np.sin(t)], axis=1)
    return np.append(vertices, vertices[0:1], axis=0)


@shape
def ellipse(cx: float, cy: float, width: float, height: float, segments: int = 64) -> Geometry:
    """中心 `(cx, cy)`、幅 `width`、高さ `height` の楕円をポリラインで近似します。

    境界矩形は `[cy - height/2, cx - width/2, cy + height/2, cx + width/2]`。
    """
    if width < 0 or height < 0:
        raise ValueError("Width and height must not be negative")
    n = int(segments)
    if n < MIN_SEGMENTS:
        raise ValueError(f"segments must be {MIN_SEGMENTS} or greater")
    return Geometry.from_lines([_ellipse_vertices(cx, cy, width / 2.0, height / 2.0, n)])


@shape
def circle(cx: float, cy: float, radius: float, segments: int = 64) -> Geometry:
    """中心 `(cx, cy)`、半径 `radius` の円。"""
    if radius < 0:
        raise ValueError("Radius must not be negative")
    return ellipse(cx, cy, 2.0 * radius, 2.0 * radius, segments)
