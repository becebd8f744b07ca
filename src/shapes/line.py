from __future__ import annotations

import numpy as np

from engine.core.geometry import Geometry

from .registry import shape


@shape
def line(x1: float, y1: float, x2: float, y2: float) -> Geometry:
    """`(x1, y1)` から `(x2, y2)` への線分を生成します。

    Parameters
    ----------
    x1, y1 : float
        始点（ページ座標）。
    x2, y2 : float
        終点（ページ座標）。始点と一致しても 2 頂点の線として返す。
    """
    vertices = np.array([[x1, y1], [x2, y2]], dtype=np.float64)
    return Geometry.from_lines([vertices])
