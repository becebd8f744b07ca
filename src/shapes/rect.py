from __future__ import annotations

import numpy as np

from common.types import Box
from engine.core.geometry import Geometry

from .registry import shape


def _box_outline(box: Box) -> np.ndarray:
    """時計回り（ページ上）の閉じた矩形輪郭。左上始点、末尾に始点を複製。"""
    return np.array(
        [
            [box.left, box.top],
            [box.right, box.top],
            [box.right, box.bottom],
            [box.left, box.bottom],
            [box.left, box.top],
        ],
        dtype=np.float64,
    )


@shape
def rect(x: float, y: float, width: float, height: float) -> Geometry:
    """左上 `(x, y)`、幅 `width`、高さ `height` の矩形。"""
    return Geometry.from_lines([_box_outline(Box.from_xywh(x, y, width, height))])


@shape
def square(x: float, y: float, side: float) -> Geometry:
    """左上 `(x, y)`、一辺 `side` の正方形。"""
    return rect(x, y, side, side)
