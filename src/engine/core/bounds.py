"""
どこで: `engine.core.bounds`
何を: `Box` に対する寸法・中央寄せ・整列・ランダム配置の純関数群。
なぜ: ホスト文書への書き戻しから座標計算を切り離し、計算だけを単体で検証可能にするため。

方針:
- すべて純関数。入力 `Box` を変更せず、新しい `Box` を返す。
- 寸法は負値でもそのまま返す（演算を全域に保つ。負の面積は呼び出し側のバグ）。
- 配置できない要求は型付き例外で報告する（`OutOfBoundsError`）。
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable

import numpy as np

from common.types import Box

from .rng import make_rng


class OutOfBoundsError(ValueError):
    """枠が余白込みで領域に収まらず、ランダム配置できない場合に送出される例外。"""


class InvalidAlignmentError(ValueError):
    """未知の整列指定が渡された場合に送出される例外。"""


class Alignment(Enum):
    """整列の基準（どの辺/中心を揃えるか）。"""

    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"
    HORIZONTAL_CENTER = "center"
    VERTICAL_CENTER = "vertical center"

    @classmethod
    def parse(cls, value: "Alignment | str") -> "Alignment":
        """`Alignment` または文字列（大文字小文字不問）から解決する。

        受理: "top", "bottom", "left", "right", "center", "vertical center"
        および列挙名（例: "HORIZONTAL_CENTER"）。
        """
        if isinstance(value, Alignment):
            return value
        if not isinstance(value, str):
            raise InvalidAlignmentError(f"invalid alignment value: {value!r}")
        key = value.strip().lower()
        for member in cls:
            if key == member.value or key == member.name.lower():
                return member
        raise InvalidAlignmentError(f"invalid alignment value: {value!r}")


def width(box: Box) -> float:
    """`right - left`（クランプしない）。"""
    return box.right - box.left


def height(box: Box) -> float:
    """`bottom - top`（クランプしない）。"""
    return box.bottom - box.top


def contains(outer: Box, inner: Box) -> bool:
    """`inner` が `outer` に（境界を含めて）収まっているか。"""
    return (
        inner.left >= outer.left
        and inner.top >= outer.top
        and inner.right <= outer.right
        and inner.bottom <= outer.bottom
    )


def union_box(boxes: Iterable[Box]) -> Box:
    """複数の `Box` をすべて囲む最小の `Box`（選択範囲の境界）を返す。"""
    items = list(boxes)
    if not items:
        raise ValueError("union_box には 1 つ以上の Box が必要です")
    return Box(
        top=min(b.top for b in items),
        left=min(b.left for b in items),
        bottom=max(b.bottom for b in items),
        right=max(b.right for b in items),
    )


def center_box(inner: Box, outer: Box) -> Box:
    """`inner` と同寸の `Box` を、中心が `outer` の中心に一致する位置へ置いて返す。

    `inner` が `outer` より大きい場合は `outer` からはみ出す（クランプしない）。
    """
    w = width(inner)
    h = height(inner)
    new_left = outer.left + (width(outer) - w) / 2.0
    new_top = outer.top + (height(outer) - h) / 2.0
    return Box(top=new_top, left=new_left, bottom=new_top + h, right=new_left + w)


def center_on_page(inner: Box, page_width: float, page_height: float) -> Box:
    """ページ矩形 `(0, 0, page_height, page_width)` の中央に置いた `Box` を返す。"""
    return center_box(inner, Box(top=0.0, left=0.0, bottom=float(page_height), right=float(page_width)))


def align_box(box: Box, target: Box, alignment: Alignment | str) -> Box:
    """`box` の指定辺（または中心）を `target` に揃えた新しい `Box` を返す。

    寸法は保持し、揃える軸以外の座標は変更しない。
    """
    align = Alignment.parse(alignment)
    w = width(box)
    h = height(box)
    left, top = box.left, box.top
    if align is Alignment.TOP:
        top = target.top
    elif align is Alignment.BOTTOM:
        top = target.bottom - h
    elif align is Alignment.LEFT:
        left = target.left
    elif align is Alignment.RIGHT:
        left = target.right - w
    elif align is Alignment.HORIZONTAL_CENTER:
        left = target.left + (width(target) - w) / 2.0
    else:  # VERTICAL_CENTER
        top = target.top + (height(target) - h) / 2.0
    return Box(top=top, left=left, bottom=top + h, right=left + w)


def random_box_within(
    frame_width: float,
    frame_height: float,
    max_width: float,
    max_height: float,
    padding: float = 0.0,
    *,
    rng: np.random.Generator | None = None,
) -> Box:
    """`[0, max_width] x [0, max_height]` 内、余白 `padding` を保つ位置にランダム配置した `Box`。

    Parameters
    ----------
    frame_width, frame_height : float
        配置する枠の寸法。
    max_width, max_height : float
        配置領域の寸法（原点は左上）。
    padding : float, default 0.0
        四辺に確保する余白。
    rng : numpy.random.Generator, optional
        乱数源。省略時は `engine.core.rng.make_rng()`。

    Returns
    -------
    Box
        `left ~ U[padding, max_width - frame_width - padding]`（`top` も同様）。
        区間幅が 0 の軸は厳密に `padding` を返す。

    Raises
    ------
    OutOfBoundsError
        `frame_width + 2*padding > max_width` または
        `frame_height + 2*padding > max_height` の場合（乱数を引く前に判定）。
    """
    fw, fh = float(frame_width), float(frame_height)
    pad = float(padding)
    if fw + pad * 2 > max_width or fh + pad * 2 > max_height:
        raise OutOfBoundsError(
            f"frame {fw}x{fh} with padding {pad} does not fit in {max_width}x{max_height}"
        )

    span_x = float(max_width) - fw - pad * 2
    span_y = float(max_height) - fh - pad * 2
    gen = rng if rng is not None else make_rng()
    left = pad + gen.random() * span_x if span_x > 0 else pad
    top = pad + gen.random() * span_y if span_y > 0 else pad
    return Box(top=top, left=left, bottom=top + fh, right=left + fw)


__all__ = [
    "OutOfBoundsError",
    "InvalidAlignmentError",
    "Alignment",
    "width",
    "height",
    "contains",
    "union_box",
    "center_box",
    "center_on_page",
    "align_box",
    "random_box_within",
]
