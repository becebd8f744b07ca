"""
どこで: `engine.core.page`
何を: 定型ページサイズ表と、ページ/マージン矩形の算出。
なぜ: ページ寸法の解決とマージン内領域の計算を、ホストのページ操作から独立させるため。
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from common.types import Box


class UnknownPageSizeError(ValueError):
    """定型ページサイズ表にない名前が渡された場合に送出される例外。"""


# (幅, 高さ) ポイント
PAGE_SIZES: Mapping[str, tuple[float, float]] = MappingProxyType(
    {
        "letter": (612.0, 792.0),  # 8.5 x 11 in
        "tabloid": (792.0, 1224.0),  # 11 x 17 in
        "a3": (841.89, 1190.551),  # 297 x 420 mm
        "a4": (595.276, 841.89),  # 210 x 297 mm
        "a5": (419.528, 595.276),  # 148 x 210 mm
    }
)


@dataclass(frozen=True)
class Margins:
    """ページ四辺のマージン（ページと同じ単位）。"""

    top: float = 0.0
    left: float = 0.0
    bottom: float = 0.0
    right: float = 0.0


def page_size(name: str) -> tuple[float, float]:
    """定型名（大文字小文字不問）から `(幅, 高さ)` を返す。"""
    size = PAGE_SIZES.get(name.strip().lower()) if isinstance(name, str) else None
    if size is None:
        raise UnknownPageSizeError(
            f"invalid page size: {name!r} (valid sizes are: {', '.join(PAGE_SIZES)})"
        )
    return size


def page_box(page_width: float, page_height: float) -> Box:
    return Box(top=0.0, left=0.0, bottom=float(page_height), right=float(page_width))


def margin_box(page_width: float, page_height: float, margins: Margins) -> Box:
    """マージンの内側（版面）の `Box`。"""
    return Box(
        top=margins.top,
        left=margins.left,
        bottom=float(page_height) - margins.bottom,
        right=float(page_width) - margins.right,
    )


def live_area(page_width: float, page_height: float, margins: Margins) -> tuple[float, float]:
    """マージンを除いた `(幅, 高さ)`。"""
    inner = margin_box(page_width, page_height, margins)
    return (inner.width, inner.height)


__all__ = [
    "UnknownPageSizeError",
    "PAGE_SIZES",
    "Margins",
    "page_size",
    "page_box",
    "margin_box",
    "live_area",
]
