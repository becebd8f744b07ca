"""
どこで: `common` の型定義。
何を: Vec2/ColorTriple の軽量エイリアスと、ページ座標の矩形値 `Box`。
なぜ: 依存の少ない場所に配置して循環と分散定義を避けるため。

座標系:
- ページ座標（原点は左上、Y は下向き）。単位は呼び出し側の文書単位に従う。
- `Box` の正準表現は `(top, left, bottom, right)`。ホストの geometric bounds
  （`[y1, x1, y2, x2]`）と同じ並びで、境界でのみ `(x, y, w, h)` と相互変換する。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

Vec2 = tuple[float, float]
ColorTriple = tuple[float, float, float]


@dataclass(frozen=True, slots=True)
class Box:
    """軸並行の矩形（不変値）。

    - `bottom >= top` かつ `right >= left` が正常形。幅/高さ 0 も合法。
    - 負の面積は呼び出し側のバグだが、演算を全域に保つため拒否しない。
    """

    top: float
    left: float
    bottom: float
    right: float

    # ── 境界変換 ───────────────────
    @classmethod
    def from_xywh(cls, x: float, y: float, width: float, height: float) -> "Box":
        """左上 `(x, y)` とサイズから生成する。"""
        x_f, y_f = float(x), float(y)
        return cls(top=y_f, left=x_f, bottom=y_f + float(height), right=x_f + float(width))

    @classmethod
    def from_bounds(cls, bounds: Sequence[float]) -> "Box":
        """ホスト形式 `[y1, x1, y2, x2]` から生成する。"""
        if len(bounds) != 4:
            raise ValueError(f"bounds は 4 要素である必要があります: {bounds!r}")
        y1, x1, y2, x2 = (float(v) for v in bounds)
        return cls(top=y1, left=x1, bottom=y2, right=x2)

    def to_bounds(self) -> list[float]:
        """ホスト形式 `[y1, x1, y2, x2]` を返す。"""
        return [self.top, self.left, self.bottom, self.right]

    def to_xywh(self) -> tuple[float, float, float, float]:
        return (self.left, self.top, self.width, self.height)

    # ── 派生値 ───────────────────
    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top

    @property
    def center(self) -> Vec2:
        """中心 `(x, y)`。"""
        return ((self.left + self.right) / 2.0, (self.top + self.bottom) / 2.0)

    def translate(self, dx: float = 0.0, dy: float = 0.0) -> "Box":
        """平行移動した新しい `Box` を返す。"""
        return Box(
            top=self.top + dy,
            left=self.left + dx,
            bottom=self.bottom + dy,
            right=self.right + dx,
        )


__all__ = ["Vec2", "ColorTriple", "Box"]
