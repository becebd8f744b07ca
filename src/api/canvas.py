"""
どこで: `api.canvas`
何を: ホスト文書との境界（`HostCanvas` プロトコル）と、配置計算→書き戻しのコマンド。
なぜ: 座標計算（純関数）と文書への書き込み（副作用）を分離し、呼び出し側で合成するため。

流れ:
1) `plan_*` がホストから現在の `Box` を読み、`engine.core.bounds` で新しい `Box` を計算し、
   `SetBounds` コマンドとして返す（この時点ではホストを変更しない）。
2) `SetBounds.apply` / `apply_all` がホストの `set_bounds` を呼ぶ。

失敗は型付き例外（`OutOfBoundsError` など）として送出する。表示（ダイアログ/ログ）は呼び出し側の責務。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Hashable, Iterable, Mapping, Protocol

import numpy as np

from common import settings
from common.types import Box
from engine.core import bounds as _bounds
from engine.core.geometry import Geometry

logger = logging.getLogger(__name__)


class HostCanvas(Protocol):
    """ホスト文書の最小インターフェイス（ページ項目の境界矩形の読み書き）。"""

    def get_bounds(self, item: Any) -> Box: ...

    def set_bounds(self, item: Any, box: Box) -> None: ...


def _trace_level() -> int:
    return logging.INFO if settings.get().DEBUG_LAYOUT else logging.DEBUG


@dataclass(frozen=True)
class SetBounds:
    """「`item` の境界矩形を `box` にする」コマンド。"""

    item: Any
    box: Box

    def apply(self, canvas: HostCanvas) -> None:
        logger.log(_trace_level(), "set_bounds %r -> %s", self.item, self.box.to_bounds())
        canvas.set_bounds(self.item, self.box)


def apply_all(canvas: HostCanvas, commands: Iterable[SetBounds]) -> int:
    """コマンドを順に適用し、適用件数を返す。

    途中で失敗した場合は WARNING を記録して例外を再送出する（適用済みの分は戻さない）。
    """
    applied = 0
    for cmd in commands:
        try:
            cmd.apply(canvas)
        except Exception:
            logger.warning("set_bounds failed for %r after %d applied", cmd.item, applied)
            raise
        applied += 1
    return applied


# ── 計算（ホストは読むだけ） ─────────────────
def plan_center_to(canvas: HostCanvas, item: Any, key_item: Any) -> SetBounds:
    """`item` を `key_item` の中央に置くコマンド。"""
    box = _bounds.center_box(canvas.get_bounds(item), canvas.get_bounds(key_item))
    return SetBounds(item, box)


def plan_center_on_page(
    canvas: HostCanvas, item: Any, page_width: float, page_height: float
) -> SetBounds:
    """`item` をページ中央に置くコマンド（大きすぎる枠ははみ出す）。"""
    box = _bounds.center_on_page(canvas.get_bounds(item), page_width, page_height)
    return SetBounds(item, box)


def plan_align(
    canvas: HostCanvas, item: Any, target: Box, alignment: _bounds.Alignment | str
) -> SetBounds:
    """`item` を `target`（ページ/マージン/選択範囲などの矩形）に整列するコマンド。"""
    box = _bounds.align_box(canvas.get_bounds(item), target, alignment)
    return SetBounds(item, box)


def plan_random_position(
    canvas: HostCanvas,
    item: Any,
    max_width: float,
    max_height: float,
    padding: float = 0.0,
    *,
    rng: np.random.Generator | None = None,
) -> SetBounds:
    """`item` を寸法を保ったまま領域内のランダムな位置へ置くコマンド。

    Raises
    ------
    OutOfBoundsError
        余白込みで収まらない場合（ホストは変更されない）。
    """
    current = canvas.get_bounds(item)
    box = _bounds.random_box_within(
        current.width, current.height, max_width, max_height, padding, rng=rng
    )
    return SetBounds(item, box)


class MemoryCanvas:
    """辞書で項目の境界矩形を保持するインプロセス実装（スクリプト試行/テスト用）。"""

    def __init__(self, items: Mapping[Hashable, Box] | None = None) -> None:
        self._items: dict[Hashable, Box] = dict(items or {})

    def add(self, item: Hashable, box: Box) -> None:
        self._items[item] = box

    def add_geometry(self, item: Hashable, g: Geometry) -> Box:
        """`Geometry` の外接矩形を項目として登録し、その `Box` を返す。"""
        box = g.bounds()
        self._items[item] = box
        return box

    def get_bounds(self, item: Hashable) -> Box:
        if item not in self._items:
            raise KeyError(f"unknown item: {item!r}")
        return self._items[item]

    def set_bounds(self, item: Hashable, box: Box) -> None:
        if item not in self._items:
            raise KeyError(f"unknown item: {item!r}")
        self._items[item] = box

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __len__(self) -> int:
        return len(self._items)


__all__ = [
    "HostCanvas",
    "SetBounds",
    "apply_all",
    "plan_center_to",
    "plan_center_on_page",
    "plan_align",
    "plan_random_position",
    "MemoryCanvas",
]
