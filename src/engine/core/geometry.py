"""
統合 Geometry 型（ページ座標の 2D ポリライン集合）

shapes が生成し、transform_utils が変換し、呼び出し側がホストへ書き戻す、
唯一の形状表現 `Geometry` を提供する。

データモデル（不変条件）:
- `coords: float64 ndarray (N, 2)`: 全頂点を 1 本の連続メモリで保持（行は XY）。
- `offsets: int32 ndarray (M+1,)`: 各ポリラインの開始 index（末尾は必ず N）。
- i 本目の線は `coords[offsets[i] : offsets[i+1]]` で取り出せる。
- 座標はページ座標（原点は左上、Y は下向き）。閉じた図形は先頭頂点を末尾に複製する。

API 方針:
- 変換は translate/scale/rotate/flip/concat の最小セットのみ。
- すべて純関数（副作用ゼロ）であり、新しい `Geometry` インスタンスを返す。

直感図（複数線の格納）:

    # 2 本のポリライン（線0は3点、線1は2点）
    # coords (N=5): [[0,0], [1,0], [1,1], [2,2], [3,2]]
    # offsets (M+1=3): [0, 3, 5]
    #   線0 = coords[0:3]
    #   線1 = coords[3:5]

補足:
- 空ジオメトリは `coords.shape==(0,2)`, `offsets==[0]`。
"""

from __future__ import annotations

from typing import Iterable, Sequence

import numpy as np

from common.types import Box, Vec2

NumberLike = float | int
LineLike = np.ndarray | Sequence[Sequence[NumberLike]]


def _normalize_geometry_input(
    coords: np.ndarray,
    offsets: np.ndarray,
) -> tuple[np.ndarray, np.ndarray]:
    """`Geometry` 生成時の内部正規化ヘルパ。"""

    coords_arr = np.asarray(coords, dtype=np.float64)
    if coords_arr.ndim != 2 or coords_arr.shape[1] != 2:
        raise ValueError("coords は形状 (N, 2) の配列である必要があります。")
    if not coords_arr.flags.c_contiguous:
        coords_arr = np.ascontiguousarray(coords_arr, dtype=np.float64)

    offsets_arr = np.asarray(offsets, dtype=np.int32)
    if offsets_arr.ndim != 1:
        raise ValueError("offsets は 1 次元配列である必要があります。")
    if offsets_arr.size == 0:
        raise ValueError("offsets は少なくとも1要素を含む必要があります。")
    if offsets_arr[0] != 0:
        raise ValueError("offsets[0] は常に 0 である必要があります。")
    if offsets_arr[-1] != coords_arr.shape[0]:
        raise ValueError("offsets[-1] は coords の行数と一致する必要があります。")
    if np.any(np.diff(offsets_arr) < 0):
        raise ValueError("offsets は単調非減少である必要があります。")
    if not offsets_arr.flags.c_contiguous:
        offsets_arr = np.ascontiguousarray(offsets_arr, dtype=np.int32)

    return coords_arr, offsets_arr


class Geometry:
    """ページ座標のポリライン集合。

    フィールド:
    - `coords (N,2) float64`: すべての点列を連結した配列。
    - `offsets (M+1,) int32`: 各ポリラインの開始 index（末尾は N）。
    """

    __slots__ = ("coords", "offsets")

    coords: np.ndarray
    offsets: np.ndarray

    def __init__(self, coords: np.ndarray, offsets: np.ndarray) -> None:
        norm_coords, norm_offsets = _normalize_geometry_input(coords, offsets)
        self.coords = norm_coords
        self.offsets = norm_offsets

    # ── ファクトリ ───────────────────
    @classmethod
    def from_lines(cls, lines: Iterable[LineLike]) -> "Geometry":
        """線分集合を統一表現に正規化して `Geometry` を生成する。

        Parameters
        ----------
        lines : Iterable[LineLike]
            各要素は `(K, 2)` の座標列。`list`/`tuple`/`ndarray` いずれも可。

        Raises
        ------
        ValueError
            形状が `(K, 2)` に適合しない場合。
        """
        np_lines: list[np.ndarray] = []
        for line in lines:
            arr = np.asarray(line, dtype=np.float64)
            if arr.ndim == 1 and arr.size == 0:
                arr = arr.reshape(0, 2)
            if arr.ndim != 2 or arr.shape[1] != 2:
                raise ValueError(f"座標配列の形状が不正です: {arr.shape}")
            np_lines.append(arr)

        if not np_lines:
            coords = np.empty((0, 2), dtype=np.float64)
            offsets = np.array([0], dtype=np.int32)
            return cls(coords, offsets)

        offsets = np.empty(len(np_lines) + 1, dtype=np.int32)
        offsets[0] = 0
        for i, arr in enumerate(np_lines, start=1):
            offsets[i] = offsets[i - 1] + arr.shape[0]
        coords = np.concatenate(np_lines, axis=0)
        return cls(coords, offsets)

    # ── 基本操作（すべて純粋） ────────
    def as_arrays(self, *, copy: bool = False) -> tuple[np.ndarray, np.ndarray]:
        """内部配列 `(coords, offsets)` を返す。

        `copy=False` は読み取り専用ビュー。書き込みが必要なら `copy=True`。
        """
        if copy:
            return self.coords.copy(), self.offsets.copy()
        coords_view = self.coords.view()
        offsets_view = self.offsets.view()
        coords_view.setflags(write=False)
        offsets_view.setflags(write=False)
        return coords_view, offsets_view

    def lines(self) -> list[np.ndarray]:
        """各ポリラインの座標配列（コピー）をリストで返す。ホストの path 設定用。"""
        return [
            self.coords[self.offsets[i] : self.offsets[i + 1]].copy()
            for i in range(len(self))
        ]

    @property
    def is_empty(self) -> bool:
        return self.coords.size == 0

    def bounds(self) -> Box:
        """全頂点を囲む `Box`。

        Raises
        ------
        ValueError
            空ジオメトリの場合。
        """
        if self.is_empty:
            raise ValueError("空の Geometry には bounds がありません")
        mins = self.coords.min(axis=0)
        maxs = self.coords.max(axis=0)
        return Box(
            top=float(mins[1]),
            left=float(mins[0]),
            bottom=float(maxs[1]),
            right=float(maxs[0]),
        )

    def translate(self, dx: float = 0.0, dy: float = 0.0) -> "Geometry":
        """平行移動（純関数）。"""
        if self.is_empty:
            return Geometry(self.coords.copy(), self.offsets.copy())
        new_coords = self.coords + np.array([dx, dy], dtype=np.float64)
        return Geometry(new_coords, self.offsets.copy())

    def scale(
        self,
        sx: float,
        sy: float | None = None,
        center: Vec2 = (0.0, 0.0),
    ) -> "Geometry":
        """拡大縮小（純関数）。`sy` 省略時は等方。`center` は基準点。"""
        if sy is None:
            sy = sx
        if self.is_empty:
            return Geometry(self.coords.copy(), self.offsets.copy())
        pivot = np.array(center, dtype=np.float64)
        factors = np.array([sx, sy], dtype=np.float64)
        new = (self.coords - pivot) * factors + pivot
        return Geometry(new, self.offsets.copy())

    def rotate(self, angle_deg: float, center: Vec2 = (0.0, 0.0)) -> "Geometry":
        """回転（純関数）。

        Parameters
        ----------
        angle_deg : float
            回転角（度）。正の値はページ上で反時計回り（Y 下向き座標系）。
        center : Vec2
            回転中心（pivot）。

        Notes
        -----
        中心の右にある点 `(cx+1, cy)` を 90° 回すと、中心の上 `(cx, cy-1)` に移る。
        """
        if self.is_empty or angle_deg == 0:
            return Geometry(self.coords.copy(), self.offsets.copy())
        theta = np.deg2rad(float(angle_deg))
        c, s = np.cos(theta), np.sin(theta)
        cx, cy = center
        x = self.coords[:, 0] - cx
        y = self.coords[:, 1] - cy
        new = np.empty_like(self.coords)
        new[:, 0] = x * c + y * s + cx
        new[:, 1] = -x * s + y * c + cy
        return Geometry(new, self.offsets.copy())

    def flip(self, *, horizontal: bool, center: Vec2 = (0.0, 0.0)) -> "Geometry":
        """鏡映（純関数）。`horizontal=True` は `x = cx` を軸に左右反転、False は上下反転。"""
        if self.is_empty:
            return Geometry(self.coords.copy(), self.offsets.copy())
        new = self.coords.copy()
        if horizontal:
            new[:, 0] = 2.0 * center[0] - new[:, 0]
        else:
            new[:, 1] = 2.0 * center[1] - new[:, 1]
        return Geometry(new, self.offsets.copy())

    def concat(self, other: "Geometry") -> "Geometry":
        """ポリライン集合の連結（純関数）。"""
        if self.is_empty:
            return Geometry(other.coords.copy(), other.offsets.copy())
        if other.is_empty:
            return Geometry(self.coords.copy(), self.offsets.copy())
        offset_shift = self.coords.shape[0]
        new_coords = np.vstack([self.coords, other.coords])
        adjusted_other_offsets = other.offsets[1:] + offset_shift
        new_offsets = np.hstack([self.offsets, adjusted_other_offsets]).astype(np.int32, copy=False)
        return Geometry(new_coords, new_offsets)

    # 演算子糖衣
    def __add__(self, other: "Geometry") -> "Geometry":
        return self.concat(other)

    def __len__(self) -> int:
        """ポリライン本数（`M`）を返す。"""
        return int(self.offsets.shape[0] - 1) if self.offsets.size > 0 else 0

    @property
    def n_vertices(self) -> int:
        return int(self.coords.shape[0])

    @property
    def n_lines(self) -> int:
        return len(self)

    def __repr__(self) -> str:  # pragma: no cover - 表示用
        return f"Geometry(N={self.n_vertices}, M={self.n_lines})"


__all__ = ["Geometry"]
