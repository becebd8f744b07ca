"""
どこで: `engine.core.lerp`
何を: スカラー/3 チャンネル色の線形補間と、値域の写像。
なぜ: 色グラデーションや寸法の段階変化をスケッチ側で簡潔に書けるようにするため。
"""

from __future__ import annotations

import math
from typing import Sequence


class DegenerateRangeError(ValueError):
    """入力値域の幅が 0（`in_min == in_max`）で写像できない場合に送出される例外。"""


def _round_half_up(x: float) -> int:
    # Python の round() は偶数丸めのため使わない（127.5 -> 128, 126.5 -> 127）
    return int(math.floor(x + 0.5))


def lerp(a: float, b: float, t: float) -> float:
    """`a*(1-t) + b*t`。`t` はクランプしない（外挿も可）。"""
    return a * (1 - t) + b * t


def lerp_color(c1: Sequence[float], c2: Sequence[float], t: float) -> tuple[int, int, int]:
    """3 チャンネルをそれぞれ `lerp` し、四捨五入した整数で返す。

    クランプはしない（RGB 0–255 でも CMYK 0–100 でも使えるように）。
    8bit 色として使う場合の範囲制限は `util.color.clamp_rgb` を使う。
    """
    if len(c1) != 3 or len(c2) != 3:
        raise ValueError("lerp_color には 3 チャンネルの色が必要です")
    return (
        _round_half_up(lerp(c1[0], c2[0], t)),
        _round_half_up(lerp(c1[1], c2[1], t)),
        _round_half_up(lerp(c1[2], c2[2], t)),
    )


def map_range(
    value: float, in_min: float, in_max: float, out_min: float, out_max: float
) -> float:
    """`value` を `[in_min, in_max]` から `[out_min, out_max]` へ線形に写す（クランプなし）。

    Raises
    ------
    DegenerateRangeError
        `in_min == in_max` の場合（NaN/Inf を黙って返さない）。
    """
    if in_max == in_min:
        raise DegenerateRangeError(f"input range is degenerate: [{in_min}, {in_max}]")
    return (value - in_min) * (out_max - out_min) / (in_max - in_min) + out_min


__all__ = ["DegenerateRangeError", "lerp", "lerp_color", "map_range"]
