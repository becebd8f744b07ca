"""
どこで: `engine.core.rng`
何を: 配置計算で使う乱数生成器の解決と、整数乱数ヘルパ。
なぜ: 乱数源を引数で差し替え可能にし、テストやスケッチの再現性を設定一箇所で制御するため。
"""

from __future__ import annotations

import math

import numpy as np

from common import settings


def make_rng(seed: int | None = None) -> np.random.Generator:
    """`numpy.random.Generator` を返す。

    - `seed` 指定時はそれを使用。
    - 未指定時は設定 `PGD_RANDOM_SEED` を使用（未設定なら OS エントロピー）。
    """
    if seed is None:
        seed = settings.get().RANDOM_SEED
    return np.random.default_rng(seed)


def random_int(lo: float, hi: float, *, rng: np.random.Generator | None = None) -> int:
    """`floor(U[lo, hi))` を返す。`hi` は含まない（サイコロなら `random_int(1, 7)`）。"""
    gen = rng if rng is not None else make_rng()
    return int(math.floor(gen.random() * (hi - lo) + lo))


__all__ = ["make_rng", "random_int"]
