"""共通フィクスチャ。

- 乱数シード固定（numpy Generator）
- 小さな Box 試料と MemoryCanvas
- 設定の環境変数を汚さないための後始末
"""

from __future__ import annotations

from typing import Iterator

import numpy as np
import pytest

from api.canvas import MemoryCanvas
from common import settings
from common.types import Box


@pytest.fixture()
def rng() -> np.random.Generator:
    """シード固定の乱数生成器。"""
    return np.random.default_rng(12345)


@pytest.fixture()
def page() -> Box:
    """US Letter 相当のページ矩形（pt）。"""
    return Box(top=0.0, left=0.0, bottom=792.0, right=612.0)


@pytest.fixture()
def small_box() -> Box:
    return Box.from_xywh(10.0, 20.0, 100.0, 50.0)


@pytest.fixture()
def canvas(small_box: Box) -> MemoryCanvas:
    return MemoryCanvas(
        {
            "frame": small_box,
            "key": Box.from_xywh(200.0, 300.0, 200.0, 100.0),
        }
    )


@pytest.fixture()
def clean_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """PGD_* 環境変数を外した状態で設定を再読込し、終了後も既定へ戻す。"""
    for name in (
        "PGD_RANDOM_SEED",
        "PGD_DEFAULT_UNIT",
        "PGD_DEFAULT_PAGE_SIZE",
        "PGD_DEBUG_LAYOUT",
        "PGD_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    settings.reload_from_env()
    yield
    monkeypatch.undo()
    settings.reload_from_env()
