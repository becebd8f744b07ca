"""
どこで: `api.page`
何を: 既定ページ（サイズ/単位/マージン）を構成ファイルと環境変数から解決する。
なぜ: スケッチ冒頭の「どのページに描くか」を一行で得られるようにするため。

優先順（size/unit）: `config.yaml` → `configs/default.yaml` の `page` セクション → 環境変数
（`PGD_DEFAULT_PAGE_SIZE` / `PGD_DEFAULT_UNIT`）→ 組み込み既定。リポジトリの `default.yaml` は
size/unit を持たないため、通常は環境変数がそのまま効く。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

from common import settings
from common.types import Box
from engine.core.page import Margins, margin_box, page_box, page_size
from engine.core.units import Unit, parse_unit
from util.utils import config_section

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PageDefaults:
    # 寸法・マージンはポイント。`unit` は描画側で使う文書単位
    width: float
    height: float
    unit: Unit
    margins: Margins

    @property
    def box(self) -> Box:
        return page_box(self.width, self.height)

    @property
    def margin_box(self) -> Box:
        return margin_box(self.width, self.height, self.margins)


def _margins_from(raw: Any) -> Margins:
    if not isinstance(raw, Mapping):
        return Margins()
    return Margins(
        top=float(raw.get("top", 0.0)),
        left=float(raw.get("left", 0.0)),
        bottom=float(raw.get("bottom", 0.0)),
        right=float(raw.get("right", 0.0)),
    )


def page_defaults(root: Path | None = None) -> PageDefaults:
    """既定ページを解決する。

    Raises
    ------
    UnknownPageSizeError, UnknownUnitError
        構成/環境変数の名前が不正な場合。
    """
    page_cfg = config_section("page", root)
    s = settings.get()
    size_name = str(page_cfg.get("size") or s.DEFAULT_PAGE_SIZE)
    unit_name = str(page_cfg.get("unit") or s.DEFAULT_UNIT)
    w, h = page_size(size_name)
    unit = parse_unit(unit_name)
    logger.debug("page defaults: size=%s (%sx%s pt) unit=%s", size_name, w, h, unit.value)
    return PageDefaults(width=w, height=h, unit=unit, margins=_margins_from(page_cfg.get("margins")))


__all__ = ["PageDefaults", "page_defaults"]
