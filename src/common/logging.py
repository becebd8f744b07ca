"""
どこで: `common.logging`
何を: 描画スクリプト向けの最小ロギング設定ヘルパ。
なぜ: ライブラリはハンドラを持たず、スクリプト側が未設定のときだけ見える出力を用意するため。

各モジュールは `logging.getLogger(__name__)` を使う。配置コマンドのトレースは `api.canvas` に出る。
"""

from __future__ import annotations

import logging

from . import settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _resolve_level(level: int | str | None) -> int:
    if level is None:
        level = settings.get().LOG_LEVEL
    if isinstance(level, str):
        named = logging.getLevelName(level.strip().upper())
        return named if isinstance(named, int) else logging.WARNING
    return int(level)


def setup_default_logging(level: int | str | None = None) -> None:
    """ルートロガーが未設定なら `basicConfig` を 1 度だけ適用する。

    `level` 省略時は `PGD_LOG_LEVEL`（既定 WARNING）。未知のレベル名は WARNING。
    既にハンドラがある（アプリ/pytest が設定済み）場合は何もしない。
    """
    root = logging.getLogger()
    if root.handlers:
        return
    logging.basicConfig(level=_resolve_level(level), format=LOG_FORMAT)


__all__ = ["LOG_FORMAT", "setup_default_logging"]
