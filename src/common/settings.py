"""
どこで: `common.settings`
何を: プロジェクトの環境変数を型付きで一元管理し、起動時に読み込む。
なぜ: `os.getenv` の散在を解消し、既定値/型の一貫性とテスト容易性を高めるため。
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_bool, env_int, env_str


@dataclass
class _Settings:
    # 乱数（None は OS エントロピー）
    RANDOM_SEED: int | None = None

    # 既定値
    DEFAULT_UNIT: str = "pt"
    DEFAULT_PAGE_SIZE: str = "letter"

    # ロギング/デバッグ
    LOG_LEVEL: str = "WARNING"
    DEBUG_LAYOUT: bool = False


_settings = _Settings()


def reload_from_env() -> None:
    """環境変数から設定を再読込。

    - 単位名/ページ名はここでは検証しない（解決時に各モジュールが型付き例外を送出）。
    - シードは負値を 0 に丸める（`numpy.random.default_rng` は負のシードを受け付けない）。
    """
    _settings.RANDOM_SEED = env_int("PGD_RANDOM_SEED", None, min_value=0)
    _settings.DEFAULT_UNIT = env_str("PGD_DEFAULT_UNIT", "pt")
    _settings.DEFAULT_PAGE_SIZE = env_str("PGD_DEFAULT_PAGE_SIZE", "letter")
    _settings.LOG_LEVEL = env_str("PGD_LOG_LEVEL", "WARNING")
    _settings.DEBUG_LAYOUT = env_bool("PGD_DEBUG_LAYOUT", False)


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings"]
