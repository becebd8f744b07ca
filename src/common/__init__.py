"""
どこで: `common` パッケージ。
何を: 各層で共有する軽量基盤（値型 `Box`・環境変数設定・ロギング初期化）。
なぜ: engine/shapes/api から再利用する共通部分を分離し、依存の向きを単純化するため。
"""

from .types import Box, ColorTriple, Vec2

__all__ = [
    "Box",
    "ColorTriple",
    "Vec2",
]
