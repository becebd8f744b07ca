"""
どこで: `shapes` パッケージ（関数登録）。
何を: ビルトイン shape を import 副作用で登録し、名前から解決できるようにする。
なぜ: 形状生成の拡張点を一箇所に集約するため。
"""

# 関数版 shape 定義を import して登録（副作用）
from . import ellipse as _register_ellipse  # noqa: F401
from . import line as _register_line  # noqa: F401
from . import polygon as _register_polygon  # noqa: F401
from . import rect as _register_rect  # noqa: F401
from .registry import get_shape, is_shape_registered, list_shapes, shape  # re-export

__all__ = [
    "shape",
    "get_shape",
    "list_shapes",
    "is_shape_registered",
]
