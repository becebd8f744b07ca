"""
どこで: `shapes` のレジストリ層（関数専用）。
何を: `@shape` デコレータで shape 関数を登録し、取得/一覧/検査を提供。
なぜ: 形状生成の拡張を一貫 API で管理し、名前（文字列）から安全に解決するため。

概要:
- 登録対象は「関数」のみ（`Geometry` を返す）。
- デコレータは名前省略可（`@shape` / `@shape()`）と明示名指定をサポート。
- キーは正規化される（前後空白除去・小文字化・ハイフン→アンダースコア）。
"""

from __future__ import annotations

import inspect
from typing import Any, Callable, Mapping

ShapeFn = Callable[..., Any]

_shape_registry: dict[str, ShapeFn] = {}


def _normalize_key(name: str) -> str:
    """レジストリキーの正規化（例: "Right-Angle-Triangle" -> "right_angle_triangle"）。"""
    if not isinstance(name, str):
        raise TypeError("レジストリキーは str である必要があります")
    key = name.strip().replace("-", "_").lower()
    if not key:
        raise ValueError("レジストリキーは空であってはなりません")
    return key


def shape(arg: Any | None = None, /, name: str | None = None):
    """シェイプ関数をレジストリに登録するデコレータ。

    使用例:
    - `@shape` / `@shape()`                      → 関数名から自動推論。
    - `@shape("custom")` / `@shape(name="custom")` → 明示名で登録。

    例外:
    - TypeError: 関数以外を登録しようとした場合。
    - ValueError: 別の関数が同名で登録済みの場合。
    """

    def _register_checked(obj: Any, resolved_name: str | None = None):
        if not inspect.isfunction(obj):
            raise TypeError(f"@shape は関数のみ登録可能です: got {obj!r}")
        key = _normalize_key(resolved_name or obj.__name__)
        existing = _shape_registry.get(key)
        if existing is not None and existing is not obj:
            raise ValueError(f"'{key}' は既に登録されています")
        _shape_registry[key] = obj
        return obj

    # 直付け (@shape)
    if inspect.isfunction(arg) and name is None:
        return _register_checked(arg, None)

    # 位置引数で名前を渡した (@shape("name"))
    if isinstance(arg, str) and name is None:

        def _decorator_named(obj: Any):
            return _register_checked(obj, arg)

        return _decorator_named

    # name キーワード引数、または引数なし
    def _decorator_generic(obj: Any):
        return _register_checked(obj, name)

    return _decorator_generic


def get_shape(name: str) -> ShapeFn:
    """登録されたシェイプ関数を取得。

    例外:
        KeyError: シェイプが登録されていない場合
    """
    key = _normalize_key(name)
    if key not in _shape_registry:
        raise KeyError(f"'{name}' は登録されていません")
    return _shape_registry[key]


def list_shapes() -> list[str]:
    """登録されているシェイプ名の一覧（ソート済み）。"""
    return sorted(_shape_registry)


def is_shape_registered(name: str) -> bool:
    return _normalize_key(name) in _shape_registry


def unregister(name: str) -> None:
    """名前を指定して登録を解除（存在しない場合は無視）。"""
    _shape_registry.pop(_normalize_key(name), None)


def get_registry() -> Mapping[str, ShapeFn]:
    """レジストリ辞書のコピーを返す。"""
    return dict(_shape_registry)


__all__ = [
    "shape",
    "get_shape",
    "list_shapes",
    "is_shape_registered",
    "unregister",
    "get_registry",
]
