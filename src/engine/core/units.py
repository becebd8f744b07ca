"""
どこで: `engine.core.units`
何を: 文書単位（pt/mm/inch/px/cm/pica/agate/cicero）の閉じた列挙と換算。
なぜ: 単位名の文字列ディスパッチを列挙型に閉じ、不正な単位を解決時点で型付き例外にするため。

換算表は「1 単位あたりのポイント数」。起動時に一度だけ定義し、以後は読み取り専用。
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping

from common.types import Box


class UnknownUnitError(ValueError):
    """閉じた単位集合に含まれない単位名が渡された場合に送出される例外。"""


class Unit(Enum):
    """文書単位。値はホストで使われる短縮名。"""

    POINTS = "pt"
    MILLIMETERS = "mm"
    INCHES = "inch"
    PIXELS = "px"
    CENTIMETERS = "cm"
    PICAS = "p"
    AGATES = "ag"
    CICEROS = "c"


POINTS_PER_UNIT: Mapping[Unit, float] = MappingProxyType(
    {
        Unit.POINTS: 1.0,
        Unit.MILLIMETERS: 2.834645669,
        Unit.INCHES: 72.0,
        Unit.PIXELS: 1.0,
        Unit.CENTIMETERS: 28.34645669,
        Unit.PICAS: 12.0,
        Unit.AGATES: 14.4,
        Unit.CICEROS: 12.7878,
    }
)

# 小文字キー → Unit
_ALIASES: Mapping[str, Unit] = MappingProxyType(
    {
        "pt": Unit.POINTS,
        "point": Unit.POINTS,
        "points": Unit.POINTS,
        "mm": Unit.MILLIMETERS,
        "millimeter": Unit.MILLIMETERS,
        "millimeters": Unit.MILLIMETERS,
        "in": Unit.INCHES,
        "inch": Unit.INCHES,
        "inches": Unit.INCHES,
        "px": Unit.PIXELS,
        "pixel": Unit.PIXELS,
        "pixels": Unit.PIXELS,
        "cm": Unit.CENTIMETERS,
        "centimeter": Unit.CENTIMETERS,
        "centimeters": Unit.CENTIMETERS,
        "p": Unit.PICAS,
        "pica": Unit.PICAS,
        "picas": Unit.PICAS,
        "ag": Unit.AGATES,
        "agate": Unit.AGATES,
        "agates": Unit.AGATES,
        "c": Unit.CICEROS,
        "cicero": Unit.CICEROS,
        "ciceros": Unit.CICEROS,
    }
)


def parse_unit(value: Unit | str) -> Unit:
    """`Unit` または単位名（大文字小文字不問、別名可）から `Unit` を解決する。"""
    if isinstance(value, Unit):
        return value
    if isinstance(value, str):
        unit = _ALIASES.get(value.strip().lower())
        if unit is not None:
            return unit
    valid = ", ".join(u.value for u in Unit)
    raise UnknownUnitError(f"invalid measurement unit: {value!r} (valid units are: {valid})")


def convert(value: float, from_unit: Unit | str, to_unit: Unit | str) -> float:
    """`value` を `from_unit` から `to_unit` へ換算する（ポイント経由）。

    例: `convert(1, "inch", "pt") == 72.0`, `convert(10, "mm", "cm") ≈ 1.0`
    """
    src = parse_unit(from_unit)
    dst = parse_unit(to_unit)
    if src is dst:
        return float(value)
    return float(value) * POINTS_PER_UNIT[src] / POINTS_PER_UNIT[dst]


def to_points(value: float, unit: Unit | str) -> float:
    return convert(value, unit, Unit.POINTS)


def from_points(value: float, unit: Unit | str) -> float:
    return convert(value, Unit.POINTS, unit)


def convert_box(box: Box, from_unit: Unit | str, to_unit: Unit | str) -> Box:
    """`Box` の全座標を換算する（原点は共有している前提）。"""
    src = parse_unit(from_unit)
    dst = parse_unit(to_unit)
    return Box(
        top=convert(box.top, src, dst),
        left=convert(box.left, src, dst),
        bottom=convert(box.bottom, src, dst),
        right=convert(box.right, src, dst),
    )


__all__ = [
    "UnknownUnitError",
    "Unit",
    "POINTS_PER_UNIT",
    "parse_unit",
    "convert",
    "to_points",
    "from_points",
    "convert_box",
]
