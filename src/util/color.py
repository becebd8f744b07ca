"""
どこで: `util.color`。
何を: 色指定の正規化（Hex ⇔ RGB 0–255、RGB/CMYK のチャンネル丸め）と既定スウォッチ名。
なぜ: ホストへ色を登録する前段の値検証を一元化し、同じ受理仕様とエラーメッセージを提供するため。
"""

from __future__ import annotations

import math


def _clamp_round(x: float, hi: int) -> int:
    # 四捨五入（偶数丸めではない）
    v = int(math.floor(float(x) + 0.5))
    return 0 if v < 0 else hi if v > hi else v


def parse_hex_rgb(s: str) -> tuple[int, int, int]:
    """Hex 文字列から RGB(0–255) を返す。

    受理形式: "#RRGGBB", "0xRRGGBB", "RRGGBB"。大文字/小文字は不問。
    """
    t = s.strip()
    if t.startswith("#"):
        t = t[1:]
    elif t.lower().startswith("0x"):
        t = t[2:]
    if len(t) != 6:
        raise ValueError(f"invalid hex color length: '{s}' (expected RRGGBB)")
    try:
        r = int(t[0:2], 16)
        g = int(t[2:4], 16)
        b = int(t[4:6], 16)
    except ValueError as e:
        raise ValueError(f"invalid hex color: '{s}'") from e
    return (r, g, b)


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """RGB(0–255) を "#RRGGBB" へ（範囲外は丸めてクランプ）。"""
    rr, gg, bb = clamp_rgb(r, g, b)
    return f"#{rr:02X}{gg:02X}{bb:02X}"


def clamp_rgb(r: float, g: float, b: float) -> tuple[int, int, int]:
    """各チャンネルを整数に丸めて 0–255 にクランプする。"""
    return (_clamp_round(r, 255), _clamp_round(g, 255), _clamp_round(b, 255))


def clamp_cmyk(c: float, m: float, y: float, k: float) -> tuple[int, int, int, int]:
    """各チャンネルを整数に丸めて 0–100 にクランプする。"""
    return (
        _clamp_round(c, 100),
        _clamp_round(m, 100),
        _clamp_round(y, 100),
        _clamp_round(k, 100),
    )


def swatch_name_rgb(r: float, g: float, b: float) -> str:
    """名前未指定の RGB スウォッチ名（例: "RGB_255_0_0"）。"""
    rr, gg, bb = clamp_rgb(r, g, b)
    return f"RGB_{rr}_{gg}_{bb}"


def swatch_name_cmyk(c: float, m: float, y: float, k: float) -> str:
    """名前未指定の CMYK スウォッチ名（例: "CMYK_0_100_0_0"）。"""
    cc, mm, yy, kk = clamp_cmyk(c, m, y, k)
    return f"CMYK_{cc}_{mm}_{yy}_{kk}"


__all__ = [
    "parse_hex_rgb",
    "rgb_to_hex",
    "clamp_rgb",
    "clamp_cmyk",
    "swatch_name_rgb",
    "swatch_name_cmyk",
]
