"""
どこで: `api` 入口（高レベル公開 API）。
何を: Box 演算・単位換算・補間・色・形状・ホスト境界（HostCanvas/SetBounds）を再輸出。
なぜ: 描画スクリプトが単一名前空間から「計算 → コマンド → 書き戻し」まで完結できるようにするため。

Usage:
    from api import Box, MemoryCanvas, apply_all, plan_random_position, convert

    canvas = MemoryCanvas({"logo": Box.from_xywh(0, 0, 100, 50)})
    cmd = plan_random_position(canvas, "logo", 500, 700, padding=convert(5, "mm", "pt"))
    apply_all(canvas, [cmd])
"""

from common.logging import setup_default_logging
from common.types import Box, ColorTriple, Vec2
from engine.core.bounds import (
    Alignment,
    InvalidAlignmentError,
    OutOfBoundsError,
    align_box,
    center_box,
    center_on_page,
    contains,
    height,
    random_box_within,
    union_box,
    width,
)
from engine.core.geometry import Geometry
from engine.core.lerp import DegenerateRangeError, lerp, lerp_color, map_range
from engine.core.page import (
    PAGE_SIZES,
    Margins,
    UnknownPageSizeError,
    live_area,
    margin_box,
    page_box,
    page_size,
)
from engine.core.rng import make_rng, random_int
from engine.core.transform_utils import (
    AnchorPoint,
    FlipDirection,
    InvalidFlipDirectionError,
    anchor_point,
    flip_box,
    flip_geometry,
    rotate_geometry,
    rotated_bounds,
)
from engine.core.units import (
    POINTS_PER_UNIT,
    Unit,
    UnknownUnitError,
    convert,
    convert_box,
    from_points,
    parse_unit,
    to_points,
)
from shapes import get_shape, is_shape_registered, list_shapes, shape
from util.color import (
    clamp_cmyk,
    clamp_rgb,
    parse_hex_rgb,
    rgb_to_hex,
    swatch_name_cmyk,
    swatch_name_rgb,
)

from .canvas import (
    HostCanvas,
    MemoryCanvas,
    SetBounds,
    apply_all,
    plan_align,
    plan_center_on_page,
    plan_center_to,
    plan_random_position,
)
from .page import PageDefaults, page_defaults

__all__ = [
    # 値型
    "Box",
    "Vec2",
    "ColorTriple",
    "Geometry",
    "Margins",
    "Unit",
    "Alignment",
    "AnchorPoint",
    "FlipDirection",
    # Box 演算
    "width",
    "height",
    "contains",
    "union_box",
    "center_box",
    "center_on_page",
    "align_box",
    "random_box_within",
    "anchor_point",
    "flip_box",
    "rotated_bounds",
    "flip_geometry",
    "rotate_geometry",
    # 単位
    "POINTS_PER_UNIT",
    "parse_unit",
    "convert",
    "convert_box",
    "to_points",
    "from_points",
    "PAGE_SIZES",
    "page_size",
    "page_box",
    "margin_box",
    "live_area",
    # 補間/乱数
    "lerp",
    "lerp_color",
    "map_range",
    "make_rng",
    "random_int",
    # 色
    "parse_hex_rgb",
    "rgb_to_hex",
    "clamp_rgb",
    "clamp_cmyk",
    "swatch_name_rgb",
    "swatch_name_cmyk",
    # 形状
    "shape",
    "get_shape",
    "list_shapes",
    "is_shape_registered",
    # ホスト境界
    "HostCanvas",
    "MemoryCanvas",
    "SetBounds",
    "apply_all",
    "plan_align",
    "plan_center_on_page",
    "plan_center_to",
    "plan_random_position",
    "PageDefaults",
    "page_defaults",
    # 例外
    "OutOfBoundsError",
    "UnknownUnitError",
    "DegenerateRangeError",
    "InvalidAlignmentError",
    "InvalidFlipDirectionError",
    "UnknownPageSizeError",
    # ロギング
    "setup_default_logging",
]

__version__ = "2025.10"
