from __future__ import annotations

import logging

import numpy as np
import pytest

from api.canvas import (
    MemoryCanvas,
    SetBounds,
    apply_all,
    plan_align,
    plan_center_on_page,
    plan_center_to,
    plan_random_position,
)
from common.types import Box
from engine.core.bounds import OutOfBoundsError
from shapes.rect import rect


def test_plan_does_not_mutate_canvas(canvas: MemoryCanvas, small_box: Box) -> None:
    cmd = plan_center_to(canvas, "frame", "key")
    assert canvas.get_bounds("frame") == small_box
    assert cmd == SetBounds("frame", Box.from_xywh(250.0, 325.0, 100.0, 50.0))


def test_apply_writes_back(canvas: MemoryCanvas) -> None:
    cmd = plan_center_to(canvas, "frame", "key")
    cmd.apply(canvas)
    assert canvas.get_bounds("frame").center == canvas.get_bounds("key").center


def test_plan_center_on_page(canvas: MemoryCanvas, page: Box) -> None:
    cmd = plan_center_on_page(canvas, "frame", page.width, page.height)
    assert cmd.box.center == page.center


def test_plan_align_to_page_edge(canvas: MemoryCanvas, page: Box) -> None:
    cmd = plan_align(canvas, "frame", page, "right")
    assert cmd.box.right == page.right
    assert cmd.box.top == canvas.get_bounds("frame").top


def test_plan_random_position_keeps_size(canvas: MemoryCanvas, rng: np.random.Generator) -> None:
    cmd = plan_random_position(canvas, "frame", 500, 700, 10, rng=rng)
    assert cmd.box.width == pytest.approx(100.0)
    assert cmd.box.height == pytest.approx(50.0)
    assert 10.0 <= cmd.box.left <= 390.0
    assert 10.0 <= cmd.box.top <= 640.0


def test_plan_random_position_out_of_bounds_leaves_canvas_untouched(
    canvas: MemoryCanvas, small_box: Box
) -> None:
    with pytest.raises(OutOfBoundsError):
        plan_random_position(canvas, "frame", 100, 700, 10)
    assert canvas.get_bounds("frame") == small_box


def test_apply_all_counts_and_logs(
    canvas: MemoryCanvas, page: Box, caplog: pytest.LogCaptureFixture
) -> None:
    cmds = [
        plan_center_on_page(canvas, "frame", page.width, page.height),
        plan_align(canvas, "key", page, "top"),
    ]
    with caplog.at_level(logging.DEBUG, logger="api.canvas"):
        assert apply_all(canvas, cmds) == 2
    assert canvas.get_bounds("key").top == 0.0
    assert sum("set_bounds" in r.getMessage() for r in caplog.records) == 2


def test_apply_all_reraises_and_warns(canvas: MemoryCanvas, caplog: pytest.LogCaptureFixture) -> None:
    cmds = [
        SetBounds("frame", Box.from_xywh(0, 0, 1, 1)),
        SetBounds("missing", Box.from_xywh(0, 0, 1, 1)),
    ]
    with caplog.at_level(logging.WARNING, logger="api.canvas"):
        with pytest.raises(KeyError):
            apply_all(canvas, cmds)
    # 失敗前の分は適用済み
    assert canvas.get_bounds("frame") == Box.from_xywh(0, 0, 1, 1)
    assert any("failed" in r.getMessage() for r in caplog.records)


def test_memory_canvas_add_geometry() -> None:
    c = MemoryCanvas()
    box = c.add_geometry("r", rect(5, 5, 10, 20))
    assert box == Box.from_xywh(5, 5, 10, 20)
    assert "r" in c
    assert len(c) == 1
    with pytest.raises(KeyError):
        c.get_bounds("nope")
