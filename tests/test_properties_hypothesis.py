import pytest

hypothesis = pytest.importorskip("hypothesis", reason="hypothesis is a dev optional dependency")
from hypothesis import given, strategies as st  # type: ignore

from common.types import Box
from engine.core.bounds import center_box, contains, height, random_box_within, width
from engine.core.lerp import lerp, map_range
from engine.core.units import Unit, convert

pytestmark = pytest.mark.optional

coord = st.floats(-1e4, 1e4, allow_nan=False, allow_infinity=False)
size = st.floats(0, 1e4, allow_nan=False, allow_infinity=False)


@st.composite
def boxes(draw, sizes=size):
    x, y = draw(coord), draw(coord)
    return Box.from_xywh(x, y, draw(sizes), draw(sizes))


@given(b=boxes())
def test_width_height_match_edges(b):
    assert width(b) == b.right - b.left
    assert height(b) == b.bottom - b.top


@given(outer=boxes(), fx=st.floats(0, 1), fy=st.floats(0, 1))
def test_center_box_contained_and_balanced(outer, fx, fy):
    inner = Box.from_xywh(0.0, 0.0, outer.width * fx, outer.height * fy)
    got = center_box(inner, outer)
    tol = 1e-6 * (1 + abs(outer.left) + abs(outer.top) + outer.width + outer.height)
    widened = Box(outer.top - tol, outer.left - tol, outer.bottom + tol, outer.right + tol)
    assert contains(widened, got)
    assert abs((got.left - outer.left) - (outer.right - got.right)) <= tol
    assert abs((got.top - outer.top) - (outer.bottom - got.bottom)) <= tol


@given(
    fw=st.floats(0, 200),
    fh=st.floats(0, 200),
    extra_w=st.floats(0, 500),
    extra_h=st.floats(0, 500),
    pad=st.floats(0, 50),
    seed=st.integers(0, 2**32 - 1),
)
def test_random_box_within_respects_padding(fw, fh, extra_w, extra_h, pad, seed):
    import numpy as np

    max_w = fw + 2 * pad + extra_w
    max_h = fh + 2 * pad + extra_h
    b = random_box_within(fw, fh, max_w, max_h, pad, rng=np.random.default_rng(seed))
    eps = 1e-9 * (1 + max_w + max_h)
    assert pad - eps <= b.left <= max_w - fw - pad + eps
    assert pad - eps <= b.top <= max_h - fh - pad + eps


@given(
    v=st.floats(-1e6, 1e6, allow_nan=False),
    a=st.sampled_from(list(Unit)),
    b=st.sampled_from(list(Unit)),
)
def test_convert_round_trip(v, a, b):
    back = convert(convert(v, a, b), b, a)
    assert back == pytest.approx(v, rel=1e-9, abs=1e-9)


@given(a=coord, b=coord)
def test_lerp_endpoints(a, b):
    assert lerp(a, b, 0.0) == a
    assert lerp(a, b, 1.0) == b


@given(
    lo=st.floats(-1e3, 1e3),
    span=st.floats(1e-3, 1e3),
    t=st.floats(0, 1),
)
def test_map_range_inverts_lerp(lo, span, t):
    hi = lo + span
    v = lerp(lo, hi, t)
    assert map_range(v, lo, hi, 0.0, 1.0) == pytest.approx(t, abs=1e-6)
