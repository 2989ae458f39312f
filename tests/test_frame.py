import pytest

from framelayout.frame import Align, Edge, Fitting, Frame
from framelayout.num import NumKind
from framelayout.rect import Rect


def make_frame(size=100.0):
    return Frame(Rect(0.0, 0.0, size, size))


def right_of(rect):
    return rect.x + rect.w


def bottom_of(rect):
    return rect.y + rect.h


def test_defaults():
    frame = make_frame()
    assert frame.margin == 4.0
    assert frame.gap == 4.0
    assert frame.scale == 1.0
    assert frame.fitting is Fitting.AGGRESSIVE
    assert frame.rect == Rect(0.0, 0.0, 100.0, 100.0)
    assert frame.cursor == Rect(0.0, 0.0, 100.0, 100.0).shrink(4.0)


def test_set_margin_recomputes_cursor():
    frame = make_frame()
    frame.push_edge(Edge.LEFT, 20.0)
    frame.margin = 8.0
    assert frame.margin == 8.0
    assert frame.cursor == frame.rect.shrink(8.0)


def test_integer_kind_reports_integers():
    frame = Frame(Rect(0, 0, 101, 101), NumKind.I32)
    assert frame.cursor == Rect(0, 0, 101, 101).shrink(4)
    assert frame.margin == 4
    assert isinstance(frame.cursor.w, int)
    assert isinstance(frame.rect.x, int)


def test_push_edge_left_shrinks_cursor():
    frame = make_frame()
    before = frame.cursor
    child = frame.push_edge(Edge.LEFT, 30.0)
    assert child.rect == Rect(before.x, before.y, 30.0, before.h)
    after = frame.cursor
    assert after.x == before.x + 30.0 + frame.gap
    assert after.w == before.w - 30.0 - frame.gap
    assert after.y == before.y and after.h == before.h


def test_push_edge_right_keeps_cursor_origin():
    frame = make_frame()
    before = frame.cursor
    child = frame.push_edge(Edge.RIGHT, 30.0)
    assert right_of(child.rect) == right_of(before)
    assert child.rect.w == 30.0
    after = frame.cursor
    assert after.x == before.x
    assert after.w == before.w - 30.0 - frame.gap


def test_push_edge_bottom_aligns_to_bottom():
    frame = make_frame()
    before = frame.cursor
    child = frame.push_edge(Edge.BOTTOM, 30.0)
    assert bottom_of(child.rect) == bottom_of(before)
    assert child.rect.w == before.w
    assert frame.cursor.y == before.y
    assert frame.cursor.h == before.h - 30.0 - frame.gap


def test_callback_receives_child():
    frame = make_frame()
    seen = []
    child = frame.push_edge(Edge.TOP, 20.0, seen.append)
    assert seen == [child]
    assert seen[0].rect.h == 20.0


def test_child_cursor_uses_parent_gap():
    frame = make_frame()
    frame.gap = 10.0
    before = frame.cursor
    child = frame.push_edge(Edge.TOP, 40.0)
    assert frame.gap == 10.0
    assert child.cursor == child.rect.shrink(10.0)
    assert frame.cursor.y == before.y + 40.0 + 10.0
    assert child.fitting is frame.fitting


def test_too_small_child_is_skipped():
    frame = make_frame()
    before = frame.cursor
    seen = []
    assert frame.push_edge(Edge.LEFT, 0.5, seen.append) is None
    assert seen == []
    assert frame.cursor == before


def test_center_does_not_touch_cursor():
    frame = make_frame()
    before = frame.cursor
    child = frame.push_size(Align.CENTER, 20.0, 20.0)
    assert frame.cursor == before
    left_space = child.rect.x - before.x
    right_space = right_of(before) - right_of(child.rect)
    assert left_space == pytest.approx(right_space)
    top_space = child.rect.y - before.y
    bottom_space = bottom_of(before) - bottom_of(child.rect)
    assert top_space == pytest.approx(bottom_space)


def test_aggressive_drops_oversized_child():
    frame = make_frame()
    before = frame.cursor
    assert frame.push_size(Align.TOP_LEFT, 500.0, 10.0) is None
    assert frame.cursor == before


def test_relaxed_keeps_oversized_child():
    frame = make_frame()
    frame.fitting = Fitting.RELAXED
    child = frame.push_size(Align.TOP_LEFT, 500.0, 10.0)
    assert child.rect.w == 500.0
    assert child.fitting is Fitting.RELAXED


def test_clamp_limits_child_to_cursor():
    frame = make_frame()
    frame.fitting = Fitting.CLAMP
    before = frame.cursor
    child = frame.push_size(Align.TOP_LEFT, 500.0, 10.0)
    assert child.rect.x == before.x
    assert right_of(child.rect) == right_of(before)
    assert child.rect.h == 10.0


def test_scale_fitting_preserves_aspect():
    frame = make_frame()
    frame.fitting = Fitting.SCALE
    before = frame.cursor
    child = frame.push_size(Align.TOP_LEFT, 200.0, 100.0)
    assert child.rect.w == pytest.approx(before.w, rel=1e-5)
    assert child.rect.h == pytest.approx(child.rect.w / 2.0, rel=1e-5)
    assert right_of(child.rect) <= right_of(before) + 1e-3


def test_scale_factor_multiplies_child_size():
    frame = make_frame()
    frame.scale = 2.0
    before = frame.cursor
    child = frame.push_edge(Edge.TOP, 10.0)
    assert child.rect.h == 10.0 * frame.scale
    assert child.rect.w == before.w
    assert frame.cursor.y == before.y + 10.0 * frame.scale + frame.gap * frame.scale


def test_fill_takes_whole_cursor():
    frame = make_frame()
    before = frame.cursor
    child = frame.fill()
    assert child.rect == before
    assert frame.cursor.h == 0.0
    assert frame.fill() is None


def test_place_offsets_from_cursor():
    frame = make_frame()
    before = frame.cursor
    child = frame.place(Align.TOP_LEFT, 10.0, 10.0, 30.0, 20.0)
    assert child.rect == Rect(before.x + 10.0, before.y + 10.0, 30.0, 20.0)
    assert frame.cursor.y == before.y + 20.0 + frame.gap + 10.0


def test_place_center_leaves_cursor():
    frame = make_frame()
    before = frame.cursor
    child = frame.place(Align.CENTER, 5.0, 5.0, 30.0, 20.0)
    assert child.rect.x == before.x + 5.0
    assert frame.cursor == before


def test_divide_width_single_column_is_cursor_width():
    frame = make_frame()
    assert frame.divide_width(1) == frame.cursor.w
    assert frame.divide_height(0) == frame.cursor.h


def test_divide_width_accounts_for_gaps():
    frame = make_frame()
    size = frame.divide_width(4)
    assert 4 * size + 3 * frame.gap == pytest.approx(frame.cursor.w)
    rows = frame.divide_height(3)
    assert 3 * rows + 2 * frame.gap == pytest.approx(frame.cursor.h)


def test_divided_rows_all_fit_without_overlap():
    frame = make_frame()
    split = frame.divide_height(3)
    children = [frame.push_edge(Edge.TOP, split) for _ in range(3)]
    rects = [child.rect for child in children]
    assert all(r.h == pytest.approx(split) for r in rects)
    assert not rects[0].overlaps(rects[1])
    assert not rects[1].overlaps(rects[2])
    assert bottom_of(rects[2]) <= bottom_of(frame.rect)


def test_children_stay_inside_parent():
    frame = make_frame()
    children = [frame.push_edge(Edge.TOP, 20.0) for _ in range(10)]
    kept = [c for c in children if c is not None]
    assert len(kept) < 10
    for child in kept:
        assert bottom_of(child.rect) <= bottom_of(frame.rect)
        assert child.rect.x >= frame.rect.x