"""Frames: rectangular regions that hand out child regions from their edges."""

from __future__ import annotations

import math
from enum import Enum
from typing import Callable, Optional

from framelayout.num import NumKind, to_float32
from framelayout.rect import Rect

_I32_MIN = -(1 << 31)
_I32_MAX = (1 << 31) - 1


class Edge(Enum):
    """The side of a frame a child frame is taken from."""

    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"


class Align(Enum):
    """Placement of a sized child frame.

    The first word names the edge the available space shrinks from, the second
    the alignment along that edge: LEFT_TOP pushes from the left and aligns to
    the top, while TOP_LEFT pushes from the top and aligns to the left.
    CENTER is the only option that leaves the available space untouched.
    """

    LEFT_TOP = "left_top"
    LEFT_CENTER = "left_center"
    LEFT_BOTTOM = "left_bottom"
    RIGHT_TOP = "right_top"
    RIGHT_CENTER = "right_center"
    RIGHT_BOTTOM = "right_bottom"
    TOP_LEFT = "top_left"
    TOP_CENTER = "top_center"
    TOP_RIGHT = "top_right"
    BOTTOM_LEFT = "bottom_left"
    BOTTOM_CENTER = "bottom_center"
    BOTTOM_RIGHT = "bottom_right"
    CENTER = "center"


class Fitting(Enum):
    """How child frames that exceed the available space are handled."""

    RELAXED = "relaxed"
    """Keep the child even if it goes past the available space."""
    AGGRESSIVE = "aggressive"
    """Drop children that go past the available space."""
    CLAMP = "clamp"
    """Clamp the child's edges to the available space."""
    SCALE = "scale"
    """Scale the child down to fit, preserving its aspect ratio."""


_ALIGN_EDGE = {
    Align.LEFT_TOP: Edge.LEFT,
    Align.LEFT_CENTER: Edge.LEFT,
    Align.LEFT_BOTTOM: Edge.LEFT,
    Align.RIGHT_TOP: Edge.RIGHT,
    Align.RIGHT_CENTER: Edge.RIGHT,
    Align.RIGHT_BOTTOM: Edge.RIGHT,
    Align.TOP_LEFT: Edge.TOP,
    Align.TOP_CENTER: Edge.TOP,
    Align.TOP_RIGHT: Edge.TOP,
    Align.BOTTOM_LEFT: Edge.BOTTOM,
    Align.BOTTOM_CENTER: Edge.BOTTOM,
    Align.BOTTOM_RIGHT: Edge.BOTTOM,
    Align.CENTER: Edge.LEFT,
}

_EDGE_ALIGN = {
    Edge.LEFT: Align.LEFT_TOP,
    Edge.RIGHT: Align.RIGHT_TOP,
    Edge.TOP: Align.TOP_LEFT,
    Edge.BOTTOM: Align.BOTTOM_LEFT,
}

_VERTICAL_CENTER = {Align.LEFT_CENTER, Align.RIGHT_CENTER}
_VERTICAL_END = {Align.LEFT_BOTTOM, Align.RIGHT_BOTTOM}
_HORIZONTAL_CENTER = {Align.TOP_CENTER, Align.BOTTOM_CENTER}
_HORIZONTAL_END = {Align.TOP_RIGHT, Align.BOTTOM_RIGHT}

ChildCallback = Callable[["Frame"], object]


def _fmax(a: float, b: float) -> float:
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return a if a >= b else b


def _fmin(a: float, b: float) -> float:
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return a if a <= b else b


def _trunc_i32(value: float) -> float:
    """Truncate toward zero into the signed 32-bit range, as a float."""
    if math.isnan(value):
        return 0.0
    if math.isinf(value):
        return float(_I32_MAX if value > 0 else _I32_MIN)
    return float(max(_I32_MIN, min(_I32_MAX, int(value))))


def _f(value: float) -> float:
    return to_float32(value)


class Frame:
    """A rectangular area that hands out child frames from its available space.

    ``rect`` is the frame's own area and never changes; ``cursor`` is the space
    still available for children and shrinks as children are added. Values are
    reported in the frame's number ``kind``.
    """

    def __init__(self, rect: Rect, kind: NumKind = NumKind.F32) -> None:
        self.kind = kind
        self._scale = 1.0
        self._margin = 4.0
        self._gap = self._margin
        self._rect = rect.to_f32()
        self._cursor = self._rect.shrink(self._margin).to_f32()
        self.fitting = Fitting.AGGRESSIVE

    @classmethod
    def _child(cls, parent: Frame, rect: Rect, cursor: Rect, fitting: Fitting) -> Frame:
        child = cls.__new__(cls)
        child.kind = parent.kind
        child._scale = parent._scale
        child._margin = parent._margin
        child._gap = parent._gap
        child._rect = rect
        child._cursor = cursor
        child.fitting = fitting
        return child

    def __repr__(self) -> str:
        return (
            f"Frame(rect={self.rect!r}, cursor={self.cursor!r}, "
            f"kind={self.kind.name}, fitting={self.fitting.name})"
        )

    @property
    def rect(self) -> Rect:
        """The frame's own area; unaffected by adding children."""
        return Rect.from_f32(self._rect, self.kind)

    @property
    def cursor(self) -> Rect:
        """The space still available for child frames."""
        return Rect.from_f32(self._cursor, self.kind)

    @property
    def margin(self) -> float | int:
        """Space between the frame's edge and its available area."""
        return self.kind.from_f32(self._margin)

    @margin.setter
    def margin(self, value: float | int) -> None:
        self._margin = self.kind.to_f32(value)
        self._cursor = self._rect.shrink(self._margin).to_f32()

    @property
    def gap(self) -> float | int:
        """Space left between consecutive child frames."""
        return self.kind.from_f32(self._gap)

    @gap.setter
    def gap(self, value: float | int) -> None:
        self._gap = self.kind.to_f32(value)

    @property
    def scale(self) -> float:
        """Scaling factor applied to child dimensions."""
        return self._scale

    @scale.setter
    def scale(self, value: float) -> None:
        self._scale = _f(float(value))

    def divide_width(self, columns: int) -> float | int:
        """Width of each of ``columns`` equal columns of the available space, gaps included."""
        return self.kind.from_f32(self._divide(self._cursor.w, columns))

    def divide_height(self, rows: int) -> float | int:
        """Height of each of ``rows`` equal rows of the available space, gaps included."""
        return self.kind.from_f32(self._divide(self._cursor.h, rows))

    def _divide(self, length: float, parts: int) -> float:
        if parts <= 1:
            return length
        unscaled_gap = _f(self._gap * (parts - 1))
        available = _f(_f(length / self._scale) - unscaled_gap)
        return _f(available / parts)

    def _align_offsets(self, align: Align, w: float, h: float) -> tuple[float, float]:
        spare_w = _f(self._cursor.w - w)
        spare_h = _f(self._cursor.h - h)
        offset_x = offset_y = 0.0
        if align in _VERTICAL_CENTER:
            offset_y = spare_h / 2.0
        elif align in _VERTICAL_END:
            offset_y = _fmax(spare_h, 0.0)
        elif align in _HORIZONTAL_CENTER:
            offset_x = spare_w / 2.0
        elif align in _HORIZONTAL_END:
            offset_x = _fmax(spare_w, 0.0)
        elif align is Align.CENTER:
            offset_x = spare_w / 2.0
            offset_y = spare_h / 2.0
        return _fmax(offset_x, 0.0), _fmax(offset_y, 0.0)

    def _fit_scale(self, w: float, h: float, offset_x: float, offset_y: float) -> float:
        if self.fitting is not Fitting.SCALE:
            return self._scale
        if w <= 0.0 or h <= 0.0:
            return self._scale
        available_w = _f(self._cursor.w - offset_x)
        available_h = _f(self._cursor.h - offset_y)
        if available_w <= 0.0 or available_h <= 0.0:
            return self._scale
        fit = _fmin(_f(available_w / w), _f(available_h / h))
        return _fmin(self._scale, fit)

    def push_size(
        self,
        align: Align,
        w: float | int,
        h: float | int,
        func: Optional[ChildCallback] = None,
    ) -> Optional[Frame]:
        """Add a child of size (w, h) placed by ``align``.

        The available space is left untouched when ``align`` is CENTER.
        Returns the child frame, or None if it did not fit.
        """
        wf = self.kind.to_f32(w)
        hf = self.kind.to_f32(h)
        offset_x, offset_y = self._align_offsets(align, wf, hf)
        scale = self._fit_scale(wf, hf, offset_x, offset_y)
        offset_x, offset_y = self._align_offsets(align, _f(wf * scale), _f(hf * scale))
        return self._add_scope(
            _ALIGN_EDGE[align],
            offset_x,
            offset_y,
            wf,
            hf,
            scale,
            align is not Align.CENTER,
            func,
        )

    def push_edge(
        self,
        edge: Edge,
        length: float | int,
        func: Optional[ChildCallback] = None,
    ) -> Optional[Frame]:
        """Add a child along ``edge`` with the given length, spanning the available space.

        Returns the child frame, or None if it did not fit.
        """
        lf = self.kind.to_f32(length)
        if edge in (Edge.LEFT, Edge.RIGHT):
            wf, hf = lf, _f(self._cursor.h / self._scale)
        else:
            wf, hf = _f(self._cursor.w / self._scale), lf
        align = _EDGE_ALIGN[edge]
        offset_x, offset_y = self._align_offsets(align, wf, hf)
        scale = self._fit_scale(wf, hf, offset_x, offset_y)
        return self._add_scope(edge, offset_x, offset_y, wf, hf, scale, True, func)

    def fill(self, func: Optional[ChildCallback] = None) -> Optional[Frame]:
        """Add a child covering the whole available space.

        Returns the child frame, or None if there was no room.
        """
        return self._add_scope(
            Edge.TOP, 0.0, 0.0, self._cursor.w, self._cursor.h, 1.0, True, func
        )

    def place(
        self,
        align: Align,
        x: float | int,
        y: float | int,
        w: float | int,
        h: float | int,
        func: Optional[ChildCallback] = None,
    ) -> Optional[Frame]:
        """Add a child at offset (x, y) from the available space, with size (w, h).

        The edge implied by ``align`` decides how the available space shrinks;
        it is left untouched when ``align`` is CENTER. Returns the child frame,
        or None if it did not fit.
        """
        xf = self.kind.to_f32(x)
        yf = self.kind.to_f32(y)
        wf = self.kind.to_f32(w)
        hf = self.kind.to_f32(h)
        scale = self._fit_scale(wf, hf, xf, yf)
        return self._add_scope(
            _ALIGN_EDGE[align], xf, yf, wf, hf, scale, align is not Align.CENTER, func
        )

    def _add_scope(
        self,
        edge: Edge,
        extra_x: float,
        extra_y: float,
        w: float,
        h: float,
        scale: float,
        update_cursor: bool,
        func: Optional[ChildCallback],
    ) -> Optional[Frame]:
        scaled_w = _f(w * scale)
        scaled_h = _f(h * scale)
        gap = _f(self._gap * self._scale)

        if scaled_w < 1.0 or scaled_h < 1.0:
            return None

        cur = self._cursor
        own = self._rect
        if edge is Edge.LEFT:
            if cur.x > own.x + own.w:
                return None
            x, y = cur.x + extra_x, cur.y + extra_y
        elif edge is Edge.RIGHT:
            x = _fmax(_f(cur.x + cur.w - scaled_w), 0.0) - extra_x
            y = cur.y + extra_y
        elif edge is Edge.TOP:
            if cur.y > own.y + own.h:
                return None
            x, y = cur.x + extra_x, cur.y + extra_y
        else:
            x = cur.x + extra_x
            y = _fmax(_f(cur.y + cur.h - scaled_h), 0.0) - extra_y
        child = Rect(_f(x), _f(y), scaled_w, scaled_h)

        right = _f(cur.x + cur.w)
        bottom = _f(cur.y + cur.h)
        if child.x > right - self._margin:
            return None
        if child.y > bottom - self._margin:
            return None

        fitting = self.fitting
        if fitting is Fitting.AGGRESSIVE:
            if _trunc_i32(child.x + child.w) > _trunc_i32(right) + 1.0:
                return None
            if _trunc_i32(child.y + child.h) > _trunc_i32(bottom) + 1.0:
                return None
        elif fitting is Fitting.CLAMP:
            if child.x < cur.x:
                diff = _f(cur.x - child.x)
                child.x = cur.x
                child.w = _fmax(_f(child.w - diff), 0.0)
            if child.y < cur.y:
                diff = _f(cur.y - child.y)
                child.y = cur.y
                child.h = _fmax(_f(child.h - diff), 0.0)
            if child.x + child.w > right:
                child.w = _f(right - child.x)
            if child.y + child.h > bottom:
                child.h = _f(bottom - child.y)

        if child.w < 1.0 or child.h < 1.0:
            return None

        if update_cursor:
            if edge is Edge.LEFT:
                cur.x = _f(cur.x + _f(scaled_w + gap + extra_x))
                cur.w = _fmax(_f(cur.w - scaled_w - gap - extra_x), 0.0)
            elif edge is Edge.RIGHT:
                cur.w = _fmax(_f(cur.w - scaled_w - gap - extra_x), 0.0)
            elif edge is Edge.TOP:
                cur.y = _f(cur.y + _f(scaled_h + gap + extra_y))
                cur.h = _fmax(_f(cur.h - scaled_h - gap - extra_y), 0.0)
            else:
                cur.h = _fmax(_f(cur.h - scaled_h - gap - extra_y), 0.0)

        frame = Frame._child(self, child, child.shrink(gap).to_f32(), fitting)
        if func is not None:
            func(frame)
        return frame