# framelayout

A small layout engine for immediate-mode user interfaces. You start with one
rectangle, the root frame, and carve child frames out of it. Each child can be
handed to a callback or taken from the return value, then drawn and subdivided
further. The package does no drawing of its own. It only works out where things
go, so it fits any rendering backend.

## Installing

```
pip install framelayout
```

The package has no dependencies outside the standard library.

## Modules

- `framelayout.rect`: the `Rect` class.
- `framelayout.num`: the `NumKind` enum and the `to_float32` helper.
- `framelayout.frame`: the `Frame` class and the `Edge`, `Align` and `Fitting`
  enums.

## Rectangles

`Rect(x, y, w, h)` is a dataclass. The point `(x, y)` is the top-left corner.

- `contains(x, y)` tells whether a point lies inside, edges included.
- `overlaps(other)` tells whether two rectangles share interior area. Rectangles
  that only touch do not overlap.
- `shrink(margin)` moves every edge inward. The width and height never go below
  zero.
- `expand(margin)` moves every edge outward.
- `to_f32()` returns a copy with every field rounded to single precision.
- `Rect.from_f32(rect, kind)` converts every field with `kind.from_f32`.

```python
from framelayout.rect import Rect

r = Rect(10, 20, 30, 40)
r.contains(25, 40)        # True
r.shrink(5)               # Rect(x=15, y=25, w=20, h=30)
r.expand(5)               # Rect(x=5, y=15, w=40, h=50)
```

## Number kinds

`NumKind` lists the number types that coordinates may be reported in: `U8`,
`U16`, `U32`, `U64`, `USIZE`, `I8`, `I16`, `I32`, `I64`, `ISIZE`, `F32` and
`F64`.

- `from_f32(value)` converts a value that has been rounded to single precision.
  Integer kinds round halves to even and wrap to their bit width. Unsigned kinds
  turn negative values into 0. Float kinds pass the value through.
- `to_f32(value)` rounds a value to single precision.
- `saturating_add(a, b)` and `saturating_sub(a, b)` clamp integer results to the
  kind's range. For float kinds, `saturating_sub` gives zero when `b > a`.

`to_float32(value)` rounds any number to the nearest single-precision float.

```python
from framelayout.num import NumKind

NumKind.U32.from_f32(2.5)    # 2
NumKind.U32.from_f32(3.5)    # 4
NumKind.U32.from_f32(-1.5)   # 0
NumKind.I32.from_f32(-3.5)   # -4
```

## Frames

`Frame(rect, kind=NumKind.F32)` creates a root frame. Layout is always worked
out in single-precision floats. The `rect`, `cursor`, `margin`, `gap`,
`divide_width` and `divide_height` results are converted to `kind`.

- `rect` is the frame's own area. Adding children does not change it.
- `cursor` is the space that is still free for children. It starts as `rect`
  shrunk by the margin, and it shrinks as children are added.
- `margin` is 4 by default. Setting it resets `cursor` to `rect` shrunk by the
  new margin, so space already taken by children is given back.
- `gap` is the space left between consecutive children. It starts equal to the
  margin.
- `scale` is 1.0 by default. It multiplies the size of children added by
  `push_edge`, `push_size` and `place`.
- `fitting` is a `Fitting` value, `Fitting.AGGRESSIVE` by default.

### Adding children

- `push_edge(edge, length, func=None)` adds a strip of the given length along
  an `Edge` (`LEFT`, `RIGHT`, `TOP`, `BOTTOM`). The strip spans all of the free
  space across that edge.
- `push_size(align, w, h, func=None)` adds a child of a fixed size, placed by
  an `Align` value.
- `place(align, x, y, w, h, func=None)` adds a child of a fixed size at an
  offset from the free space. The edge implied by `align` decides how the free
  space shrinks.
- `fill(func=None)` adds a child that covers all of the remaining free space,
  without scaling.

Each method returns the new child frame. If `func` is given, it is first called
with the child frame. A child is skipped if it would be less than one unit wide
or high, if it starts past the free space, or if the fitting rule drops it. A
skipped child returns `None`, and its callback is not called.

A child takes its parent's margin, gap, scale, kind and fitting. Its cursor is
its own rectangle shrunk by the parent's gap times the parent's scale.

### Alignment

An `Align` name has two words. The first is the edge that gives up space. The
second is the alignment along that edge. `LEFT_TOP` pushes from the left and
aligns to the top. `TOP_LEFT` pushes from the top and aligns to the left.
`CENTER` centres the child and is the only alignment that leaves the free space
as it was.

### Fitting

- `RELAXED` keeps a child even if it goes past the free space.
- `AGGRESSIVE` drops a child that goes past the free space by more than one
  unit.
- `CLAMP` trims the child's edges to the free space.
- `SCALE` scales the child down, keeping its aspect ratio, so that it fits in
  the free space. It never scales the child up beyond the frame's `scale`.

### Splitting the free space

`divide_width(columns)` and `divide_height(rows)` give the size of one column
or row when the free space is split evenly, with the gaps between them taken
out. The result is in unscaled units. With one part or fewer, they return the
whole free width or height.

### Example

```python
from framelayout.frame import Edge, Frame
from framelayout.rect import Rect

root = Frame(Rect(0, 0, 100, 100))
root.cursor                      # Rect(x=4.0, y=4.0, w=92.0, h=92.0)

left = root.push_edge(Edge.LEFT, 20)
left.rect                        # Rect(x=4.0, y=4.0, w=20.0, h=92.0)
root.cursor                      # Rect(x=28.0, y=4.0, w=68.0, h=92.0)

rows = root.divide_height(2)
root.push_edge(Edge.TOP, rows, lambda pane: print(pane.rect))
root.fill(lambda pane: print(pane.rect))
```

## What the package does not do

It draws nothing, handles no input and keeps no state between layout passes.
Build the frames again each time the interface is drawn. Use the rectangles
with whatever graphics library you have.

## Running the tests

```
pip install -e ".[test]"
pytest
```