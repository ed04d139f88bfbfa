# scrolltile

Building blocks for a scrollable tiling window layout. The package provides
the layout's geometry types, its configuration, the outputs windows are shown
on, eased animations, focus rings and borders, and tiles. A tile is a window
together with its decorations. The package also computes how far a view has
to scroll to bring a column into sight.

It holds layout state only. It does not talk to a display server. Windows are
plain Python objects that implement the `LayoutElement` interface from
`scrolltile.tile`.

## Installation

```
pip install scrolltile
```

To install with the test dependencies:

```
pip install "scrolltile[test]"
```

## Modules

- `scrolltile.geometry`: the frozen value types `Point`, `Size` and `Rectangle`.
  - `Point.to_physical_round(scale)` scales a point into physical pixels and
    rounds half away from zero.
  - `Rectangle.contains(point)` excludes the right and bottom edges.
  - `Rectangle.from_extremities(top_left, bottom_right)` builds a rectangle
    from two opposite corners.
- `scrolltile.options`: the layout configuration.
  - `Options` holds the gaps, the struts, the focus ring and border settings,
    the centering mode, the preset widths and the default width.
  - The supporting types are `Struts`, `FocusRingConfig`, `Color`,
    `CenterFocusedColumn`, `SizeChange`/`SizeChangeKind`, `PresetWidth` and
    `ColumnWidth`/`ColumnWidthKind`.
  - `default_border()` returns the border settings used by default. That
    border is switched off.
- `scrolltile.focus_ring`: `FocusRing` lays out a ring around a window. For a
  window with server-side decorations it lays out four border strips instead.
  `render(scale)` returns `SolidColorElement` rectangles, or nothing when the
  ring is switched off.
- `scrolltile.output`: `Output` describes a display. It has a name, a mode
  size, a scale, a rotation of 0, 90, 180 or 270, and an optional usable area.
  - `OutputId.of(output)` gives an identity based on the output's name.
  - `output_size(output)` returns the logical size of the output.
  - `compute_working_area(output, struts)` returns the usable area shrunk by
    the struts.
- `scrolltile.animation`: `Animation` eases out, with a cubic curve, from one
  value to another over a duration in seconds. The default duration is 0.25 s.
  Its clock is driven from outside through `set_current_time()`.
- `scrolltile.tile`: `LayoutElement` is the interface a window implements.
  `Tile` wraps a window with its border and its fullscreen backdrop. It
  converts between window sizes and tile sizes, and answers hit tests for the
  input region and the activation region.
- `scrolltile.viewport`: `compute_new_view_offset(cur_x, view_width,
  new_col_x, new_col_width, gaps)` picks the view offset that brings a column
  into view with the least motion. A column that is already visible keeps the
  view where it is. A column wider than the view is left-aligned.

## Example

```python
from scrolltile.geometry import Point, Size
from scrolltile.options import ColumnWidth, FocusRingConfig, Options
from scrolltile.output import Output, Struts, compute_working_area, output_size
from scrolltile.tile import Tile
from scrolltile.viewport import compute_new_view_offset


class Window:
    def __init__(self):
        self.requested = None

    def size(self): return Size(396, 296)
    def buf_loc(self): return Point(0, 0)
    def is_in_input_region(self, point): return True
    def render(self, location, scale): return []
    def request_size(self, size): self.requested = size
    def request_fullscreen(self, size): pass
    def min_size(self): return Size(0, 0)
    def max_size(self): return Size(0, 0)
    def is_surface(self, surface): return False
    def has_ssd(self): return False
    def set_preferred_scale_transform(self, scale, transform): pass
    def output_enter(self, output): pass
    def output_leave(self, output): pass
    def is_fullscreen(self): return False


options = Options(border=FocusRingConfig(off=False, width=2))
window = Window()
tile = Tile(window, options)

tile.request_tile_size(Size(400, 300))
assert window.requested == Size(396, 296)   # the border is taken off
assert tile.tile_size() == Size(400, 300)   # and added back on

output = Output("DP-1", Size(2560, 1440), scale=2.0)
assert output_size(output) == Size(1280, 720)
area = compute_working_area(output, Struts(left=10))
assert area.loc == Point(10, 0) and area.size == Size(1270, 720)

assert ColumnWidth.proportion(0.5).resolve(Options(), 1280) == 616
assert compute_new_view_offset(0, 1000, 1200, 400, 16) == -584
```

## What the package does not do

The package gives you tiles and the arithmetic around them. It has no column,
workspace or monitor manager. It does not stack tiles into columns, scroll a
strip of columns, switch between workspaces, or move windows between outputs.
Those parts have to be built on top of these modules. The package also does
not render anything and does not connect to a display server. It has no
command-line program.

## Running the tests

```
pytest
```