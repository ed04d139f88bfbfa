import pytest

from scrolltile.geometry import I32_MAX, Point, Size
from scrolltile.options import FocusRingConfig, Options
from scrolltile.tile import Tile

BORDER = 4


class FakeWindow:
    def __init__(
        self,
        wid=1,
        size=Size(100, 200),
        min_size=Size(0, 0),
        max_size=Size(0, 0),
        ssd=False,
        buf_loc=Point(0, 0),
    ):
        self.wid = wid
        self._size = size
        self._min = min_size
        self._max = max_size
        self.ssd = ssd
        self._buf_loc = buf_loc
        self.requested_size = None
        self.fullscreen_request = None
        self.fullscreen = False
        self.input_points = []
        self.input_region_hit = False

    def __eq__(self, other):
        return isinstance(other, FakeWindow) and other.wid == self.wid

    def __hash__(self):
        return hash(self.wid)

    def size(self):
        return self._size

    def buf_loc(self):
        return self._buf_loc

    def is_in_input_region(self, point):
        self.input_points.append(point)
        return self.input_region_hit

    def render(self, location, scale):
        return [("window", location)]

    def request_size(self, size):
        self.requested_size = size

    def request_fullscreen(self, size):
        self.fullscreen_request = size

    def min_size(self):
        return self._min

    def max_size(self):
        return self._max

    def is_surface(self, surface):
        return False

    def has_ssd(self):
        return self.ssd

    def set_preferred_scale_transform(self, scale, transform):
        pass

    def output_enter(self, output):
        pass

    def output_leave(self, output):
        pass

    def is_fullscreen(self):
        return self.fullscreen


def bordered(width=BORDER):
    return Options(border=FocusRingConfig(off=False, width=width))


def test_border_off_tile_matches_window():
    win = FakeWindow()
    tile = Tile(win, Options())
    assert tile.tile_size() == Size(100, 200)
    assert tile.window_loc() == Point(0, 0)
    assert tile.has_ssd() is False


def test_border_adds_width_on_each_side():
    win = FakeWindow()
    tile = Tile(win, bordered())
    assert tile.window_loc() == Point(BORDER, BORDER)
    size = tile.tile_size()
    assert size.w - win.size().w == 2 * BORDER
    assert size.h - win.size().h == 2 * BORDER
    assert tile.has_ssd() is True


@pytest.mark.parametrize("height", [1, 50, 720])
def test_height_conversions_round_trip(height):
    tile = Tile(FakeWindow(), bordered())
    assert tile.window_height_for_tile_height(tile.tile_height_for_window_height(height)) == height
    plain = Tile(FakeWindow(), Options())
    assert plain.tile_height_for_window_height(height) == height
    assert plain.tile_width_for_window_width(height) == height


def test_tile_width_saturates():
    tile = Tile(FakeWindow(), bordered())
    assert tile.tile_width_for_window_width(I32_MAX) == I32_MAX
    assert tile.tile_height_for_window_height(I32_MAX) == I32_MAX


def test_request_tile_size_subtracts_border():
    win = FakeWindow()
    tile = Tile(win, bordered())
    tile.request_tile_size(Size(300, 400))
    req = win.requested_size
    assert tile.tile_width_for_window_width(req.w) == 300
    assert tile.tile_height_for_window_height(req.h) == 400


def test_request_tile_size_never_below_one():
    win = FakeWindow()
    tile = Tile(win, bordered())
    tile.request_tile_size(Size(1, 1))
    assert win.requested_size == Size(1, 1)


def test_min_size_with_border():
    tile = Tile(FakeWindow(), bordered())
    assert tile.min_size() == Size(
        tile.tile_width_for_window_width(1), tile.tile_height_for_window_height(1)
    )
    assert Tile(FakeWindow(), Options()).min_size() == Size(0, 0)


def test_max_size_zero_stays_unbounded():
    tile = Tile(FakeWindow(max_size=Size(0, 500)), bordered())
    size = tile.max_size()
    assert size.w == 0
    assert size.h == tile.tile_height_for_window_height(500)


def test_fullscreen_only_after_window_confirms():
    win = FakeWindow()
    tile = Tile(win, bordered())
    tile.request_fullscreen(Size(1280, 720))
    assert win.fullscreen_request == Size(1280, 720)
    assert tile.is_fullscreen is False

    win.fullscreen = True
    tile.update_window()
    assert tile.is_fullscreen is True
    assert tile.tile_size() == Size(1280, 720)
    loc = tile.window_loc()
    assert loc.x * 2 + 100 == 1280
    assert loc.y * 2 + 200 == 720
    assert tile.has_ssd() is False


def test_update_window_ignored_without_fullscreen_size():
    win = FakeWindow()
    win.fullscreen = True
    tile = Tile(win, Options())
    tile.update_window()
    assert tile.is_fullscreen is False


def test_activation_region_excludes_far_edges():
    tile = Tile(FakeWindow(), Options())
    assert tile.is_in_activation_region(Point(0, 0)) is True
    assert tile.is_in_activation_region(Point(99.5, 199.5)) is True
    assert tile.is_in_activation_region(Point(100, 0)) is False
    assert tile.is_in_activation_region(Point(-1, 0)) is False


def test_input_region_translated_to_window():
    win = FakeWindow()
    win.input_region_hit = True
    tile = Tile(win, bordered())
    assert tile.is_in_input_region(Point(10, 10)) is True
    assert win.input_points == [Point(10 - BORDER, 10 - BORDER)]


def test_buf_loc_adds_window_offset():
    win = FakeWindow(buf_loc=Point(-5, -3))
    tile = Tile(win, bordered())
    assert tile.buf_loc() == tile.window_loc() + Point(-5, -3)


def test_render_border_follows_location():
    options = bordered()
    tile = Tile(FakeWindow(), options)
    tile.advance_animations(0.0, True)
    elements = tile.render(Point(10, 20), 1.0)
    assert elements[0] == ("window", Point(10 + BORDER, 20 + BORDER))
    rings = elements[1:]
    assert len(rings) == 1
    assert rings[0].location == Point(10, 20)
    assert rings[0].size == tile.tile_size()
    assert rings[0].color == options.border.active_color.rgba


def test_render_ssd_window_gets_four_strips():
    options = bordered()
    tile = Tile(FakeWindow(ssd=True), options)
    tile.advance_animations(0.0, False)
    rings = tile.render(Point(0, 0), 1.0)[1:]
    assert len(rings) == 4
    assert all(ring.color == options.border.inactive_color.rgba for ring in rings)


def test_render_border_off_has_only_window():
    tile = Tile(FakeWindow(), Options())
    tile.advance_animations(0.0, True)
    assert tile.render(Point(3, 4), 1.0) == [("window", Point(3, 4))]


def test_render_fullscreen_adds_backdrop():
    win = FakeWindow()
    tile = Tile(win, bordered())
    tile.request_fullscreen(Size(1280, 720))
    win.fullscreen = True
    tile.update_window()
    tile.advance_animations(0.0, True)
    elements = tile.render(Point(0, 0), 1.0)
    assert len(elements) == 2
    backdrop = elements[-1]
    assert backdrop.color == (0.0, 0.0, 0.0, 1.0)
    assert backdrop.size == Size(1280, 720)


def test_update_config_switches_border_on():
    tile = Tile(FakeWindow(), Options())
    assert tile.window_loc() == Point(0, 0)
    tile.update_config(bordered())
    assert tile.window_loc() == Point(BORDER, BORDER)