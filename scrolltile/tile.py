"""Toplevel windows wrapped with their decorations."""

from __future__ import annotations

from dataclasses import replace
from typing import Any, Protocol

from scrolltile.focus_ring import FocusRing, SolidColorElement
from scrolltile.geometry import I32_MAX, I32_MIN, Point, Rectangle, Size
from scrolltile.options import Options

BACKDROP_COLOR = (0.0, 0.0, 0.0, 1.0)


def _saturate(value: int) -> int:
    return max(I32_MIN, min(I32_MAX, value))


class LayoutElement(Protocol):
    """What the layout needs from a window it arranges.

    Elements are compared with ``==`` to find them in the layout.
    """

    def size(self) -> Size:
        """Visual size, excluding client-side shadows and the like."""

    def buf_loc(self) -> Point:
        """Location of the buffer relative to the visual geometry."""

    def is_in_input_region(self, point: Point) -> bool:
        """Whether a point relative to the visual geometry accepts input."""

    def render(self, location: Point, scale: float | tuple[float, float]) -> list[Any]:
        """Elements that draw the visual geometry at ``location``."""

    def request_size(self, size: Size) -> None:
        """Ask the window to take the given size and leave fullscreen."""

    def request_fullscreen(self, size: Size) -> None:
        """Ask the window to go fullscreen at the given size."""

    def min_size(self) -> Size:
        """Minimum size; zero means unconstrained."""

    def max_size(self) -> Size:
        """Maximum size; zero means unconstrained."""

    def is_surface(self, surface: Any) -> bool:
        """Whether the window belongs to the given surface."""

    def has_ssd(self) -> bool:
        """Whether the window uses server-side decorations."""

    def set_preferred_scale_transform(self, scale: int, transform: int) -> None:
        """Tell the window the scale and rotation it is shown at."""

    def output_enter(self, output: Any) -> None:
        """The window became visible on an output."""

    def output_leave(self, output: Any) -> None:
        """The window stopped being visible on an output."""

    def is_fullscreen(self) -> bool:
        """Whether the window is currently fullscreen, as acknowledged by it."""


class Tile:
    """A toplevel window together with its border and fullscreen backdrop."""

    def __init__(self, window: LayoutElement, options: Options) -> None:
        self.window = window
        self.border = FocusRing(options.border)
        # Only becomes true once the window has actually gone fullscreen.
        self.is_fullscreen = False
        self.fullscreen_size = Size(0, 0)
        self.options = options

    def update_config(self, options: Options) -> None:
        self.border.update_config(options.border)
        self.options = options

    def update_window(self) -> None:
        """Pick up state the window has acknowledged."""
        if self.fullscreen_size != Size(0, 0):
            self.is_fullscreen = self.window.is_fullscreen()

    def advance_animations(self, current_time: float, is_active: bool) -> None:
        width = self.border.width
        self.border.update(Point(width, width), self.window.size(), self.window.has_ssd())
        self.border.set_active(is_active)

    def _effective_border_width(self) -> int | None:
        if self.is_fullscreen or self.border.is_off:
            return None
        return self.border.width

    def window_loc(self) -> Point:
        """Location of the window's visual geometry within the tile."""
        x, y = 0, 0

        if self.is_fullscreen:
            window_size = self.window.size()
            target = self.fullscreen_size
            # A window larger than the fullscreen size stays at the top-left.
            if window_size.w < target.w:
                x += (target.w - window_size.w) // 2
            if window_size.h < target.h:
                y += (target.h - window_size.h) // 2

        width = self._effective_border_width()
        if width is not None:
            x += width
            y += width

        return Point(x, y)

    def tile_size(self) -> Size:
        size = self.window.size()

        if self.is_fullscreen:
            return Size(max(size.w, self.fullscreen_size.w), max(size.h, self.fullscreen_size.h))

        width = self._effective_border_width()
        if width is not None:
            return Size(_saturate(size.w + width * 2), _saturate(size.h + width * 2))

        return size

    def window_size(self) -> Size:
        return self.window.size()

    def buf_loc(self) -> Point:
        return self.window_loc() + self.window.buf_loc()

    def is_in_input_region(self, point: Point) -> bool:
        return self.window.is_in_input_region(point - self.window_loc())

    def is_in_activation_region(self, point: Point) -> bool:
        return Rectangle(Point(0, 0), self.tile_size()).contains(point)

    def request_tile_size(self, size: Size) -> None:
        # The border is checked directly since the tile might be fullscreen.
        if not self.border.is_off:
            width = self.border.width
            size = Size(max(1, size.w - width * 2), max(1, size.h - width * 2))
        self.window.request_size(size)

    def tile_width_for_window_width(self, size: int) -> int:
        if self.border.is_off:
            return size
        return _saturate(size + self.border.width * 2)

    def tile_height_for_window_height(self, size: int) -> int:
        if self.border.is_off:
            return size
        return _saturate(size + self.border.width * 2)

    def window_height_for_tile_height(self, size: int) -> int:
        if self.border.is_off:
            return size
        return _saturate(size - self.border.width * 2)

    def request_fullscreen(self, size: Size) -> None:
        self.fullscreen_size = size
        self.window.request_fullscreen(size)

    def min_size(self) -> Size:
        size = self.window.min_size()
        width = self._effective_border_width()
        if width is not None:
            size = Size(
                _saturate(max(1, size.w) + width * 2),
                _saturate(max(1, size.h) + width * 2),
            )
        return size

    def max_size(self) -> Size:
        size = self.window.max_size()
        width = self._effective_border_width()
        if width is not None:
            size = Size(
                _saturate(size.w + width * 2) if size.w > 0 else size.w,
                _saturate(size.h + width * 2) if size.h > 0 else size.h,
            )
        return size

    def has_ssd(self) -> bool:
        return self._effective_border_width() is not None or self.window.has_ssd()

    def render(self, location: Point, scale: float | tuple[float, float]) -> list[Any]:
        """Window elements, then the border and the fullscreen backdrop."""
        elements = list(self.window.render(location + self.window_loc(), scale))
        offset = location.to_physical_round(scale)

        if self._effective_border_width() is not None:
            elements.extend(
                replace(elem, location=elem.location + offset)
                for elem in self.border.render(scale)
            )

        if self.is_fullscreen:
            elements.append(
                SolidColorElement(offset, self.fullscreen_size, BACKDROP_COLOR, scale)
            )

        return elements