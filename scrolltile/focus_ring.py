"""Focus ring and window border made of solid-colour rectangles."""

from __future__ import annotations

from dataclasses import dataclass, field

from scrolltile.geometry import Point, Size
from scrolltile.options import FocusRingConfig


@dataclass(frozen=True)
class SolidColorElement:
    """A solid rectangle ready to be drawn at a physical location."""

    location: Point
    size: Size
    color: tuple[float, float, float, float]
    scale: float | tuple[float, float] = 1.0


@dataclass
class _Buffer:
    size: Size = Size(0, 0)
    color: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 0.0)


@dataclass
class FocusRing:
    """A ring around a window, or four border strips when the window has server-side decorations."""

    config: FocusRingConfig = field(default_factory=FocusRingConfig)

    def __post_init__(self) -> None:
        self._buffers = [_Buffer() for _ in range(4)]
        self._locations = [Point(0, 0) for _ in range(4)]
        self.is_border = False
        self.update_config(self.config)

    def update_config(self, config: FocusRingConfig) -> None:
        self.config = config
        self.is_off = config.off
        self.width = int(config.width)
        self.active_color = config.active_color
        self.inactive_color = config.inactive_color

    def update(self, win_pos: Point, win_size: Size, is_border: bool) -> None:
        """Lay the rectangles out around a window at ``win_pos`` of size ``win_size``."""
        width = self.width
        if is_border:
            horizontal = Size(win_size.w + width * 2, width)
            vertical = Size(width, win_size.h)
            self._buffers[0].size = horizontal
            self._buffers[1].size = horizontal
            self._buffers[2].size = vertical
            self._buffers[3].size = vertical

            self._locations[0] = win_pos + Point(-width, -width)
            self._locations[1] = win_pos + Point(-width, win_size.h)
            self._locations[2] = win_pos + Point(-width, 0)
            self._locations[3] = win_pos + Point(win_size.w, 0)
        else:
            self._buffers[0].size = win_size + Size(width * 2, width * 2)
            self._locations[0] = win_pos - Point(width, width)

        self.is_border = is_border

    def set_active(self, is_active: bool) -> None:
        color = (self.active_color if is_active else self.inactive_color).rgba
        for buf in self._buffers:
            buf.color = color

    def render(self, scale: float | tuple[float, float]) -> list[SolidColorElement]:
        """Elements to draw; none when the ring is switched off."""
        if self.is_off:
            return []

        pairs = zip(self._buffers, self._locations)
        if not self.is_border:
            pairs = [(self._buffers[0], self._locations[0])]

        return [
            SolidColorElement(loc.to_physical_round(scale), buf.size, buf.color, scale)
            for buf, loc in pairs
        ]