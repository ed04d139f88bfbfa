"""Outputs (monitors) as seen by the layout, and the working area inside them."""

from __future__ import annotations

import math
from dataclasses import dataclass

from scrolltile.geometry import I32_MAX, I32_MIN, Point, Rectangle, Size
from scrolltile.options import Struts

_VALID_TRANSFORMS = (0, 90, 180, 270)


def _saturating_sub(a: int, b: int) -> int:
    return max(I32_MIN, min(I32_MAX, a - b))


def _round_to_int(value: float) -> int:
    rounded = math.floor(abs(value) + 0.5)
    return int(rounded if value >= 0 else -rounded)


@dataclass(eq=False)
class Output:
    """A connected output with its current mode, scale and rotation.

    Outputs compare by identity, like handles to a real display.
    ``usable_area`` is the part of the output left free by exclusive zones
    of layer surfaces; when unset, the whole output is usable.
    """

    name: str
    mode_size: Size = Size(1280, 720)
    scale: float = 1.0
    transform: int = 0
    usable_area: Rectangle | None = None

    def __post_init__(self) -> None:
        if not self.scale > 0:
            raise ValueError(f"output scale must be positive, got {self.scale!r}")
        if self.transform not in _VALID_TRANSFORMS:
            raise ValueError(f"unsupported output transform: {self.transform!r}")

    @property
    def integer_scale(self) -> int:
        """The scale rounded up to a whole number, as advertised to clients."""
        return max(1, math.ceil(self.scale))

    def transformed_mode_size(self) -> Size:
        """Mode size in physical pixels after applying the rotation."""
        if self.transform in (90, 270):
            return Size(self.mode_size.h, self.mode_size.w)
        return self.mode_size

    def non_exclusive_zone(self) -> Rectangle:
        """Area not claimed by exclusive zones, in logical coordinates."""
        if self.usable_area is not None:
            return self.usable_area
        return Rectangle(Point(0, 0), output_size(self))


@dataclass(frozen=True)
class OutputId:
    """Stable identity of an output that survives disconnection: its name."""

    name: str

    @classmethod
    def of(cls, output: Output) -> OutputId:
        return cls(output.name)


def output_size(output: Output) -> Size:
    """Logical size of the output: transformed mode size divided by the scale."""
    physical = output.transformed_mode_size()
    return Size(
        _round_to_int(physical.w / output.scale),
        _round_to_int(physical.h / output.scale),
    )


def compute_working_area(output: Output, struts: Struts) -> Rectangle:
    """The non-exclusive zone of the output shrunk by the configured struts."""
    zone = output.non_exclusive_zone()

    width = _saturating_sub(_saturating_sub(zone.size.w, struts.left), struts.right)
    height = _saturating_sub(_saturating_sub(zone.size.h, struts.top), struts.bottom)

    return Rectangle(
        Point(zone.loc.x + struts.left, zone.loc.y + struts.top),
        Size(width, height),
    )