"""Configurable properties of the layout and column width descriptions."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum

from scrolltile.geometry import I32_MAX, I32_MIN

MAX_FIXED_WIDTH = 100000
MAX_PROPORTION = 10000.0


def _floor_to_i32(value: float) -> int:
    if math.isnan(value):
        return 0
    if math.isinf(value):
        return I32_MAX if value > 0 else I32_MIN
    return max(I32_MIN, min(I32_MAX, math.floor(value)))


@dataclass(frozen=True)
class Color:
    """An RGBA colour with components between 0 and 1."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 1.0

    @property
    def rgba(self) -> tuple[float, float, float, float]:
        return (self.r, self.g, self.b, self.a)


def _rgb8(r: int, g: int, b: int, a: int = 255) -> Color:
    return Color(r / 255, g / 255, b / 255, a / 255)


@dataclass(frozen=True)
class FocusRingConfig:
    """Settings for a focus ring or a window border."""

    off: bool = False
    width: int = 4
    active_color: Color = _rgb8(127, 200, 255)
    inactive_color: Color = _rgb8(80, 80, 80)


def default_border() -> FocusRingConfig:
    """The border settings used when none are configured: switched off."""
    return FocusRingConfig(
        off=True,
        width=4,
        active_color=_rgb8(255, 200, 127),
        inactive_color=_rgb8(80, 80, 80),
    )


@dataclass(frozen=True)
class Struts:
    """Extra padding around the working area in logical pixels."""

    left: int = 0
    right: int = 0
    top: int = 0
    bottom: int = 0


class CenterFocusedColumn(Enum):
    """When to center the newly focused column."""

    NEVER = "never"
    ALWAYS = "always"
    ON_OVERFLOW = "on-overflow"


class SizeChangeKind(Enum):
    SET_FIXED = "set-fixed"
    SET_PROPORTION = "set-proportion"
    ADJUST_FIXED = "adjust-fixed"
    ADJUST_PROPORTION = "adjust-proportion"


@dataclass(frozen=True)
class SizeChange:
    """A requested change of a width or height; proportions are in percent."""

    kind: SizeChangeKind
    value: float


@dataclass(frozen=True)
class PresetWidth:
    """A configured preset width: a proportion, or fixed pixels when ``fixed`` is set."""

    value: float
    fixed: bool = False


class ColumnWidthKind(Enum):
    PROPORTION = "proportion"
    PRESET = "preset"
    FIXED = "fixed"


@dataclass(frozen=True)
class ColumnWidth:
    """Width of a column: a proportion of the view, a preset index or fixed pixels."""

    kind: ColumnWidthKind
    value: float

    @classmethod
    def proportion(cls, value: float) -> ColumnWidth:
        return cls(ColumnWidthKind.PROPORTION, float(value))

    @classmethod
    def preset(cls, index: int) -> ColumnWidth:
        return cls(ColumnWidthKind.PRESET, int(index))

    @classmethod
    def fixed(cls, value: int) -> ColumnWidth:
        return cls(ColumnWidthKind.FIXED, int(value))

    @classmethod
    def from_preset(cls, preset: PresetWidth) -> ColumnWidth:
        """Convert a configured preset, clamping it to sane limits."""
        if preset.fixed:
            return cls.fixed(max(1, min(MAX_FIXED_WIDTH, int(preset.value))))
        return cls.proportion(max(0.0, min(MAX_PROPORTION, float(preset.value))))

    def resolve(self, options: Options, view_width: int) -> int:
        """Width in logical pixels for a view of the given width."""
        if self.kind is ColumnWidthKind.PROPORTION:
            return _floor_to_i32((view_width - options.gaps) * self.value) - options.gaps
        if self.kind is ColumnWidthKind.PRESET:
            return options.preset_widths[int(self.value)].resolve(options, view_width)
        return int(self.value)


def _default_preset_widths() -> tuple[ColumnWidth, ...]:
    return (
        ColumnWidth.proportion(1.0 / 3.0),
        ColumnWidth.proportion(0.5),
        ColumnWidth.proportion(2.0 / 3.0),
    )


@dataclass(frozen=True)
class Options:
    """Configurable properties of the layout."""

    gaps: int = 16
    struts: Struts = Struts()
    focus_ring: FocusRingConfig = FocusRingConfig()
    border: FocusRingConfig = field(default_factory=default_border)
    center_focused_column: CenterFocusedColumn = CenterFocusedColumn.NEVER
    preset_widths: tuple[ColumnWidth, ...] = field(default_factory=_default_preset_widths)
    default_width: ColumnWidth | None = None