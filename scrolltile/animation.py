"""Time-driven interpolation between two values."""

from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_DURATION = 0.25


def _ease_out_cubic(t: float) -> float:
    return 1.0 - (1.0 - t) ** 3


@dataclass
class Animation:
    """Animates from ``from_value`` to ``to_value`` over ``duration`` seconds.

    The clock is driven from outside through :meth:`set_current_time`. If no
    ``start_time`` is given, the first time passed in becomes the start.
    """

    from_value: float
    to_value: float
    duration: float = DEFAULT_DURATION
    start_time: float | None = None
    _elapsed: float = field(default=0.0, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.duration < 0:
            raise ValueError(f"animation duration cannot be negative: {self.duration!r}")
        self.from_value = float(self.from_value)
        self.to_value = float(self.to_value)

    def set_current_time(self, current_time: float) -> None:
        if self.start_time is None:
            self.start_time = current_time
        self._elapsed = max(0.0, current_time - self.start_time)

    def _progress(self) -> float:
        if self.duration <= 0:
            return 1.0
        return min(1.0, self._elapsed / self.duration)

    def value(self) -> float:
        """The current interpolated value."""
        progress = self._progress()
        if progress >= 1.0:
            return self.to_value
        eased = _ease_out_cubic(progress)
        return self.from_value + (self.to_value - self.from_value) * eased

    def is_done(self) -> bool:
        return self._progress() >= 1.0