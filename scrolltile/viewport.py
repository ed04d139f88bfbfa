"""Choosing how far the view scrolls to show a column."""

from __future__ import annotations


def compute_new_view_offset(
    cur_x: int,
    view_width: int,
    new_col_x: int,
    new_col_width: int,
    gaps: int,
) -> int:
    """View offset, relative to the column's X, that brings the column into view.

    ``cur_x`` is the current left edge of the view. A column that is already
    fully visible keeps the view where it is; otherwise the view moves the
    shorter way, aligning the column to the left or the right edge with
    ``gaps`` of padding. A column wider than the view is always left-aligned.
    """
    if view_width <= new_col_width:
        return 0

    # The padding shrinks when the column barely fits.
    padding = max(0, min(gaps, (view_width - new_col_width) // 2))

    new_x = new_col_x - padding
    new_right_x = new_col_x + new_col_width + padding

    if cur_x <= new_x and new_right_x <= cur_x + view_width:
        return -(new_col_x - cur_x)

    dist_to_left = abs(cur_x - new_x)
    dist_to_right = abs(cur_x + view_width - new_right_x)
    if dist_to_left <= dist_to_right:
        return -padding
    return -(view_width - padding - new_col_width)