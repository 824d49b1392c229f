"""
Viewport module deciding which rows of the buffer are on screen.
"""

from typing import Optional, Tuple


def visible_range(length: int, bytes_per_row: int, scroll_row: int,
                  visible_rows: int) -> Optional[Tuple[int, int]]:
    """
    Compute the byte range covered by a viewport.

    Args:
        length (int): Buffer length in bytes
        bytes_per_row (int): Row width in bytes
        scroll_row (int): First visible row
        visible_rows (int): Number of rows on screen

    Returns:
        Optional[Tuple[int, int]]: Inclusive (first_offset, last_offset), or None
                                   if no byte is visible
    """

    first = scroll_row * bytes_per_row
    if length <= 0 or visible_rows <= 0 or first >= length:
        return None

    last = min(first + visible_rows * bytes_per_row, length) - 1
    return first, last


class ViewportModel:
    """Tracks the scroll position and keeps the cursor row on screen."""

    def __init__(self, length: int, bytes_per_row: int, visible_rows: int = 1) -> None:
        self.length = length
        self.bytes_per_row = bytes_per_row
        self.visible_rows = max(1, visible_rows)
        self.scroll_row = 0

    def row_for_offset(self, offset: int) -> int:
        return offset // self.bytes_per_row

    def col_for_offset(self, offset: int) -> int:
        return offset % self.bytes_per_row

    def total_rows(self) -> int:
        """Get the number of rows needed for the whole buffer."""

        return (self.length + self.bytes_per_row - 1) // self.bytes_per_row

    def max_scroll_row(self) -> int:
        return max(0, self.total_rows() - self.visible_rows)

    def visible_range(self) -> Optional[Tuple[int, int]]:
        return visible_range(self.length, self.bytes_per_row, self.scroll_row, self.visible_rows)

    def ensure_visible(self, cursor_offset: Optional[int]) -> bool:
        """
        Scroll by the fewest whole rows that bring the cursor row into view.

        Returns:
            bool: True if scroll_row changed
        """

        old_scroll = self.scroll_row
        scroll = min(self.scroll_row, self.max_scroll_row())

        if cursor_offset is not None and self.length > 0:
            cursor_row = self.row_for_offset(cursor_offset)
            if cursor_row < scroll:
                scroll = cursor_row
            elif cursor_row >= scroll + self.visible_rows:
                scroll = cursor_row - self.visible_rows + 1

        self.scroll_row = max(0, scroll)
        return self.scroll_row != old_scroll

    def resize(self, visible_rows: int, cursor_offset: Optional[int]) -> bool:
        """Apply a new viewport height reported by the host."""

        self.visible_rows = max(1, visible_rows)
        return self.ensure_visible(cursor_offset)

    def reset(self, length: int, bytes_per_row: Optional[int] = None) -> None:
        """Rebind the viewport to a new buffer length and scroll to the top."""

        self.length = length
        if bytes_per_row is not None:
            self.bytes_per_row = bytes_per_row

        self.scroll_row = 0
