"""
Cursor module tracking the edited byte, nibble and selection.
"""

from enum import Enum
from typing import Optional, Tuple


class NibblePhase(Enum):
    """Which half of the byte under the cursor a hex digit replaces."""

    HIGH = 'high'
    LOW = 'low'


class CursorModel:
    """
    Byte cursor over a buffer of a given length.

    The offset always stays in [0, length) while the buffer is non-empty.
    With an empty buffer the offset is None and every move is a no-op.
    """

    def __init__(self, length: int, bytes_per_row: int) -> None:
        self.length = length
        self.bytes_per_row = bytes_per_row
        self.offset: Optional[int] = 0 if length > 0 else None
        self.nibble_phase = NibblePhase.HIGH
        self.selection_anchor: Optional[int] = None

    @property
    def enabled(self) -> bool:
        return self.offset is not None

    def _clamp(self, offset: int) -> int:
        return max(0, min(offset, self.length - 1))

    def move_to(self, offset: int) -> bool:
        """Move to an absolute offset, clamped into the buffer."""

        if self.offset is None:
            return False

        new_offset = self._clamp(offset)
        if new_offset == self.offset:
            return False

        self.offset = new_offset
        return True

    def move(self, delta_bytes: int) -> bool:
        """Move by a number of bytes without wrapping around."""

        if self.offset is None:
            return False

        return self.move_to(self.offset + delta_bytes)

    def move_row(self, delta_rows: int) -> bool:
        """
        Move by whole rows keeping the column.

        The destination row is clamped to the buffer's rows. On a short last
        row the offset falls back to that row's last byte.
        """

        if self.offset is None:
            return False

        last_row = (self.length - 1) // self.bytes_per_row
        row, col = divmod(self.offset, self.bytes_per_row)
        row = max(0, min(row + delta_rows, last_row))

        return self.move_to(row * self.bytes_per_row + col)

    def move_row_start(self) -> bool:
        if self.offset is None:
            return False

        return self.move_to(self.offset - self.offset % self.bytes_per_row)

    def move_row_end(self) -> bool:
        if self.offset is None:
            return False

        row_start = self.offset - self.offset % self.bytes_per_row
        return self.move_to(row_start + self.bytes_per_row - 1)

    def set_nibble_phase(self, phase: NibblePhase) -> None:
        self.nibble_phase = phase

    def start_selection(self) -> None:
        self.selection_anchor = self.offset

    def clear_selection(self) -> None:
        self.selection_anchor = None

    def selection_range(self) -> Optional[Tuple[int, int]]:
        """Get the inclusive (start, end) of the selection."""

        if self.selection_anchor is None or self.offset is None:
            return None

        return (min(self.selection_anchor, self.offset),
                max(self.selection_anchor, self.offset))

    def reset(self, length: int, bytes_per_row: Optional[int] = None) -> None:
        """Rebind to a new buffer: back to offset 0, high nibble, no selection."""

        self.length = length
        if bytes_per_row is not None:
            self.bytes_per_row = bytes_per_row

        self.offset = 0 if length > 0 else None
        self.nibble_phase = NibblePhase.HIGH
        self.selection_anchor = None

    def clamp_to(self, length: int) -> None:
        """Keep the current position but pull it inside a changed length."""

        self.length = length
        if length <= 0:
            self.offset = None
            self.selection_anchor = None
            return

        self.offset = self._clamp(self.offset or 0)
        if self.selection_anchor is not None:
            self.selection_anchor = self._clamp(self.selection_anchor)
