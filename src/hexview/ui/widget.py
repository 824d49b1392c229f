"""
Hex view widget tying the buffer, cursor, viewport and input handling together.
"""

import logging
from typing import Iterable, List, Optional, Tuple, Union

from ..core.buffer import ByteBuffer
from ..core.config import DisplayState, ViewConfig
from ..core.cursor import CursorModel
from ..core.viewport import ViewportModel
from .input_handler import InputStateMachine, Mode, RedrawHint
from .keys import KeyBindings
from .render import RowDescriptor, RowLayout, build_rows

logger = logging.getLogger(__name__)

BufferData = Union[bytes, bytearray, Iterable[int]]


class HexView:
    """
    Hexadecimal viewer and editor.

    The host feeds key codes and resize notifications in and draws the row
    descriptors returned by visible_rows(). The widget never draws by itself
    and never persists the data; read it back with data().
    """

    def __init__(self, buffer: BufferData = b'', config: Optional[ViewConfig] = None, *,
                 display_state: DisplayState = DisplayState.EDITABLE,
                 key_bindings: Optional[KeyBindings] = None,
                 visible_rows: int = 1) -> None:
        self.config = config or ViewConfig()
        self.buffer = ByteBuffer(buffer)

        length = len(self.buffer)
        self.cursor = CursorModel(length, self.config.bytes_per_row)
        self.viewport = ViewportModel(length, self.config.bytes_per_row, visible_rows)
        self.input = InputStateMachine(
            self.buffer, self.cursor, self.viewport, key_bindings, display_state
        )

    def __repr__(self) -> str:
        return (f"HexView(length={len(self.buffer)}, cursor={self.cursor.offset}, "
                f"mode={self.input.mode.value}, state={self.input.display_state.value})")

    def __len__(self) -> int:
        return len(self.buffer)

    def set_buffer(self, data: BufferData) -> None:
        """Replace the data, moving the cursor and scroll back to the start."""

        self.buffer.data = bytearray(data)
        length = len(self.buffer)

        self.cursor.reset(length)
        self.viewport.reset(length)
        self.input.reset()

        logger.debug("Buffer replaced, %d bytes", length)

    def set_len(self, length: int) -> None:
        """
        Pad with zeros or truncate the data.

        Truncated bytes are lost. Cursor, selection and scroll are pulled back
        inside the new length.
        """

        self.buffer.resize(length)
        self.cursor.clamp_to(length)
        self.viewport.length = length

        if not self.cursor.enabled:
            self.input.reset()

        self.viewport.ensure_visible(self.cursor.offset)

    def data(self) -> bytes:
        return bytes(self.buffer)

    def set_config(self, config: ViewConfig) -> None:
        """Apply a new display configuration, keeping the cursor offset."""

        self.config = config
        self.cursor.bytes_per_row = config.bytes_per_row
        self.viewport.bytes_per_row = config.bytes_per_row
        self.viewport.ensure_visible(self.cursor.offset)

    def set_display_state(self, state: DisplayState) -> None:
        self.input.set_display_state(state)

    def display_state(self) -> DisplayState:
        return self.input.display_state

    def handle_key(self, key_code: int) -> RedrawHint:
        return self.input.handle_key(key_code)

    def handle_resize(self, visible_rows: int) -> RedrawHint:
        return self.input.handle_resize(visible_rows)

    def handle_focus(self, focused: bool) -> RedrawHint:
        """Notify the widget that it gained or lost focus."""

        if focused:
            return RedrawHint.IGNORED

        return self.input.handle_focus_lost()

    def handle_click(self, row: int, column: int) -> RedrawHint:
        """
        Move the cursor to the byte drawn at a position.

        Args:
            row (int): Row relative to the first visible row
            column (int): Column relative to the start of the row

        Returns:
            RedrawHint: IGNORED if the click did not move the cursor
        """

        if not self.cursor.enabled or row < 0 or column < 0:
            return RedrawHint.IGNORED

        layout = RowLayout(self.config, len(self.buffer))
        index, phase = layout.index_for_column(column)

        target_row = min(self.viewport.scroll_row + row, self.viewport.total_rows() - 1)
        offset = target_row * self.config.bytes_per_row + index
        hint = self.input.move_cursor_to(offset)

        if self.input.mode is Mode.EDIT and self.cursor.offset == offset:
            if self.cursor.nibble_phase is not phase:
                self.cursor.set_nibble_phase(phase)
                return RedrawHint.REDRAW if hint is RedrawHint.IGNORED else hint

        return hint

    def visible_rows(self) -> List[RowDescriptor]:
        return build_rows(
            self.buffer, self.config, self.cursor, self.viewport,
            editing=self.input.mode is Mode.EDIT,
        )

    def required_width(self) -> int:
        """Number of columns one row needs on screen."""

        return RowLayout(self.config, len(self.buffer)).width

    def cursor_offset(self) -> Optional[int]:
        return self.cursor.offset

    def selection_range(self) -> Optional[Tuple[int, int]]:
        return self.cursor.selection_range()

    def mode(self) -> Mode:
        return self.input.mode

    def scroll_row(self) -> int:
        return self.viewport.scroll_row
