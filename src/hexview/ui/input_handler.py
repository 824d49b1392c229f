"""
Input handler module turning key events into cursor moves and byte edits.
"""

import curses
import logging
from enum import Enum
from typing import Callable, Dict, Optional

from ..core.buffer import ByteBuffer
from ..core.config import DisplayState
from ..core.cursor import CursorModel, NibblePhase
from ..core.errors import OutOfRange
from ..core.viewport import ViewportModel
from .keys import KeyBindings

logger = logging.getLogger(__name__)


class Mode(Enum):
    """Interaction mode of the hex view."""

    NAVIGATE = 'navigate'
    EDIT = 'edit'
    SELECT = 'select'


class RedrawHint(Enum):
    """What the host has to do after an event."""

    IGNORED = 'ignored'  # nothing changed, the host may route the key elsewhere
    REDRAW = 'redraw'
    SCROLL = 'scroll'  # redraw, and the first visible row moved


class InputStateMachine:
    """Handles keyboard input and applies it to the cursor, viewport and buffer."""

    def __init__(self, buffer: ByteBuffer, cursor: CursorModel, viewport: ViewportModel,
                 key_bindings: Optional[KeyBindings] = None,
                 display_state: DisplayState = DisplayState.EDITABLE) -> None:
        self.buffer = buffer
        self.cursor = cursor
        self.viewport = viewport
        self.key_bindings = key_bindings or KeyBindings()
        self.display_state = display_state
        self.mode = Mode.NAVIGATE
        self.navigation_handlers: Dict[int, Callable[[], bool]] = self._setup_handlers()

    def _setup_handlers(self) -> Dict[int, Callable[[], bool]]:
        """Set up the cursor movement handlers."""

        return {
            curses.KEY_LEFT: self._move_left,
            curses.KEY_RIGHT: self._move_right,
            curses.KEY_UP: self._move_up,
            curses.KEY_DOWN: self._move_down,
            curses.KEY_HOME: self.cursor.move_row_start,
            curses.KEY_END: self.cursor.move_row_end,
            curses.KEY_PPAGE: self._page_up,
            curses.KEY_NPAGE: self._page_down,
            curses.KEY_SHOME: self._move_buffer_start,  # Shift + Home
            curses.KEY_SEND: self._move_buffer_end,  # Shift + End
        }

    def set_mode(self, mode: Mode) -> None:
        if mode is self.mode:
            return

        logger.debug("Mode %s -> %s", self.mode.value, mode.value)
        self.mode = mode

    def reset(self) -> None:
        """Return to navigation after the buffer was replaced."""

        self.cursor.set_nibble_phase(NibblePhase.HIGH)
        self.set_mode(Mode.NAVIGATE)

    def set_display_state(self, state: DisplayState) -> None:
        """Change the allowed interactions, leaving modes the new state forbids."""

        self.display_state = state

        if state is DisplayState.DISABLED and self.mode is Mode.SELECT:
            self.cursor.clear_selection()
            self.set_mode(Mode.NAVIGATE)

        if state is not DisplayState.EDITABLE and self.mode is Mode.EDIT:
            self._exit_edit()

    def handle_key(self, ch: int) -> RedrawHint:
        """Handle a single key code."""

        if self.display_state is DisplayState.DISABLED or not self.cursor.enabled:
            return RedrawHint.IGNORED

        if self.mode is Mode.EDIT:
            return self._handle_edit_key(ch)

        if self.mode is Mode.SELECT:
            return self._handle_select_key(ch)

        return self._handle_navigate_key(ch)

    def handle_resize(self, visible_rows: int) -> RedrawHint:
        """Apply a new viewport height, in any mode and state."""

        if self.viewport.resize(visible_rows, self.cursor.offset):
            return RedrawHint.SCROLL

        return RedrawHint.REDRAW

    def handle_focus_lost(self) -> RedrawHint:
        if self.mode is not Mode.EDIT:
            return RedrawHint.IGNORED

        self._exit_edit()
        return RedrawHint.REDRAW

    def move_cursor_to(self, offset: int) -> RedrawHint:
        """Move the cursor to an absolute offset as a navigation step."""

        if self.display_state is DisplayState.DISABLED or not self.cursor.enabled:
            return RedrawHint.IGNORED

        return self._after_move(self.cursor.move_to(offset))

    def _handle_navigate_key(self, ch: int) -> RedrawHint:
        if ch in self.navigation_handlers:
            return self._after_move(self.navigation_handlers[ch]())

        if ch in self.key_bindings.enter_edit:
            if self.display_state is not DisplayState.EDITABLE:
                return RedrawHint.IGNORED

            self.cursor.set_nibble_phase(NibblePhase.HIGH)
            self.set_mode(Mode.EDIT)
            return RedrawHint.REDRAW

        if ch in self.key_bindings.toggle_selection:
            self.cursor.start_selection()
            self.set_mode(Mode.SELECT)
            return RedrawHint.REDRAW

        return RedrawHint.IGNORED

    def _handle_edit_key(self, ch: int) -> RedrawHint:
        if ch in self.key_bindings.exit_edit:
            self._exit_edit()
            return RedrawHint.REDRAW

        if ch in self.navigation_handlers:
            return self._after_move(self.navigation_handlers[ch]())

        if self._is_hex_char(ch):
            return self._write_nibble(int(chr(ch), 16))

        # Any other non-hex key also leaves; every nibble is already committed.
        self._exit_edit()
        return RedrawHint.REDRAW

    def _handle_select_key(self, ch: int) -> RedrawHint:
        if ch in self.navigation_handlers:
            return self._after_move(self.navigation_handlers[ch]())

        if ch in self.key_bindings.toggle_selection or ch in self.key_bindings.cancel:
            self.cursor.clear_selection()
            self.set_mode(Mode.NAVIGATE)
            return RedrawHint.REDRAW

        return RedrawHint.IGNORED

    def _is_hex_char(self, ch: int) -> bool:
        """Check if character is a valid hex digit."""
        return (0x30 <= ch <= 0x39) or (0x41 <= ch <= 0x46) or (0x61 <= ch <= 0x66)

    def _exit_edit(self) -> None:
        self.cursor.set_nibble_phase(NibblePhase.HIGH)
        self.set_mode(Mode.NAVIGATE)

    def _write_nibble(self, value: int) -> RedrawHint:
        """Merge a hex digit into the byte under the cursor and advance."""

        offset = self.cursor.offset
        high = self.cursor.nibble_phase is NibblePhase.HIGH

        try:
            current = self.buffer.read(offset)
            if high:
                new_value = (current & 0x0F) | (value << 4)
            else:
                new_value = (current & 0xF0) | value
            self.buffer.write(offset, new_value)
        except OutOfRange:
            logger.exception("Cursor offset %s escaped the buffer, nibble write dropped", offset)
            return RedrawHint.IGNORED

        if high:
            self.cursor.set_nibble_phase(NibblePhase.LOW)
            return RedrawHint.REDRAW

        self.cursor.set_nibble_phase(NibblePhase.HIGH)
        self.cursor.move(1)

        if self.viewport.ensure_visible(self.cursor.offset):
            return RedrawHint.SCROLL

        return RedrawHint.REDRAW

    def _after_move(self, moved: bool) -> RedrawHint:
        if not moved:
            return RedrawHint.IGNORED

        if self.mode is Mode.EDIT:
            self.cursor.set_nibble_phase(NibblePhase.HIGH)

        if self.viewport.ensure_visible(self.cursor.offset):
            return RedrawHint.SCROLL

        return RedrawHint.REDRAW

    def _move_left(self) -> bool:
        return self.cursor.move(-1)

    def _move_right(self) -> bool:
        return self.cursor.move(1)

    def _move_up(self) -> bool:
        return self.cursor.move_row(-1)

    def _move_down(self) -> bool:
        return self.cursor.move_row(1)

    def _page_up(self) -> bool:
        return self.cursor.move_row(-self.viewport.visible_rows)

    def _page_down(self) -> bool:
        return self.cursor.move_row(self.viewport.visible_rows)

    def _move_buffer_start(self) -> bool:
        return self.cursor.move_to(0)

    def _move_buffer_end(self) -> bool:
        return self.cursor.move_to(self.cursor.length - 1)
