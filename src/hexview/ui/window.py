"""
Curses host for the hex view widget.
"""

import curses
import logging
import os
from typing import Dict, Final, FrozenSet, Optional, Sequence

from .keys import ctrl
from ..core.cursor import NibblePhase
from .input_handler import Mode
from .render import Cell, CellRole, RowDescriptor
from .widget import HexView

logger = logging.getLogger(__name__)

QUIT_KEYS: Final[FrozenSet[int]] = frozenset({ord('q'), ctrl('x')})
SAVE_KEY: Final[int] = ctrl('w')

ROLE_COLOR_PAIRS: Final[Dict[CellRole, int]] = {
    CellRole.ADDRESS: 1,
    CellRole.SEPARATOR: 2,
    CellRole.HEX: 3,
    CellRole.ASCII: 4,
}
SELECTION_COLOR_PAIR: Final[int] = 5
STATUS_COLOR_PAIR: Final[int] = 6


def safe_addstr(window: 'curses.window', y: int, x: int, string: str, attr: int = 0) -> None:
    """Safely add a string to a window, truncating if necessary."""

    height, width = window.getmaxyx()
    if y >= height or x >= width:
        return

    available = width - x
    if available <= 0:
        return

    if len(string) > available:
        string = string[:available]

    try:
        window.addstr(y, x, string, attr)
    except curses.error:
        pass


class CursesRenderer:
    """Draws row descriptors into a curses window."""

    def __init__(self, window: 'curses.window', use_color: bool = False) -> None:
        self.window = window
        self.use_color = use_color

    @staticmethod
    def init_colors() -> None:
        """Register the color pairs; needs an initialised screen."""

        curses.start_color()
        curses.init_pair(ROLE_COLOR_PAIRS[CellRole.ADDRESS], curses.COLOR_YELLOW, -1)
        curses.init_pair(ROLE_COLOR_PAIRS[CellRole.SEPARATOR], curses.COLOR_BLUE, -1)
        curses.init_pair(ROLE_COLOR_PAIRS[CellRole.HEX], curses.COLOR_WHITE, -1)
        curses.init_pair(ROLE_COLOR_PAIRS[CellRole.ASCII], curses.COLOR_GREEN, -1)
        curses.init_pair(SELECTION_COLOR_PAIR, curses.COLOR_BLACK, curses.COLOR_CYAN)
        curses.init_pair(STATUS_COLOR_PAIR, curses.COLOR_WHITE, -1)

    def cell_attr(self, cell: Cell) -> int:
        """Get the curses attribute for a cell."""

        if cell.padding:
            return curses.A_NORMAL

        attr = curses.color_pair(ROLE_COLOR_PAIRS[cell.role]) if self.use_color else curses.A_NORMAL

        if cell.selected:
            attr = curses.color_pair(SELECTION_COLOR_PAIR) if self.use_color else curses.A_STANDOUT

        if cell.cursor:
            attr |= curses.A_REVERSE | curses.A_BOLD

        return attr

    def draw_cell(self, y: int, cell: Cell) -> None:
        attr = self.cell_attr(cell)

        if cell.nibble is None:
            safe_addstr(self.window, y, cell.column, cell.text, attr)
            return

        # Underline the nibble the next hex digit replaces.
        active = 0 if cell.nibble is NibblePhase.HIGH else 1
        for i, char in enumerate(cell.text):
            char_attr = (attr | curses.A_UNDERLINE) if i == active else attr
            safe_addstr(self.window, y, cell.column + i, char, char_attr)

    def draw_rows(self, rows: Sequence[RowDescriptor]) -> None:
        """Draw the rows starting at the top of the window."""

        self.window.erase()

        for y, row in enumerate(rows):
            for cell in row.cells:
                self.draw_cell(y, cell)

        self.window.noutrefresh()


class ViewerWindow:
    """Runs a HexView full screen with a status line below it."""

    MIN_HEIGHT = 2
    MIN_WIDTH = 20

    def __init__(self, stdscr: 'curses.window', view: HexView,
                 filename: Optional[str] = None) -> None:
        self.stdscr = stdscr
        self.view = view
        self.filename = filename
        self.saved_data = view.data()
        self.status_message: Optional[str] = None
        self.use_color = False
        self.renderer = CursesRenderer(stdscr)
        self.height, self.width = stdscr.getmaxyx()
        self.view.handle_resize(self.content_height())

    def content_height(self) -> int:
        return max(1, self.height - 1)

    @property
    def modified(self) -> bool:
        return self.view.data() != self.saved_data

    def setup_terminal(self) -> None:
        """Configure the terminal; needs an initialised screen."""

        curses.use_default_colors()
        curses.curs_set(0)
        self.stdscr.keypad(True)
        curses.mousemask(curses.BUTTON1_CLICKED | curses.BUTTON1_PRESSED)

        if curses.has_colors():
            CursesRenderer.init_colors()
            self.use_color = True
            self.renderer.use_color = True

    def resize(self) -> None:
        """Handle terminal resize events."""

        self.height, self.width = self.stdscr.getmaxyx()

        if self.height < self.MIN_HEIGHT or self.width < self.MIN_WIDTH:
            self.status_message = "Error: Terminal too small"

        self.view.handle_resize(self.content_height())

    def status_line(self) -> str:
        offset = self.view.cursor_offset()
        parts = [
            os.path.basename(self.filename) if self.filename else "[No Name]",
            f"{len(self.view)} bytes",
            f"Offset: {offset:08X}" if offset is not None else "Offset: --",
            f"Mode: {self.view.mode().value.capitalize()}",
        ]

        selection = self.view.selection_range()
        if selection is not None:
            parts.append(f"Sel: {selection[0]:X}-{selection[1]:X}")

        parts.append("Mod:" + ("Y" if self.modified else "N"))

        if self.status_message:
            parts.append(self.status_message)

        return " | ".join(parts)

    def draw_status(self) -> None:
        attr = curses.A_REVERSE
        if self.use_color:
            attr |= curses.color_pair(STATUS_COLOR_PAIR)

        status = self.status_line()
        safe_addstr(self.stdscr, self.height - 1, 0, status.ljust(self.width - 1), attr)

    def refresh_all(self) -> None:
        self.renderer.draw_rows(self.view.visible_rows())
        self.draw_status()
        self.stdscr.noutrefresh()

    def save(self) -> bool:
        """
        Write the buffer back to its file.

        Returns:
            bool: True if save was successful, False otherwise
        """

        if not self.filename:
            self.status_message = "No file to save to"
            return False

        try:
            with open(self.filename, 'wb') as f:
                f.write(self.view.data())
        except OSError as e:
            logger.error("Failed to save %s: %s", self.filename, e)
            self.status_message = f"Save failed: {e.strerror or e}"
            return False

        self.saved_data = self.view.data()
        self.status_message = f"Saved {len(self.saved_data)} bytes"
        logger.info("Saved %d bytes to %s", len(self.saved_data), self.filename)
        return True

    def handle_input(self, ch: int) -> bool:
        """Handle a single keyboard input. Returns False if should quit."""

        self.status_message = None

        if ch == curses.KEY_RESIZE:
            self.resize()
            return True

        if ch == curses.KEY_MOUSE:
            try:
                _, x, y, _, _ = curses.getmouse()
            except curses.error:
                return True

            if y < self.content_height():
                self.view.handle_click(y, x)
            return True

        if ch == SAVE_KEY:
            self.save()
            return True

        if ch in QUIT_KEYS and self.view.mode() is Mode.NAVIGATE:
            return False

        self.view.handle_key(ch)
        return True

    def run(self) -> None:
        """Main loop; returns when the user quits."""

        self.setup_terminal()
        self.resize()

        while True:
            self.refresh_all()
            curses.doupdate()

            try:
                ch = self.stdscr.getch()
            except KeyboardInterrupt:
                break

            if ch == -1:
                continue

            if not self.handle_input(ch):
                break


def run_viewer(stdscr: 'curses.window', view: HexView, filename: Optional[str] = None) -> ViewerWindow:
    """Entry point for curses.wrapper."""

    window = ViewerWindow(stdscr, view, filename)
    window.run()
    return window
