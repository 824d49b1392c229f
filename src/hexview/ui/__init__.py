"""
UI package for the hex view widget.

This package implements the interactive side of the hex view: the
InputStateMachine turning key codes into edits, the HexView widget the host
talks to, the row descriptors it draws from, and a curses host to run it.
"""

from .input_handler import InputStateMachine, Mode, RedrawHint
from .keys import ESCAPE_KEY, KeyBindings, ctrl
from .render import Cell, CellRole, Renderer, RowDescriptor, RowLayout
from .widget import HexView
from .window import CursesRenderer, ViewerWindow, run_viewer

__all__ = [
    'Cell',
    'CellRole',
    'CursesRenderer',
    'ESCAPE_KEY',
    'HexView',
    'InputStateMachine',
    'KeyBindings',
    'Mode',
    'RedrawHint',
    'Renderer',
    'RowDescriptor',
    'RowLayout',
    'ViewerWindow',
    'ctrl',
    'run_viewer',
]
