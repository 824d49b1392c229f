"""
Core package for the hex view model.

This package implements the state behind the hex view: the ByteBuffer holding
the data, the CursorModel tracking the edited byte and selection, the
ViewportModel deciding which rows are on screen, and the display configuration.
"""

from .buffer import ByteBuffer
from .config import DisplayState, ViewConfig
from .cursor import CursorModel, NibblePhase
from .errors import ConfigError, HexViewError, OutOfRange
from .viewport import ViewportModel, visible_range

__all__ = [
    'ByteBuffer',
    'ConfigError',
    'CursorModel',
    'DisplayState',
    'HexViewError',
    'NibblePhase',
    'OutOfRange',
    'ViewConfig',
    'ViewportModel',
    'visible_range',
]
