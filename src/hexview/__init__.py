"""
Terminal hex viewer and editor widget.
"""

import logging

from .core import ByteBuffer, ConfigError, DisplayState, HexViewError, OutOfRange, ViewConfig
from .ui import HexView, KeyBindings, Mode, RedrawHint

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'ByteBuffer',
    'ConfigError',
    'DisplayState',
    'HexView',
    'HexViewError',
    'KeyBindings',
    'Mode',
    'OutOfRange',
    'RedrawHint',
    'ViewConfig',
]
