"""
Utility package for hex formatting and logging.
"""

from .hex_utils import (
    address_digits,
    format_offset,
    hexdump,
    hexdump_lines,
    make_printable
)
from .logger import setup_logging

__all__ = [
    'address_digits',
    'format_offset',
    'hexdump',
    'hexdump_lines',
    'make_printable',
    'setup_logging'
]
