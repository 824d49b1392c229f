"""
Exceptions raised by the hex view core.
"""


class HexViewError(Exception):
    """Base class for all hex view errors."""


class OutOfRange(HexViewError, IndexError):
    """Raised when an offset lies outside the buffer."""

    def __init__(self, offset: int, length: int) -> None:
        super().__init__(f"Offset {offset} out of range for buffer of length {length}")
        self.offset = offset
        self.length = length


class ConfigError(HexViewError, ValueError):
    """Raised for invalid view configuration values."""
