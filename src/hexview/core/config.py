"""
Display configuration for the hex view.
"""

from dataclasses import dataclass
from enum import Enum

from .errors import ConfigError


class DisplayState(Enum):
    """Which interactions the view accepts."""

    DISABLED = 'disabled'
    ENABLED = 'enabled'
    EDITABLE = 'editable'


@dataclass(frozen=True)
class ViewConfig:
    """
    Display parameters of a hex view.

    address_width is the minimum number of hex digits used for the address
    column; 0 lets the view size it from the buffer length.
    """

    bytes_per_row: int = 16
    show_ascii: bool = True
    address_width: int = 0
    bytes_per_group: int = 1
    group_separator: str = ' '
    address_separator: str = ': '
    ascii_separator: str = ' | '
    start_address: int = 0

    def __post_init__(self) -> None:
        if self.bytes_per_row < 1:
            raise ConfigError(f"bytes_per_row must be at least 1, got {self.bytes_per_row}")

        if not 1 <= self.bytes_per_group <= self.bytes_per_row:
            raise ConfigError(
                f"bytes_per_group must be between 1 and {self.bytes_per_row}, "
                f"got {self.bytes_per_group}"
            )

        if self.address_width < 0:
            raise ConfigError(f"address_width cannot be negative, got {self.address_width}")

        if self.start_address < 0:
            raise ConfigError(f"start_address cannot be negative, got {self.start_address}")
