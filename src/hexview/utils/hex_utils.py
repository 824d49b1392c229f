"""
Utility functions for formatting hex output.
"""

from typing import Iterator, Optional

from pygments import highlight
from pygments.formatters import TerminalFormatter
from pygments.lexers.hexdump import HexdumpLexer

from ..core.config import ViewConfig


def make_printable(byte: int) -> str:
    """
    Get the ASCII gloss character of a byte.

    Args:
        byte (int): Byte value

    Returns:
        str: The character itself for graphic ASCII (0x21-0x7E), '.' otherwise
    """

    return chr(byte) if 0x21 <= byte <= 0x7E else '.'


def format_offset(offset: int, width: int = 8) -> str:
    """
    Format a byte offset as a hex string.

    Args:
        offset (int): Byte offset to format
        width (int): Number of hex digits to use

    Returns:
        str: Formatted hex string
    """

    return f"{offset:0{width}X}"


def address_digits(length: int, start_address: int = 0, minimum: int = 0) -> int:
    """
    Count the hex digits needed to align all row addresses.

    Args:
        length (int): Buffer length in bytes
        start_address (int): Address label of the first byte
        minimum (int): Lower bound requested by the configuration

    Returns:
        int: Smallest d with 16**d >= length + start_address, at least 1
    """

    end = max(length, 1) + start_address
    digits = 1
    while 16 ** digits < end:
        digits += 1

    return max(digits, minimum)


def hexdump_lines(data: bytes, config: Optional[ViewConfig] = None) -> Iterator[str]:
    """Yield plain hexdump lines laid out like the interactive view."""

    config = config or ViewConfig()
    width = address_digits(len(data), config.start_address, config.address_width)
    bpr = config.bytes_per_row

    for start in range(0, len(data), bpr):
        row = data[start:start + bpr]
        groups = []
        for g in range(0, bpr, config.bytes_per_group):
            chunk = row[g:g + config.bytes_per_group]
            text = ''.join(f"{b:02X}" for b in chunk)
            groups.append(text.ljust(2 * min(config.bytes_per_group, bpr - g)))

        line = (format_offset(config.start_address + start, width)
                + config.address_separator
                + config.group_separator.join(groups))

        if config.show_ascii:
            line += config.ascii_separator + ''.join(make_printable(b) for b in row)

        yield line


def hexdump(data: bytes, config: Optional[ViewConfig] = None, color: bool = False) -> str:
    """
    Render data as a hexdump.

    Args:
        data (bytes): Data to dump
        config (ViewConfig): Layout options, defaults to ViewConfig()
        color (bool): Colorize the result for a terminal using Pygments

    Returns:
        str: The dump, one line per row, newline terminated
    """

    text = ''.join(line + '\n' for line in hexdump_lines(data, config))
    if not color or not text:
        return text

    return highlight(text, HexdumpLexer(), TerminalFormatter())
