"""
Buffer module holding the raw bytes shown by the hex view.
"""

from typing import Iterable, Union

from .errors import OutOfRange


class ByteBuffer:
    """Fixed-length byte storage with bounds-checked reads and writes."""

    def __init__(self, initial_data: Union[bytes, bytearray, Iterable[int]] = b'') -> None:
        self.data = bytearray(initial_data)

    def __len__(self) -> int:
        return len(self.data)

    def __bytes__(self) -> bytes:
        return bytes(self.data)

    def __repr__(self) -> str:
        return f"ByteBuffer(length={len(self.data)})"

    def _check_offset(self, offset: int) -> None:
        if not 0 <= offset < len(self.data):
            raise OutOfRange(offset, len(self.data))

    def read(self, offset: int) -> int:
        """Read the byte at the specified offset."""

        self._check_offset(offset)
        return self.data[offset]

    def write(self, offset: int, value: int) -> None:
        """Overwrite the byte at the specified offset."""

        if not 0 <= value <= 255:
            raise ValueError("Byte value must be between 0 and 255")

        self._check_offset(offset)
        self.data[offset] = value

    def get_row(self, row: int, bytes_per_row: int) -> bytes:
        """
        Get the bytes of a single row.

        Args:
            row (int): Zero-based row index
            bytes_per_row (int): Row width in bytes

        Returns:
            bytes: The row's bytes, shorter than bytes_per_row for the last row
                   and empty for rows past the end
        """

        start = row * bytes_per_row
        end = min(start + bytes_per_row, len(self.data))
        return bytes(self.data[start:end])

    def resize(self, length: int) -> None:
        """Grow with zero bytes or truncate to the given length."""

        if length < 0:
            raise ValueError("Buffer length cannot be negative")

        if length > len(self.data):
            self.data.extend(bytes(length - len(self.data)))
            return

        del self.data[length:]
