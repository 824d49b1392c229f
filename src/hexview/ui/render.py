"""
Render module describing visible rows as cells for the host to draw.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Protocol, Sequence, Tuple

from ..core.buffer import ByteBuffer
from ..core.config import ViewConfig
from ..core.cursor import CursorModel, NibblePhase
from ..core.viewport import ViewportModel
from ..utils.hex_utils import address_digits, format_offset, make_printable


class CellRole(Enum):
    """Column a cell belongs to."""

    ADDRESS = 'address'
    SEPARATOR = 'separator'
    HEX = 'hex'
    ASCII = 'ascii'


@dataclass
class Cell:
    """A run of characters on one row with a single style."""

    role: CellRole
    text: str
    column: int
    offset: Optional[int] = None
    cursor: bool = False
    selected: bool = False
    padding: bool = False
    nibble: Optional[NibblePhase] = None


@dataclass
class RowDescriptor:
    """One buffer row mapped to address, hex and ASCII cells."""

    row: int
    offset: int
    address: str
    data: bytes
    cells: List[Cell] = field(default_factory=list)


class Renderer(Protocol):
    """Anything that can put row descriptors on screen."""

    def draw_rows(self, rows: Sequence[RowDescriptor]) -> None:
        ...


class RowLayout:
    """
    Column positions of a row for a given configuration and buffer length.

    A row looks like ``ADDR: 00 11 22 | ."3`` where the address is padded
    so all rows align and hex bytes are grouped by bytes_per_group.
    """

    def __init__(self, config: ViewConfig, length: int) -> None:
        self.config = config
        self.address_digits = address_digits(length, config.start_address, config.address_width)
        self.hex_start = self.address_digits + len(config.address_separator)

        groups = (config.bytes_per_row + config.bytes_per_group - 1) // config.bytes_per_group
        self.hex_width = 2 * config.bytes_per_row + (groups - 1) * len(config.group_separator)
        self.ascii_separator_start = self.hex_start + self.hex_width
        self.ascii_start = self.ascii_separator_start + len(config.ascii_separator)

    @property
    def width(self) -> int:
        if self.config.show_ascii:
            return self.ascii_start + self.config.bytes_per_row

        return self.hex_start + self.hex_width

    def hex_column(self, index: int) -> int:
        """Screen column of the first hex digit of the index-th byte in a row."""

        group = index // self.config.bytes_per_group
        return self.hex_start + 2 * index + group * len(self.config.group_separator)

    def ascii_column(self, index: int) -> int:
        return self.ascii_start + index

    def index_for_column(self, column: int) -> Tuple[int, NibblePhase]:
        """
        Map a screen column to the byte index within the row.

        Columns left of the hex area map to the first byte, separators to the
        byte before them and columns right of the row to the last byte.
        """

        bpr = self.config.bytes_per_row

        if self.config.show_ascii and column >= self.ascii_separator_start:
            index = max(0, min(column - self.ascii_start, bpr - 1))
            return index, NibblePhase.HIGH

        index = 0
        for i in range(bpr):
            if self.hex_column(i) > column:
                break
            index = i

        phase = NibblePhase.LOW if column - self.hex_column(index) >= 1 else NibblePhase.HIGH
        return index, phase


def build_row(buffer: ByteBuffer, layout: RowLayout, row: int,
              cursor: CursorModel, editing: bool = False) -> RowDescriptor:
    """Describe a single row of the buffer."""

    config = layout.config
    bpr = config.bytes_per_row
    start = row * bpr
    data = buffer.get_row(row, bpr)
    selection = cursor.selection_range()

    address = format_offset(config.start_address + start, layout.address_digits)
    cells = [
        Cell(CellRole.ADDRESS, address, 0),
        Cell(CellRole.SEPARATOR, config.address_separator, layout.address_digits),
    ]

    ascii_cells = []
    for i in range(bpr):
        if i and i % config.bytes_per_group == 0:
            separator_column = layout.hex_column(i) - len(config.group_separator)
            cells.append(Cell(CellRole.SEPARATOR, config.group_separator, separator_column))

        if i >= len(data):
            cells.append(Cell(CellRole.HEX, '  ', layout.hex_column(i), padding=True))
            ascii_cells.append(Cell(CellRole.ASCII, ' ', layout.ascii_column(i), padding=True))
            continue

        offset = start + i
        is_cursor = offset == cursor.offset
        selected = selection is not None and selection[0] <= offset <= selection[1]

        cells.append(Cell(
            CellRole.HEX, f"{data[i]:02X}", layout.hex_column(i), offset,
            cursor=is_cursor,
            selected=selected,
            nibble=cursor.nibble_phase if is_cursor and editing else None,
        ))
        ascii_cells.append(Cell(
            CellRole.ASCII, make_printable(data[i]), layout.ascii_column(i), offset,
            cursor=is_cursor,
            selected=selected,
        ))

    if config.show_ascii:
        cells.append(Cell(CellRole.SEPARATOR, config.ascii_separator, layout.ascii_separator_start))
        cells.extend(ascii_cells)

    return RowDescriptor(row, start, address, data, cells)


def build_rows(buffer: ByteBuffer, config: ViewConfig, cursor: CursorModel,
               viewport: ViewportModel, editing: bool = False) -> List[RowDescriptor]:
    """Describe every row inside the viewport."""

    layout = RowLayout(config, len(buffer))
    last_row = min(viewport.scroll_row + viewport.visible_rows, viewport.total_rows())

    return [
        build_row(buffer, layout, row, cursor, editing)
        for row in range(viewport.scroll_row, last_row)
    ]
