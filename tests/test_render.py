import curses

from hexview.core.config import ViewConfig
from hexview.core.cursor import NibblePhase
from hexview.ui.keys import ctrl
from hexview.ui.render import CellRole, RowLayout
from hexview.ui.widget import HexView
from hexview.utils.hex_utils import hexdump_lines


def row_text(row):
    line = []
    for cell in row.cells:
        end = cell.column + len(cell.text)
        if len(line) < end:
            line.extend(' ' * (end - len(line)))
        line[cell.column:end] = cell.text
    return ''.join(line).rstrip()


def test_rows_of_two_bytes():
    view = HexView(b'\x00\x11\x22\x33', ViewConfig(bytes_per_row=2), visible_rows=5)

    rows = view.visible_rows()

    assert [row.offset for row in rows] == [0, 2]
    assert [row.data for row in rows] == [b'\x00\x11', b'\x22\x33']
    assert [row.address for row in rows] == ['0', '2']


def test_row_cell_roles():
    view = HexView(b'AB', ViewConfig(bytes_per_row=2))

    row = view.visible_rows()[0]

    assert [cell.role for cell in row.cells] == [
        CellRole.ADDRESS, CellRole.SEPARATOR,
        CellRole.HEX, CellRole.SEPARATOR, CellRole.HEX,
        CellRole.SEPARATOR,
        CellRole.ASCII, CellRole.ASCII,
    ]
    assert row_text(row) == '0: 41 42 | AB'


def test_short_last_row_is_padded():
    view = HexView(b'ABC', ViewConfig(bytes_per_row=2), visible_rows=2)

    last = view.visible_rows()[1]
    hex_cells = [cell for cell in last.cells if cell.role is CellRole.HEX]
    ascii_cells = [cell for cell in last.cells if cell.role is CellRole.ASCII]

    assert [cell.padding for cell in hex_cells] == [False, True]
    assert [cell.offset for cell in hex_cells] == [2, None]
    assert ascii_cells[1].padding
    assert row_text(last) == '2: 43    | C'


def test_row_text_matches_hexdump():
    data = bytes(range(0x1e, 0x50))
    config = ViewConfig(bytes_per_row=8, bytes_per_group=4)
    view = HexView(data, config, visible_rows=100)

    texts = [row_text(row) for row in view.visible_rows()]

    assert texts == list(hexdump_lines(data, config))


def test_cursor_and_selection_flags():
    view = HexView(bytes(6), ViewConfig(bytes_per_row=3), visible_rows=2)
    view.handle_key(curses.KEY_RIGHT)
    view.handle_key(ord('v'))
    view.handle_key(curses.KEY_DOWN)

    cells = [cell for row in view.visible_rows() for cell in row.cells
             if cell.role is CellRole.HEX]

    assert [cell.cursor for cell in cells] == [False, False, False, False, True, False]
    assert [cell.selected for cell in cells] == [False, True, True, True, True, False]


def test_nibble_marker_only_while_editing():
    view = HexView(b'\x00\x11')

    def first_hex():
        return next(c for c in view.visible_rows()[0].cells if c.role is CellRole.HEX)

    assert first_hex().nibble is None

    view.handle_key(ctrl('e'))
    assert first_hex().nibble is NibblePhase.HIGH

    view.handle_key(ord('1'))
    assert first_hex().nibble is NibblePhase.LOW


def test_no_ascii_column():
    view = HexView(b'AB', ViewConfig(bytes_per_row=2, show_ascii=False))

    row = view.visible_rows()[0]

    assert all(cell.role is not CellRole.ASCII for cell in row.cells)
    assert row_text(row) == '0: 41 42'
    assert view.required_width() == 8


def test_only_viewport_rows_are_built():
    view = HexView(bytes(100), ViewConfig(bytes_per_row=10), visible_rows=3)
    view.handle_key(curses.KEY_SEND)

    rows = view.visible_rows()

    assert [row.row for row in rows] == [7, 8, 9]


def test_empty_buffer_has_no_rows():
    assert HexView(b'', visible_rows=5).visible_rows() == []


def test_layout_columns_with_groups():
    layout = RowLayout(ViewConfig(bytes_per_row=4, bytes_per_group=2), 4)

    assert layout.address_digits == 1
    assert layout.hex_start == 3
    assert [layout.hex_column(i) for i in range(4)] == [3, 5, 8, 10]
    assert layout.hex_width == 9
    assert layout.ascii_start == 15
    assert layout.width == 19


def test_layout_maps_columns_back_to_bytes():
    layout = RowLayout(ViewConfig(), 32)

    assert layout.hex_start == 4
    assert layout.index_for_column(0) == (0, NibblePhase.HIGH)
    assert layout.index_for_column(19) == (5, NibblePhase.HIGH)
    assert layout.index_for_column(20) == (5, NibblePhase.LOW)
    assert layout.index_for_column(21) == (5, NibblePhase.LOW)
    assert layout.index_for_column(57) == (3, NibblePhase.HIGH)
    assert layout.index_for_column(500) == (15, NibblePhase.HIGH)


def test_address_width_and_start_address():
    config = ViewConfig(bytes_per_row=4, address_width=6, start_address=0x100)
    view = HexView(bytes(8), config, visible_rows=2)

    assert [row.address for row in view.visible_rows()] == ['000100', '000104']


def test_single_byte_address_does_not_overlap_hex():
    view = HexView(b'A', ViewConfig(start_address=0x8000))

    row = view.visible_rows()[0]
    separator = next(cell for cell in row.cells if cell.role is CellRole.SEPARATOR)
    first_hex = next(cell for cell in row.cells if cell.role is CellRole.HEX)

    assert row.address == '8000'
    assert separator.column == 4
    assert first_hex.column == 6
    assert row_text(row).startswith('8000: 41')
