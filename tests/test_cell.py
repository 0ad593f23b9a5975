import pytest

from minesboomer.cell import Cell, CellKind, CellState


def test_default_cell_is_hidden_and_empty():
    cell = Cell()
    assert cell.is_hidden()
    assert cell.is_empty()
    assert not cell.is_mine()


def test_new_number_zero_is_empty():
    cell = Cell.new_number(0)
    assert cell.kind is CellKind.EMPTY
    assert cell.is_empty()


def test_new_number_keeps_count():
    cell = Cell.new_number(3)
    assert cell.kind is CellKind.NUMBER
    assert cell.number == 3
    assert not cell.is_empty()


def test_new_number_out_of_range_raises():
    with pytest.raises(ValueError):
        Cell.new_number(-1)


def test_new_mine():
    cell = Cell.new_mine()
    assert cell.is_mine()
    assert cell.is_hidden()


def test_toggle_flagged_round_trip():
    cell = Cell()
    cell.toggle_flagged()
    assert cell.is_flagged()
    cell.toggle_flagged()
    assert cell.is_hidden()


def test_toggle_flagged_leaves_cleared_cell():
    cell = Cell()
    cell.clear()
    cell.toggle_flagged()
    assert cell.is_cleared()
    assert not cell.is_flagged()


def test_clear_flagged_cell():
    cell = Cell.new_mine()
    cell.toggle_flagged()
    cell.clear()
    assert cell.state is CellState.CLEARED


@pytest.mark.parametrize(
    "cell",
    [
        Cell(),
        Cell.new_mine(),
        Cell.new_number(5),
        Cell(CellKind.NUMBER, CellState.FLAGGED, 2),
        Cell(CellKind.MINE, CellState.CLEARED),
    ],
)
def test_dict_round_trip(cell):
    assert Cell.from_dict(cell.to_dict()) == cell


def test_mine_dict_form():
    assert Cell.new_mine().to_dict() == {"kind": "Mine", "state": "Hidden"}


def test_number_dict_form():
    assert Cell.new_number(4).to_dict()["kind"] == {"Number": 4}


@pytest.mark.parametrize(
    "data",
    [
        {"kind": "Bomb", "state": "Hidden"},
        {"kind": "Empty", "state": "Open"},
        {"kind": {"Count": 1}, "state": "Hidden"},
        {"state": "Hidden"},
    ],
)
def test_from_invalid_dict_raises(data):
    with pytest.raises(ValueError):
        Cell.from_dict(data)