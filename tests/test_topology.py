"""
Unit tests for board topology.
"""
import numpy as np
import pytest

from morris_board.core import InvalidConfiguration, InvalidSlot, OutOfRange
from morris_board.board import (
    Board,
    LayoutConfig,
    build_board,
    format_key,
    is_valid_slot,
)


def test_board_init():
    """Test Board initialization."""
    board = build_board(3)

    assert board.ring_count == 3
    assert board.size == 7
    assert board.center == 3
    assert len(board) == 24
    assert repr(board) == "Board(ring_count=3)"


@pytest.mark.parametrize("ring_count", [0, -1, -10])
def test_board_invalid_ring_count(ring_count):
    """Ring count below 1 is rejected."""
    with pytest.raises(InvalidConfiguration):
        build_board(ring_count)


@pytest.mark.parametrize("ring_count", [1.5, "3", None, True])
def test_board_non_integer_ring_count(ring_count):
    """Non-integer ring counts are rejected."""
    with pytest.raises(InvalidConfiguration):
        Board(ring_count)


def test_is_valid_slot_one_ring():
    """1-ring board: the 8 cells around the center."""
    size = 3
    valid = {
        (row, col)
        for row in range(size)
        for col in range(size)
        if is_valid_slot(row, col, size)
    }

    assert (1, 1) not in valid
    assert len(valid) == 8


def test_is_valid_slot_out_of_range():
    """Out-of-grid cells raise OutOfRange."""
    with pytest.raises(OutOfRange):
        is_valid_slot(-1, 0, 5)
    with pytest.raises(OutOfRange):
        is_valid_slot(0, 5, 5)
    with pytest.raises(OutOfRange):
        is_valid_slot(7, 7, 7)


def test_is_valid_slot_lines():
    """Diagonals and mid-lines are valid, other cells are not."""
    size = 7
    assert is_valid_slot(0, 0, size)  # main diagonal
    assert is_valid_slot(0, 6, size)  # anti-diagonal
    assert is_valid_slot(3, 0, size)  # horizontal mid-line
    assert is_valid_slot(0, 3, size)  # vertical mid-line
    assert is_valid_slot(2, 4, size)  # inner corner

    assert not is_valid_slot(3, 3, size)  # center
    assert not is_valid_slot(0, 1, size)
    assert not is_valid_slot(1, 2, size)
    assert not is_valid_slot(5, 2, size)


@pytest.mark.parametrize("ring_count", range(1, 7))
def test_valid_slots_match_predicate(ring_count):
    """Valid slots are the line cells minus the center."""
    board = build_board(ring_count)
    size = board.size
    mid = (size - 1) // 2

    assert size == 2 * ring_count + 1

    expected = {
        format_key(row, col)
        for row in range(size)
        for col in range(size)
        if row == col or row + col == size - 1 or row == mid or col == mid
    }
    expected.discard(format_key(mid, mid))

    assert set(board.valid_slots()) == expected
    assert len(board) == 8 * ring_count


@pytest.mark.parametrize("ring_count", range(1, 5))
def test_slot_grid_matches_valid_slots(ring_count):
    """slot_grid and valid_slots are equivalent views."""
    board = build_board(ring_count)
    grid = board.slot_grid
    slots = board.valid_slots()

    assert grid.shape == (board.size, board.size)
    assert grid.dtype == bool
    assert int(grid.sum()) == len(slots)

    for key, (row, col) in slots.items():
        assert key == format_key(row, col)
        assert grid[row, col]


def test_valid_slots_row_major_order():
    """Slots are listed in row-major scan order."""
    board = build_board(1)

    assert list(board.valid_slots()) == [
        "0,0", "0,1", "0,2",
        "1,0", "1,2",
        "2,0", "2,1", "2,2",
    ]


def test_board_is_read_only():
    """Board views cannot be mutated."""
    board = build_board(2)

    with pytest.raises(TypeError):
        board.valid_slots()["9,9"] = (9, 9)

    with pytest.raises(ValueError):
        board.slot_grid[0, 1] = True


def test_membership_and_lookup():
    """Test key membership helpers."""
    board = build_board(2)

    assert "0,0" in board
    assert "2,2" not in board  # center
    assert "99,99" not in board
    assert board.is_valid_key("1,2")
    assert not board.is_valid_key(None)

    assert board.coordinate_of("4,2") == (4, 2)
    with pytest.raises(InvalidSlot):
        board.coordinate_of("0,1")


def test_ring_of():
    """Ring index is the distance from the center."""
    board = build_board(3)

    assert board.ring_of("0,0") == 3
    assert board.ring_of("0,3") == 3
    assert board.ring_of("1,3") == 2
    assert board.ring_of("2,2") == 1
    assert board.ring_of("3,4") == 1

    with pytest.raises(InvalidSlot):
        board.ring_of("3,3")


def test_layout():
    """Test slot layout projection."""
    board = build_board(1)
    positions = board.layout((400, 400))

    # spacing = 400 / (3 + 1)
    assert board.spacing((400, 400)) == pytest.approx(100.0)
    assert list(positions) == list(board.valid_slots())

    assert positions["0,0"] == pytest.approx((100.0, 100.0))
    assert positions["0,1"] == pytest.approx((200.0, 100.0))
    assert positions["2,1"] == pytest.approx((200.0, 300.0))
    assert positions["1,2"] == pytest.approx((300.0, 200.0))


def test_layout_non_square_bounds():
    """Spacing follows the smaller dimension; board stays centered."""
    board = build_board(2)
    positions = board.layout((1200, 600))

    spacing = 600 / 6
    assert board.spacing((1200, 600)) == pytest.approx(spacing)
    assert positions["0,0"] == pytest.approx((600 - 2 * spacing, 300 - 2 * spacing))
    assert positions["4,4"] == pytest.approx((600 + 2 * spacing, 300 + 2 * spacing))


def test_layout_clamps_bounds():
    """Bounds are clamped before projection."""
    board = build_board(1)

    # Width clamped up to 100, height down to 1080
    assert board.spacing((10, 5000)) == pytest.approx(100 / 4)

    custom = LayoutConfig(min_width=200.0, min_height=200.0)
    assert board.spacing((10, 10), custom) == pytest.approx(200 / 4)

    positions = board.layout((5000, 5000))
    xs = np.array([x for x, _ in positions.values()])
    assert xs.max() <= 1920.0


def test_layout_config_validation():
    """Invalid layout bounds are rejected."""
    with pytest.raises(InvalidConfiguration):
        LayoutConfig(min_width=0)
    with pytest.raises(InvalidConfiguration):
        LayoutConfig(min_height=500.0, max_height=400.0)


def test_board_rebuild_on_ring_change():
    """A new ring count produces an independent board."""
    small = build_board(2)
    large = build_board(3)

    assert small.size == 5
    assert large.size == 7
    assert "6,6" in large
    assert "6,6" not in small
