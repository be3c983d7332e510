"""
Coordinate transforms between offset keys and the centered frame.

Offset keys index the backing grid ("row,col", 0-indexed). Centered keys
are the same cells translated so that the board center is "0,0".
"""
import re

from morris_board.core import Coordinate, InvalidKey, SlotKey

# Canonical integers only: ASCII digits, no sign but "-", no padding
_KEY_PART = re.compile(r"0|-?[1-9][0-9]*")


def center_index(size: int) -> int:
    """Return the row/column index of the center cell of a size x size grid."""
    return (size - 1) // 2


def format_key(row: int, col: int) -> SlotKey:
    """Format a coordinate pair as a canonical "row,col" key."""
    return f"{row},{col}"


def parse_key(key: SlotKey) -> Coordinate:
    """
    Parse a "row,col" key into an integer pair.

    Args:
        key: Slot key, offset or centered

    Returns:
        (row, col) tuple

    Raises:
        InvalidKey: If the key is not a string of two comma-separated integers
    """
    if not isinstance(key, str) or "," not in key:
        raise InvalidKey(f"Given key is invalid. Key: {key!r}")

    parts = key.split(",")
    if len(parts) != 2:
        raise InvalidKey(f"Key must have exactly two parts: {key!r}")

    if not all(_KEY_PART.fullmatch(part) for part in parts):
        raise InvalidKey(f"Key parts must be integers: {key!r}")

    return int(parts[0]), int(parts[1])


def offset_key(key: SlotKey, d_row: int, d_col: int) -> SlotKey:
    """Return the key reached by moving (d_row, d_col) cells from key."""
    row, col = parse_key(key)
    return format_key(row + d_row, col + d_col)


def to_centered(key: SlotKey, size: int) -> SlotKey:
    """Convert an offset key to centered coordinates (center = "0,0")."""
    row, col = parse_key(key)
    center = center_index(size)
    return format_key(row - center, col - center)


def to_offset(centered_key: SlotKey, size: int) -> SlotKey:
    """Convert a centered key back to offset coordinates."""
    row, col = parse_key(centered_key)
    center = center_index(size)
    return format_key(row + center, col + center)
