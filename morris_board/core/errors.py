"""
Exception types raised by the board topology engine.

Each error also derives from the closest builtin so callers can catch
either the specific kind or the generic Python exception.
"""


class BoardError(Exception):
    """Base class for all board topology errors."""


class InvalidConfiguration(BoardError, ValueError):
    """Ring count (or another board parameter) is not usable."""


class OutOfRange(BoardError, IndexError):
    """Row or column lies outside the backing grid."""


class InvalidKey(BoardError, ValueError):
    """Slot key is malformed (not "row,col")."""


class InvalidSlot(BoardError, ValueError):
    """Slot key is well-formed but not a member of the board."""


class NoActiveTraversal(BoardError, RuntimeError):
    """A traversal step was requested while the planner is idle."""


class UnknownSlot(BoardError, LookupError):
    """A traversal step resolved to a slot that does not exist."""
