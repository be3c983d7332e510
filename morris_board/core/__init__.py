"""
Core module - shared data types, errors, and configuration.
"""
from .types import (
    SlotKey,
    Coordinate,
    Position,
    Direction,
    SlotClass,
    Move,
)
from .errors import (
    BoardError,
    InvalidConfiguration,
    OutOfRange,
    InvalidKey,
    InvalidSlot,
    NoActiveTraversal,
    UnknownSlot,
)
from .io_utils import load_yaml
from .config_loader import Config

__all__ = [
    # Types
    "SlotKey",
    "Coordinate",
    "Position",
    "Direction",
    "SlotClass",
    "Move",
    # Errors
    "BoardError",
    "InvalidConfiguration",
    "OutOfRange",
    "InvalidKey",
    "InvalidSlot",
    "NoActiveTraversal",
    "UnknownSlot",
    # I/O
    "load_yaml",
    # Config
    "Config",
]
