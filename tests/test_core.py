"""
Unit tests for core module.
"""
from pathlib import Path
import textwrap

import pytest
import yaml

from morris_board.core import (
    BoardError,
    Config,
    Direction,
    InvalidConfiguration,
    InvalidKey,
    InvalidSlot,
    Move,
    NoActiveTraversal,
    OutOfRange,
    UnknownSlot,
    load_yaml,
)


def test_direction_steps():
    """Test Direction unit steps on the offset grid."""
    assert (Direction.UP.d_row, Direction.UP.d_col) == (1, 0)
    assert (Direction.DOWN.d_row, Direction.DOWN.d_col) == (-1, 0)
    assert (Direction.LEFT.d_row, Direction.LEFT.d_col) == (0, -1)
    assert (Direction.RIGHT.d_row, Direction.RIGHT.d_col) == (0, 1)


def test_move():
    """Test Move dataclass."""
    move = Move(Direction.RIGHT, 3)
    direction, distance = move

    assert direction is Direction.RIGHT
    assert distance == 3
    assert str(move) == "RIGHT 3"
    assert move == Move(Direction.RIGHT, 3)

    # Frozen
    with pytest.raises(AttributeError):
        move.distance = 4


def test_error_hierarchy():
    """Errors derive from BoardError and the matching builtin."""
    assert issubclass(InvalidConfiguration, ValueError)
    assert issubclass(OutOfRange, IndexError)
    assert issubclass(InvalidKey, ValueError)
    assert issubclass(InvalidSlot, ValueError)
    assert issubclass(NoActiveTraversal, RuntimeError)
    assert issubclass(UnknownSlot, LookupError)

    for error in (InvalidConfiguration, OutOfRange, InvalidKey,
                  InvalidSlot, NoActiveTraversal, UnknownSlot):
        assert issubclass(error, BoardError)


def test_config_defaults():
    """Test Config defaults."""
    config = Config()

    assert config.ring_count == 3
    assert config.get("layout", "max_width") == 1920.0
    assert config.get("render", "slot_scale") == 0.5
    assert config.get("render", "missing", "fallback") == "fallback"
    assert config.get_section("unknown") == {}


def test_config_from_yaml(tmp_path: Path):
    """User values override defaults section by section."""
    config_path = tmp_path / "board.yaml"
    config_path.write_text(textwrap.dedent("""
        board:
          ring_count: 5
        render:
          slot_scale: 0.3
    """).strip())

    config = Config(config_path)

    assert config.ring_count == 5
    assert config.get("render", "slot_scale") == 0.3
    # Untouched keys keep their defaults
    assert config.get("render", "canvas_width") == 800


def test_config_does_not_mutate_defaults():
    """Merging overrides must not leak into class defaults."""
    Config.from_dict({"board": {"ring_count": 7}})

    assert Config.DEFAULTS["board"]["ring_count"] == 3
    assert Config().ring_count == 3


def test_config_malformed_yaml_falls_back(tmp_path: Path):
    """Malformed YAML should fall back to defaults."""
    config_path = tmp_path / "broken.yaml"
    config_path.write_text("board: [ring_count: 4")

    config = Config(config_path)

    assert config.ring_count == 3


def test_config_missing_file(tmp_path: Path):
    """Missing config file uses defaults."""
    config = Config(tmp_path / "missing.yaml")
    assert config.ring_count == 3


def test_load_yaml(tmp_path: Path):
    """Test YAML loading."""
    filepath = tmp_path / "data.yaml"
    filepath.write_text("board:\n  ring_count: 2\n")

    data = load_yaml(filepath)
    assert data == {"board": {"ring_count": 2}}

    # Empty file yields empty dict
    empty = tmp_path / "empty.yaml"
    empty.write_text("")
    assert load_yaml(empty) == {}


def test_load_yaml_errors(tmp_path: Path):
    """Test loading invalid files."""
    with pytest.raises(FileNotFoundError):
        load_yaml(Path("nonexistent_file.yaml"))

    broken = tmp_path / "broken.yaml"
    broken.write_text("a: [1, 2")
    with pytest.raises(yaml.YAMLError):
        load_yaml(broken)

    scalar = tmp_path / "scalar.yaml"
    scalar.write_text("42")
    with pytest.raises(ValueError):
        load_yaml(scalar)
