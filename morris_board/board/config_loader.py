"""
Build board, layout and render settings from the YAML configuration.

Unknown keys are ignored to keep older config files loadable.
"""
from pathlib import Path
from typing import Any, Dict, Optional
import logging

from morris_board.core import Config
from .topology import Board, LayoutConfig
from .visualizer import RenderConfig

logger = logging.getLogger(__name__)

# Default location for the application-wide settings
DEFAULT_CONFIG_PATH = Path("config/board.yaml")


def _known_fields(cls: type, section: Dict[str, Any]) -> Dict[str, Any]:
    """
    Keep only the entries of a config section that name fields of cls.

    Unknown keys are ignored to remain forward compatible with new YAML fields.
    """
    values = {}
    for key, value in section.items():
        if key in cls.__dataclass_fields__:
            values[key] = value
        else:
            logger.debug("Ignoring unknown config key: %s", key)
    return values


def build_layout_config(config: Optional[Config] = None) -> LayoutConfig:
    """Construct LayoutConfig from the "layout" section."""
    config = config or Config()
    # Validation runs in __post_init__
    return LayoutConfig(**_known_fields(LayoutConfig, config.get_section("layout")))


def build_render_config(config: Optional[Config] = None) -> RenderConfig:
    """
    Construct RenderConfig (including its layout bounds) from settings.

    Args:
        config: Loaded configuration (default: Config())

    Returns:
        Populated RenderConfig instance

    Raises:
        ValueError: If the canvas size is not positive
    """
    config = config or Config()
    values = _known_fields(RenderConfig, config.get_section("render"))
    # Layout bounds come from their own section
    values.pop("layout", None)
    return RenderConfig(layout=build_layout_config(config), **values)


def build_board_from_config(config: Optional[Config] = None) -> Board:
    """Build the board described by the "board" section."""
    config = config or Config()
    return Board(config.ring_count)


def load_board_config(config_path: Optional[Path] = None) -> Config:
    """
    Load configuration from YAML, falling back to defaults.

    Args:
        config_path: Optional path (defaults to DEFAULT_CONFIG_PATH)
    """
    path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
    return Config(path)
