"""
Configuration loader with validation and defaults.
"""
import copy
from pathlib import Path
from typing import Any, Dict, Optional
import logging

from .io_utils import load_yaml

logger = logging.getLogger(__name__)


class Config:
    """
    Configuration container with sectioned defaults.
    """

    DEFAULTS = {
        # Board topology
        "board": {
            "ring_count": 3,  # Classic Nine Men's Morris
        },

        # Layout projection (canvas clamping, in canvas units)
        "layout": {
            "min_width": 100.0,
            "max_width": 1920.0,
            "min_height": 100.0,
            "max_height": 1080.0,
        },

        # Debug rendering
        "render": {
            "canvas_width": 800,
            "canvas_height": 800,
            "slot_scale": 0.5,  # Slot marker size relative to spacing
            "opacity": 1.0,
            "draw_lines": True,
            "draw_slots": True,
        },
    }

    def __init__(self, config_path: Optional[Path] = None):
        """
        Load configuration from file or use defaults.

        Args:
            config_path: Path to config YAML (None = use defaults)
        """
        self.data = copy.deepcopy(self.DEFAULTS)

        if config_path and Path(config_path).exists():
            try:
                user_config = load_yaml(Path(config_path))
                self._merge_config(user_config)
                logger.info(f"Configuration loaded from {config_path}")
            except Exception as e:  # YAML/IO errors fall back to defaults
                logger.warning(f"Failed to load config: {e}, using defaults")
        else:
            logger.info("Using default configuration")

    @classmethod
    def from_dict(cls, overrides: Dict[str, Any]) -> "Config":
        """Build a config from an in-memory dictionary of overrides."""
        config = cls()
        config._merge_config(overrides)
        return config

    def _merge_config(self, user_config: Dict[str, Any]) -> None:
        """Merge user config with defaults."""
        for section, values in user_config.items():
            if section in self.data and isinstance(values, dict):
                self.data[section].update(values)
            else:
                self.data[section] = values

    def get(self, section: str, key: str, default: Any = None) -> Any:
        """Get config value."""
        return self.data.get(section, {}).get(key, default)

    def get_section(self, section: str) -> Dict[str, Any]:
        """Get entire config section."""
        return self.data.get(section, {})

    @property
    def ring_count(self) -> Any:
        # Validated by Board, not coerced
        return self.get("board", "ring_count", 3)
