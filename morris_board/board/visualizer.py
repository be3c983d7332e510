"""
Board rendering for visual debugging.

Replays the traversal plan as a single polyline and marks every slot.
"""
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple
import logging

import cv2
import numpy as np

from morris_board.core import SlotKey
from .topology import Board, LayoutConfig
from .traversal import traversal_path

logger = logging.getLogger(__name__)


def line_thickness(ring_count: int) -> int:
    """Line thickness in pixels; thinner lines for denser boards."""
    return max(1, int(round(68.4 / (0.8 + ring_count))))


@dataclass
class RenderConfig:
    """Options for the debug renderer."""
    canvas_width: int = 800
    canvas_height: int = 800
    slot_scale: float = 0.5  # Slot marker diameter relative to spacing
    opacity: float = 1.0
    draw_lines: bool = True
    draw_slots: bool = True
    layout: LayoutConfig = field(default_factory=LayoutConfig)

    def __post_init__(self):
        if self.canvas_width <= 0 or self.canvas_height <= 0:
            raise ValueError("Canvas dimensions must be positive")
        self.opacity = max(0.0, min(1.0, self.opacity))


class BoardVisualizer:
    """
    Renders a board's slots and lines onto BGR images.
    """

    # Color scheme (BGR)
    COLORS = {
        "background": (255, 255, 255),  # White
        "lines": (0, 0, 0),  # Black
        "slots": (0, 0, 0),  # Black
    }

    def __init__(
            self,
            board: Board,
            config: Optional[RenderConfig] = None
    ):
        """
        Initialize visualizer.

        Args:
            board: Board topology to draw
            config: Render options (default: RenderConfig())
        """
        self.board = board
        self.config = config or RenderConfig()

    def slot_pixels(self, image_shape: Tuple[int, ...]) -> Dict[SlotKey, Tuple[int, int]]:
        """
        Pixel position of every slot for an image of the given shape.

        Layout rows grow upwards, so the y axis is flipped for images.
        """
        height, width = image_shape[:2]
        clamped_w, clamped_h = self.config.layout.clamp((width, height))
        shift_x = (width - clamped_w) / 2
        shift_y = (height - clamped_h) / 2

        positions = self.board.layout((width, height), self.config.layout)
        return {
            key: (int(round(x + shift_x)), int(round(height - 1 - (y + shift_y))))
            for key, (x, y) in positions.items()
        }

    def draw_board(self, image: np.ndarray) -> np.ndarray:
        """
        Draw board lines and slots.

        Args:
            image: Input BGR image (not modified)

        Returns:
            New image with the board drawn
        """
        overlay = image.copy()
        pixels = self.slot_pixels(image.shape)
        spacing = self.board.spacing(image.shape[1::-1], self.config.layout)

        if self.config.draw_lines:
            points = np.array(
                [pixels[key] for key in traversal_path(self.board)],
                dtype=np.int32,
            ).reshape((-1, 1, 2))
            cv2.polylines(
                overlay,
                [points],
                False,
                self.COLORS["lines"],
                line_thickness(self.board.ring_count),
            )

        if self.config.draw_slots:
            radius = max(1, int(spacing * self.config.slot_scale / 2))
            for pos in pixels.values():
                cv2.circle(overlay, pos, radius, self.COLORS["slots"], -1)

        if self.config.opacity >= 1.0:
            return overlay

        return cv2.addWeighted(image, 1 - self.config.opacity, overlay, self.config.opacity, 0)

    def render(
            self,
            width: Optional[int] = None,
            height: Optional[int] = None
    ) -> np.ndarray:
        """
        Render the board on a blank canvas.

        Args:
            width: Canvas width (default: config.canvas_width)
            height: Canvas height (default: config.canvas_height)

        Returns:
            BGR image of shape (height, width, 3)
        """
        width = width or self.config.canvas_width
        height = height or self.config.canvas_height

        canvas = np.full((height, width, 3), self.COLORS["background"], dtype=np.uint8)
        result = self.draw_board(canvas)

        logger.debug(f"Rendered {self.board!r} on {width}x{height} canvas")
        return result
