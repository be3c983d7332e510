"""
Render a Morris board to an image for visual checks.

Usage:
    python scripts/render_board.py
    python scripts/render_board.py --rings 4 --output board.png
    python scripts/render_board.py --config config/board.yaml --show
"""
import cv2
import sys
import argparse
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from morris_board.board import (
    BoardVisualizer,
    build_board_from_config,
    build_render_config,
    load_board_config,
    neighbors,
    plan_traversal,
)
import logging

# Setup logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def parse_args():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Render a Morris board")
    parser.add_argument("--config", type=str, default=None,
                        help="Board config YAML (default: config/board.yaml)")
    parser.add_argument("--rings", type=int, default=None,
                        help="Number of rings (overrides config)")
    parser.add_argument("--width", type=int, default=None, help="Canvas width")
    parser.add_argument("--height", type=int, default=None, help="Canvas height")
    parser.add_argument("--output", type=str, default="board.png",
                        help="Output image path")
    parser.add_argument("--show", action="store_true", help="Display the result")
    parser.add_argument("--verbose", action="store_true",
                        help="Print traversal and adjacency table")
    return parser.parse_args()


def main():
    """Render the configured board."""
    args = parse_args()

    config = load_board_config(Path(args.config) if args.config else None)
    if args.rings is not None:
        config.data["board"]["ring_count"] = args.rings

    board = build_board_from_config(config)
    visualizer = BoardVisualizer(board, build_render_config(config))

    print("=" * 60)
    print("Morris Board Renderer")
    print("=" * 60)
    print(f"Rings: {board.ring_count}  Size: {board.size}  Slots: {len(board)}")

    if args.verbose:
        moves = plan_traversal(board)
        print(f"\nTraversal ({len(moves)} moves):")
        print("  " + ", ".join(str(move) for move in moves))

        print("\nNeighbours (up, down, left, right):")
        for key in board:
            print(f"  {key:>7}: {neighbors(board, key)}")

    image = visualizer.render(args.width, args.height)

    output = Path(args.output)
    output.parent.mkdir(parents=True, exist_ok=True)
    if not cv2.imwrite(str(output), image):
        logger.error(f"Failed to write {output}")
        return 1
    print(f"\n✓ Board saved to {output}")

    if args.show:
        cv2.imshow("Morris Board", image)
        cv2.waitKey(0)
        cv2.destroyAllWindows()

    return 0


if __name__ == "__main__":
    sys.exit(main())
