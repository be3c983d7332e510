"""
Board module - topology, adjacency, traversal, and visualization.
"""
from .coordinates import (
    center_index,
    format_key,
    parse_key,
    offset_key,
    to_centered,
    to_offset,
)
from .topology import (
    Board,
    LayoutConfig,
    build_board,
    is_valid_slot,
)
from .adjacency import (
    NEIGHBOR_ORDER,
    adjacency_table,
    classify_slot,
    connected_slots,
    neighbors,
)
from .traversal import (
    TraversalPlanner,
    TraversalState,
    plan_traversal,
    start_key,
    traversal_edges,
    traversal_path,
)
from .visualizer import BoardVisualizer, RenderConfig, line_thickness
from .config_loader import (
    build_board_from_config,
    build_layout_config,
    build_render_config,
    load_board_config,
)

__all__ = [
    # Coordinates
    "center_index",
    "format_key",
    "parse_key",
    "offset_key",
    "to_centered",
    "to_offset",
    # Topology
    "Board",
    "LayoutConfig",
    "build_board",
    "is_valid_slot",
    # Adjacency
    "NEIGHBOR_ORDER",
    "adjacency_table",
    "classify_slot",
    "connected_slots",
    "neighbors",
    # Traversal
    "TraversalPlanner",
    "TraversalState",
    "plan_traversal",
    "start_key",
    "traversal_edges",
    "traversal_path",
    # Rendering
    "BoardVisualizer",
    "RenderConfig",
    "line_thickness",
    # Config
    "build_board_from_config",
    "build_layout_config",
    "build_render_config",
    "load_board_config",
]
