"""Miro: board client, frame lookup by title, object graph for JSON export."""
from .types import BoardObject, Board, FRAME_TYPE, GROUP_TYPE
from .board import MiroBoard, BoardError, matches_filter
from .frames import MissingFramesError, get_frames
from .graph import get_objects_by_id, resolve_graph

__all__ = [
    "BoardObject",
    "Board",
    "FRAME_TYPE",
    "GROUP_TYPE",
    "MiroBoard",
    "BoardError",
    "matches_filter",
    "MissingFramesError",
    "get_frames",
    "get_objects_by_id",
    "resolve_graph",
]
