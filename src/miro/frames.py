"""Frame lookup by title."""
from __future__ import annotations

import logging

from .types import FRAME_TYPE, Board, BoardObject

logger = logging.getLogger(__name__)


class MissingFramesError(RuntimeError):
    def __init__(self, missing: int):
        super().__init__(f"{missing} frame(s) could not be found on the board.")
        self.missing = missing


def get_frames(board: Board, frame_names: list[str]) -> list[BoardObject]:
    """
    All frames whose title is one of frame_names, in board order.
    Repeated names count once. Raises MissingFramesError if any distinct name
    matched no frame, even when another title matched several.
    """
    names = list(dict.fromkeys(frame_names))
    frames = board.get_board_objects({"type": FRAME_TYPE}, {"title": names})
    found = {f.get("title") for f in frames}
    missing = [n for n in names if n not in found]
    if missing:
        logger.error("Frames not found: %s", ", ".join(missing))
        raise MissingFramesError(len(missing))
    return frames
