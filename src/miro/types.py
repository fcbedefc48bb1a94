"""
Board records as returned by the in-page board SDK. Kept as plain dicts so
JSON export writes them back out verbatim; only the keys used here are typed.
"""
from __future__ import annotations

from typing import Any, Protocol, TypedDict

FRAME_TYPE = "frame"
GROUP_TYPE = "group"


class BoardObject(TypedDict, total=False):
    id: str
    type: str
    title: str
    childrenIds: list[str]
    itemsIds: list[str]


class Board(Protocol):
    """What the exporters need from a board client."""

    def get_board_objects(
        self,
        filter: dict[str, Any],
        additional_filter: dict[str, Any] | None = None,
    ) -> list[BoardObject]:
        ...

    def get_svg(self, object_ids: list[str] | None = None) -> str:
        ...
