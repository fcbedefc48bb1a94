"""Frames -> children -> group members, flattened for JSON export."""
from __future__ import annotations

from .types import GROUP_TYPE, Board, BoardObject


def _in_order(objects: list[BoardObject], ids: list[str]) -> list[BoardObject]:
    by_id = {obj.get("id"): obj for obj in objects}
    return [by_id[i] for i in ids if i in by_id]


def get_objects_by_id(board: Board, ids: list[str]) -> list[BoardObject]:
    """One batched lookup; result follows ids order, repeated and absent ids are dropped."""
    ids = list(dict.fromkeys(ids))
    return _in_order(board.get_board_objects({"id": ids}), ids)


def resolve_graph(board: Board, frames: list[BoardObject] | None = None) -> list[BoardObject]:
    """
    frames is None: every object on the board, as the board returns them.
    Otherwise frames + their children + members of children that are groups.
    """
    if frames is None:
        return board.get_board_objects({})

    child_ids = [cid for frame in frames for cid in frame.get("childrenIds") or []]
    frame_children = get_objects_by_id(board, child_ids)

    item_ids = [
        iid
        for child in frame_children
        if child.get("type") == GROUP_TYPE
        for iid in child.get("itemsIds") or []
    ]
    group_children = get_objects_by_id(board, item_ids)

    return [*frames, *frame_children, *group_children]
