"""
Board -> SVG or JSON string -> file or stdout.
With {frameName} in the destination, one export and one file per frame name.
"""
from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import requests

from ..miro import Board, BoardObject, get_frames, resolve_graph
from ..svg import inline_images

logger = logging.getLogger(__name__)

FRAME_NAME_PLACEHOLDER = "{frameName}"
EXPORT_FORMATS = ("svg", "json")


class ConfigurationError(ValueError):
    """Options that cannot work together; raised before the board is touched."""


def check_options(
    frame_names: list[str] | None,
    output_file: str | None,
    export_format: str = "svg",
) -> None:
    if export_format not in EXPORT_FORMATS:
        raise ConfigurationError(
            f"Unknown export format '{export_format}' (expected one of: {', '.join(EXPORT_FORMATS)})"
        )
    if output_file and FRAME_NAME_PLACEHOLDER in output_file and not frame_names:
        raise ConfigurationError(
            "Expected frame names to be given when the output file name format expects a frame name."
        )


def render_svg(
    board: Board,
    frames: list[BoardObject] | None = None,
    token: str | None = None,
    *,
    session: requests.Session | None = None,
    image_timeout: float | None = None,
) -> str:
    """Board (or frames) as SVG with every remote image embedded."""
    object_ids = None
    if frames is not None:
        object_ids = [f["id"] for f in frames if f.get("id")]
    svg = board.get_svg(object_ids)
    return inline_images(svg, token, session=session, timeout=image_timeout)


def render_json(board: Board, frames: list[BoardObject] | None = None) -> str:
    """Board (or frames, children, group members) as a compact JSON array."""
    return json.dumps(resolve_graph(board, frames), ensure_ascii=False, separators=(",", ":"))


def write_output(output: str, output_file: str | Path | None = None) -> None:
    """Write to output_file verbatim, or to stdout when no file is given."""
    if output_file:
        path = Path(output_file)
        path.write_text(output, encoding="utf-8")
        logger.info("Wrote %s (%d chars)", path, len(output))
    else:
        sys.stdout.write(output)
        sys.stdout.flush()


def export_board(
    board: Board,
    frame_names: list[str] | None = None,
    *,
    export_format: str = "svg",
    output_file: str | None = None,
    token: str | None = None,
    session: requests.Session | None = None,
    image_timeout: float | None = None,
) -> None:
    """
    Resolve frames (if named), render in export_format and write the result.
    Raises ConfigurationError, MissingFramesError or ParseError; image fetch
    failures are logged inside the SVG step and never raised.
    """
    check_options(frame_names, output_file, export_format)

    def render(frames: list[BoardObject] | None) -> str:
        if export_format == "json":
            return render_json(board, frames)
        return render_svg(board, frames, token, session=session, image_timeout=image_timeout)

    if output_file and FRAME_NAME_PLACEHOLDER in output_file:
        total = len(frame_names)
        for idx, frame_name in enumerate(frame_names):
            logger.info("Frame %d/%d: %s", idx + 1, total, frame_name)
            output = render(get_frames(board, [frame_name]))
            write_output(output, output_file.replace(FRAME_NAME_PLACEHOLDER, frame_name))
        return

    frames = get_frames(board, frame_names) if frame_names else None
    write_output(render(frames), output_file)
