#!/usr/bin/env python3
"""
Root entry: open a Miro board -> export frames (or the whole board) as a
self-contained SVG or as JSON -> write to a file, one file per frame, or stdout.
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import requests

_ROOT = Path(__file__).resolve().parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

from src.config import (
    load_env,
    get_miro_token,
    get_board_id,
    get_export_format,
    get_load_timeout_ms,
    get_image_timeout,
)
from src.export import EXPORT_FORMATS, ConfigurationError, check_options, export_board
from src.miro import MiroBoard, BoardError, MissingFramesError
from src.svg import ParseError

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Export a Miro board (or some of its frames) as a self-contained SVG or as JSON."
    )
    parser.add_argument(
        "-t", "--token",
        default=None,
        help="Miro token (default: MIRO_TOKEN); also sent as cookie when fetching images",
    )
    parser.add_argument(
        "-b", "--board-id",
        default=None,
        help="The board ID (default: MIRO_BOARD_ID)",
    )
    parser.add_argument(
        "-f", "--frame-names",
        nargs="+",
        metavar="FRAME_NAME",
        default=None,
        help="The frame name(s), leave empty to export entire board",
    )
    parser.add_argument(
        "-o", "--output-file",
        metavar="FILENAME",
        default=None,
        help="A file to output to (stdout if not supplied); {frameName} writes one file per frame",
    )
    parser.add_argument(
        "-e", "--export-format",
        choices=EXPORT_FORMATS,
        default=None,
        help="'svg' or 'json' (default: MIRO_EXPORT_FORMAT or 'svg')",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    load_env()
    token = args.token or get_miro_token()
    board_id = args.board_id or get_board_id()
    export_format = args.export_format or get_export_format()

    if not board_id:
        logger.error("No board ID given. Pass --board-id or set MIRO_BOARD_ID.")
        return 1

    try:
        check_options(args.frame_names, args.output_file, export_format)
    except ConfigurationError as e:
        logger.error("%s", e)
        return 1

    try:
        with MiroBoard(board_id, token, load_timeout_ms=get_load_timeout_ms()) as board, requests.Session() as session:
            export_board(
                board,
                args.frame_names,
                export_format=export_format,
                output_file=args.output_file,
                token=token,
                session=session,
                image_timeout=get_image_timeout(),
            )
    except MissingFramesError as e:
        logger.error("%s", e)
        return 1
    except ParseError as e:
        logger.error("Board SVG is not well-formed XML: %s", e)
        return 1
    except (ConfigurationError, BoardError, OSError) as e:
        logger.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
