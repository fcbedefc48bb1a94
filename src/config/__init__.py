"""Config: load .env, expose MIRO_TOKEN, MIRO_BOARD_ID, timeouts, etc."""
from .config import (
    load_env,
    get_miro_token,
    get_board_id,
    get_export_format,
    get_load_timeout_ms,
    get_image_timeout,
)

__all__ = [
    "load_env",
    "get_miro_token",
    "get_board_id",
    "get_export_format",
    "get_load_timeout_ms",
    "get_image_timeout",
]
