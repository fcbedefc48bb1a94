"""
Load .env from project root; expose MIRO_TOKEN, MIRO_BOARD_ID, MIRO_*.
Call load_env() before using in main or other modules.
"""
from __future__ import annotations

import os
from pathlib import Path

DEFAULT_EXPORT_FORMAT = "svg"
DEFAULT_LOAD_TIMEOUT_MS = 300_000


def _project_root() -> Path:
    """Project root (directory containing src/)."""
    p = Path(__file__).resolve()
    # src/config/config.py -> two levels up
    for _ in range(3):
        p = p.parent
        if (p / "src").is_dir():
            return p
    return Path.cwd()


def load_env() -> None:
    """Load env vars from project root .env if present."""
    root = _project_root()
    env_file = root / ".env"
    if not env_file.is_file():
        return
    for line in env_file.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        k, _, v = line.partition("=")
        k, v = k.strip(), v.strip().strip("'\"")
        if k and v:
            os.environ.setdefault(k, v)


def get_miro_token() -> str | None:
    """Board access token (MIRO_TOKEN); also sent as cookie on image fetches."""
    load_env()
    return os.environ.get("MIRO_TOKEN") or None


def get_board_id() -> str | None:
    """Board to export (MIRO_BOARD_ID)."""
    load_env()
    return os.environ.get("MIRO_BOARD_ID") or None


def get_export_format() -> str:
    """svg or json (MIRO_EXPORT_FORMAT). Default: svg."""
    load_env()
    return (os.environ.get("MIRO_EXPORT_FORMAT") or DEFAULT_EXPORT_FORMAT).strip().lower()


def get_load_timeout_ms() -> int:
    """How long to wait for the board page to load, in milliseconds."""
    load_env()
    raw = os.environ.get("MIRO_LOAD_TIMEOUT_MS")
    if not raw:
        return DEFAULT_LOAD_TIMEOUT_MS
    try:
        value = int(raw)
    except ValueError:
        return DEFAULT_LOAD_TIMEOUT_MS
    return value if value > 0 else DEFAULT_LOAD_TIMEOUT_MS


def get_image_timeout() -> float | None:
    """Per-image fetch timeout in seconds (MIRO_IMAGE_TIMEOUT); None = no timeout."""
    load_env()
    raw = os.environ.get("MIRO_IMAGE_TIMEOUT")
    if not raw:
        return None
    try:
        value = float(raw)
    except ValueError:
        return None
    return value if value > 0 else None
