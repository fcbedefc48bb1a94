"""
Board client: drives the board's live-embed page in headless Chromium and talks
to the in-page board SDK. Use as a context manager; the browser lives for the
duration of the with-block.
"""
from __future__ import annotations

import logging
from typing import Any

from .types import BoardObject

logger = logging.getLogger(__name__)

MIRO_DOMAIN = ".miro.com"
EMBED_URL = "https://miro.com/app/live-embed/{board_id}/?embedMode=view_only_without_ui"

_SDK_READY_JS = "() => typeof window.miro?.board?.get === 'function' && typeof window.cmd?.board?.api !== 'undefined'"

_GET_OBJECTS_JS = """
async (filter) => {
  const objects = await window.miro.board.get(filter);
  return JSON.parse(JSON.stringify(objects));
}
"""

_GET_SVG_JS = """
async (objectIds) => {
  const api = window.cmd.board.api;
  const items = objectIds
    ? objectIds.map((id) => api.getObjectById(id)).filter(Boolean)
    : undefined;
  return await api.export.makeVector(items);
}
"""


class BoardError(RuntimeError):
    """Board page could not be loaded or an SDK call failed."""


def matches_filter(obj: BoardObject, additional_filter: dict[str, Any] | None) -> bool:
    """List value: obj[key] must be one of them; scalar: equal; None: ignored."""
    if not additional_filter:
        return True
    for key, expected in additional_filter.items():
        if expected is None:
            continue
        value = obj.get(key)
        if isinstance(expected, (list, tuple, set, frozenset)):
            if value not in expected:
                return False
        elif value != expected:
            return False
    return True


class MiroBoard:
    """Read-only access to one board through its embedded web page."""

    def __init__(self, board_id: str, token: str | None = None, *, load_timeout_ms: int = 300_000):
        self.board_id = board_id
        self.token = token
        self.load_timeout_ms = load_timeout_ms
        self._playwright = None
        self._browser = None
        self._page = None

    def __enter__(self) -> MiroBoard:
        from playwright.sync_api import Error as PlaywrightError
        from playwright.sync_api import sync_playwright

        try:
            self._playwright = sync_playwright().start()
            self._browser = self._playwright.chromium.launch(headless=True)
            context = self._browser.new_context()
            if self.token:
                context.add_cookies([
                    {"name": "token", "value": self.token, "domain": MIRO_DOMAIN, "path": "/"}
                ])
            self._page = context.new_page()
            url = EMBED_URL.format(board_id=self.board_id)
            logger.info("Opening board %s", self.board_id)
            self._page.goto(url, timeout=self.load_timeout_ms)
            self._page.wait_for_function(_SDK_READY_JS, timeout=self.load_timeout_ms)
        except PlaywrightError as e:
            self.close()
            raise BoardError(f"Could not load board {self.board_id}: {e}") from e
        logger.info("Board %s loaded", self.board_id)
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        if self._browser is not None:
            self._browser.close()
            self._browser = None
        if self._playwright is not None:
            self._playwright.stop()
            self._playwright = None
        self._page = None

    def _evaluate(self, script: str, arg: Any) -> Any:
        if self._page is None:
            raise BoardError("Board is not open; use MiroBoard as a context manager")
        from playwright.sync_api import Error as PlaywrightError

        try:
            return self._page.evaluate(script, arg)
        except PlaywrightError as e:
            raise BoardError(f"Board SDK call failed: {e}") from e

    def get_board_objects(
        self,
        filter: dict[str, Any],
        additional_filter: dict[str, Any] | None = None,
    ) -> list[BoardObject]:
        """board.get(filter) in the page, then narrowed by additional_filter."""
        objects = self._evaluate(_GET_OBJECTS_JS, filter) or []
        return [obj for obj in objects if matches_filter(obj, additional_filter)]

    def get_svg(self, object_ids: list[str] | None = None) -> str:
        """SVG markup for the given objects, or the whole board when object_ids is None."""
        svg = self._evaluate(_GET_SVG_JS, object_ids)
        if not isinstance(svg, str):
            raise BoardError("Board did not return SVG markup")
        return svg
