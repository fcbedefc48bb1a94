"""Pytest configuration and shared fixtures."""
from __future__ import annotations

from unittest.mock import MagicMock

import pytest
import requests

import src.config.config as _config_module

_REAL_LOAD_ENV = _config_module.load_env


class FakeBoard:
    """In-memory board: answers {}, {"type": ...} and {"id": [...]} filters and records calls."""

    def __init__(self, objects: list[dict], svg: str = "<svg xmlns='http://www.w3.org/2000/svg'/>"):
        self.objects = objects
        self.svg = svg
        self.calls: list[tuple] = []

    def get_board_objects(self, filter, additional_filter=None):
        from src.miro import matches_filter

        self.calls.append(("get_board_objects", filter, additional_filter))
        out = []
        for obj in self.objects:
            if "type" in filter and obj.get("type") != filter["type"]:
                continue
            if "id" in filter and obj.get("id") not in filter["id"]:
                continue
            if matches_filter(obj, additional_filter):
                out.append(obj)
        return out

    def get_svg(self, object_ids=None):
        self.calls.append(("get_svg", object_ids))
        return self.svg


def make_response(
    status: int = 200,
    content: bytes = b"",
    content_type: str | None = None,
    url: str = "https://example.com/x.png",
) -> requests.Response:
    resp = requests.Response()
    resp.status_code = status
    resp._content = content
    resp.url = url
    resp.reason = "OK" if status < 400 else "Not Found"
    if content_type is not None:
        resp.headers["Content-Type"] = content_type
    return resp


@pytest.fixture
def sample_board() -> FakeBoard:
    """Frame F (children C1, C2), C1 is a group of I1; frame G with child C3; loose item X."""
    return FakeBoard([
        {"id": "X", "type": "shape"},
        {"id": "I1", "type": "image"},
        {"id": "C2", "type": "sticky_note"},
        {"id": "C1", "type": "group", "itemsIds": ["I1"]},
        {"id": "F", "type": "frame", "title": "Frame A", "childrenIds": ["C1", "C2"]},
        {"id": "C3", "type": "text"},
        {"id": "G", "type": "frame", "title": "Frame B", "childrenIds": ["C3"]},
    ])


@pytest.fixture
def session() -> MagicMock:
    """requests.Session stand-in; set .get.side_effect / .return_value per test."""
    return MagicMock(spec=requests.Session)


@pytest.fixture
def real_load_env():
    """load_env as shipped (the autouse fixture below stubs it out)."""
    return _REAL_LOAD_ENV


@pytest.fixture(autouse=True)
def isolate_env(monkeypatch):
    """Avoid loading project .env in tests unless explicitly set."""
    for key in ("MIRO_TOKEN", "MIRO_BOARD_ID", "MIRO_EXPORT_FORMAT", "MIRO_LOAD_TIMEOUT_MS", "MIRO_IMAGE_TIMEOUT"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setattr("src.config.config.load_env", lambda: None)


@pytest.fixture
def board_factory():
    """Build a FakeBoard from a list of objects (and optional SVG markup)."""
    return FakeBoard


@pytest.fixture
def response_factory():
    """Build a requests.Response with a given status, body and content type."""
    return make_response
