"""Tests for src.export.dispatch."""
from __future__ import annotations

import json
from pathlib import Path

import pytest

from src.export import ConfigurationError, check_options, export_board, render_json, render_svg
from src.miro import MissingFramesError

_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" xmlns:xlink="http://www.w3.org/1999/xlink">'
    '<image xlink:href="https://example.com/a.png"/></svg>'
)


def test_placeholder_without_frame_names_fails_before_board_access(sample_board, tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="frame names"):
        export_board(sample_board, None, output_file=str(tmp_path / "{frameName}.svg"))
    assert sample_board.calls == []


def test_unknown_format_rejected() -> None:
    with pytest.raises(ConfigurationError, match="pdf"):
        check_options(None, None, "pdf")


def test_check_options_accepts_plain_output() -> None:
    check_options(None, "board.svg", "svg")
    check_options(["A"], "{frameName}.json", "json")


def test_render_svg_uses_frame_ids_and_inlines(board_factory, session, response_factory) -> None:
    board = board_factory([], svg=_SVG)
    session.get.return_value = response_factory(200, b"img", "image/png")

    out = render_svg(board, [{"id": "F"}, {"type": "frame"}], "tok", session=session)

    assert board.calls == [("get_svg", ["F"])]
    assert "data:image/png;base64,aW1n" in out
    assert session.get.call_args.kwargs["headers"] == {"Cookie": "token=tok"}


def test_render_svg_whole_board(board_factory, session) -> None:
    board = board_factory([])

    render_svg(board, None, session=session)

    assert board.calls == [("get_svg", None)]


def test_render_json_compact(sample_board) -> None:
    out = render_json(sample_board)

    assert json.loads(out) == sample_board.objects
    assert ", " not in out and ": " not in out


def test_export_json_to_stdout(sample_board, capsys) -> None:
    export_board(sample_board, ["Frame A"], export_format="json")

    out = capsys.readouterr().out
    assert [o["id"] for o in json.loads(out)] == ["F", "C1", "C2", "I1"]
    assert not out.endswith("\n")


def test_export_svg_to_file(board_factory, session, response_factory, tmp_path: Path) -> None:
    board = board_factory([{"id": "F", "type": "frame", "title": "Frame A"}], svg=_SVG)
    session.get.return_value = response_factory(200, b"img", "image/jpeg")
    target = tmp_path / "board.svg"

    export_board(board, ["Frame A"], output_file=str(target), session=session)

    assert "data:image/jpeg;base64,aW1n" in target.read_text(encoding="utf-8")
    assert ("get_svg", ["F"]) in board.calls


def test_per_frame_output(sample_board, tmp_path: Path) -> None:
    pattern = str(tmp_path / "{frameName}.json")

    export_board(sample_board, ["Frame A", "Frame B"], export_format="json", output_file=pattern)

    a = json.loads((tmp_path / "Frame A.json").read_text(encoding="utf-8"))
    b = json.loads((tmp_path / "Frame B.json").read_text(encoding="utf-8"))
    assert [o["id"] for o in a] == ["F", "C1", "C2", "I1"]
    assert [o["id"] for o in b] == ["G", "C3"]
    frame_lookups = [c[2] for c in sample_board.calls if c[1] == {"type": "frame"}]
    assert frame_lookups == [{"title": ["Frame A"]}, {"title": ["Frame B"]}]


def test_per_frame_output_stops_at_missing_frame(sample_board, tmp_path: Path) -> None:
    pattern = str(tmp_path / "{frameName}.json")

    with pytest.raises(MissingFramesError):
        export_board(sample_board, ["Frame A", "Nope", "Frame B"], export_format="json", output_file=pattern)

    assert (tmp_path / "Frame A.json").is_file()
    assert not (tmp_path / "Frame B.json").exists()


def test_missing_frames_writes_nothing(sample_board, tmp_path: Path) -> None:
    target = tmp_path / "out.json"

    with pytest.raises(MissingFramesError) as exc_info:
        export_board(sample_board, ["Frame A", "Nope"], export_format="json", output_file=str(target))

    assert exc_info.value.missing == 1
    assert not target.exists()
