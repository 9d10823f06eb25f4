"""Tests for the command line interface."""

# pylint: disable=missing-class-docstring,missing-function-docstring

import importlib
import io
import logging
from unittest.mock import patch

import pyperclip

from tablify import config
from tablify.cli import EXIT_CLIPBOARD_ERROR, EXIT_DECODE_ERROR, EXIT_OK, build_parser, main


def fake_stdin(text: str) -> io.TextIOWrapper:
    """A text stdin whose .buffer yields the given UTF-8 bytes."""
    return io.TextIOWrapper(io.BytesIO(text.encode("utf-8")), encoding="utf-8")


class TestBuildParser:

    def test_defaults(self):
        args = build_parser().parse_args([])
        assert args.file == "-"
        assert args.format == "csv"
        assert args.copy is False
        assert args.tablefmt is None

    def test_flags(self):
        args = build_parser().parse_args(["-f", "json", "-c", "-t", "psql", "data.json"])
        assert args.format == "json"
        assert args.copy is True
        assert args.tablefmt == "psql"
        assert args.file == "data.json"


class TestMain:

    def test_csv_file(self, tmp_path, capsys):
        path = tmp_path / "data.csv"
        path.write_text("a,b\n1,2\n", encoding="utf-8")
        assert main([str(path)]) == EXIT_OK
        out = capsys.readouterr().out
        assert "TABLE RESULT (Rows: 1)" in out
        assert "| a " in out

    def test_json_from_stdin(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", fake_stdin('[{"x": 1}, {"y": 2}]'))
        assert main(["-f", "json"]) == EXIT_OK
        assert "<absent>" in capsys.readouterr().out

    def test_decode_error_exit_code(self, monkeypatch, caplog):
        monkeypatch.setattr("sys.stdin", fake_stdin("{not valid"))
        with caplog.at_level(logging.ERROR):
            assert main(["-f", "json"]) == EXIT_DECODE_ERROR
        assert "Failed to decode json input" in caplog.text

    def test_missing_file(self, tmp_path, caplog):
        with caplog.at_level(logging.ERROR):
            assert main([str(tmp_path / "nope.csv")]) == EXIT_DECODE_ERROR
        assert "Cannot read" in caplog.text

    def test_clipboard_error_exit_code(self, tmp_path, capsys):
        path = tmp_path / "data.csv"
        path.write_text("a\n1\n", encoding="utf-8")
        with patch("tablify.presentation.pyperclip.copy", side_effect=pyperclip.PyperclipException("no clipboard")):
            assert main(["-c", str(path)]) == EXIT_CLIPBOARD_ERROR
        assert "TABLE RESULT (Rows: 1)" in capsys.readouterr().out

    def test_copy_success(self, tmp_path):
        path = tmp_path / "data.csv"
        path.write_text("a\n1\n", encoding="utf-8")
        with patch("tablify.presentation.pyperclip.copy") as mock_copy:
            assert main(["--copy", str(path)]) == EXIT_OK
        mock_copy.assert_called_once_with("a\t\n1\t\n")

    def test_unknown_log_level_does_not_crash(self, tmp_path, monkeypatch, capsys):
        monkeypatch.setenv("TABLIFY_LOG_LEVEL", "loud")
        importlib.reload(config)
        try:
            path = tmp_path / "data.csv"
            path.write_text("a\n1\n", encoding="utf-8")
            assert main([str(path)]) == EXIT_OK
            assert "TABLE RESULT (Rows: 1)" in capsys.readouterr().out
        finally:
            monkeypatch.delenv("TABLIFY_LOG_LEVEL")
            importlib.reload(config)
