"""Tests for cli module."""

import io

import pytest

from pathtree.cli import (
    PathTreeError,
    build_parser,
    main,
    read_lines,
    resolve_color,
    resolve_options,
)
from pathtree.models import ColorMode


class _FakeTTY(io.StringIO):
    def isatty(self):
        return True


def _stdin(monkeypatch, data: bytes) -> None:
    monkeypatch.setattr("sys.stdin", io.TextIOWrapper(io.BytesIO(data)))


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv("NO_COLOR", raising=False)
    monkeypatch.delenv("PATHTREE_COMPACT", raising=False)
    monkeypatch.setenv("TERM", "xterm-256color")


class TestBuildParser:
    def test_defaults(self):
        args = build_parser().parse_args([])
        assert args.compact is None
        assert args.color == "auto"
        assert args.detect_status is True
        assert args.verbose is False

    def test_bare_color_means_always(self):
        assert build_parser().parse_args(["--color"]).color == "always"

    def test_color_choice(self):
        assert build_parser().parse_args(["--color", "never"]).color == "never"

    def test_no_color(self):
        assert build_parser().parse_args(["--no-color"]).color == "never"

    def test_short_compact(self):
        assert build_parser().parse_args(["-c"]).compact is True

    def test_invalid_color_choice(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--color", "sometimes"])


class TestResolveColor:
    def test_always_and_never(self):
        assert resolve_color(ColorMode.ALWAYS, io.StringIO()) is True
        assert resolve_color(ColorMode.NEVER, _FakeTTY()) is False

    def test_auto_follows_tty(self):
        assert resolve_color(ColorMode.AUTO, _FakeTTY()) is True
        assert resolve_color(ColorMode.AUTO, io.StringIO()) is False

    def test_auto_respects_no_color(self, monkeypatch):
        monkeypatch.setenv("NO_COLOR", "1")
        assert resolve_color(ColorMode.AUTO, _FakeTTY()) is False

    def test_auto_dumb_terminal(self, monkeypatch):
        monkeypatch.setenv("TERM", "dumb")
        assert resolve_color(ColorMode.AUTO, _FakeTTY()) is False

    def test_always_overrides_no_color(self, monkeypatch):
        monkeypatch.setenv("NO_COLOR", "1")
        assert resolve_color(ColorMode.ALWAYS, io.StringIO()) is True


class TestResolveOptions:
    def test_compact_from_env(self, monkeypatch):
        monkeypatch.setenv("PATHTREE_COMPACT", "yes")
        args = build_parser().parse_args([])
        assert resolve_options(args, io.StringIO()).compact is True

    def test_env_ignored_when_falsy(self, monkeypatch):
        monkeypatch.setenv("PATHTREE_COMPACT", "0")
        args = build_parser().parse_args([])
        assert resolve_options(args, io.StringIO()).compact is False

    def test_flag(self):
        args = build_parser().parse_args(["--compact", "--color=always"])
        options = resolve_options(args, io.StringIO())
        assert options.compact is True
        assert options.color is True


class TestReadLines:
    def test_text_stream_without_buffer(self):
        assert read_lines(io.StringIO("a\nb\n")) == ["a", "b", ""]

    def test_invalid_utf8(self):
        with pytest.raises(PathTreeError):
            read_lines(io.TextIOWrapper(io.BytesIO(b"\xff\xfe/bad\n")))


class TestMain:
    def test_plain_paths(self, monkeypatch, capsys):
        _stdin(monkeypatch, b"a/b\na/c\n")
        assert main([]) == 0
        assert capsys.readouterr().out == "└── a\n    ├── b\n    └── c\n"

    def test_compact(self, monkeypatch, capsys):
        _stdin(monkeypatch, b"a/b/c/file.txt\n")
        assert main(["--compact"]) == 0
        assert capsys.readouterr().out == "└── a/b/c\n    └── file.txt\n"

    def test_porcelain_rename(self, monkeypatch, capsys):
        _stdin(monkeypatch, b"R  old.txt -> new.txt\n")
        assert main([]) == 0
        assert capsys.readouterr().out == "└── new.txt\n"

    def test_porcelain_color(self, monkeypatch, capsys):
        _stdin(monkeypatch, b" M src/main.py\n?? notes.txt\n")
        assert main(["--color"]) == 0
        out = capsys.readouterr().out
        assert "\x1b[33mmain.py\x1b[0m" in out
        assert "\x1b[90mnotes.txt\x1b[0m" in out
        assert "\x1b[34msrc\x1b[0m" in out

    def test_no_status(self, monkeypatch, capsys):
        _stdin(monkeypatch, b"?? notes.txt\n")
        assert main(["--no-status"]) == 0
        assert capsys.readouterr().out == "└── ?? notes.txt\n"

    def test_blank_input(self, monkeypatch, capsys):
        _stdin(monkeypatch, b"\n  \n\t\n")
        assert main([]) == 0
        assert capsys.readouterr().out == ""

    def test_windows_line_endings(self, monkeypatch, capsys):
        _stdin(monkeypatch, b"a/b\r\na/c\r\n")
        assert main([]) == 0
        assert capsys.readouterr().out == "└── a\n    ├── b\n    └── c\n"

    def test_auto_color_off_when_captured(self, monkeypatch, capsys):
        _stdin(monkeypatch, b" M x.txt\n")
        assert main([]) == 0
        assert "\x1b" not in capsys.readouterr().out

    def test_invalid_input(self, monkeypatch, capsys):
        _stdin(monkeypatch, b"\xff\n")
        assert main([]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "pathtree: input is not valid UTF-8" in captured.err

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["--version"])
        assert exc.value.code == 0
        assert capsys.readouterr().out.startswith("pathtree ")
