"""Unit tests for the command-line entry point."""

from __future__ import annotations

from pathlib import Path

import pytest

from mdnsview import __version__
from mdnsview.cli import build_parser, main


class TestCli:
    """Tests for build_parser() and main()."""

    def test_version(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            build_parser().parse_args(["--version"])
        assert exc_info.value.code == 0
        assert capsys.readouterr().out.strip() == f"mdnsview {__version__}"

    def test_help_shows_key_banner(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--help"])
        out = capsys.readouterr().out
        assert "A terminal-based mDNS service browser" in out
        assert "?        show every key binding" in out
        assert "q        quit" in out

    def test_config_option(self, tmp_path: Path) -> None:
        args = build_parser().parse_args(["--config", str(tmp_path / "s.yaml")])
        assert args.config == tmp_path / "s.yaml"

    def test_invalid_config_exits_with_status_2(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        path = tmp_path / "settings.yaml"
        path.write_text("- not\n- a mapping\n", encoding="utf-8")
        assert main(["--config", str(path)]) == 2
        assert "must contain a mapping" in capsys.readouterr().err
