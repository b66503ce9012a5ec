"""
Tests for the mediabrowse command line.

Each command starts a private Application over a library snapshot written to
a temporary YAML file.
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest
import yaml
from conftest import LIBRARY_DATA

from mediabrowse.interfaces.cli.main import build_parser, main


@pytest.fixture
def library_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> str:
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("CONFIG_PATH", raising=False)
    for key in list(os.environ):
        if key.startswith("MEDIABROWSE_"):
            monkeypatch.delenv(key)
    path = tmp_path / "library.yaml"
    path.write_text(yaml.safe_dump(LIBRARY_DATA), encoding="utf-8")
    return str(path)


class TestParser:
    @pytest.mark.unit
    def test_browse_arguments(self) -> None:
        args = build_parser().parse_args(["browse", "artist/2", "--metadata", "--count", "5"])
        assert args.object_id == "artist/2"
        assert args.metadata
        assert args.count == 5
        assert args.offset == 0

    @pytest.mark.unit
    def test_search_defaults(self) -> None:
        args = build_parser().parse_args(["search", "dc:title contains x"])
        assert args.container == "0"
        assert args.filter is None

    @pytest.mark.unit
    def test_no_command_prints_help(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([]) == 0
        assert "mediabrowse" in capsys.readouterr().out


class TestCommands:
    """Commands run end to end against the snapshot."""

    @pytest.mark.unit
    def test_browse(self, library_file: str, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["browse", "artist", "--library", library_file]) == 0
        out = capsys.readouterr().out
        assert "artist/2" in out
        assert "3 of 3" in out

    @pytest.mark.unit
    def test_menu(self, library_file: str, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["menu", "--library", library_file]) == 0
        assert "Podcasts" in capsys.readouterr().out

    @pytest.mark.unit
    def test_config_file(self, library_file: str, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """--config is merged over the defaults."""
        config = tmp_path / "mediabrowse.yaml"
        config.write_text(yaml.safe_dump({"menu": {"podcast": False}}), encoding="utf-8")
        assert main(["menu", "--library", library_file, "--config", str(config)]) == 0
        assert "Podcasts" not in capsys.readouterr().out

    @pytest.mark.unit
    def test_search_without_matches(self, library_file: str, capsys: pytest.CaptureFixture[str]) -> None:
        query = 'upnp:class derivedfrom "object.item.audioItem" and dc:title contains "zzz"'
        assert main(["search", query, "--library", library_file]) == 0
        assert "No matches" in capsys.readouterr().out

    @pytest.mark.unit
    def test_browse_error(self, library_file: str, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["browse", "bogus", "--library", library_file]) == 1
        assert "Browse failed" in capsys.readouterr().out

    @pytest.mark.unit
    def test_missing_library(self, tmp_path: Path, library_file: str) -> None:
        assert main(["browse", "artist", "--library", str(tmp_path / "nope.yaml")]) == 1
