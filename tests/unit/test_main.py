# tests/unit/test_main.py — v1
"""Tests for main.py — CLI entry point."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

import pytest

from ncexport.main import _build_parser, _option_overrides, main

# ---------------------------------------------------------------------------
# Parser tests
# ---------------------------------------------------------------------------

class TestBuildParser:
    def test_version_flag(self, capsys):
        parser = _build_parser()
        with pytest.raises(SystemExit) as exc_info:
            parser.parse_args(["--version"])
        assert exc_info.value.code == 0

    def test_graphml_subcommand(self):
        parser = _build_parser()
        args = parser.parse_args(["graphml", "input.json", "-o", "/tmp/out"])
        assert args.command == "graphml"
        assert args.input == Path("input.json")
        assert args.output == Path("/tmp/out")

    def test_graphml_defaults(self):
        args = _build_parser().parse_args(["graphml", "input.json"])
        assert args.output is None
        assert args.unify is None
        assert args.directed is None
        assert args.no_screen_coordinates is False
        assert args.width is None

    def test_graphml_flags(self):
        args = _build_parser().parse_args(
            ["graphml", "in.json", "--unify", "--directed", "--no-screen-coordinates",
             "--width", "800", "--height", "600"]
        )
        assert args.unify is True
        assert args.directed is True
        assert args.no_screen_coordinates is True
        assert (args.width, args.height) == (800.0, 600.0)


# ---------------------------------------------------------------------------
# Option overrides
# ---------------------------------------------------------------------------

class TestOptionOverrides:
    def test_none_by_default(self):
        args = _build_parser().parse_args(["graphml", "in.json"])
        assert _option_overrides(args) == {}

    def test_all_overrides(self):
        args = argparse.Namespace(
            unify=True, directed=True, no_screen_coordinates=True, width=10.0, height=20.0
        )
        assert _option_overrides(args) == {
            "unify_networks": True,
            "use_directed_edges": True,
            "use_screen_layout_coordinates": False,
            "screen_layout_width": 10.0,
            "screen_layout_height": 20.0,
        }


# ---------------------------------------------------------------------------
# main() integration
# ---------------------------------------------------------------------------

def _write_input(path: Path) -> Path:
    payload = {
        "codebook": {"node": {"person": {"name": "Person", "variables": {}}}},
        "sessions": [
            {
                "ego": {"_uid": "ego-1"},
                "nodes": [{"_uid": "n1", "type": "person"}, {"_uid": "n2", "type": "person"}],
                "edges": [{"_uid": "e1", "type": "knows", "from": "n1", "to": "n2"}],
                "sessionVariables": {
                    "caseId": "case-1",
                    "sessionId": "s-1",
                    "protocolName": "Study",
                    "protocolUID": "p-1",
                    "sessionExported": "2024-03-01T12:00:00Z",
                },
            }
        ],
    }
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


class TestMain:
    def test_no_command_returns_1(self):
        assert main([]) == 1

    def test_graphml_missing_file_returns_1(self, tmp_path: Path):
        assert main(["graphml", str(tmp_path / "nonexistent.json")]) == 1

    def test_graphml_invalid_input_returns_1(self, tmp_path: Path):
        f = tmp_path / "bad.json"
        f.write_text("{not json", encoding="utf-8")
        assert main(["graphml", str(f), "-o", str(tmp_path / "out")]) == 1

    def test_graphml_export(self, tmp_path: Path, capsys):
        source = _write_input(tmp_path / "input.json")
        out = tmp_path / "out"
        assert main(["graphml", str(source), "-o", str(out)]) == 0
        assert (out / "case-1_s-1.graphml").exists()
        assert "Export complete" in capsys.readouterr().out

    def test_graphml_unified_export(self, tmp_path: Path):
        source = _write_input(tmp_path / "input.json")
        out = tmp_path / "out"
        assert main(["graphml", str(source), "-o", str(out), "--unify"]) == 0
        assert (out / "networkCanvasExport.graphml").exists()
