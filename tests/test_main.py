"""
Tests for the command-line entry point.
"""
import argparse
import json
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

import main as cli


@pytest.fixture
def dataset_file(tmp_path, abc_dicts):
    path = tmp_path / "sales.json"
    path.write_text(json.dumps(abc_dicts), encoding="utf-8")
    return path


def run(monkeypatch, *args):
    monkeypatch.setattr(sys, "argv", ["main.py", *map(str, args)])
    return cli.main()


# ==================== TestParseOption ====================

class TestParseOption:

    @pytest.mark.parametrize("text,expected", [
        ("width=800", ("width", 800)),
        ("showLegend=false", ("showLegend", False)),
        ("curveType=step", ("curveType", "step")),
        ("yAxisLabel=Profit ($k)", ("yAxisLabel", "Profit ($k)")),
        ("color=null", ("color", None)),
    ])
    def test_values(self, text, expected):
        assert cli.parse_option(text) == expected

    def test_missing_equals(self):
        with pytest.raises(argparse.ArgumentTypeError):
            cli.parse_option("showLegend")


# ==================== TestLoadDataset ====================

class TestLoadDataset:

    def test_list(self, dataset_file, abc_dicts):
        assert cli.load_dataset(dataset_file) == (abc_dicts, {})

    def test_object_with_options(self, tmp_path, abc_dicts):
        path = tmp_path / "wrapped.json"
        path.write_text(json.dumps({"data": abc_dicts, "options": {"innerRadius": 50}}))
        assert cli.load_dataset(path) == (abc_dicts, {"innerRadius": 50})


# ==================== TestMain ====================

class TestMain:

    def test_prints_scene_json(self, monkeypatch, capsys, dataset_file):
        assert run(monkeypatch, dataset_file, "--chart", "pie") == 0
        scene = json.loads(capsys.readouterr().out)
        assert scene["chart_type"] == "pie"
        assert len(scene["legend"]) == 3

    def test_options(self, monkeypatch, capsys, dataset_file):
        code = run(monkeypatch, dataset_file, "--chart", "pie",
                   "--option", "showPercentages=true", "--option", "showLegend=false")
        assert code == 0
        scene = json.loads(capsys.readouterr().out)
        assert scene["legend"] == []
        labels = [p["text"] for p in scene["primitives"] if p["type"] == "text"]
        assert labels == ["30.0%", "50.0%", "20.0%"]

    def test_output_file(self, monkeypatch, tmp_path, dataset_file):
        out = tmp_path / "scene.json"
        assert run(monkeypatch, dataset_file, "--chart", "bar", "-o", out) == 0
        assert json.loads(out.read_text(encoding="utf-8"))["chart_type"] == "bar"

    def test_png_preview(self, monkeypatch, tmp_path, dataset_file):
        png = tmp_path / "preview.png"
        assert run(monkeypatch, dataset_file, "--chart", "bar", "--png", png,
                   "-o", tmp_path / "scene.json") == 0
        assert png.exists()

    def test_missing_dataset(self, monkeypatch, capsys, tmp_path):
        assert run(monkeypatch, tmp_path / "nope.json", "--chart", "pie") == 1
        assert "Dataset not found" in capsys.readouterr().err

    def test_invalid_json(self, monkeypatch, capsys, tmp_path):
        bad = tmp_path / "bad.json"
        bad.write_text("{not json", encoding="utf-8")
        assert run(monkeypatch, bad, "--chart", "pie") == 1
        assert "Failed to read dataset" in capsys.readouterr().err

    def test_unknown_option(self, monkeypatch, capsys, dataset_file):
        assert run(monkeypatch, dataset_file, "--chart", "pie", "--option", "explode=1") == 1
        assert "Unknown option" in capsys.readouterr().err

    def test_invalid_curve_type(self, monkeypatch, capsys, tmp_path):
        path = tmp_path / "series.json"
        path.write_text(json.dumps([{"name": "s", "data": [{"x": 0, "y": 1}, {"x": 1, "y": 2}]}]))
        assert run(monkeypatch, path, "--chart", "line", "--option", "curveType=spline") == 1
        assert "curve_type" in capsys.readouterr().err

    def test_unknown_chart_type_rejected_by_parser(self, monkeypatch, dataset_file):
        with pytest.raises(SystemExit):
            run(monkeypatch, dataset_file, "--chart", "radar")
