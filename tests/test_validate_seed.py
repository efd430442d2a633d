"""
Tests for the scripts/validate_seed.py checker.
"""

import importlib.util
import json
import sys

import pytest


@pytest.fixture(scope="module")
def validate_cli(request):
    path = request.config.rootpath / "scripts" / "validate_seed.py"
    spec = importlib.util.spec_from_file_location("validate_seed_cli", path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def run(validate_cli, monkeypatch, *args) -> int:
    monkeypatch.setattr(sys, "argv", ["validate_seed.py", *args])
    return validate_cli.main()


class TestValidateSeed:
    """Test validation report and exit codes."""

    def test_reference_seed(self, validate_cli, monkeypatch, capsys):
        assert run(validate_cli, monkeypatch) == 0
        out = capsys.readouterr().out
        assert "nodes: 7" in out
        assert "All validation checks passed" in out

    def test_missing_default_seed(self, validate_cli, monkeypatch, capsys):
        monkeypatch.setattr(validate_cli, "get_missing_data_files", lambda: ["seed_graph"])
        assert run(validate_cli, monkeypatch) == 1
        assert "Missing data files: seed_graph" in capsys.readouterr().out

    def test_disconnected_seed(self, validate_cli, monkeypatch, tmp_path, capsys, seed_data):
        seed_data["nodes"].append({"id": "Z", "latitude": 0.0, "longitude": 0.0})
        seed = tmp_path / "graph.json"
        seed.write_text(json.dumps(seed_data), encoding="utf-8")
        assert run(validate_cli, monkeypatch, "--seed", str(seed)) == 0
        out = capsys.readouterr().out
        assert "Isolated nodes: Z" in out
        assert "not fully connected" in out

    def test_not_utf8(self, validate_cli, monkeypatch, tmp_path):
        seed = tmp_path / "graph.json"
        seed.write_bytes(b'{"nodes": [{"id": "\xff"}]}')
        assert run(validate_cli, monkeypatch, "--seed", str(seed)) == 1
