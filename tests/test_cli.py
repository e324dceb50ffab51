"""Command-line entry points."""

import json

import pytest

from bcd.cli import build_parser, main
from bcd.config import load_config


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


class TestCommands:

    def test_warmup_prints_snapshot(self, capsys):
        assert main(["-q", "warmup", "--steps", "3"]) == 0
        payload = json.loads(capsys.readouterr().out)
        assert set(payload['cognitiveState']) == {
            'attention', 'cognitiveLoad', 'emotionalValence', 'stress', 'engagement', 'deceptionRisk',
        }
        assert payload['timelinePoint']['time'] == "T+3s"

    def test_warmup_full(self, capsys):
        assert main(["-q", "--seed", "9", "warmup", "--steps", "4", "--full"]) == 0
        payload = json.loads(capsys.readouterr().out)
        assert len(payload['timeline']) == 4
        assert len(payload['reactivity']) == 4

    def test_run(self, capsys):
        assert main(["-q", "run", "--ticks", "2", "--interval", "0"]) == 0
        out = capsys.readouterr().out
        assert "T+15s" in out
        assert "T+16s" in out
        assert "Dominant mode:" in out

    def test_export(self, isolated_cwd):
        out = isolated_cwd / "session.json"
        assert main(["-q", "export", "--ticks", "2", "--out", str(out)]) == 0
        payload = json.loads(out.read_text())
        assert len(payload['timeline']) == 14
        assert 'exportedAt' in payload

    def test_soak(self, capsys):
        assert main(["-q", "soak", "--steps", "200"]) == 0
        assert "200 steps, all invariants held" in capsys.readouterr().out

    def test_config_write(self, isolated_cwd):
        path = isolated_cwd / "bcd.yaml"
        assert main(["-q", "config", "--write", str(path)]) == 0
        assert load_config(path).engine.seed == 7

    def test_config_file_applies(self, isolated_cwd, capsys):
        (isolated_cwd / "custom.yaml").write_text("engine:\n  seed: 21\n")
        main(["-q", "--config", "custom.yaml", "warmup", "--steps", "2"])
        from_file = capsys.readouterr().out
        main(["-q", "--seed", "21", "warmup", "--steps", "2"])
        assert capsys.readouterr().out == from_file


class TestParser:

    def test_command_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])

    def test_verbosity_exclusive(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["-v", "-q", "warmup"])
