"""
Configuration Tests
===================

YAML load/save, partial files and fallback to defaults.
"""

import logging

import pytest

from bcd import config as config_module
from bcd.config import DashboardConfig, get_config, load_config, save_config


class TestDashboardConfig:

    def test_defaults(self, config):
        assert config.engine.seed == 7
        assert config.engine.sensitivity == 0.8
        assert config.engine.warmup_steps == 12
        assert config.session.interval_s == 2.4
        assert config.session.history_length == 14
        assert config.alerts.stress_threshold == 82.0
        assert [m.id for m in config.modalities] == ['facial', 'voice', 'text', 'physio', 'behavior']

    def test_dict_roundtrip(self, config):
        assert DashboardConfig.from_dict(config.to_dict()).to_dict() == config.to_dict()

    def test_partial_dict(self):
        config = DashboardConfig.from_dict({'engine': {'seed': 3}, 'session': {'max_alerts': 5}})
        assert config.engine.seed == 3
        assert config.engine.sensitivity == 0.8
        assert config.session.max_alerts == 5
        assert config.session.confidence_bounds == (30.0, 99.0)
        assert len(config.modalities) == 5

    def test_custom_modalities(self):
        config = DashboardConfig.from_dict({'modalities': [{'id': 'voice', 'confidence': 50}]})
        assert len(config.modalities) == 1
        assert config.modalities[0].active
        assert config.modalities[0].confidence == 50.0


class TestLoadSave:

    def test_yaml_roundtrip(self, tmp_path):
        custom = DashboardConfig()
        custom.engine.seed = 42
        custom.session.driver_seed = 99
        path = save_config(custom, tmp_path / "nested" / "bcd.yaml")

        loaded = load_config(path)
        assert loaded.to_dict() == custom.to_dict()

    def test_missing_file_uses_defaults(self, tmp_path, caplog):
        with caplog.at_level(logging.WARNING):
            config = load_config(tmp_path / "absent.yaml")
        assert config.to_dict() == DashboardConfig().to_dict()
        assert "not found" in caplog.text

    @pytest.mark.parametrize("content", [
        "engine: [unclosed\n",
        "engine:\n  seed: not-a-number\n",
        "- just\n- a list\n",
        "modalities:\n  - name: no id\n",
    ])
    def test_malformed_file_uses_defaults(self, tmp_path, caplog, content):
        path = tmp_path / "bcd.yaml"
        path.write_text(content)
        with caplog.at_level(logging.WARNING):
            config = load_config(path)
        assert config.to_dict() == DashboardConfig().to_dict()
        assert "Failed to load config" in caplog.text

    def test_empty_file(self, tmp_path):
        path = tmp_path / "bcd.yaml"
        path.write_text("")
        assert load_config(path).to_dict() == DashboardConfig().to_dict()

    def test_search_path(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "bcd.yaml").write_text("engine:\n  seed: 13\n")
        assert load_config().engine.seed == 13

    def test_get_config_caches(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setattr(config_module, "_default_config", None)
        first = get_config()
        assert get_config() is first
