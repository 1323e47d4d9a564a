"""Tests for environment overrides of the configuration constants."""

from swimmingfish import config


class TestEnvOverrides:
    def test_missing_variable_uses_default(self, monkeypatch):
        monkeypatch.delenv("SWIMMINGFISH_HEAD_RADIUS", raising=False)
        assert config._env_float("HEAD_RADIUS", 50.0) == 50.0

    def test_valid_float_override(self, monkeypatch):
        monkeypatch.setenv("SWIMMINGFISH_HEAD_RADIUS", "32.5")
        assert config._env_float("HEAD_RADIUS", 50.0) == 32.5

    def test_malformed_float_falls_back(self, monkeypatch, caplog):
        monkeypatch.setenv("SWIMMINGFISH_DURATION_MS", "fast")
        assert config._env_float("DURATION_MS", 2000.0) == 2000.0
        assert "not a number" in caplog.text

    def test_non_positive_int_falls_back(self, monkeypatch):
        monkeypatch.setenv("SWIMMINGFISH_FRAME_INTERVAL_MS", "0")
        assert config._env_int("FRAME_INTERVAL_MS", 16) == 16

    def test_valid_int_override(self, monkeypatch):
        monkeypatch.setenv("SWIMMINGFISH_FRAME_INTERVAL_MS", "33")
        assert config._env_int("FRAME_INTERVAL_MS", 16) == 33
