"""Tests for config system."""

import json
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from stageboard.config.models import BoardConfig, ServerConfig
from stageboard.config.settings import Settings


def test_default_settings(tmp_path):
    """Settings should have sane defaults when no config file exists."""
    fake_config = tmp_path / "config.json"
    with patch("stageboard.config.settings.CONFIG_FILE", fake_config):
        s = Settings()
        assert s.app_name == "Stageboard"
        assert s.server.port == 8000
        assert s.board.max_assigned == 2
        assert s.board.seed_file == ""


def test_settings_override():
    """Explicit values should override defaults."""
    s = Settings(
        app_name="Custom",
        server=ServerConfig(host="0.0.0.0", port=9000),
        board=BoardConfig(max_assigned=3),
    )
    assert s.app_name == "Custom"
    assert s.server.port == 9000
    assert s.board.max_assigned == 3


def test_config_file_values_are_defaults(tmp_path):
    """config.json supplies values that explicit arguments still override."""
    fake_config = tmp_path / "config.json"
    fake_config.write_text(json.dumps({
        "app_name": "FromFile",
        "log_level": "DEBUG",
        "board": {"max_assigned": 4},
    }))
    with patch("stageboard.config.settings.CONFIG_FILE", fake_config):
        s = Settings(app_name="Explicit")
    assert s.app_name == "Explicit"
    assert s.log_level == "DEBUG"
    assert s.board.max_assigned == 4


def test_corrupted_config_file_is_ignored(tmp_path):
    fake_config = tmp_path / "config.json"
    fake_config.write_text("NOT VALID JSON{{{")
    with patch("stageboard.config.settings.CONFIG_FILE", fake_config):
        s = Settings()
    assert s.app_name == "Stageboard"


def test_env_host_and_port(tmp_path, monkeypatch):
    """Flat STAGEBOARD_HOST/PORT map into the server sub-config."""
    monkeypatch.setenv("STAGEBOARD_HOST", "0.0.0.0")
    monkeypatch.setenv("STAGEBOARD_PORT", "9100")
    with patch("stageboard.config.settings.CONFIG_FILE", tmp_path / "config.json"):
        s = Settings()
    assert s.server.host == "0.0.0.0"
    assert s.server.port == 9100


def test_env_nested_board(tmp_path, monkeypatch):
    monkeypatch.setenv("STAGEBOARD_BOARD__MAX_ASSIGNED", "5")
    with patch("stageboard.config.settings.CONFIG_FILE", tmp_path / "config.json"):
        s = Settings()
    assert s.board.max_assigned == 5


def test_max_assigned_must_be_positive():
    with pytest.raises(ValidationError):
        BoardConfig(max_assigned=0)



def test_dotenv_host_and_port(tmp_path, monkeypatch):
    """Flat STAGEBOARD_HOST/PORT are also read from a .env file."""
    monkeypatch.delenv("STAGEBOARD_HOST", raising=False)
    monkeypatch.delenv("STAGEBOARD_PORT", raising=False)
    (tmp_path / ".env").write_text("STAGEBOARD_HOST=0.0.0.0\nSTAGEBOARD_PORT=9100\n")
    monkeypatch.chdir(tmp_path)
    with patch("stageboard.config.settings.CONFIG_FILE", tmp_path / "config.json"):
        s = Settings()
    assert (s.server.host, s.server.port) == ("0.0.0.0", 9100)


def test_environment_beats_dotenv(tmp_path, monkeypatch):
    monkeypatch.setenv("STAGEBOARD_PORT", "9200")
    (tmp_path / ".env").write_text("STAGEBOARD_PORT=9100\n")
    monkeypatch.chdir(tmp_path)
    with patch("stageboard.config.settings.CONFIG_FILE", tmp_path / "config.json"):
        s = Settings()
    assert s.server.port == 9200
