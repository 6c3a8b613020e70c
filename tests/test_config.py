# tests/test_config.py - Configuration tests
"""
Tests for configuration loading.
"""
from pathlib import Path

import pytest

from dotrepl.config import Config, load_config
from dotrepl.errors import ConfigError
from dotrepl.repl.accumulator import PROMPT_BLOCK, PROMPT_MAIN


@pytest.fixture
def isolated(tmp_path, monkeypatch):
    """Run with an empty working directory and home."""
    home = tmp_path / "home"
    home.mkdir()
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(work)
    return work


class TestConfig:
    """Tests for the Config class."""

    def test_defaults(self, isolated):
        config = Config()

        assert config.prompt == PROMPT_MAIN
        assert config.block_prompt == PROMPT_BLOCK
        assert config.history_file == Path.home() / ".dotrepl_history"
        assert config.completion_enabled
        assert config.extra_keywords == []

    def test_from_dict(self):
        """Test values are read from their tables."""
        config = Config.from_dict({
            "repl": {"prompt": "py> ", "highlight": False, "history_file": ""},
            "completion": {"enabled": False, "extra_keywords": ["match", "case"]},
        })

        assert config.prompt == "py> "
        assert config.block_prompt == PROMPT_BLOCK
        assert config.highlight is False
        assert config.history_file is None
        assert config.completion_enabled is False
        assert config.extra_keywords == ["match", "case"]

    def test_from_dict_rejects_bad_types(self):
        with pytest.raises(ConfigError):
            Config.from_dict({"repl": {"prompt": 3}})
        with pytest.raises(ConfigError):
            Config.from_dict({"repl": "nope"})
        with pytest.raises(ConfigError):
            Config.from_dict({"completion": {"extra_keywords": "match"}})

    def test_to_dict_round_trip(self):
        config = Config.from_dict({"repl": {"label": "<repl>"}})
        assert Config.from_dict(config.to_dict()) == config


class TestLoadConfig:
    """Tests for config file discovery."""

    def test_no_files_gives_defaults(self, isolated):
        assert load_config() == Config()

    def test_local_file(self, isolated):
        (isolated / ".dotrepl.toml").write_text('[repl]\nprompt = "local> "\n')
        assert load_config().prompt == "local> "

    def test_user_file(self, isolated):
        user_dir = Path.home() / ".config" / "dotrepl"
        user_dir.mkdir(parents=True)
        (user_dir / "config.toml").write_text('[repl]\nblock_prompt = "... "\n')

        assert load_config().block_prompt == "... "

    def test_explicit_path_wins(self, isolated, tmp_path):
        (isolated / ".dotrepl.toml").write_text('[repl]\nprompt = "local> "\n')
        explicit = tmp_path / "custom.toml"
        explicit.write_text('[repl]\nprompt = "mine> "\n')

        assert load_config(explicit).prompt == "mine> "

    def test_broken_file_warns(self, isolated, capsys):
        """Test an unreadable file falls back to defaults with a warning."""
        (isolated / ".dotrepl.toml").write_text("[repl\nprompt = ")

        assert load_config() == Config()
        assert "Warning: Failed to load config" in capsys.readouterr().err

    def test_invalid_value_warns(self, isolated, capsys):
        (isolated / ".dotrepl.toml").write_text("[repl]\nprompt = 1\n")

        assert load_config() == Config()
        assert "prompt must be a string" in capsys.readouterr().err
