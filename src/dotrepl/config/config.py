# dotrepl.config.config - Configuration management
"""
Configuration file loading and management.
"""
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional
import sys

# Use tomli for Python < 3.11, tomllib for 3.11+
if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from dotrepl.errors import ConfigError
from dotrepl.repl.accumulator import PROMPT_BLOCK, PROMPT_MAIN


def _default_history_file() -> Path:
    return Path.home() / ".dotrepl_history"


@dataclass
class Config:
    """
    dotrepl configuration.

    Configuration file locations (in order of precedence):
    1. --config argument
    2. .dotrepl.toml in current directory
    3. ~/.config/dotrepl/config.toml
    """

    # REPL settings
    prompt: str = PROMPT_MAIN
    block_prompt: str = PROMPT_BLOCK
    history_file: Optional[Path] = field(default_factory=_default_history_file)
    highlight: bool = True
    label: str = "<stdin>"

    # Completion settings
    completion_enabled: bool = True
    extra_keywords: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "Config":
        """
        Create config from dictionary.

        Args:
            data: Configuration dictionary

        Returns:
            Config instance

        Raises:
            ConfigError: If a value has the wrong type
        """
        config = cls()

        # REPL settings
        repl = _table(data, "repl")
        if "prompt" in repl:
            config.prompt = _string(repl, "prompt")
        if "block_prompt" in repl:
            config.block_prompt = _string(repl, "block_prompt")
        if "history_file" in repl:
            value = repl["history_file"]
            config.history_file = Path(_string(repl, "history_file")).expanduser() if value else None
        if "highlight" in repl:
            config.highlight = bool(repl["highlight"])
        if "label" in repl:
            config.label = _string(repl, "label")

        # Completion settings
        completion = _table(data, "completion")
        if "enabled" in completion:
            config.completion_enabled = bool(completion["enabled"])
        if "extra_keywords" in completion:
            words = completion["extra_keywords"]
            if not isinstance(words, list) or not all(isinstance(w, str) for w in words):
                raise ConfigError("completion.extra_keywords must be a list of strings")
            config.extra_keywords = list(words)

        return config

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "repl": {
                "prompt": self.prompt,
                "block_prompt": self.block_prompt,
                "history_file": str(self.history_file) if self.history_file else "",
                "highlight": self.highlight,
                "label": self.label,
            },
            "completion": {
                "enabled": self.completion_enabled,
                "extra_keywords": list(self.extra_keywords),
            },
        }


def _table(data: dict, name: str) -> dict:
    table = data.get(name, {})
    if not isinstance(table, dict):
        raise ConfigError(f"[{name}] must be a table")
    return table


def _string(table: dict, key: str) -> str:
    value = table[key]
    if not isinstance(value, str):
        raise ConfigError(f"{key} must be a string, got {type(value).__name__}")
    return value


def load_config(config_path: Optional[Path] = None) -> Config:
    """
    Load configuration.

    Args:
        config_path: Optional explicit config path

    Returns:
        Config instance
    """
    # Try explicit path first
    if config_path and config_path.exists():
        return _load_from_file(config_path)

    # Try current directory
    local_config = Path(".dotrepl.toml")
    if local_config.exists():
        return _load_from_file(local_config)

    # Try user config directory
    user_config = Path.home() / ".config" / "dotrepl" / "config.toml"
    if user_config.exists():
        return _load_from_file(user_config)

    # Return defaults
    return Config()


def _load_from_file(path: Path) -> Config:
    """Load config from TOML file."""
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
        return Config.from_dict(data)
    except (OSError, tomllib.TOMLDecodeError, ConfigError) as e:
        print(f"Warning: Failed to load config from {path}: {e}", file=sys.stderr)
        return Config()
