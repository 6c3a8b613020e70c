# dotrepl.config - Configuration module
from dotrepl.config.config import Config, load_config

__all__ = [
    "Config",
    "load_config",
]
