"""Configuration utilities."""

from .config_loader import ConfigLoader, build_configs, get_config

__all__ = [
    "ConfigLoader",
    "build_configs",
    "get_config",
]
