"""Configuration management for cleverlists.

This module handles loading and validating configuration from .cleverlists/config.yaml files.
"""

from .loader import config_path_for, find_config, load_config, save_config
from .schema import BlankListItemBehaviour, Config, EditorConfig, ListsConfig

__all__ = [
    "BlankListItemBehaviour",
    "Config",
    "EditorConfig",
    "ListsConfig",
    "config_path_for",
    "find_config",
    "load_config",
    "save_config",
]
