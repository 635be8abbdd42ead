"""Configuration loader for cleverlists."""

from __future__ import annotations

from pathlib import Path

import yaml
from loguru import logger
from pydantic import ValidationError

from .schema import Config

CONFIG_DIR = ".cleverlists"
CONFIG_FILE = "config.yaml"


def config_path_for(root: Path) -> Path:
    """Location of the config file for a directory."""
    return root / CONFIG_DIR / CONFIG_FILE


def find_config(start: Path) -> Path | None:
    """Find the nearest .cleverlists/config.yaml at or above ``start``.

    Args:
        start: File or directory to start searching from.

    Returns:
        Path to the config file, or None if no directory has one.
    """
    directory = start if start.is_dir() else start.parent
    for candidate in [directory.resolve(), *directory.resolve().parents]:
        config_path = config_path_for(candidate)
        if config_path.is_file():
            return config_path
    return None


def load_config(config_path: Path) -> Config | None:
    """Load configuration from a YAML file.

    Args:
        config_path: Path to the config.yaml file.

    Returns:
        Config object if the file exists and is valid, None otherwise.
    """
    if not config_path.exists():
        return None

    try:
        with config_path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Could not read config {config_path}: {e}")
        return None

    if data is None:
        return None
    if not isinstance(data, dict):
        logger.warning(f"Ignoring config {config_path}: expected a mapping")
        return None

    try:
        return Config.from_dict(data)
    except ValidationError as e:
        logger.warning(f"Ignoring invalid config {config_path}: {e}")
        return None


def save_config(config: Config, root: Path) -> Path:
    """Save configuration to config.yaml in the .cleverlists folder.

    Args:
        config: Config object to save.
        root: Directory the .cleverlists folder is created in.

    Returns:
        Path of the written file.
    """
    config_path = config_path_for(root)
    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(config.to_yaml(), encoding="utf-8")
    return config_path
