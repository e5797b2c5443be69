"""
Configuration file utilities.

Handles loading and saving configuration from ~/.opensocial/config.yaml.
Environment variables override values from the file.
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = {
    "server": "http://localhost:8080/social/rest",
    "token": None,
    "user_id": "@me",
}

CONFIG_KEYS = tuple(DEFAULT_CONFIG)


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path from OPENSOCIAL_CONFIG_DIR, or ~/.opensocial
    """
    override = os.environ.get("OPENSOCIAL_CONFIG_DIR")
    if override:
        return Path(override)
    return Path.home() / ".opensocial"


def get_config_path() -> Path:
    return get_config_dir() / "config.yaml"


def load_config() -> Dict[str, Any]:
    """Load configuration from file.

    If the file doesn't exist or can't be parsed, returns default
    configuration.
    """
    config_path = get_config_path()
    config = DEFAULT_CONFIG.copy()

    if not config_path.exists():
        return config

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            user_config = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Failed to load config from {config_path}: {e}")
        return config

    if not isinstance(user_config, dict):
        logger.warning(f"Ignoring config {config_path}: expected a mapping")
        return config

    config.update({k: v for k, v in user_config.items() if k in CONFIG_KEYS})
    return config


def save_config(config: Dict[str, Any]) -> None:
    """Save configuration to file, creating the directory if needed."""
    config_dir = get_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)

    with open(get_config_path(), "w", encoding="utf-8") as f:
        yaml.dump(config, f, default_flow_style=False, allow_unicode=True)


def _get(key: str, env_var: str) -> Optional[str]:
    value = os.environ.get(env_var)
    if value:
        return value
    return load_config().get(key)


def get_server() -> str:
    """Get API base URL (OPENSOCIAL_SERVER, then config file)."""
    return _get("server", "OPENSOCIAL_SERVER") or DEFAULT_CONFIG["server"]


def get_token() -> Optional[str]:
    """Get OAuth token (OPENSOCIAL_TOKEN, then config file)."""
    return _get("token", "OPENSOCIAL_TOKEN")


def get_user_id() -> str:
    """Get default user id (OPENSOCIAL_USER_ID, then config file)."""
    return _get("user_id", "OPENSOCIAL_USER_ID") or DEFAULT_CONFIG["user_id"]
