"""YAML settings for drivelink.

Settings live in ``~/.config/drivelink/config.yaml``. ``DRIVELINK_CONFIG_DIR``
moves the directory and ``DRIVELINK_CONFIG_FILE`` points at a file directly.
Keys are addressed with dots, e.g. ``client.id`` or ``token.refresh``.
"""

import os
import copy
import yaml
import logging
from pathlib import Path
from typing import Any, Mapping

logger = logging.getLogger(__name__)

CONFIG_DIR_ENV = "DRIVELINK_CONFIG_DIR"
CONFIG_FILE_ENV = "DRIVELINK_CONFIG_FILE"

DEFAULT_CONFIG = {
    "client": {
        "id": None,
        "secret": None,
        "application_name": None,
    },
    "token": {
        "access": None,
        "refresh": None,
    },
    "scopes": None,
}


def get_config_file_path() -> Path:
    """Path of the settings file after applying the env overrides."""
    if os.getenv(CONFIG_FILE_ENV):
        return Path(os.environ[CONFIG_FILE_ENV])
    config_dir = os.getenv(CONFIG_DIR_ENV) or Path.home() / ".config" / "drivelink"
    return Path(config_dir) / "config.yaml"


def load_config() -> dict:
    """
    Load settings, filling anything the file leaves out from DEFAULT_CONFIG.

    An unreadable or malformed file is logged and treated as empty.
    """
    settings = copy.deepcopy(DEFAULT_CONFIG)
    config_file = get_config_file_path()
    if not config_file.exists():
        logger.debug(f"No settings file at {config_file}, using defaults")
        return settings

    try:
        with open(config_file, 'r') as f:
            stored = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.error(f"Ignoring settings file {config_file}: {e}")
        return settings

    if isinstance(stored, dict):
        _merge_into(settings, stored)
    elif stored is not None:
        logger.error(f"Ignoring settings file {config_file}: expected a mapping")
    return settings


def save_config(config_data: dict):
    """Write settings to the settings file, creating its directory."""
    config_file = get_config_file_path()
    config_file.parent.mkdir(parents=True, exist_ok=True)
    with open(config_file, 'w') as f:
        yaml.safe_dump(config_data, f, default_flow_style=False)
    logger.debug(f"Settings written to {config_file}")


def lookup(config_data: Mapping, key: str, default: Any = None) -> Any:
    """Value at a dotted key of already loaded settings; unset values give ``default``."""
    value = config_data
    for part in key.split('.'):
        if not isinstance(value, Mapping) or part not in value:
            return default
        value = value[part]
    return default if value is None else value


def get_config_value(key: str, default: Any = None) -> Any:
    return lookup(load_config(), key, default)


def set_config_value(key: str, value: Any):
    """Store ``value`` at a dotted key, replacing non-mapping parents."""
    config_data = load_config()
    *parents, last = key.split('.')
    section = config_data
    for part in parents:
        if not isinstance(section.get(part), dict):
            section[part] = {}
        section = section[part]
    section[last] = value
    save_config(config_data)


def _merge_into(target: dict, overrides: Mapping):
    for name, value in overrides.items():
        if isinstance(target.get(name), dict) and isinstance(value, Mapping):
            _merge_into(target[name], value)
        else:
            target[name] = value
