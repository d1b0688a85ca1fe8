"""Configuration loading for winloss.

Settings live in ~/.config/winloss/config.toml. A missing or unreadable
file falls back to DEFAULT_CONFIG; keys present in the file override the
defaults section by section.
"""

import copy
import logging
from pathlib import Path
from typing import Optional

import toml

logger = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".config" / "winloss"
CONFIG_PATH = CONFIG_DIR / "config.toml"

DEFAULT_CONFIG = {
    "storage": {
        "path": str(CONFIG_DIR / "defaults.db"),
    },
    "log": {
        "default_filter": "all",
    },
    "logging": {
        "level": "WARNING",
    },
}


def load_config(config_path: Optional[Path] = None) -> dict:
    """Load configuration merged over the defaults.

    Args:
        config_path: Config file to read, defaults to CONFIG_PATH.

    Returns:
        Config dict with every section of DEFAULT_CONFIG present.
    """
    path = config_path or CONFIG_PATH
    config = copy.deepcopy(DEFAULT_CONFIG)

    if not path.exists():
        return config

    try:
        loaded = toml.load(path)
    except (toml.TomlDecodeError, OSError) as e:
        logger.warning("Ignoring unreadable config %s: %s", path, e)
        return config

    for section, values in loaded.items():
        if isinstance(config.get(section), dict):
            if isinstance(values, dict):
                config[section].update(values)
            else:
                logger.warning("Ignoring non-table [%s] in %s", section, path)
        else:
            config[section] = values
    return config


def create_template_config(config_path: Optional[Path] = None) -> Path:
    """Write the default configuration as a template file.

    Returns:
        Path of the written file.
    """
    path = config_path or CONFIG_PATH
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w") as f:
        toml.dump(DEFAULT_CONFIG, f)

    return path


def get_storage_path(config: dict) -> Path:
    """Get the defaults database path, with ~ expanded."""
    return Path(config["storage"]["path"]).expanduser()
