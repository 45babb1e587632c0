"""
Central configuration for debcrates.

Defaults cover a stock Debian/Ubuntu system. They can be overridden by a
small config file, looked up in this order:
    1. $DEBCRATES_CONFIG, if set
    2. ~/.config/debcrates/config

Config file format (optional, one setting per line):
    index_command=apt-cache show librust-*
    installed_command=dpkg -l
    family_marker=librust-
    installed_code=ii
    # Comments start with #
"""

import logging
import os
import shlex
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

# Environment variable pointing at an alternate config file
CONFIG_ENV = "DEBCRATES_CONFIG"
DEFAULT_CONFIG_PATH = Path("~/.config/debcrates/config")

# Package index query: full paragraphs of every librust package
INDEX_COMMAND = ["apt-cache", "show", "librust-*"]
# Installed listing: one line per package with its state code
INSTALLED_COMMAND = ["dpkg", "-l"]

# Substring identifying listing lines of the packages we inventory
FAMILY_MARKER = "librust-"
# dpkg state code of installed packages
INSTALLED_CODE = "ii"

# Keys holding a command line (split into argv)
_COMMAND_KEYS = ('index_command', 'installed_command')
_STRING_KEYS = ('family_marker', 'installed_code')

# Cache for the merged config (avoid re-reading the file)
_cached_config: Optional[dict] = None


def default_config() -> dict:
    """Return a fresh dict with the built-in defaults."""
    return {
        'index_command': list(INDEX_COMMAND),
        'installed_command': list(INSTALLED_COMMAND),
        'family_marker': FAMILY_MARKER,
        'installed_code': INSTALLED_CODE,
    }


def get_config_path() -> Path:
    """Return the config file path (it may not exist)."""
    env_path = os.environ.get(CONFIG_ENV)
    if env_path:
        return Path(env_path).expanduser()
    return DEFAULT_CONFIG_PATH.expanduser()


def read_config_file(path: Path) -> Optional[dict]:
    """Read key=value settings from a config file.

    Returns:
        Dict with raw string values, or None if the file doesn't exist
        or cannot be read
    """
    if not path.exists():
        return None

    values = {}
    try:
        with open(path, encoding='utf-8') as f:
            for line in f:
                line = line.strip()
                if not line or line.startswith('#'):
                    continue
                if '=' in line:
                    key, value = line.split('=', 1)
                    values[key.strip()] = value.strip()
    except (OSError, UnicodeDecodeError) as e:
        logger.debug(f"Cannot read config {path}: {e}")
        return None

    return values


def load_config(path: Optional[Path] = None) -> dict:
    """Build the configuration from defaults and the optional config file.

    Args:
        path: Config file to read; defaults to get_config_path()

    Returns:
        Dict with 'index_command', 'installed_command' (argv lists),
        'family_marker' and 'installed_code'
    """
    config = default_config()
    path = path or get_config_path()

    values = read_config_file(path)
    if values is None:
        return config

    logger.debug(f"Using config file {path}")
    for key, value in values.items():
        if key in _COMMAND_KEYS:
            argv = shlex.split(value)
            if argv:
                config[key] = argv
        elif key in _STRING_KEYS:
            if value:
                config[key] = value
        else:
            logger.debug(f"Ignoring unknown config key {key!r} in {path}")

    return config


def get_config() -> dict:
    """Return the configuration, loading it on first use."""
    global _cached_config
    if _cached_config is None:
        _cached_config = load_config()
    return _cached_config


def reset_config():
    """Forget the cached configuration."""
    global _cached_config
    _cached_config = None
