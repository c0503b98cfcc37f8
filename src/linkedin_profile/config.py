import os
from pathlib import Path
from typing import Dict, Optional

from .api.fields import API_BASE_URL

CONFIG_DIR = Path.home() / ".linkedin-profile"
CONFIG_FILE = CONFIG_DIR / "config"

TOKEN_KEY = "LINKEDIN_ACCESS_TOKEN"
BASE_URL_KEY = "LINKEDIN_API_BASE_URL"


def _read_config() -> Dict[str, str]:
    """read KEY=value lines from the config file."""
    config = {}
    if not CONFIG_FILE.exists():
        return config

    try:
        with open(CONFIG_FILE, "r") as f:
            for line in f:
                line = line.strip()
                if "=" in line:
                    key, value = line.split("=", 1)
                    config[key] = value
    except (IOError, PermissionError, OSError):
        # unreadable config is treated as empty
        return {}
    return config


def _get_value(key: str) -> Optional[str]:
    """environment first, then config file."""
    value = os.environ.get(key)
    if value:
        return value
    return _read_config().get(key) or None


def get_access_token() -> Optional[str]:
    return _get_value(TOKEN_KEY)


def get_api_base_url() -> str:
    return _get_value(BASE_URL_KEY) or API_BASE_URL


def set_access_token(token: str):
    """store the token in the config file, preserving other config values."""
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)

    config = _read_config()
    config[TOKEN_KEY] = token

    try:
        with open(CONFIG_FILE, "w") as f:
            for key, value in config.items():
                f.write(f"{key}={value}\n")
    except (IOError, PermissionError, OSError) as e:
        raise RuntimeError(f"failed to write config file: {e}") from e
