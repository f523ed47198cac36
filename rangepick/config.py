"""Configuration file management for rangepick."""

import os
import tomllib
from pathlib import Path
from typing import Any

import tomli_w

from rangepick.domain.models import Granularity

DEFAULT_GRANULARITY = Granularity.DAY


def get_xdg_config_home() -> Path:
    """Get XDG config directory, with fallback to ~/.config."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config)
    return Path.home() / ".config"


def get_config_path() -> Path:
    """Get the config file path (XDG compliant).

    Returns:
        Path to the config file.
    """
    return get_xdg_config_home() / "rangepick" / "config.toml"


def create_default_config(config_path: Path | None = None) -> None:
    """Create default config file with secure permissions.

    Args:
        config_path: Path to config file. If None, uses default location.
    """
    save_config({"granularity": DEFAULT_GRANULARITY.value}, config_path)


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration from TOML file.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Configuration dictionary.

    Raises:
        FileNotFoundError: If config file doesn't exist.
    """
    if config_path is None:
        config_path = get_config_path()

    with open(config_path, "rb") as f:
        return tomllib.load(f)


def save_config(config: dict[str, Any], config_path: Path | None = None) -> None:
    """Write the config as TOML, readable by the owner only.

    The file is opened with mode 0600 so it is never world-readable, even
    briefly. Existing files are tightened as well.
    """
    path = config_path or get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)

    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
    with os.fdopen(fd, "wb") as f:
        tomli_w.dump(config, f)
    path.chmod(0o600)


def get_default_granularity(config_path: Path | None = None) -> Granularity:
    """Get the configured default granularity.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Configured granularity, or day when the file is missing, unreadable,
        or names an unknown granularity.
    """
    try:
        config = load_config(config_path)
    except (FileNotFoundError, tomllib.TOMLDecodeError):
        return DEFAULT_GRANULARITY

    value = config.get("granularity")
    if not isinstance(value, str):
        return DEFAULT_GRANULARITY

    try:
        return Granularity.parse(value)
    except ValueError:
        return DEFAULT_GRANULARITY


def set_default_granularity(granularity: Granularity, config_path: Path | None = None) -> None:
    """Store the default granularity, keeping any other keys in the file.

    Args:
        granularity: Granularity to store.
        config_path: Path to config file. If None, uses default location.
    """
    try:
        config = load_config(config_path)
    except FileNotFoundError:
        config = {}

    config["granularity"] = granularity.value
    save_config(config, config_path)
