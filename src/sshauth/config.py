"""Settings storage for sshauth."""

import json
from dataclasses import dataclass
from pathlib import Path

from sshauth.errors import ConfigUnreadable
from sshauth.ssh_config import SSHHost, get_home_dir


@dataclass
class Config:
    """Application settings."""

    last_host: str | None = None


def config_dir() -> Path:
    """Return the settings directory, ~/.config/sshauth.

    Raises:
        ConfigUnreadable: If the home directory can't be determined.
    """
    return get_home_dir() / ".config" / "sshauth"


def config_file() -> Path:
    return config_dir() / "config.json"


def load_config() -> Config:
    """Load settings from disk.

    Returns:
        Config object with loaded settings, or defaults if there is no
        readable settings file (including when the home directory is unknown).
    """
    try:
        path = config_file()
    except ConfigUnreadable:
        return Config()

    if not path.exists():
        return Config()

    try:
        with open(path, "r") as f:
            data = json.load(f)
            return Config(last_host=data.get("last_host"))
    except (json.JSONDecodeError, OSError, AttributeError):
        return Config()


def save_config(config: Config) -> None:
    """Save settings to disk.

    Raises:
        ConfigUnreadable: If the home directory can't be determined.
        OSError: If the settings file can't be written.
    """
    directory = config_dir()
    directory.mkdir(parents=True, exist_ok=True)

    data = {"last_host": config.last_host}

    with open(directory / "config.json", "w") as f:
        json.dump(data, f, indent=2)


def remember_host(host_name: str) -> None:
    """Record the alias of the last successfully probed host."""
    config = load_config()
    config.last_host = host_name
    save_config(config)


def default_index(hosts: list[SSHHost], last_host: str | None) -> int:
    """Return the index of ``last_host`` in ``hosts``, or 0."""
    if last_host is not None:
        for i, host in enumerate(hosts):
            if host.name == last_host:
                return i
    return 0
