"""SSH config parser to read hosts from ~/.ssh/config."""

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Union

from sshauth.errors import ConfigUnreadable

logger = logging.getLogger(__name__)

HomeDir = Union[Path, str, Callable[[], Union[Path, str]]]

# Key and value are separated by the first whitespace or "=".
_SEPARATOR = re.compile(r"[\s=]")


@dataclass
class SSHHost:
    """Represents an SSH host entry from the config."""

    name: str
    hostname: str | None = None
    identity_file: str | None = None
    user: str | None = None

    @property
    def display_name(self) -> str:
        """Return a one-line summary: name, → hostname, [key], (user)."""
        parts = [self.name]
        if self.hostname:
            parts.append(f"→ {self.hostname}")
        if self.identity_file:
            parts.append(f"[{self.identity_file}]")
        if self.user:
            parts.append(f"({self.user})")
        return "  ".join(parts)

    def __str__(self) -> str:
        return self.display_name


def get_home_dir() -> Path:
    """Return the current user's home directory.

    Raises:
        ConfigUnreadable: If the home directory can't be determined.
    """
    try:
        return Path.home()
    except (RuntimeError, KeyError) as e:
        raise ConfigUnreadable("Could not determine home directory") from e


def default_config_path(home: Path | None = None) -> Path:
    """Return the path of the user's SSH config file."""
    if home is None:
        home = get_home_dir()
    return home / ".ssh" / "config"


def read_ssh_config(config_path: Path) -> str:
    """Read the SSH config file.

    Raises:
        ConfigUnreadable: If the file is missing or unreadable.
    """
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigUnreadable(f"Could not read {config_path}: {e}") from e


def _split_directive(line: str) -> tuple[str, str] | None:
    parts = _SEPARATOR.split(line, maxsplit=1)
    if len(parts) != 2:
        return None
    key, value = parts
    return key.strip().lower(), value.strip()


def _expand_identity_file(value: str, home: HomeDir) -> str:
    if not value.startswith("~/"):
        return value
    if callable(home):
        home = home()
    return str(Path(home) / value[2:])


def parse_ssh_config_text(text: str, home: HomeDir) -> list[SSHHost]:
    """Parse SSH config text into host entries.

    Only Host, HostName, IdentityFile and User are recognised; every other
    directive, blank line, comment and line without a separator is skipped.
    Hosts whose pattern contains "*" are dropped together with their
    directives.

    Args:
        text: Full contents of an SSH config file.
        home: Home directory used to expand "~/" in IdentityFile. May be a
            callable, which is only invoked when an expansion is needed.

    Returns:
        List of SSHHost objects in the order their Host lines appear.
    """
    hosts: list[SSHHost] = []
    current_host: SSHHost | None = None

    for lineno, line in enumerate(text.split("\n"), start=1):
        line = line.strip()

        # Skip empty lines and comments
        if not line or line.startswith("#"):
            continue

        directive = _split_directive(line)
        if directive is None:
            logger.debug("Skipping line %d without a value: %r", lineno, line)
            continue

        key, value = directive

        if key == "host":
            if current_host is not None:
                hosts.append(current_host)

            if "*" in value:
                logger.debug("Skipping wildcard host %r on line %d", value, lineno)
                current_host = None
            else:
                current_host = SSHHost(name=value)

        elif current_host is not None:
            if key == "hostname":
                current_host.hostname = value
            elif key == "identityfile":
                current_host.identity_file = _expand_identity_file(value, home)
            elif key == "user":
                current_host.user = value

    # Don't forget the last host
    if current_host is not None:
        hosts.append(current_host)

    return hosts


def parse_ssh_config(config_path: Path | None = None) -> list[SSHHost]:
    """Read and parse an SSH config file.

    Args:
        config_path: Path to SSH config file. Defaults to ~/.ssh/config.

    Returns:
        List of SSHHost objects representing configured hosts.

    Raises:
        ConfigUnreadable: If the home directory is unknown or the file
            can't be read.
    """
    if config_path is None:
        config_path = default_config_path()

    text = read_ssh_config(config_path)
    hosts = parse_ssh_config_text(text, get_home_dir)
    logger.debug("Parsed %d host(s) from %s", len(hosts), config_path)
    return hosts


def get_host_by_name(name: str, hosts: list[SSHHost]) -> SSHHost | None:
    """Return the first host with the given alias, or None."""
    for host in hosts:
        if host.name == name:
            return host
    return None
