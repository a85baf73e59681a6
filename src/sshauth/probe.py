"""Host selection and the ssh authentication probe."""

import logging
import subprocess
from typing import Callable

from sshauth.errors import NoHostsFound, SelectionCancelled, SshInvocationFailed
from sshauth.selector import interactive_select
from sshauth.ssh_config import SSHHost

logger = logging.getLogger(__name__)

SSH_COMMAND = "ssh"
PROBE_USER = "git"

# GitHub/GitLab exit with 1 after a successful `ssh -T` auth since they
# refuse to open a shell.
AUTH_SUCCESS_CODES = frozenset({0, 1})

Chooser = Callable[..., int | None]


def pick_host(
    hosts: list[SSHHost],
    chooser: Chooser = interactive_select,
    default: int = 0,
) -> SSHHost:
    """Choose the host to probe.

    A single host is returned without prompting.

    Args:
        hosts: Parsed hosts, in config order.
        chooser: Called with the host summaries and a ``default`` index;
            returns the chosen index or None when cancelled.
        default: Index the prompt starts on.

    Raises:
        NoHostsFound: If ``hosts`` is empty.
        SelectionCancelled: If the chooser returns None.
    """
    if not hosts:
        raise NoHostsFound("No Host entries found in SSH config")

    if len(hosts) == 1:
        return hosts[0]

    labels = [host.display_name for host in hosts]
    selection = chooser(labels, default=default)
    if selection is None:
        raise SelectionCancelled("Selection cancelled")

    return hosts[selection]


def build_probe_command(host: SSHHost) -> list[str]:
    """Build the ssh command for an authentication test.

    The alias is used rather than the resolved hostname so ssh applies
    its own config for that Host block.
    """
    return [SSH_COMMAND, "-T", f"{PROBE_USER}@{host.name}"]


def is_auth_success(code: int) -> bool:
    """Return True if an ssh exit code means authentication worked."""
    return code in AUTH_SUCCESS_CODES


def run_probe(host: SSHHost) -> int:
    """Run ``ssh -T git@<alias>`` and wait for it to exit.

    Output goes straight to the terminal.

    Returns:
        The ssh exit code, when it counts as success.

    Raises:
        SshInvocationFailed: If ssh can't be launched or reports failure.
    """
    cmd = build_probe_command(host)
    logger.debug("Running %s", " ".join(cmd))

    try:
        result = subprocess.run(cmd)
    except FileNotFoundError as e:
        raise SshInvocationFailed(
            "ssh command not found. Please install OpenSSH."
        ) from e
    except OSError as e:
        raise SshInvocationFailed(f"Failed to execute ssh: {e}") from e

    logger.debug("ssh exited with status %d", result.returncode)

    if not is_auth_success(result.returncode):
        raise SshInvocationFailed(
            f"ssh exited with status {result.returncode}",
            code=result.returncode,
        )

    return result.returncode
