"""Exception hierarchy for sshauth."""


class SshAuthError(Exception):
    """Base exception for all sshauth errors.

    Attributes:
        message: Human-readable error message
        exit_code: Suggested exit code for the CLI (default 1)
    """

    def __init__(self, message: str, exit_code: int = 1):
        self.message = message
        self.exit_code = exit_code
        super().__init__(message)


class ConfigUnreadable(SshAuthError):
    """Home directory unknown, or the SSH config file can't be read."""

    pass


class NoHostsFound(SshAuthError):
    """The SSH config yielded no usable Host entries."""

    pass


class SelectionCancelled(SshAuthError):
    """The user aborted the host prompt."""

    pass


class SshInvocationFailed(SshAuthError):
    """ssh could not be launched, or exited with a failing status.

    Attributes:
        code: The ssh exit code, or None if ssh never ran.
    """

    def __init__(self, message: str, code: int | None = None):
        self.code = code
        super().__init__(message, exit_code=code if code and code > 0 else 1)
