"""sshauth - pick a host from ~/.ssh/config and test key authentication."""

__version__ = "0.1.0"
