"""Shared test fixtures for sshauth."""

import pytest
from pathlib import Path
from unittest.mock import MagicMock

from sshauth.ssh_config import SSHHost


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Point the settings file at a temp directory."""
    settings_dir = tmp_path / "settings"
    monkeypatch.setattr("sshauth.config.config_dir", lambda: settings_dir)
    return settings_dir


@pytest.fixture
def mock_home_dir(mocker, tmp_path):
    """Mock Path.home() to return a temp directory."""
    home = tmp_path / "home"
    home.mkdir()
    mocker.patch.object(Path, "home", return_value=home)
    return home


@pytest.fixture
def ssh_config_file(mock_home_dir):
    """Write ~/.ssh/config under the mocked home directory."""
    ssh_dir = mock_home_dir / ".ssh"
    ssh_dir.mkdir()
    config = ssh_dir / "config"
    config.write_text(
        """
# Personal hosts
Host github
    HostName github.com
    User git
    IdentityFile ~/.ssh/id_github

Host *
    ServerAliveInterval 60

Host gitlab
    HostName gitlab.com
"""
    )
    return config


@pytest.fixture
def hosts():
    return [
        SSHHost(name="github", hostname="github.com"),
        SSHHost(name="gitlab", hostname="gitlab.com", user="git"),
        SSHHost(name="work"),
    ]


@pytest.fixture
def mock_subprocess(mocker):
    """Mock subprocess.run for ssh commands."""
    mock = mocker.patch("subprocess.run")
    mock.return_value = MagicMock(returncode=1)
    return mock
