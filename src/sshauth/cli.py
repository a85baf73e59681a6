"""CLI entry point for sshauth."""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from sshauth import __version__
from sshauth.config import default_index, load_config, remember_host
from sshauth.errors import ConfigUnreadable, NoHostsFound, SshAuthError
from sshauth.log import setup_logging
from sshauth.probe import build_probe_command, pick_host, run_probe
from sshauth.ssh_config import get_host_by_name, parse_ssh_config

app = typer.Typer(
    name="sshauth",
    help="Pick a host from ~/.ssh/config and test SSH key authentication.",
    add_completion=False,
)

console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger(__name__)


def version_callback(value: bool):
    if value:
        console.print(f"[bold cyan]sshauth[/bold cyan] version {__version__}")
        raise typer.Exit()


@app.command()
def main(
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-F",
        help="SSH config file to read (default: ~/.ssh/config).",
    ),
    host_name: Optional[str] = typer.Option(
        None,
        "--host",
        "-H",
        help="Probe this Host alias without prompting.",
    ),
    verbose: bool = typer.Option(
        False, "--verbose", help="Show debug logging."
    ),
    version: bool = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
):
    """Select an SSH host and run `ssh -T git@<host>` against it."""
    setup_logging(verbose=verbose)

    try:
        hosts = parse_ssh_config(config)

        if host_name is not None:
            host = get_host_by_name(host_name, hosts)
            if host is None:
                raise NoHostsFound(f"Host '{host_name}' not found in SSH config")
        else:
            if len(hosts) == 1:
                console.print(
                    f"[bold cyan]→[/bold cyan] Only one host found, using: "
                    f"[green]{escape(hosts[0].display_name)}[/green]",
                    highlight=False,
                )
            start = default_index(hosts, load_config().last_host)
            host = pick_host(hosts, default=start)

        cmd = " ".join(build_probe_command(host))
        console.print(f"\n[bold]🔑[/bold] [green]{escape(cmd)}[/green]\n", highlight=False)

        run_probe(host)
    except SshAuthError as e:
        err_console.print(f"[bold red]✗[/bold red] {escape(e.message)}", highlight=False)
        raise typer.Exit(e.exit_code)

    try:
        remember_host(host.name)
    except (ConfigUnreadable, OSError) as e:
        logger.debug("Could not save settings: %s", e)


if __name__ == "__main__":
    app()
