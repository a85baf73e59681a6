"""Interactive arrow-key navigation selector using rich."""

import logging
import sys
import termios
import tty

from rich.console import Console
from rich.live import Live
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

logger = logging.getLogger(__name__)


def get_key() -> str:
    """Read a single keypress from stdin."""
    fd = sys.stdin.fileno()
    old_settings = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        ch = sys.stdin.read(1)
        # Arrow keys arrive as escape sequences
        if ch == "\x1b":
            ch += sys.stdin.read(2)
        return ch
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)


def interactive_select(
    labels: list[str],
    title: str = "Select SSH host",
    default: int = 0,
) -> int | None:
    """Display an interactive selector with arrow-key navigation.

    Args:
        labels: One line of text per choice.
        title: Title for the selection panel.
        default: Index the cursor starts on.

    Returns:
        Zero-based index of the chosen label, or None if cancelled or if
        stdin is not a terminal.
    """
    if not labels:
        return None

    console = Console()
    selected_idx = min(max(default, 0), len(labels) - 1)

    def render() -> Panel:
        table = Table(show_header=False, box=None, padding=(0, 2), expand=True)
        table.add_column("", width=2)  # Selection indicator
        table.add_column("Host")

        for i, label in enumerate(labels):
            is_selected = i == selected_idx
            indicator = "[bold cyan]▸[/bold cyan]" if is_selected else " "
            style = "bold white on grey23" if is_selected else ""
            table.add_row(indicator, Text(label), style=style)

        help_text = Text()
        help_text.append("↑/↓", style="bold cyan")
        help_text.append(" navigate  ", style="dim")
        help_text.append("Enter", style="bold cyan")
        help_text.append(" select  ", style="dim")
        help_text.append("q/Esc", style="bold cyan")
        help_text.append(" cancel", style="dim")

        content = Table.grid(expand=True)
        content.add_row(table)
        content.add_row("")
        content.add_row(help_text)

        return Panel(
            content,
            title=f"[bold]{title}[/bold]",
            border_style="cyan",
            padding=(1, 2),
        )

    with Live(render(), console=console, refresh_per_second=30, transient=True) as live:
        while True:
            try:
                key = get_key()
            except (termios.error, OSError) as e:
                logger.debug("Cannot read keys from stdin: %s", e)
                return None

            if key in ("\x1b[A", "k"):  # Up arrow or k
                selected_idx = (selected_idx - 1) % len(labels)
            elif key in ("\x1b[B", "j"):  # Down arrow or j
                selected_idx = (selected_idx + 1) % len(labels)
            elif key in ("\r", "\n"):  # Enter
                return selected_idx
            elif key in ("q", "\x1b", "\x03"):  # q, Escape, Ctrl+C
                return None

            live.update(render())
