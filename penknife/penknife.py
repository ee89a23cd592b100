"""
Penknife Main Module.

This module serves as the console entry point for Penknife, a small template
expander with conditionals and nested loops.

Features:
- Runs the Click command group
- Handles graceful termination on user interruption

Examples:
    Render a template with JSON data:
        $ penknife render report.tpl --data report.json

    Render from stdin with inline values:
        $ echo "Hello {{name}}" | penknife render - --set name=world

    Use alternative markers:
        $ penknife render page.tpl -t open='<%' -t close='%>'

    Show the effective markers:
        $ penknife tokens
"""

import signal
import sys
from types import FrameType
from typing import Final, Optional
from rich.console import Console
from penknife.commands.app import cli

__version__: Final[str] = "0.1.0"

console: Final[Console] = Console(stderr=True)


def signal_handle(sig: int, frame: Optional[FrameType]) -> None:
    """Signal handler for graceful interruption.

    Args:
        sig: Signal number
        frame: Current stack frame
    """
    console.print("\n[bold cyan]Interrupted. Exiting.[/bold cyan]")
    sys.exit(130)


def main() -> None:
    """Main entry point for the penknife console script."""
    signal.signal(signal.SIGINT, signal_handle)
    cli(prog_name="penknife")


if __name__ == "__main__":
    main()
