"""Subcommand modules for treelayout.

Provides register_commands() which uses deferred imports to keep
``treelayout --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from treelayout.commands.bounds import bounds
    from treelayout.commands.check import check
    from treelayout.commands.show import show

    cli.add_command(check)
    cli.add_command(bounds)
    cli.add_command(show)
