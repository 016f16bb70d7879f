"""Shared Click building blocks: --examples support and the SNAPSHOT argument.

When ``--examples`` is passed, the command prints usage examples and exits.
This keeps ``--help`` concise while making examples available on demand.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import click


def _add_examples_option(cmd: click.Command, examples: str) -> None:
    """Attach an eager ``--examples`` flag to a Click command."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


class LayoutCommand(click.Command):
    """Click Command subclass that supports an ``--examples`` flag."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


def snapshot_argument(func: Callable[..., Any]) -> Callable[..., Any]:
    """Attach the positional SNAPSHOT path shared by every layout command.

    Existence is not checked here; LayoutService reports a missing file as
    a ``NOT_FOUND`` result so it follows the normal output and exit-code path.
    """
    return click.argument(
        "snapshot",
        type=click.Path(dir_okay=False, path_type=Path),
    )(func)
