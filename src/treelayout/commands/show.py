"""Command: print a layout snapshot."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from treelayout.commands._base import LayoutCommand, snapshot_argument

if TYPE_CHECKING:
    from treelayout.commands._context import AppContext


@click.command(
    cls=LayoutCommand,
    examples="""\
  treelayout show layout.json
  treelayout --json show layout.json""",
)
@snapshot_argument
@click.pass_obj
def show(app: AppContext, snapshot: Path) -> None:
    """Print the bounding box and vertex positions of SNAPSHOT."""
    app.emit(app.service.show(snapshot))
