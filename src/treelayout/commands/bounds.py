"""Command: compare stored and recomputed bounding boxes."""

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
  treelayout bounds layout.json
  treelayout bounds layout.json --write""",
)
@snapshot_argument
@click.option("--write", is_flag=True, help="Rewrite SNAPSHOT with the recomputed box.")
@click.pass_obj
def bounds(app: AppContext, snapshot: Path, write: bool) -> None:
    """Report the stored and recomputed bounding boxes of SNAPSHOT."""
    app.emit(app.service.bounds(snapshot, write=write))
