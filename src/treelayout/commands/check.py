"""Command: verify a layout snapshot's bounding box."""

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
  treelayout check layout.json
  treelayout --json check layout.json
  TREELAYOUT_CHECK__TOLERANCE=0.01 treelayout check layout.json""",
)
@snapshot_argument
@click.pass_obj
def check(app: AppContext, snapshot: Path) -> None:
    """Check that the bounding box of SNAPSHOT bounds every vertex."""
    app.emit(app.service.check(snapshot))
