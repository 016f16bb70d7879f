"""JSON snapshots of a Layout, for handing a layout to a renderer.

Document shape (version 1)::

    {
      "version": 1,
      "bounds": {"min_offset": 0.0, "max_offset": 10.0, "min_depth": 0.0, "max_depth": 2.0},
      "vertices": [{"depth": 0.0, "offset": 5.0}, ...]
    }

INVARIANT: The bounding box is carried verbatim. Loading a snapshot never
recomputes or corrects it.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, ValidationError

from treelayout.domain.layout import Layout
from treelayout.domain.position import BoundingBox

logger = logging.getLogger(__name__)

SNAPSHOT_VERSION = 1


class SnapshotError(ValueError):
    """Raised when a snapshot cannot be parsed or has an unsupported shape."""


class VertexRecord(BaseModel):
    """One vertex entry in a snapshot."""

    model_config = {"frozen": True, "ser_json_inf_nan": "constants"}

    depth: float
    offset: float


class LayoutSnapshot(BaseModel):
    """Serialized form of a :class:`Layout`."""

    model_config = {"frozen": True, "extra": "forbid"}

    version: Literal[1] = SNAPSHOT_VERSION
    bounds: BoundingBox = Field(default_factory=BoundingBox)
    vertices: list[VertexRecord] = Field(default_factory=list)

    @classmethod
    def from_layout(cls, layout: Layout) -> LayoutSnapshot:
        return cls(
            bounds=layout.bounds,
            vertices=[VertexRecord(depth=p.depth, offset=p.offset) for p in layout],
        )

    def to_layout(self) -> Layout:
        return Layout.from_positions(
            ((v.depth, v.offset) for v in self.vertices),
            bounds=self.bounds,
        )


# ---------------------------------------------------------------------------
# Text <-> Layout
# ---------------------------------------------------------------------------


def dump_snapshot(layout: Layout, *, indent: int | None = 2) -> str:
    """Serialize *layout* to a JSON snapshot string."""
    return LayoutSnapshot.from_layout(layout).model_dump_json(indent=indent)


def load_snapshot(text: str | bytes) -> Layout:
    """Parse a JSON snapshot into a new :class:`Layout`.

    Raises:
        SnapshotError: On malformed JSON, schema violations, or an
            unsupported ``version``.
    """
    try:
        snapshot = LayoutSnapshot.model_validate_json(text)
    except ValidationError as exc:
        msg = f"Invalid layout snapshot: {exc.error_count()} error(s); {_first_error(exc)}"
        raise SnapshotError(msg) from exc
    return snapshot.to_layout()


def _first_error(exc: ValidationError) -> str:
    err = exc.errors()[0]
    loc = ".".join(str(part) for part in err["loc"]) or "<root>"
    return f"{loc}: {err['msg']}"


# ---------------------------------------------------------------------------
# File I/O
# ---------------------------------------------------------------------------


def read_snapshot(path: Path) -> Layout:
    """Read a snapshot file into a :class:`Layout`.

    The raw bytes go straight to the JSON parser, so a file that is not
    valid UTF-8 surfaces as a :class:`SnapshotError` like any other
    malformed snapshot.
    """
    layout = load_snapshot(path.read_bytes())
    logger.debug("Read layout snapshot %s (%d vertices)", path, layout.size())
    return layout


def write_snapshot(layout: Layout, path: Path) -> None:
    """Write *layout* to *path* as a JSON snapshot.

    Creates parent directories if they don't exist.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dump_snapshot(layout) + "\n", encoding="utf-8")
    logger.debug("Wrote layout snapshot %s (%d vertices)", path, layout.size())
