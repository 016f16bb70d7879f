"""LayoutService — snapshot loading, bounds checking, and bounds recomputation.

Every public method takes a snapshot path and returns a ServiceResult.
Expected failures (missing file, bad snapshot, inconsistent box) are
reported as ``ok=False`` results, never raised.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from treelayout.config.models import CheckConfig
from treelayout.domain.layout import Layout
from treelayout.infrastructure.snapshot import SnapshotError, read_snapshot, write_snapshot
from treelayout.services.result import (
    INCONSISTENT_BOUNDS,
    INVALID_SNAPSHOT,
    NOT_FOUND,
    ServiceResult,
)

logger = logging.getLogger(__name__)


class LayoutService:
    """Operations over layout snapshots on disk."""

    def __init__(self, check_config: CheckConfig | None = None) -> None:
        self._check = check_config or CheckConfig()

    # ------------------------------------------------------------------
    # Shared helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _load(path: Path, op: str) -> Layout | ServiceResult:
        """Read *path*, or return the failure result for *op*."""
        if not path.is_file():
            return ServiceResult.failure(
                op, NOT_FOUND, f"Snapshot '{path}' not found", path=str(path)
            )
        try:
            return read_snapshot(path)
        except SnapshotError as exc:
            logger.debug("Rejected snapshot %s", path, exc_info=True)
            return ServiceResult.failure(op, INVALID_SNAPSHOT, str(exc), path=str(path))

    # ------------------------------------------------------------------
    # check — verify the stored box against the positions
    # ------------------------------------------------------------------

    def check(self, path: Path) -> ServiceResult:
        """Check that the snapshot's bounding box bounds every vertex."""
        loaded = self._load(path, "check")
        if isinstance(loaded, ServiceResult):
            return loaded

        result = loaded.check_bounds(
            tolerance=self._check.tolerance,
            allow_non_finite=self._check.allow_non_finite,
        )
        logger.debug(
            "Checked %s: %d error(s), %d warning(s)",
            path,
            len(result.errors),
            len(result.warnings),
        )
        if not result.valid:
            return ServiceResult.failure(
                "check",
                INCONSISTENT_BOUNDS,
                f"{len(result.errors)} bounding-box issue(s) in '{path}'",
                warnings=result.warnings,
                errors=result.errors,
            )
        return ServiceResult(
            ok=True,
            op="check",
            data={"path": str(path), "size": loaded.size(), "valid": True},
            warnings=result.warnings,
        )

    # ------------------------------------------------------------------
    # bounds — compare stored and recomputed boxes
    # ------------------------------------------------------------------

    def bounds(self, path: Path, *, write: bool = False) -> ServiceResult:
        """Report the stored and recomputed bounding boxes.

        With *write*, the snapshot is rewritten with the recomputed box.
        A layout with no finite position has no recomputed box and is
        never rewritten.
        """
        loaded = self._load(path, "bounds")
        if isinstance(loaded, ServiceResult):
            return loaded

        warnings: list[str] = []
        recomputed = loaded.recompute_bounds()
        data: dict[str, Any] = {
            "path": str(path),
            "size": loaded.size(),
            "stored": loaded.bounds.model_dump(),
            "recomputed": recomputed.model_dump() if recomputed is not None else None,
            "matches": recomputed == loaded.bounds,
            "written": False,
        }

        if write:
            if recomputed is None:
                warnings.append("Layout has no finite positions to bound")
            elif not data["matches"]:
                updated = Layout.from_positions(loaded, bounds=recomputed)
                write_snapshot(updated, path)
                data["written"] = True
                logger.debug("Rewrote bounds of %s", path)

        return ServiceResult(ok=True, op="bounds", data=data, warnings=warnings)

    # ------------------------------------------------------------------
    # show — dump the box and every vertex
    # ------------------------------------------------------------------

    def show(self, path: Path) -> ServiceResult:
        """Return the stored box and the vertices in index order."""
        loaded = self._load(path, "show")
        if isinstance(loaded, ServiceResult):
            return loaded

        return ServiceResult(
            ok=True,
            op="show",
            data={
                "path": str(path),
                "size": loaded.size(),
                "bounds": loaded.bounds.model_dump(),
                "vertices": [
                    {"index": i, "depth": p.depth, "offset": p.offset}
                    for i, p in enumerate(loaded)
                ],
            },
        )
