"""Layout — the per-vertex positions of a whole tree plus its bounding box.

A Layout is pre-sized scratch space filled in by a layout algorithm:

- The vertex count is fixed at construction; there is no insert, remove,
  or resize. The only mutation path is editing a slot in place through
  ``layout[index]``.
- The bounding box is supplied by the caller and stored verbatim. It is
  never derived from the positions unless the caller asks for it via
  :meth:`Layout.recompute_bounds`.

INVARIANT (caller-maintained): every position lies inside the stored box.
:meth:`Layout.check_bounds` verifies this on demand; nothing checks it
implicitly.
"""

from __future__ import annotations

import math
import operator
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from treelayout.domain.position import BoundingBox, VertexPosition


def _is_finite(position: VertexPosition) -> bool:
    return math.isfinite(position.depth) and math.isfinite(position.offset)


class LayoutIndexError(IndexError):
    """Raised when a vertex index falls outside ``[0, size)``."""

    def __init__(self, index: int, size: int) -> None:
        super().__init__(f"Vertex index {index} out of range for layout of size {size}")
        self.index = index
        self.size = size


@dataclass(frozen=True)
class ValidationResult:
    """Result of a layout consistency check."""

    valid: bool
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


class Layout:
    """Indexed vertex positions of a tree, with the tree's bounding box.

    Usage::

        layout = Layout(3, min_offset=0.0, max_offset=10.0, min_depth=0.0, max_depth=2.0)
        layout[0].depth, layout[0].offset = 0.0, 5.0
        layout[1].set_depth(1.0)
    """

    __slots__ = ("_positions", "_bounds")

    def __init__(
        self,
        size: int = 0,
        min_offset: float = 0.0,
        max_offset: float = 0.0,
        min_depth: float = 0.0,
        max_depth: float = 0.0,
    ) -> None:
        size = operator.index(size)
        if size < 0:
            msg = f"Layout size must be non-negative, got {size}"
            raise ValueError(msg)
        self._positions: tuple[VertexPosition, ...] = tuple(VertexPosition() for _ in range(size))
        self._bounds = BoundingBox(
            min_offset=min_offset,
            max_offset=max_offset,
            min_depth=min_depth,
            max_depth=max_depth,
        )

    @classmethod
    def from_positions(
        cls,
        positions: Iterable[VertexPosition | tuple[float, float]],
        bounds: BoundingBox | None = None,
    ) -> Layout:
        """Build a layout from ``(depth, offset)`` pairs or positions.

        Positions are copied into the new layout. When *bounds* is omitted
        the tight box around the finite positions is used (all zeros if
        there are none).
        """
        pairs = [p.as_tuple() if isinstance(p, VertexPosition) else p for p in positions]
        layout = cls(len(pairs))
        for slot, (depth, offset) in zip(layout._positions, pairs, strict=True):
            slot.depth = depth
            slot.offset = offset
        if bounds is None:
            bounds = layout.recompute_bounds() or BoundingBox()
        layout._bounds = bounds
        return layout

    # --- Indexed access ---

    def __getitem__(self, index: int) -> VertexPosition:
        """Return the stored position of vertex *index* (a live, mutable slot)."""
        index = operator.index(index)
        if not 0 <= index < len(self._positions):
            raise LayoutIndexError(index, len(self._positions))
        return self._positions[index]

    def __len__(self) -> int:
        return len(self._positions)

    def __iter__(self) -> Iterator[VertexPosition]:
        return iter(self._positions)

    def size(self) -> int:
        """Number of vertices, fixed at construction."""
        return len(self._positions)

    # --- Bounding box ---

    @property
    def bounds(self) -> BoundingBox:
        """The bounding box as supplied at construction."""
        return self._bounds

    @property
    def min_offset(self) -> float:
        """Left edge of the box when the tree is drawn top-down."""
        return self._bounds.min_offset

    @property
    def max_offset(self) -> float:
        """Right edge of the box when the tree is drawn top-down."""
        return self._bounds.max_offset

    @property
    def min_depth(self) -> float:
        """Top edge of the box when the tree is drawn top-down."""
        return self._bounds.min_depth

    @property
    def max_depth(self) -> float:
        """Bottom edge of the box when the tree is drawn top-down."""
        return self._bounds.max_depth

    def get_min_offset(self) -> float:
        return self._bounds.min_offset

    def get_max_offset(self) -> float:
        return self._bounds.max_offset

    def get_min_depth(self) -> float:
        return self._bounds.min_depth

    def get_max_depth(self) -> float:
        return self._bounds.max_depth

    @property
    def vertices(self) -> tuple[VertexPosition, ...]:
        """All positions in index order (the tuple is read-only, the slots are live)."""
        return self._positions

    def get_vertices(self) -> tuple[VertexPosition, ...]:
        return self._positions

    # --- Checks (never called implicitly) ---

    def recompute_bounds(self) -> BoundingBox | None:
        """Return the tight box around the finite positions.

        A position with a NaN or infinite coordinate is skipped entirely,
        matching :meth:`check_bounds`, so the result does not depend on
        vertex order. The stored box is left untouched. Returns None when
        no position is finite (including an empty layout).
        """
        finite = [p for p in self._positions if _is_finite(p)]
        if not finite:
            return None
        depths = [p.depth for p in finite]
        offsets = [p.offset for p in finite]
        return BoundingBox(
            min_offset=min(offsets),
            max_offset=max(offsets),
            min_depth=min(depths),
            max_depth=max(depths),
        )

    def check_bounds(
        self,
        *,
        tolerance: float = 0.0,
        allow_non_finite: bool = False,
    ) -> ValidationResult:
        """Verify that the stored box is well-formed and bounds every position.

        Args:
            tolerance: Slack allowed on every edge of the box.
            allow_non_finite: Downgrade NaN/inf coordinates from errors to
                warnings. Such positions are not compared against the box.
        """
        errors: list[str] = []
        warnings: list[str] = []
        box = self._bounds

        for axis in box.inverted_axes():
            low = getattr(box, f"min_{axis}")
            high = getattr(box, f"max_{axis}")
            errors.append(f"Inverted {axis} range: min {low} > max {high}")

        for index, position in enumerate(self._positions):
            if not _is_finite(position):
                msg = f"Vertex {index} has non-finite position {position.as_tuple()}"
                (warnings if allow_non_finite else errors).append(msg)
                continue
            if not box.contains(position, tolerance=tolerance):
                errors.append(f"Vertex {index} at {position.as_tuple()} lies outside the box")

        return ValidationResult(valid=not errors, errors=errors, warnings=warnings)

    # --- Dunder helpers ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Layout):
            return NotImplemented
        return self._bounds == other._bounds and self._positions == other._positions

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        box = self._bounds
        return (
            f"Layout(size={len(self._positions)}, "
            f"offset=[{box.min_offset}, {box.max_offset}], "
            f"depth=[{box.min_depth}, {box.max_depth}])"
        )
