"""Vertex coordinates and the bounding box that summarizes them.

If the root of the tree is drawn on top, positive depth is down and
positive offset is right.
"""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel


@dataclass(eq=True, slots=True)
class VertexPosition:
    """The (depth, offset) position of one vertex in a tree.

    No range checking is performed: NaN and infinities are stored as given.
    The zero defaults carry no meaning; a layout pass is expected to
    overwrite them.
    """

    depth: float = 0.0
    offset: float = 0.0

    def get_depth(self) -> float:
        return self.depth

    def get_offset(self) -> float:
        return self.offset

    def set_depth(self, value: float) -> None:
        self.depth = value

    def set_offset(self, value: float) -> None:
        self.offset = value

    def as_tuple(self) -> tuple[float, float]:
        """Return ``(depth, offset)``."""
        return (self.depth, self.offset)


class BoundingBox(BaseModel):
    """Extent of a layout along both axes.

    Values are stored verbatim; an inverted box (``min > max``) is
    representable and only reported by :meth:`Layout.check_bounds`.
    """

    model_config = {"frozen": True, "ser_json_inf_nan": "constants"}

    min_offset: float = 0.0
    max_offset: float = 0.0
    min_depth: float = 0.0
    max_depth: float = 0.0

    @property
    def width(self) -> float:
        return self.max_offset - self.min_offset

    @property
    def height(self) -> float:
        return self.max_depth - self.min_depth

    def inverted_axes(self) -> list[str]:
        """Names of the axes whose minimum exceeds their maximum."""
        axes: list[str] = []
        if self.min_offset > self.max_offset:
            axes.append("offset")
        if self.min_depth > self.max_depth:
            axes.append("depth")
        return axes

    def is_inverted(self) -> bool:
        return bool(self.inverted_axes())

    def contains(self, position: VertexPosition, *, tolerance: float = 0.0) -> bool:
        """Check whether *position* lies inside the box, widened by *tolerance*."""
        return (
            self.min_depth - tolerance <= position.depth <= self.max_depth + tolerance
            and self.min_offset - tolerance <= position.offset <= self.max_offset + tolerance
        )
