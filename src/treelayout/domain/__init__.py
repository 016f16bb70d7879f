"""Domain layer — vertex positions, bounding boxes, and layouts.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""

from treelayout.domain.layout import Layout, LayoutIndexError, ValidationResult
from treelayout.domain.position import BoundingBox, VertexPosition

__all__ = [
    "BoundingBox",
    "Layout",
    "LayoutIndexError",
    "ValidationResult",
    "VertexPosition",
]
