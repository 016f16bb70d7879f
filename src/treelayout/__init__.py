"""treelayout — vertex positions and bounding boxes for laid-out trees."""

__version__ = "0.1.0"
