"""Parent-linked binary tree nodes, with traversal, measurement, rendering and a demo."""

__version__ = "0.1.0"
__all__ = ["tree", "render", "demo"]