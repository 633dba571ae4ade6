"""Linked binary tree nodes with traversals, measurements and an ASCII renderer."""

__version__ = "0.1.0"
__all__ = ["demo", "node", "render"]