"""CLI package for exactlin tools."""

__all__ = [
    "render",
    "solve",
]
