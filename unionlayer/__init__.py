"""Two-layer directory union with copy-on-write and whiteout markers."""

__version__ = "0.1.0"
__all__ = ["cow", "operations", "paths"]