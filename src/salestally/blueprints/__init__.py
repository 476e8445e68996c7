"""Blueprint exports."""

from . import sales

__all__ = ["sales"]
