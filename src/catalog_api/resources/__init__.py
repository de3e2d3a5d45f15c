"""Response shapers."""

from .category import CategoryResource

__all__ = ["CategoryResource"]
