"""Store protocol definitions for domain layer."""

from .category import CategoryStore

__all__ = ["CategoryStore"]
