"""Repository protocol definitions for domain layer."""

from .category import CategoryRepository

__all__ = ["CategoryRepository"]
