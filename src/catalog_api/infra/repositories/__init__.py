"""Concrete repository implementations."""

from .category import StoreCategoryRepository

__all__ = ["StoreCategoryRepository"]
