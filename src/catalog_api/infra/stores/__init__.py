"""Concrete category store implementations."""

from .category import SQLModelCategoryStore
from .memory import InMemoryCategoryStore

__all__ = ["InMemoryCategoryStore", "SQLModelCategoryStore"]
