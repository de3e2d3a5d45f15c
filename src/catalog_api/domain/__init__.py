"""Domain layer: protocols and value objects independent of storage."""

from .pagination import Page, PageRequest
from .repositories import CategoryRepository
from .stores import CategoryStore

__all__ = ["CategoryRepository", "CategoryStore", "Page", "PageRequest"]
