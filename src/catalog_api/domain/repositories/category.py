"""Category repository protocol."""

from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol

from ...models.category import Category
from ..pagination import Page


class CategoryRepository(Protocol):
    """Repository the HTTP layer talks to; never exposes the storage technology."""

    def find_all(self) -> list[Category]:
        """List all categories."""
        ...

    def find_all_paged(self, per_page: Optional[int] = None, page: int = 1) -> Page[Category]:
        """List categories one page at a time."""
        ...

    def find_all_active(self) -> list[Category]:
        """List active categories."""
        ...

    def find_by_id(self, category_id: int) -> Category:
        """Retrieve a category by ID."""
        ...

    def create(self, attributes: Mapping[str, Any]) -> Category:
        """Create a new category."""
        ...

    def update(self, category_id: int, attributes: Mapping[str, Any]) -> Category:
        """Partially update an existing category."""
        ...

    def delete(self, category_id: int) -> None:
        """Delete a category by ID."""
        ...
