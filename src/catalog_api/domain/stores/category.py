"""Category store protocol."""

from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol

from ...models.category import Category
from ..pagination import Page


class CategoryStore(Protocol):
    """Persistence for canonical category records.

    Lookups and updates on a missing id raise ``CategoryNotFoundError``;
    deleting a missing id is a no-op.
    """

    def find_all(self) -> list[Category]:
        """List every category ordered by id."""
        ...

    def find_all_paged(self, per_page: Optional[int] = None, page: int = 1) -> Page[Category]:
        """Return one page of categories plus the total count."""
        ...

    def find_all_active(self) -> list[Category]:
        """List categories whose status is active."""
        ...

    def find_by_id(self, category_id: int) -> Category:
        """Retrieve a category by ID."""
        ...

    def create(self, attributes: Mapping[str, Any]) -> Category:
        """Persist a new category and return it with its assigned id."""
        ...

    def update(self, category_id: int, attributes: Mapping[str, Any]) -> Category:
        """Merge ``attributes`` into an existing category."""
        ...

    def delete(self, category_id: int) -> None:
        """Delete a category by ID."""
        ...
