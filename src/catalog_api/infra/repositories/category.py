"""Store-backed implementation of the category repository."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from ...domain.pagination import Page
from ...domain.stores.category import CategoryStore
from ...models.category import Category


class StoreCategoryRepository:
    """Stateless facade forwarding every call to a :class:`CategoryStore`."""

    def __init__(self, store: CategoryStore):
        self.store = store

    def find_all(self) -> list[Category]:
        return self.store.find_all()

    def find_all_paged(self, per_page: Optional[int] = None, page: int = 1) -> Page[Category]:
        return self.store.find_all_paged(per_page=per_page, page=page)

    def find_all_active(self) -> list[Category]:
        return self.store.find_all_active()

    def find_by_id(self, category_id: int) -> Category:
        return self.store.find_by_id(category_id)

    def create(self, attributes: Mapping[str, Any]) -> Category:
        return self.store.create(attributes)

    def update(self, category_id: int, attributes: Mapping[str, Any]) -> Category:
        return self.store.update(category_id, attributes)

    def delete(self, category_id: int) -> None:
        self.store.delete(category_id)
