"""In-memory category store used for tests and ``CATALOG_STORE=memory``."""

from __future__ import annotations

import threading
from typing import Any, Mapping, Optional

from ...domain.pagination import DEFAULT_PER_PAGE, MAX_PER_PAGE, Page, PageRequest, paginate
from ...errors import CategoryNotFoundError
from ...logging_config import get_logger
from ...models.category import ACTIVE_STATUS, Category, utcnow
from .base import creation_values, update_values

logger = get_logger("stores.memory")


class InMemoryCategoryStore:
    """Dict-backed store; hands out copies so callers never mutate canonical records."""

    def __init__(
        self,
        *,
        default_per_page: int = DEFAULT_PER_PAGE,
        max_per_page: int = MAX_PER_PAGE,
    ) -> None:
        self.default_per_page = default_per_page
        self.max_per_page = max_per_page
        self._records: dict[int, Category] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def find_all(self) -> list[Category]:
        with self._lock:
            return [self._copy(self._records[key]) for key in sorted(self._records)]

    def find_all_paged(self, per_page: Optional[int] = None, page: int = 1) -> Page[Category]:
        request = PageRequest.build(
            per_page,
            page,
            default_per_page=self.default_per_page,
            max_per_page=self.max_per_page,
        )
        return paginate(self.find_all(), request)

    def find_all_active(self) -> list[Category]:
        return [category for category in self.find_all() if category.status == ACTIVE_STATUS]

    def find_by_id(self, category_id: int) -> Category:
        with self._lock:
            record = self._records.get(category_id)
            if record is None:
                raise CategoryNotFoundError(category_id)
            return self._copy(record)

    def create(self, attributes: Mapping[str, Any]) -> Category:
        values = creation_values(attributes)
        with self._lock:
            # ids are never reused, even after deletes
            category = Category(id=self._next_id, **values)
            self._next_id += 1
            self._records[category.id] = category
            created = self._copy(category)
        logger.info("Category created", extra={"category_id": created.id})
        return created

    def update(self, category_id: int, attributes: Mapping[str, Any]) -> Category:
        changes = update_values(attributes)
        with self._lock:
            record = self._records.get(category_id)
            if record is None:
                raise CategoryNotFoundError(category_id)
            for key, value in changes.items():
                setattr(record, key, value)
            record.updated_at = utcnow()
            updated = self._copy(record)
        logger.info(
            "Category updated",
            extra={"category_id": category_id, "fields": sorted(changes)},
        )
        return updated

    def delete(self, category_id: int) -> None:
        with self._lock:
            removed = self._records.pop(category_id, None)
        if removed is not None:
            logger.info("Category deleted", extra={"category_id": category_id})

    @staticmethod
    def _copy(category: Category) -> Category:
        return Category(
            id=category.id,
            name=category.name,
            status=category.status,
            created_at=category.created_at,
            updated_at=category.updated_at,
        )
