"""External representation of categories."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Iterable

from ..domain.pagination import Page
from ..models.category import Category


def _isoformat(value: datetime | None) -> str | None:
    """Render timestamps in UTC; SQLite hands stored values back without tzinfo."""

    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat()


class CategoryResource:
    """Maps stored categories to the JSON shape returned by the API."""

    @staticmethod
    def to_dict(category: Category) -> dict[str, Any]:
        return {
            "id": category.id,
            "name": category.name,
            "status": category.status,
            "created_at": _isoformat(category.created_at),
            "updated_at": _isoformat(category.updated_at),
        }

    @classmethod
    def collection(cls, categories: Iterable[Category]) -> list[dict[str, Any]]:
        return [cls.to_dict(category) for category in categories]

    @staticmethod
    def pagination_meta(page: Page[Category]) -> dict[str, int]:
        return {
            "current_page": page.page,
            "last_page": page.last_page,
            "per_page": page.per_page,
            "total": page.total,
        }


__all__ = ["CategoryResource"]
