"""SQLModel implementation of the category store."""

from __future__ import annotations

from typing import Any, Callable, ContextManager, Mapping, Optional

from sqlalchemy import func
from sqlmodel import Session, select

from ...domain.pagination import DEFAULT_PER_PAGE, MAX_PER_PAGE, Page, PageRequest
from ...errors import CategoryNotFoundError
from ...logging_config import get_logger
from ...models.category import ACTIVE_STATUS, INTEGER_MAX, INTEGER_MIN, Category, utcnow
from .base import creation_values, update_values

logger = get_logger("stores.sqlmodel")


class SQLModelCategoryStore:
    """SQLModel-based category store implementation."""

    def __init__(
        self,
        session_factory: Callable[[], ContextManager[Session]],
        *,
        default_per_page: int = DEFAULT_PER_PAGE,
        max_per_page: int = MAX_PER_PAGE,
    ):
        """Initialize with a session factory and pagination bounds."""
        self.session_factory = session_factory
        self.default_per_page = default_per_page
        self.max_per_page = max_per_page

    def find_all(self) -> list[Category]:
        with self.session_factory() as session:
            rows = list(session.exec(select(Category).order_by(Category.id)).all())
            session.expunge_all()
            return rows

    def find_all_paged(self, per_page: Optional[int] = None, page: int = 1) -> Page[Category]:
        """Return one page of categories ordered by id, plus the total count."""
        request = PageRequest.build(
            per_page,
            page,
            default_per_page=self.default_per_page,
            max_per_page=self.max_per_page,
        )
        with self.session_factory() as session:
            total = session.exec(select(func.count()).select_from(Category)).one()
            statement = (
                select(Category)
                .order_by(Category.id)
                .offset(request.offset)
                .limit(request.per_page)
            )
            rows = list(session.exec(statement).all())
            session.expunge_all()
        return Page(items=rows, page=request.page, per_page=request.per_page, total=int(total or 0))

    def find_all_active(self) -> list[Category]:
        with self.session_factory() as session:
            statement = (
                select(Category)
                .where(Category.status == ACTIVE_STATUS)
                .order_by(Category.id)
            )
            rows = list(session.exec(statement).all())
            session.expunge_all()
            return rows

    def find_by_id(self, category_id: int) -> Category:
        with self.session_factory() as session:
            obj = self._get(session, category_id)
            if obj is None:
                raise CategoryNotFoundError(category_id)
            session.expunge(obj)
            return obj

    def create(self, attributes: Mapping[str, Any]) -> Category:
        with self.session_factory() as session:
            category = Category(**creation_values(attributes))
            session.add(category)
            session.commit()
            session.refresh(category)
            session.expunge(category)
        logger.info("Category created", extra={"category_id": category.id})
        return category

    def update(self, category_id: int, attributes: Mapping[str, Any]) -> Category:
        """Merge supplied attributes; fields not present keep their stored values."""
        changes = update_values(attributes)
        with self.session_factory() as session:
            category = self._get(session, category_id)
            if category is None:
                raise CategoryNotFoundError(category_id)
            for key, value in changes.items():
                setattr(category, key, value)
            category.updated_at = utcnow()
            session.add(category)
            session.commit()
            session.refresh(category)
            session.expunge(category)
        logger.info(
            "Category updated",
            extra={"category_id": category_id, "fields": sorted(changes)},
        )
        return category

    def delete(self, category_id: int) -> None:
        with self.session_factory() as session:
            category = self._get(session, category_id)
            if category is None:
                return
            session.delete(category)
            session.commit()
        logger.info("Category deleted", extra={"category_id": category_id})

    @staticmethod
    def _get(session: Session, category_id: int) -> Optional[Category]:
        # ids outside the INTEGER column range cannot be bound, so they never match
        if not INTEGER_MIN <= category_id <= INTEGER_MAX:
            return None
        return session.get(Category, category_id)
