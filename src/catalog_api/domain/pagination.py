"""Page container and pagination helpers shared by every store."""

from __future__ import annotations

from dataclasses import dataclass
from math import ceil
from typing import Generic, Optional, Sequence, TypeVar

T = TypeVar("T")

DEFAULT_PER_PAGE = 10
MAX_PER_PAGE = 100


@dataclass(frozen=True, slots=True)
class PageRequest:
    """Sanitized pagination parameters."""

    page: int = 1
    per_page: int = DEFAULT_PER_PAGE

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.per_page

    @classmethod
    def build(
        cls,
        per_page: Optional[int] = None,
        page: Optional[int] = None,
        *,
        default_per_page: int = DEFAULT_PER_PAGE,
        max_per_page: int = MAX_PER_PAGE,
    ) -> "PageRequest":
        """Clamp raw values: ``per_page`` into ``[1, max_per_page]``, ``page`` to ``>= 1``."""

        size = default_per_page if per_page is None else per_page
        sanitized_per_page = max(min(size, max_per_page), 1)
        sanitized_page = max(page or 1, 1)
        return cls(page=sanitized_page, per_page=sanitized_per_page)


@dataclass(frozen=True, slots=True)
class Page(Generic[T]):
    """A bounded slice of a listing plus pagination metadata."""

    items: Sequence[T]
    page: int
    per_page: int
    total: int

    @property
    def last_page(self) -> int:
        """Return the number of the final page; an empty listing still has page 1."""

        if self.total == 0:
            return 1
        return ceil(self.total / self.per_page)


def paginate(items: Sequence[T], request: PageRequest) -> Page[T]:
    """Slice an in-memory sequence into a :class:`Page`."""

    start = request.offset
    end = start + request.per_page
    return Page(
        items=list(items[start:end]),
        page=request.page,
        per_page=request.per_page,
        total=len(items),
    )


__all__ = ["DEFAULT_PER_PAGE", "MAX_PER_PAGE", "Page", "PageRequest", "paginate"]
