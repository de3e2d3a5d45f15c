"""SQLModel table exports."""

from .category import ACTIVE_STATUS, FILLABLE_FIELDS, Category

__all__ = ["ACTIVE_STATUS", "FILLABLE_FIELDS", "Category"]
