"""Category form definitions."""

from __future__ import annotations

from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, ValidationError

from ...models.category import ACTIVE_STATUS, INTEGER_MAX, INTEGER_MIN, NAME_MAX_LENGTH


class CategoryForm(BaseModel):
    """Form model for creating a category."""

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    name: StrictStr = Field(
        description="Display name of the category",
        min_length=1,
        max_length=NAME_MAX_LENGTH,
    )
    status: StrictInt = Field(
        default=ACTIVE_STATUS,
        ge=INTEGER_MIN,
        le=INTEGER_MAX,
        description="Integer status flag; 1 marks the category active",
    )

    def attributes(self) -> dict[str, Any]:
        """Return only the fields the client supplied."""

        return self.model_dump(exclude_unset=True)


class CategoryUpdateForm(CategoryForm):
    """Form model for partial updates; every field is optional."""

    name: StrictStr = Field(
        default="",
        description="Display name of the category",
        min_length=1,
        max_length=NAME_MAX_LENGTH,
    )


def validation_errors(exc: ValidationError) -> dict[str, list[str]]:
    """Group pydantic errors by top-level field name."""

    structured: dict[str, list[str]] = {}
    for error in exc.errors(include_url=False):
        loc = error.get("loc", ())
        key = str(loc[0]) if loc else "__root__"
        structured.setdefault(key, []).append(error.get("msg", "Invalid value"))
    return structured


def load_category_form(data: Mapping[str, Any], *, partial: bool = False) -> CategoryForm:
    """Validate request data with the create or update form."""

    form_cls = CategoryUpdateForm if partial else CategoryForm
    return form_cls.model_validate(dict(data))


__all__ = ["CategoryForm", "CategoryUpdateForm", "load_category_form", "validation_errors"]
