"""Attribute handling shared by the store implementations."""

from __future__ import annotations

from typing import Any, Mapping

from ...errors import ValidationError
from ...models.category import FILLABLE_FIELDS


def fillable(attributes: Mapping[str, Any]) -> dict[str, Any]:
    """Keep only caller-assignable attributes."""

    return {key: value for key, value in attributes.items() if key in FILLABLE_FIELDS}


def _require_name() -> ValidationError:
    return ValidationError(
        "Category attributes are invalid",
        details={"name": "This field is required."},
    )


def creation_values(attributes: Mapping[str, Any]) -> dict[str, Any]:
    """Return fillable attributes for a new record; ``name`` is mandatory."""

    values = fillable(attributes)
    if not values.get("name"):
        raise _require_name()
    return values


def update_values(attributes: Mapping[str, Any]) -> dict[str, Any]:
    """Return fillable attributes for a merge; a supplied ``name`` may not be blank."""

    values = fillable(attributes)
    if "name" in values and not values["name"]:
        raise _require_name()
    return values
