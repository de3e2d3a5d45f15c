"""Tests for category payload validation."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from catalog_api.blueprints.categories.forms import (
    CategoryForm,
    CategoryUpdateForm,
    load_category_form,
    validation_errors,
)


def _errors(data, *, partial=False) -> dict[str, list[str]]:
    with pytest.raises(ValidationError) as excinfo:
        load_category_form(data, partial=partial)
    return validation_errors(excinfo.value)


def test_valid_create_payload():
    form = load_category_form({"name": "  Books ", "status": 1})

    assert isinstance(form, CategoryForm)
    assert form.attributes() == {"name": "Books", "status": 1}


def test_create_leaves_status_to_the_store_when_omitted():
    form = load_category_form({"name": "Books"})

    assert form.status == 1
    assert form.attributes() == {"name": "Books"}


def test_create_requires_name():
    errors = _errors({"status": 1})

    assert list(errors) == ["name"]
    assert errors["name"] == ["Field required"]


def test_partial_payload_only_returns_supplied_fields():
    form = load_category_form({"status": 0}, partial=True)

    assert isinstance(form, CategoryUpdateForm)
    assert form.attributes() == {"status": 0}


def test_empty_partial_payload_is_valid():
    assert load_category_form({}, partial=True).attributes() == {}


@pytest.mark.parametrize("name", ["", "   ", 42, None, "x" * 256])
@pytest.mark.parametrize("partial", [False, True])
def test_invalid_names(name, partial):
    assert "name" in _errors({"name": name}, partial=partial)


@pytest.mark.parametrize("status", ["1", 1.5, True, None])
def test_invalid_status(status):
    errors = _errors({"name": "Books", "status": status})

    assert list(errors) == ["status"]


@pytest.mark.parametrize("status", [2**63, -(2**63) - 1, 2**70])
def test_status_outside_integer_column_range(status):
    assert list(_errors({"name": "Books", "status": status})) == ["status"]


def test_status_at_integer_column_bounds():
    assert load_category_form({"name": "Books", "status": 2**63 - 1}).status == 2**63 - 1
    assert load_category_form({"name": "Books", "status": -(2**63)}).status == -(2**63)


def test_unknown_and_read_only_fields_are_rejected():
    errors = _errors({"name": "Books", "id": 5, "colour": "red"})

    assert set(errors) == {"colour", "id"}


def test_errors_are_collected_per_field():
    errors = _errors({"status": "on", "id": 3})

    assert set(errors) == {"id", "name", "status"}
    assert all(isinstance(messages, list) and messages for messages in errors.values())
