"""HTTP-facing orchestration for the categories resource."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional

from flask import Response, jsonify, make_response
from pydantic import ValidationError as FormValidationError

from ...domain.repositories.category import CategoryRepository
from ...errors import InvalidJSONError, InvalidQueryError, ValidationError
from ...resources.category import CategoryResource
from .forms import CategoryForm, load_category_form, validation_errors

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _query_int(query: Mapping[str, Any], name: str) -> Optional[int]:
    raw = query.get(name)
    if raw is None or str(raw).strip() == "":
        return None
    try:
        return int(str(raw).strip())
    except ValueError as exc:
        raise InvalidQueryError(f"Query parameter '{name}' must be an integer") from exc


def _query_flag(query: Mapping[str, Any], name: str, default: bool) -> bool:
    raw = query.get(name)
    if raw is None or str(raw).strip() == "":
        return default
    value = str(raw).strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise InvalidQueryError(f"Query parameter '{name}' must be a boolean flag")


class CategoryController:
    """Parses requests, calls the repository, and shapes JSON responses."""

    def __init__(self, repository: CategoryRepository, resource: type[CategoryResource] = CategoryResource):
        self.repository = repository
        self.resource = resource

    def list(self, query: Mapping[str, Any]) -> Response:
        """List categories.

        ``active=1`` returns only active categories and ``paginate=0`` the full
        listing, both without ``meta``. Otherwise the listing is paginated by
        ``per_page`` and ``page``, with the store's default page size.
        """
        if _query_flag(query, "active", default=False):
            return jsonify({"data": self.resource.collection(self.repository.find_all_active())})

        if not _query_flag(query, "paginate", default=True):
            return jsonify({"data": self.resource.collection(self.repository.find_all())})

        per_page = _query_int(query, "per_page")
        page_number = _query_int(query, "page") or 1
        page = self.repository.find_all_paged(per_page=per_page, page=page_number)
        return jsonify(
            {
                "data": self.resource.collection(page.items),
                "meta": self.resource.pagination_meta(page),
            }
        )

    def create(self, body: Any) -> Response:
        form = self._validated_form(body, partial=False)
        category = self.repository.create(form.attributes())
        return make_response(jsonify({"data": self.resource.to_dict(category)}), 201)

    def show(self, category_id: int) -> Response:
        category = self.repository.find_by_id(category_id)
        return jsonify({"data": self.resource.to_dict(category)})

    def update(self, category_id: int, body: Any) -> Response:
        form = self._validated_form(body, partial=True)
        category = self.repository.update(category_id, form.attributes())
        return jsonify({"data": self.resource.to_dict(category)})

    def delete(self, category_id: int) -> Response:
        """Delete when an id is given; 204 whether or not the record existed."""
        if category_id:
            self.repository.delete(category_id)
        return make_response("", 204)

    @staticmethod
    def _validated_form(body: Any, *, partial: bool) -> CategoryForm:
        if not isinstance(body, Mapping):
            raise InvalidJSONError("Request body must be a JSON object")
        try:
            return load_category_form(body, partial=partial)
        except FormValidationError as exc:
            raise ValidationError(
                "Category attributes are invalid", details=validation_errors(exc)
            ) from exc
