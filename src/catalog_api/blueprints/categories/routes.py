"""Category routes."""

from __future__ import annotations

from flask import request

from ...extensions import get_repository
from . import bp
from .controller import CategoryController


def _controller() -> CategoryController:
    return CategoryController(get_repository())


@bp.get("", strict_slashes=False)
def list_categories():
    """List categories, paginated unless asked otherwise."""

    return _controller().list(request.args)


@bp.post("", strict_slashes=False)
def create_category():
    """Create a category from the JSON body."""

    return _controller().create(request.get_json(silent=True))


@bp.get("/<int:category_id>")
def show_category(category_id: int):
    return _controller().show(category_id)


@bp.route("/<int:category_id>", methods=["PUT", "PATCH"])
def update_category(category_id: int):
    """Apply a partial update; PUT and PATCH behave the same."""

    return _controller().update(category_id, request.get_json(silent=True))


@bp.delete("/<int:category_id>")
def delete_category(category_id: int):
    return _controller().delete(category_id)
