"""Domain exceptions and their JSON rendering."""

from __future__ import annotations

from typing import Any, Mapping

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from .logging_config import get_logger

logger = get_logger("errors")


class CatalogError(Exception):
    """Base class for errors surfaced to API clients."""

    status_code = 500
    error = "internal_error"

    def __init__(self, message: str, *, details: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = dict(details or {})

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"error": self.error, "message": self.message}
        if self.details:
            payload["details"] = self.details
        return payload


class CategoryNotFoundError(CatalogError, LookupError):
    """Raised when no category matches the requested id."""

    status_code = 404
    error = "not_found"

    def __init__(self, category_id: Any) -> None:
        super().__init__(f"Category {category_id} was not found")
        self.category_id = category_id


class ValidationError(CatalogError, ValueError):
    """Raised when a request payload does not describe valid category attributes."""

    status_code = 422
    error = "validation_failed"


class InvalidQueryError(CatalogError, ValueError):
    """Raised for malformed query-string parameters."""

    status_code = 400
    error = "invalid_query"


class InvalidJSONError(CatalogError, ValueError):
    """Raised when the request body is not a JSON object."""

    status_code = 400
    error = "invalid_json"


def register_error_handlers(app: Flask) -> None:
    """Render catalog and HTTP errors as JSON envelopes."""

    @app.errorhandler(CatalogError)
    def _handle_catalog_error(exc: CatalogError):
        logger.warning(
            "Request failed",
            extra={"error": exc.error, "status_code": exc.status_code, "detail": exc.message},
        )
        return jsonify(exc.to_dict()), exc.status_code

    @app.errorhandler(HTTPException)
    def _handle_http_error(exc: HTTPException):
        code = exc.code or 500
        error = (exc.name or "error").lower().replace(" ", "_")
        # keep protocol headers such as Allow on 405
        headers = [
            (name, value)
            for name, value in exc.get_headers()
            if name.lower() != "content-type"
        ]
        return jsonify({"error": error, "message": exc.description}), code, headers


__all__ = [
    "CatalogError",
    "CategoryNotFoundError",
    "InvalidJSONError",
    "InvalidQueryError",
    "ValidationError",
    "register_error_handlers",
]
