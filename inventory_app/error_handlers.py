"""Centralized error handlers.

Browsers get the error page; clients that ask for JSON get the
`{"success": false, ...}` envelope.
"""

from __future__ import annotations

import logging
from typing import Any

from flask import Flask, render_template, request
from pymongo.errors import PyMongoError
from werkzeug.exceptions import HTTPException

from inventory_app.errors import AppError
from inventory_app.utils.responses import fail

logger = logging.getLogger(__name__)


def _wants_json() -> bool:
    best = request.accept_mimetypes.best_match(["text/html", "application/json"])
    return best == "application/json"


def _error_response(code: str, message: str, status_code: int, details: Any | None = None):
    if _wants_json():
        return fail(code, message, status_code, details)
    return (
        render_template("error.html", title=message, message=message, status=status_code),
        status_code,
    )


def register_error_handlers(app: Flask) -> None:
    """Register error handlers for the Flask app."""

    @app.errorhandler(AppError)
    def _handle_app_error(exc: AppError):
        return _error_response(exc.code, exc.message, exc.status_code, exc.details)

    @app.errorhandler(HTTPException)
    def _handle_http_exception(exc: HTTPException):
        status = int(getattr(exc, "code", 500) or 500)
        if status == 404:
            return _error_response("not_found", "Not found", 404)
        if status == 429:
            return _error_response("rate_limited", "Too many requests, please try again later", 429)

        return _error_response(
            "http_error",
            getattr(exc, "description", "HTTP error"),
            status,
            details={"name": getattr(exc, "name", "HTTPException")},
        )

    @app.errorhandler(PyMongoError)
    def _handle_store_error(exc: PyMongoError):
        logger.exception("Document store failure")
        return _error_response("store_error", "Internal server error", 500)

    @app.errorhandler(Exception)
    def _handle_unexpected(exc: Exception):
        logger.exception("Unhandled exception")
        return _error_response("internal_error", "Internal server error", 500)
