"""JSON envelope shared by the health check and JSON error responses."""

from __future__ import annotations

from typing import Any

from flask import Response, jsonify


def envelope(data: Any = None, error: dict[str, Any] | None = None) -> dict[str, Any]:
    return {"success": error is None, "data": data, "error": error}


def ok(data: Any, status_code: int = 200) -> tuple[Response, int]:
    return jsonify(envelope(data=data)), status_code


def fail(code: str, message: str, status_code: int, details: Any | None = None) -> tuple[Response, int]:
    error = {"code": code, "message": message, "details": details}
    return jsonify(envelope(error=error)), status_code
