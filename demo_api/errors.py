"""Error types surfaced to clients as failure envelopes.

Handlers raise these instead of building error responses by hand; the
handlers installed by :func:`register_error_handlers` turn them into
``{"success": false, "message": ..., "errors": [...]}`` JSON bodies.
"""

from typing import List, Optional

from flask import Flask, jsonify, request
from werkzeug.exceptions import MethodNotAllowed, NotFound


class APIError(Exception):
    status_code = 400

    def __init__(self, message: str, errors: Optional[List[str]] = None, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.errors = errors
        if status_code is not None:
            self.status_code = status_code

    def to_envelope(self) -> dict:
        body = {"success": False, "message": self.message}
        if self.errors:
            body["errors"] = list(self.errors)
        return body


class ValidationError(APIError):
    """Missing required field, or a field shorter than its minimum."""

    status_code = 400


class NotFoundError(APIError):
    """No record with the requested id."""

    status_code = 404


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(APIError)
    def handle_api_error(exc: APIError):
        return jsonify(exc.to_envelope()), exc.status_code

    # Keep /api JSON-only; everything else falls back to Flask's pages
    @app.errorhandler(NotFound)
    def handle_not_found(exc: NotFound):
        if request.path.startswith("/api"):
            return jsonify({"success": False, "message": "route not found"}), 404
        return exc

    @app.errorhandler(MethodNotAllowed)
    def handle_method_not_allowed(exc: MethodNotAllowed):
        if request.path.startswith("/api"):
            return jsonify({"success": False, "message": "method not allowed"}), 405
        return exc
