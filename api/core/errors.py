"""
Request-terminal error taxonomy.

Services raise these; `api/main.py` renders every one of them as
`{"error": message}` with the matching status code.
"""

from __future__ import annotations


class ApiError(RuntimeError):
    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(ApiError):
    """Missing or malformed required input."""

    status_code = 400


class NotFoundError(ApiError):
    status_code = 404


class StoreError(ApiError):
    """
    Any database failure. `message` is the generic text shown to clients;
    the underlying exception is chained and logged, never returned.
    """

    status_code = 500
