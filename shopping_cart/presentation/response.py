"""View response helpers."""
from typing import Any


def success_response(body: dict[str, Any]) -> dict[str, Any]:
    """Build a success response.

    Args:
        body: response body

    Returns:
        response dictionary
    """
    return {"status": "ok", **body}


def error_response(message: str, error_code: str, body: dict[str, Any] | None = None) -> dict[str, Any]:
    """Build an error response.

    Args:
        message: error message
        error_code: machine-readable error code
        body: extra fields (e.g. the unchanged cart)

    Returns:
        response dictionary
    """
    response: dict[str, Any] = {"status": "error", "error": {"message": message, "code": error_code}}
    if body:
        response.update(body)
    return response


def not_found_response(resource: str, error_code: str, body: dict[str, Any] | None = None) -> dict[str, Any]:
    """Build a not-found response."""
    return error_response(f"{resource} not found", error_code, body)


def bad_request_response(message: str) -> dict[str, Any]:
    """Build a bad-request response."""
    return error_response(message, "BAD_REQUEST")
