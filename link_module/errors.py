from __future__ import annotations

import json
from typing import Any, NoReturn

from .exceptions import (
    ApiError,
    AuthenticationError,
    AuthorizationError,
    BadRequestError,
    ClientRequestError,
    NotFoundError,
    RateLimitError,
    ValidationError,
)

_BY_STATUS: dict[int, type[ApiError]] = {
    400: BadRequestError,
    401: AuthenticationError,
    403: AuthorizationError,
    404: NotFoundError,
    422: ValidationError,
    429: RateLimitError,
}


def _error_payload(error: ClientRequestError) -> dict[str, Any]:
    try:
        data = json.loads(error.body)
    except ValueError:
        return {}
    return data if isinstance(data, dict) else {}


def handle_client_error(error: ClientRequestError) -> NoReturn:
    """Raise the ApiError subclass matching a 4xx response.

    The message comes from the response's ``message`` key when the body is a
    JSON object, otherwise from the raw body.
    """
    payload = _error_payload(error)
    message = payload.get("message") or error.body or str(error)
    errors = payload.get("errors")

    exc_type = _BY_STATUS.get(error.status_code, ApiError)
    raise exc_type(
        f"{error.method} {error.url} failed ({error.status_code}): {message}",
        status_code=error.status_code,
        errors=errors if isinstance(errors, dict) else None,
    ) from error
