from __future__ import annotations

from typing import Any


class LinkModuleError(Exception):
    """Base class for every error raised by link_module."""


class NotConfiguredError(LinkModuleError):
    pass


class MissingTokenError(LinkModuleError):
    def __init__(self, message: str = "No API token has been set") -> None:
        super().__init__(message)


class ResponseDecodeError(LinkModuleError):
    def __init__(self, message: str, *, status_code: int | None = None, body: str = "") -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class RequestError(LinkModuleError):
    """A response came back with a non-2xx status."""

    def __init__(
        self,
        message: str,
        *,
        method: str,
        url: str,
        status_code: int,
        body: str = "",
        response: Any = None,
    ) -> None:
        super().__init__(message)
        self.method = method
        self.url = url
        self.status_code = status_code
        self.body = body
        self.response = response


class ClientRequestError(RequestError):
    """4xx response."""


class ServerRequestError(RequestError):
    """5xx response."""


class ApiError(LinkModuleError):
    """Domain error describing a rejected API call."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        errors: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.errors = errors or {}


class BadRequestError(ApiError):
    pass


class AuthenticationError(ApiError):
    pass


class AuthorizationError(ApiError):
    pass


class NotFoundError(ApiError):
    pass


class ValidationError(ApiError):
    pass


class RateLimitError(ApiError):
    pass
