from __future__ import annotations

import json
from typing import Any, Callable, Mapping

from .auth import Credentials
from .config import Config
from .errors import handle_client_error
from .exceptions import ClientRequestError, NotConfiguredError, ResponseDecodeError
from .log import get_logger
from .models import RequestOptions
from .transport import RequestsTransport, Transport

log = get_logger(__name__)

ErrorHandler = Callable[[ClientRequestError], Any]


class ApiRequestor:
    """Sends authenticated JSON requests through an injected transport.

    Each verb returns the decoded JSON object. A 4xx response is handed to
    ``error_handler`` (which raises an ``ApiError`` by default); when the
    handler returns instead, the verb returns ``None``. Anything else the
    transport raises, 5xx included, reaches the caller untouched.
    """

    def __init__(
        self,
        transport: Transport | None = None,
        *,
        credentials: Credentials | None = None,
        error_handler: ErrorHandler = handle_client_error,
    ):
        self._transport = transport
        self.credentials = credentials if credentials is not None else Credentials()
        self.error_handler = error_handler

    @classmethod
    def from_config(cls, config: Config) -> "ApiRequestor":
        return cls(
            RequestsTransport(base_url=config.base_uri, timeout_s=config.timeout_s),
            credentials=Credentials(
                token=config.token,
                verify_ssl=config.verify_ssl,
            ),
        )

    def get_transport(self) -> Transport:
        if self._transport is None:
            raise NotConfiguredError("No HTTP transport has been set")
        return self._transport

    def set_transport(self, transport: Transport) -> None:
        self._transport = transport

    def get(
        self,
        uri: str,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> dict[str, Any] | None:
        return self._dispatch("GET", uri, RequestOptions(
            headers=self.default_headers(headers) if headers is not None else self.authenticated_headers(),
            query=dict(params or {}),
            verify=self.credentials.get_verify_ssl(),
        ))

    def post(
        self,
        uri: str,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> dict[str, Any] | None:
        return self._dispatch("POST", uri, RequestOptions(
            headers=self.default_headers(headers or {}),
            json=dict(params or {}),
            verify=self.credentials.get_verify_ssl(),
        ))

    def patch(
        self,
        uri: str,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> dict[str, Any] | None:
        return self._dispatch("PATCH", uri, RequestOptions(
            headers=self.default_headers(headers) if headers is not None else self.authenticated_headers(),
            json=dict(params or {}),
            verify=self.credentials.get_verify_ssl(),
        ))

    def delete(
        self,
        uri: str,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> dict[str, Any] | None:
        return self._dispatch("DELETE", uri, RequestOptions(
            headers=self.default_headers(headers) if headers is not None else self.authenticated_headers(),
            query=dict(params or {}),
            verify=self.credentials.get_verify_ssl(),
        ))

    def default_headers(self, extra: Mapping[str, str] | None = None) -> dict[str, str]:
        """Standard headers merged with ``extra``; keys in ``extra`` win.

        Keys are compared case-insensitively so a caller's ``authorization``
        replaces the generated one instead of sitting next to it. The token
        is only read when the caller did not bring their own Authorization.
        """
        extra = dict(extra or {})
        supplied = {k.lower() for k in extra}

        headers: dict[str, str] = {}
        if "user-agent" not in supplied:
            headers["User-Agent"] = self.credentials.user_agent()
        if "accept" not in supplied:
            headers["Accept"] = "application/json"
        if "authorization" not in supplied:
            headers["Authorization"] = f"Bearer {self.credentials.get_token()}"

        headers.update(extra)
        return headers

    def authenticated_headers(self) -> dict[str, str]:
        return self.default_headers()

    def _dispatch(self, method: str, uri: str, options: RequestOptions) -> dict[str, Any] | None:
        log.debug("api_request", method=method, uri=uri, headers=sorted(options.headers))
        try:
            resp = self.get_transport().execute(method, uri, options)
        except ClientRequestError as e:
            log.warning("api_client_error", method=method, uri=uri, status_code=e.status_code)
            self.error_handler(e)
            return None
        return _decode_json(resp, method=method, uri=uri)


def _decode_json(resp: Any, *, method: str, uri: str) -> dict[str, Any]:
    status = getattr(resp, "status_code", None)
    text = resp.text
    # 204 No Content and friends
    if not text.strip():
        return {}
    try:
        data = json.loads(text)
    except ValueError as e:
        raise ResponseDecodeError(
            f"Failed to decode JSON for {method} {uri}: {e}",
            status_code=status,
            body=text[:500],
        ) from e
    if not isinstance(data, dict):
        raise ResponseDecodeError(
            f"Expected a JSON object for {method} {uri}, got {type(data).__name__}",
            status_code=status,
            body=text[:500],
        )
    return data
