from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol

import requests

from .exceptions import ClientRequestError, ServerRequestError
from .models import RequestOptions


class Transport(Protocol):
    def execute(self, method: str, uri: str, options: RequestOptions) -> Any:
        ...

    def close(self) -> None:
        ...


@dataclass(frozen=True)
class RequestsTransport:
    base_url: str
    timeout_s: float = 30.0
    session: requests.Session = field(default_factory=requests.Session, repr=False, compare=False)

    def url_for(self, uri: str) -> str:
        if uri.startswith(("http://", "https://")):
            return uri
        return self.base_url.rstrip("/") + "/" + uri.lstrip("/")

    def execute(self, method: str, uri: str, options: RequestOptions) -> requests.Response:
        url = self.url_for(uri)
        resp = self.session.request(
            method.upper(),
            url,
            headers=options.headers,
            params=options.query,
            json=options.json,
            verify=options.verify,
            timeout=self.timeout_s,
        )
        if 400 <= resp.status_code < 500:
            raise ClientRequestError(
                f"Client error {resp.status_code} for {method.upper()} {url}",
                method=method.upper(),
                url=url,
                status_code=resp.status_code,
                body=resp.text,
                response=resp,
            )
        if resp.status_code >= 500:
            raise ServerRequestError(
                f"Server error {resp.status_code} for {method.upper()} {url}",
                method=method.upper(),
                url=url,
                status_code=resp.status_code,
                body=resp.text,
                response=resp,
            )
        return resp

    def close(self) -> None:
        self.session.close()
