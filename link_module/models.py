from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class RequestOptions:
    """Everything a transport needs to send one request besides method and URI."""

    headers: dict[str, str] = field(default_factory=dict)

    # Sent as the query string (GET, DELETE).
    query: dict[str, Any] | None = None

    # Sent as a JSON-encoded body (POST, PATCH).
    json: dict[str, Any] | None = None

    # Verify TLS certificates; read from the credentials at call time.
    verify: bool = True
