from __future__ import annotations

from dataclasses import dataclass

from .exceptions import MissingTokenError

AGENT = "LinkModule"
VERSION = "0.1.0"


@dataclass
class Credentials:
    """Token and TLS policy for one client.

    Read on every request, so ``set_token`` applies from the next call.
    """

    token: str | None = None
    verify_ssl: bool = True

    def get_token(self) -> str:
        if self.token is None or not self.token.strip():
            raise MissingTokenError()
        return self.token

    def set_token(self, token: str | None) -> None:
        self.token = token

    def get_verify_ssl(self) -> bool:
        return self.verify_ssl

    def set_verify_ssl(self, verify: bool) -> None:
        self.verify_ssl = verify

    @staticmethod
    def user_agent() -> str:
        return f"{AGENT}/{VERSION}"
