from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

from .exceptions import NotConfiguredError


REQUIRED_KEYS = [
    "LINK_MODULE_BASE_URI",
    "LINK_MODULE_TOKEN",
]

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class Config:
    base_uri: str
    token: str
    verify_ssl: bool = True
    timeout_s: float = 30.0
    log_level: str = "INFO"
    log_format: str = "console"

    @staticmethod
    def load_from_env(environ: Mapping[str, str] | None = None) -> "Config":
        env = os.environ if environ is None else environ

        values: dict[str, str] = {}
        for k in REQUIRED_KEYS:
            val = env.get(k)
            if val is None:
                raise NotConfiguredError(f"Missing environment variable: {k}")
            if val.strip() in {"PLACEHOLDER", "CHANGEME", ""}:
                raise NotConfiguredError(f"Environment variable {k} is still a placeholder")
            values[k] = val.strip()

        timeout = env.get("LINK_MODULE_TIMEOUT", "30")
        try:
            timeout_s = float(timeout)
        except ValueError:
            raise NotConfiguredError(f"LINK_MODULE_TIMEOUT must be a number, got {timeout!r}")

        return Config(
            base_uri=values["LINK_MODULE_BASE_URI"].rstrip("/"),
            token=values["LINK_MODULE_TOKEN"],
            verify_ssl=_parse_bool("LINK_MODULE_VERIFY_SSL", env.get("LINK_MODULE_VERIFY_SSL", "true")),
            timeout_s=timeout_s,
            log_level=env.get("LINK_MODULE_LOG_LEVEL", "INFO"),
            log_format=env.get("LINK_MODULE_LOG_FORMAT", "console"),
        )


def _parse_bool(key: str, raw: str) -> bool:
    val = raw.strip().lower()
    if val in _TRUE:
        return True
    if val in _FALSE:
        return False
    raise NotConfiguredError(f"{key} must be a boolean, got {raw!r}")
