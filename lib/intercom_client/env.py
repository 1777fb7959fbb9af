from __future__ import annotations

import os
from typing import Protocol

ENV_KEYS = {
    "intercom.accessToken": "INTERCOM_ACCESS_TOKEN",
    "intercom.token": "INTERCOM_TOKEN",
    "intercom.baseUrl": "INTERCOM_BASE_URL",
    "intercom.version": "INTERCOM_VERSION",
}


class EnvStore(Protocol):
    def lookup(self, key: str) -> str | None: ...


class EnvironStore:
    """Reads ``intercom.*`` keys from process environment variables."""

    def __init__(self, environ: dict[str, str] | None = None):
        self._environ = environ

    def lookup(self, key: str) -> str | None:
        name = ENV_KEYS.get(key)
        if not name:
            return None
        environ = os.environ if self._environ is None else self._environ
        value = (environ.get(name) or "").strip()
        return value or None
