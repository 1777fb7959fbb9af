from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any

_ALIASES = {
    "access_token": ("access_token", "accessToken"),
    "base_url": ("base_url", "baseUrl"),
    "version": ("version",),
}


def _pick(options: Mapping[str, Any], field_name: str) -> Any:
    for key in _ALIASES[field_name]:
        value = options.get(key)
        if value:
            return value
    return None


@dataclass(frozen=True)
class ClientConfig:
    access_token: str | None = None
    base_url: str | None = None
    version: str | None = None

    def merged(self, options: ClientConfig | Mapping[str, Any] | None) -> ClientConfig:
        """Return a copy updated with the truthy fields of ``options``.

        Falsy or missing fields keep the current value; anything that is not a
        ``ClientConfig`` or a mapping leaves the config untouched.
        """
        if isinstance(options, ClientConfig):
            options = {
                "access_token": options.access_token,
                "base_url": options.base_url,
                "version": options.version,
            }
        if not isinstance(options, Mapping):
            return self

        changes: dict[str, str] = {}
        token = _pick(options, "access_token")
        if token:
            changes["access_token"] = str(token).strip()
        base_url = _pick(options, "base_url")
        if base_url:
            changes["base_url"] = strip_trailing_slash(str(base_url).strip())
        version = _pick(options, "version")
        if version:
            changes["version"] = str(version).strip()
        if not changes:
            return self
        return replace(self, **changes)


def strip_trailing_slash(value: str) -> str:
    return value[:-1] if value.endswith("/") else value
