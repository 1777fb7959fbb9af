from __future__ import annotations

from .config_types import ClientConfig, strip_trailing_slash
from .env import EnvStore

DEFAULT_BASE_URL = "https://api.intercom.io"
DEFAULT_VERSION = "2.9"


def resolve_token(cfg: ClientConfig, env: EnvStore, override: str | None = None) -> str | None:
    """Pick the bearer token: call override, configured token, then environment."""
    override_value = str(override).strip() if override else ""
    return (
        override_value
        or cfg.access_token
        or env.lookup("intercom.accessToken")
        or env.lookup("intercom.token")
        or None
    )


def resolve_base_url(cfg: ClientConfig, env: EnvStore) -> str:
    return strip_trailing_slash(cfg.base_url or env.lookup("intercom.baseUrl") or DEFAULT_BASE_URL)


def resolve_version(cfg: ClientConfig, env: EnvStore) -> str:
    return cfg.version or env.lookup("intercom.version") or DEFAULT_VERSION
