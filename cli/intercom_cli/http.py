from __future__ import annotations

from intercom_client import IntercomClient
from intercom_client.config_types import ClientConfig
from intercom_client.transport import Transport

from .config import AppConfig, SettingsStore, normalize_base_url


def make_client(
    cfg: AppConfig,
    *,
    token_override: str | None = None,
    base_url_override: str | None = None,
) -> IntercomClient:
    client_cfg = ClientConfig().merged(
        {
            "access_token": token_override,
            "base_url": normalize_base_url(base_url_override),
        }
    )
    return IntercomClient(
        client_cfg,
        env=SettingsStore(cfg),
        transport=Transport(timeout_s=cfg.timeout_s),
    )
