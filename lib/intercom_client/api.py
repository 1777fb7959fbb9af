"""Module-level helpers sharing one process-wide configuration.

``configure`` merges into the shared ``ClientConfig``; every call afterwards
builds a fresh ``IntercomClient`` from whatever is configured at that moment.
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .client import IntercomClient
from .config_types import ClientConfig
from .env import EnvironStore
from .result import Result
from .transport import Transport

_config = ClientConfig()


def configure(options: ClientConfig | Mapping[str, Any] | None) -> ClientConfig:
    global _config
    _config = _config.merged(options)
    return _config


def current_config() -> ClientConfig:
    return _config


def _client() -> IntercomClient:
    return IntercomClient(_config, env=EnvironStore(), transport=Transport())


async def request(path: str, **kwargs: Any) -> Result:
    return await _client().request(path, **kwargs)


async def create_contact(**fields: Any) -> Result:
    return await _client().create_contact(**fields)


async def update_contact(contact_id: Any, **fields: Any) -> Result:
    return await _client().update_contact(contact_id, **fields)


async def search_contacts(query: Mapping[str, Any] | None, *, token: str | None = None) -> Result:
    return await _client().search_contacts(query, token=token)


async def self_test() -> str:
    return await _client().self_test()
