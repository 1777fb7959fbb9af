from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass
from typing import Any

import tomli_w
from intercom_client.env import EnvironStore
from platformdirs import user_config_dir

APP_NAME = "intercom"
CONFIG_FILENAME = "config.toml"
DEFAULT_TIMEOUT_S = 15.0


@dataclass
class AppConfig:
    access_token: str = ""
    base_url: str = ""
    version: str = ""
    timeout_s: float = DEFAULT_TIMEOUT_S


def config_path() -> str:
    return f"{user_config_dir(APP_NAME)}/{CONFIG_FILENAME}"


def default_config() -> AppConfig:
    return AppConfig()


def normalize_base_url(raw: str | None) -> str:
    value = (raw or "").strip()
    if not value:
        return ""
    value = value.rstrip("/")
    lowered = value.lower()
    if lowered.startswith("http://") or lowered.startswith("https://"):
        return value

    host = value.split("/", 1)[0]
    host = host.split(":", 1)[0].lower()
    if host in {"localhost", "127.0.0.1", "0.0.0.0"}:
        return f"http://{value}"
    return f"https://{value}"


def ensure_parent_dir(path: str) -> None:
    os.makedirs(os.path.dirname(path), exist_ok=True)


def to_toml(cfg: AppConfig) -> dict[str, Any]:
    section: dict[str, Any] = {"timeout_s": float(cfg.timeout_s)}
    if cfg.access_token:
        section["access_token"] = cfg.access_token
    if cfg.base_url:
        section["base_url"] = cfg.base_url
    if cfg.version:
        section["version"] = cfg.version
    return {"intercom": section}


def from_toml(data: dict[str, Any]) -> AppConfig:
    raw = data.get("intercom") or {}
    if not isinstance(raw, dict):
        return default_config()
    timeout_s = DEFAULT_TIMEOUT_S
    if raw.get("timeout_s") is not None:
        try:
            timeout_s = float(raw["timeout_s"])
        except (TypeError, ValueError):
            timeout_s = DEFAULT_TIMEOUT_S
    return AppConfig(
        access_token=str(raw.get("access_token") or "").strip(),
        base_url=normalize_base_url(str(raw.get("base_url") or "")),
        version=str(raw.get("version") or "").strip(),
        timeout_s=timeout_s,
    )


def load_config() -> AppConfig:
    path = config_path()
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
        return from_toml(data)
    except FileNotFoundError:
        return default_config()


def save_config(cfg: AppConfig) -> str:
    path = config_path()
    ensure_parent_dir(path)
    with open(path, "wb") as f:
        f.write(tomli_w.dumps(to_toml(cfg)).encode("utf-8"))
    os.chmod(path, 0o600)
    return path


class SettingsStore:
    """Environment variables first, then values saved in the config file."""

    def __init__(self, cfg: AppConfig, environ: EnvironStore | None = None):
        self._environ = environ or EnvironStore()
        self._values = {
            "intercom.accessToken": cfg.access_token,
            "intercom.baseUrl": cfg.base_url,
            "intercom.version": cfg.version,
        }

    def lookup(self, key: str) -> str | None:
        env_value = self._environ.lookup(key)
        if not env_value and key == "intercom.accessToken":
            # INTERCOM_TOKEN in the environment still beats a saved token
            env_value = self._environ.lookup("intercom.token")
        return env_value or self._values.get(key) or None
