from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Protocol
from urllib.parse import quote, urlencode

from .config_types import ClientConfig
from .env import EnvironStore, EnvStore
from .errors import SelfTestError
from .payload import build_contact_payload
from .resolve import resolve_base_url, resolve_token, resolve_version
from .result import Failure, Result, classify_response
from .transport import Transport, TransportResponse, bearer

logger = logging.getLogger(__name__)


class JsonTransport(Protocol):
    async def perform_json_request(
            self,
            *,
            url: str,
            method: str,
            headers: dict[str, str],
            body: Any | None = None,
    ) -> TransportResponse: ...


def normalize_path(path: Any) -> str:
    value = str(path or "").strip()
    if not value:
        return ""
    return value if value.startswith("/") else "/" + value


def _overlay_headers(headers: dict[str, str], extra: Mapping[str, Any] | None) -> dict[str, str]:
    if not isinstance(extra, Mapping):
        return headers
    for key, value in extra.items():
        if value is None:
            continue
        for existing in [k for k in headers if k.lower() == str(key).lower()]:
            del headers[existing]
        headers[str(key)] = str(value)
    return headers


class IntercomClient:
    def __init__(
            self,
            cfg: ClientConfig | None = None,
            *,
            env: EnvStore | None = None,
            transport: JsonTransport | None = None,
    ):
        self._cfg = cfg or ClientConfig()
        self._env = env or EnvironStore()
        self._t = transport or Transport()

    def _build_headers(self, token: str, extra: Mapping[str, Any] | None, has_body: bool) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        version = resolve_version(self._cfg, self._env)
        if version:
            headers["Intercom-Version"] = version
        headers.update(bearer(token))
        if has_body:
            headers["Content-Type"] = "application/json"
        # caller headers win over everything computed above
        return _overlay_headers(headers, extra)

    async def request(
            self,
            path: str,
            *,
            method: str | None = None,
            query: Mapping[str, Any] | None = None,
            body: Any | None = None,
            token: str | None = None,
            headers: Mapping[str, Any] | None = None,
            debug: bool = False,
    ) -> Result:
        """Issue a single API call and return a ``Success`` or ``Failure``.

        Local problems (no token, empty path) fail before any network activity.
        Non-2xx responses come back as ``Failure``; transport exceptions propagate.
        """
        auth_token = resolve_token(self._cfg, self._env, token)
        if not auth_token:
            return Failure("missing access token")
        normalized_path = normalize_path(path)
        if not normalized_path:
            return Failure("missing path")

        url = resolve_base_url(self._cfg, self._env) + normalized_path
        if isinstance(query, Mapping):
            qs = urlencode(query, doseq=True)
            if qs:
                url += ("&" if "?" in url else "?") + qs

        has_body = body is not None
        req_headers = self._build_headers(auth_token, headers, has_body)
        http_method = str(method).upper() if method else ("POST" if has_body else "GET")
        if debug:
            logger.debug("request method=%s path=%s", http_method, normalized_path)

        res = await self._t.perform_json_request(url=url, method=http_method, headers=req_headers, body=body)
        return classify_response(res, normalized_path)

    # --- contacts ---
    async def create_contact(
            self,
            *,
            email: Any = None,
            phone: Any = None,
            name: Any = None,
            external_id: Any = None,
            custom_attributes: Mapping[str, Any] | None = None,
            signed_up_at: Any = None,
            last_seen_at: Any = None,
            owner_id: Any = None,
            token: str | None = None,
    ) -> Result:
        payload = build_contact_payload(
            email=email,
            phone=phone,
            name=name,
            external_id=external_id,
            custom_attributes=custom_attributes,
            signed_up_at=signed_up_at,
            last_seen_at=last_seen_at,
            owner_id=owner_id,
        )
        if not any(key in payload for key in ("email", "phone", "external_id")):
            return Failure("email, phone, or externalId required")
        return await self.request("/contacts", method="POST", body=payload, token=token)

    async def update_contact(
            self,
            contact_id: Any,
            *,
            email: Any = None,
            phone: Any = None,
            name: Any = None,
            external_id: Any = None,
            custom_attributes: Mapping[str, Any] | None = None,
            signed_up_at: Any = None,
            last_seen_at: Any = None,
            owner_id: Any = None,
            token: str | None = None,
    ) -> Result:
        if not contact_id:
            return Failure("missing id")
        payload = build_contact_payload(
            email=email,
            phone=phone,
            name=name,
            external_id=external_id,
            custom_attributes=custom_attributes,
            signed_up_at=signed_up_at,
            last_seen_at=last_seen_at,
            owner_id=owner_id,
        )
        path = "/contacts/" + quote(str(contact_id), safe="")
        return await self.request(path, method="PUT", body=payload, token=token)

    async def search_contacts(self, query: Mapping[str, Any] | None, *, token: str | None = None) -> Result:
        if not isinstance(query, Mapping):
            return Failure("missing query")
        return await self.request("/contacts/search", method="POST", body={"query": query}, token=token)

    async def self_test(self) -> str:
        """Smoke-test connectivity with ``GET /me``.

        Unlike the other calls this raises ``SelfTestError`` on a failed result,
        so a broken setup is distinguishable from a skipped one.
        """
        if not resolve_token(self._cfg, self._env):
            return "skipped: missing access token"
        res = await self.request("/me", method="GET")
        if not res.ok:
            raise SelfTestError(res)
        return "ok"
