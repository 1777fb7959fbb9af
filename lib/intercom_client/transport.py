from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import httpx

from .errors import NetworkError

USER_AGENT = "intercom-client/0.1.0"


class _NoJson:
    def __repr__(self) -> str:
        return "NO_JSON"


# body was not JSON; distinct from a JSON null body
NO_JSON: Any = _NoJson()


@dataclass(frozen=True)
class TransportResponse:
    status: int
    json: Any = NO_JSON
    raw: str | None = None


def bearer(token: str | None) -> dict[str, str]:
    token = (token or "").strip()
    if not token:
        return {}
    return {"Authorization": f"Bearer {token}"}


class Transport:
    """Sends one JSON request per call over ``httpx.AsyncClient``.

    When no client is injected, a short-lived client is opened for each request.
    An injected client is reused and left open for its owner to close.
    """

    def __init__(self, *, timeout_s: float = 15.0, client: httpx.AsyncClient | None = None):
        self._timeout_s = timeout_s
        self._client = client

    async def perform_json_request(
            self,
            *,
            url: str,
            method: str,
            headers: dict[str, str],
            body: Any | None = None,
    ) -> TransportResponse:
        if self._client is not None:
            return await self._send(self._client, url, method, headers, body)
        async with httpx.AsyncClient(
                timeout=self._timeout_s,
                headers={"User-Agent": USER_AGENT},
                follow_redirects=True,
        ) as client:
            return await self._send(client, url, method, headers, body)

    async def _send(
            self,
            client: httpx.AsyncClient,
            url: str,
            method: str,
            headers: dict[str, str],
            body: Any | None,
    ) -> TransportResponse:
        try:
            r = await client.request(method, url, headers=headers, json=body)
        except httpx.RequestError as e:
            raise NetworkError(str(e)) from e

        # Keep the raw text only when the body is not JSON
        try:
            return TransportResponse(status=r.status_code, json=r.json())
        except ValueError:
            return TransportResponse(status=r.status_code, raw=r.text)
