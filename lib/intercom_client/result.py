from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Literal

from .transport import NO_JSON, TransportResponse

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Success:
    data: Any
    status: int
    ok: Literal[True] = field(default=True, init=False)

    def to_dict(self) -> dict[str, Any]:
        return {"ok": True, "data": self.data, "status": self.status}


@dataclass(frozen=True)
class Failure:
    error: str
    status: int | None = None
    data: Any = None
    ok: Literal[False] = field(default=False, init=False)

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"ok": False, "error": self.error}
        if self.status is not None:
            out["status"] = self.status
        if self.data is not None:
            out["data"] = self.data
        return out


Result = Success | Failure


def classify_response(res: TransportResponse, path: str) -> Result:
    """Map a transport response to ``Success`` for 2xx and ``Failure`` otherwise."""
    status = res.status
    data = res.raw if res.json is NO_JSON else res.json
    if 200 <= status < 300:
        return Success(data=data, status=status)

    if isinstance(res.raw, str):
        error_text = res.raw
    elif res.json is not NO_JSON:
        error_text = json.dumps(data, ensure_ascii=False)
    else:
        error_text = ""
    logger.error("request failed status=%s path=%s", status, path)
    return Failure(error=error_text or f"unexpected status {status}", status=status, data=data)
