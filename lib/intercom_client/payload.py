from __future__ import annotations

import math
from collections.abc import Mapping
from datetime import date, datetime, time, timezone
from email.utils import parsedate_to_datetime
from typing import Any


def _is_truthy(value: Any) -> bool:
    # None, False, 0, NaN and "" are all "not set" for contact text fields.
    if value is None or isinstance(value, bool):
        return bool(value)
    if isinstance(value, (int, float)):
        return value != 0 and not math.isnan(value)
    return str(value) != ""


_LOOSE_FORMATS = (
    "%Y/%m/%d",
    "%Y/%m/%d %H:%M",
    "%Y/%m/%d %H:%M:%S",
    "%m/%d/%Y",
    "%m/%d/%Y %H:%M",
    "%m/%d/%Y %H:%M:%S",
    "%b %d, %Y",
    "%B %d, %Y",
    "%b %d %Y",
    "%B %d %Y",
    "%d %b %Y",
    "%d %B %Y",
    "%b %d, %Y %H:%M:%S",
    "%B %d, %Y %H:%M:%S",
    "%a %b %d %Y",
    "%a %b %d %Y %H:%M:%S",
    "%Y-%m",
    "%Y",
)


def _parse_datetime(text: str) -> datetime | None:
    text = text.strip()
    if not text:
        return None
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        pass
    try:
        return parsedate_to_datetime(text)
    except (TypeError, ValueError, IndexError):
        pass
    # slash dates, month names and bare years; read as UTC like the forms above
    for fmt in _LOOSE_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    return None


def _datetime_seconds(dt: datetime) -> int:
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return math.floor(dt.timestamp())


def to_epoch_seconds(value: Any) -> int | None:
    """Coerce a date-like value to whole seconds since the epoch.

    Numbers are taken as epoch seconds already. ``datetime``/``date`` objects
    and ISO 8601 or RFC 2822 strings are converted; naive values are read as UTC.
    Returns ``None`` when the value cannot be interpreted.
    """
    if value is None or value == "" or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        if not math.isfinite(value):
            return None
        return math.floor(value)
    if isinstance(value, datetime):
        return _datetime_seconds(value)
    if isinstance(value, date):
        return _datetime_seconds(datetime.combine(value, time.min, tzinfo=timezone.utc))
    if isinstance(value, str):
        parsed = _parse_datetime(value)
        if parsed is None:
            return None
        return _datetime_seconds(parsed)
    return None


def build_contact_payload(
        *,
        email: Any = None,
        phone: Any = None,
        name: Any = None,
        external_id: Any = None,
        custom_attributes: Mapping[str, Any] | None = None,
        signed_up_at: Any = None,
        last_seen_at: Any = None,
        owner_id: Any = None,
) -> dict[str, Any]:
    payload: dict[str, Any] = {}
    if _is_truthy(email):
        payload["email"] = str(email)
    if _is_truthy(phone):
        payload["phone"] = str(phone)
    if _is_truthy(name):
        payload["name"] = str(name)
    if _is_truthy(external_id):
        payload["external_id"] = str(external_id)

    signed = to_epoch_seconds(signed_up_at)
    if signed is not None:
        payload["signed_up_at"] = signed
    last_seen = to_epoch_seconds(last_seen_at)
    if last_seen is not None:
        payload["last_seen_at"] = last_seen

    # owner id 0 is a valid owner, unlike the text fields above
    if owner_id is not None and owner_id != "":
        payload["owner_id"] = str(owner_id)
    if isinstance(custom_attributes, Mapping):
        payload["custom_attributes"] = custom_attributes
    return payload
