from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from rich.table import Table


def format_epoch(value: Any) -> str:
    if value is None or value == "":
        return "-"
    try:
        dt = datetime.fromtimestamp(int(value), tz=timezone.utc)
    except (TypeError, ValueError, OverflowError, OSError):
        return str(value)
    return dt.strftime("%Y-%m-%dT%H:%M:%SZ")


def _contact_rows(data: Any) -> list[dict[str, Any]]:
    if isinstance(data, dict) and isinstance(data.get("data"), list):
        return [item for item in data["data"] if isinstance(item, dict)]
    if isinstance(data, dict) and data.get("type") == "contact":
        return [data]
    return []


def contacts_table(data: Any) -> Table | None:
    """Render a contact or a contact search page; ``None`` for anything else."""
    rows = _contact_rows(data)
    if not rows and not (isinstance(data, dict) and data.get("type") == "list"):
        return None
    table = Table(title="Contacts")
    table.add_column("id", style="bold")
    table.add_column("email")
    table.add_column("phone")
    table.add_column("name")
    table.add_column("external_id")
    table.add_column("last_seen_at")
    for row in rows:
        table.add_row(
            str(row.get("id") or "-"),
            str(row.get("email") or "-"),
            str(row.get("phone") or "-"),
            str(row.get("name") or "-"),
            str(row.get("external_id") or "-"),
            format_epoch(row.get("last_seen_at")),
        )
    return table
