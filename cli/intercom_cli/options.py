from __future__ import annotations

import asyncio
import json
from collections.abc import Coroutine
from typing import Any

import typer

from intercom_client import Failure, NetworkError, Result

from . import console
from .formatting import contacts_table


def parse_pairs(items: list[str] | None, *, sep: str = "=", what: str = "KEY=VALUE") -> dict[str, str]:
    out: dict[str, str] = {}
    for item in items or []:
        key, found, value = item.partition(sep)
        key = key.strip()
        if not found or not key:
            console.err(f"Expected {what}, got '{item}'.")
            raise typer.Exit(code=2)
        out[key] = value.strip()
    return out


def parse_json_option(raw: str | None, *, option: str) -> Any:
    if raw is None:
        return None
    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        console.err(f"{option} is not valid JSON: {exc}")
        raise typer.Exit(code=2)


def emit_result(result: Result, *, json_out: bool, success_msg: str | None = None) -> None:
    if json_out:
        console.print_json(result.to_dict())
    if isinstance(result, Failure):
        if not json_out:
            prefix = f"HTTP {result.status}: " if result.status is not None else ""
            console.err(f"{prefix}{result.error}")
        # local validation failures never reached the API
        raise typer.Exit(code=1 if result.status is not None else 2)
    if json_out:
        return
    if success_msg:
        console.ok(success_msg)
    table = contacts_table(result.data)
    if table is not None:
        console.console.print(table)
    elif result.data not in (None, ""):
        console.print_json(result.data)


def run_api(call: Coroutine[Any, Any, Result]) -> Result:
    try:
        return asyncio.run(call)
    except NetworkError as e:
        console.err(f"Network error: {e}")
        raise typer.Exit(code=1)
