from __future__ import annotations

import asyncio

import typer
from intercom_client import NetworkError, SelfTestError

from .. import console
from ..config import load_config
from ..http import make_client
from ..options import emit_result, parse_json_option, parse_pairs, run_api


def request(
        path: str = typer.Argument(..., help="API path, e.g. /contacts/123."),
        method: str | None = typer.Option(None, "--method", "-X", help="HTTP method (default GET, POST with --data)."),
        query: list[str] | None = typer.Option(None, "--query", "-q", help="Query parameter KEY=VALUE (repeatable)."),
        data: str | None = typer.Option(None, "--data", "-d", help="JSON request body."),
        headers: list[str] | None = typer.Option(None, "--header", "-H", help="Extra header KEY:VALUE (repeatable)."),
        debug: bool = typer.Option(False, "--debug", help="Log method and path."),
        token: str | None = typer.Option(None, "--token", help="Override access token."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
        json_out: bool = typer.Option(False, "--json", help="Print raw result JSON."),
) -> None:
    """Call any Intercom API endpoint."""
    body = parse_json_option(data, option="--data")
    query_params = parse_pairs(query) if query else None
    extra_headers = parse_pairs(headers, sep=":", what="KEY:VALUE") if headers else None
    client = make_client(load_config(), token_override=token, base_url_override=base_url)
    result = run_api(
        client.request(
            path,
            method=method,
            query=query_params,
            body=body,
            headers=extra_headers,
            debug=debug,
        )
    )
    emit_result(result, json_out=json_out)


def selftest(
        token: str | None = typer.Option(None, "--token", help="Override access token."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
) -> None:
    """Check that the configured token can reach GET /me."""
    client = make_client(load_config(), token_override=token, base_url_override=base_url)
    try:
        outcome = asyncio.run(client.self_test())
    except SelfTestError as e:
        console.err(str(e))
        raise typer.Exit(code=1)
    except NetworkError as e:
        console.err(f"Network error: {e}")
        raise typer.Exit(code=1)
    if outcome == "ok":
        console.ok("Intercom API reachable.")
    else:
        console.warn(outcome)
