from __future__ import annotations

import typer

from .. import console
from ..config import load_config, normalize_base_url, save_config

app = typer.Typer(help="Show or change saved Intercom settings.")


@app.command("show")
def show_config() -> None:
    cfg = load_config()
    token_state = "(set)" if cfg.access_token else "(empty)"
    console.console.print(
        f"base_url={cfg.base_url or '(default)'} version={cfg.version or '(default)'} "
        f"access_token={token_state} timeout_s={cfg.timeout_s}"
    )


@app.command("set")
def set_config(
        access_token: str | None = typer.Option(None, "--access-token", help="Intercom access token."),
        base_url: str | None = typer.Option(None, "--base-url", help="API base URL."),
        version: str | None = typer.Option(None, "--version", help="Intercom-Version header value."),
        timeout_s: float | None = typer.Option(None, "--timeout", help="Request timeout in seconds."),
) -> None:
    cfg = load_config()

    if access_token is not None:
        cfg.access_token = access_token.strip()
    if base_url is not None:
        cfg.base_url = normalize_base_url(base_url)
    if version is not None:
        cfg.version = version.strip()
    if timeout_s is not None:
        if timeout_s <= 0:
            console.err("Timeout must be positive.")
            raise typer.Exit(code=2)
        cfg.timeout_s = timeout_s

    path = save_config(cfg)
    console.ok(f"Config updated: {path}")
