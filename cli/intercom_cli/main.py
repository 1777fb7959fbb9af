from __future__ import annotations

import typer

from .commands import config_cmd, contacts_cmd, request_cmd
from .logging_ import setup_logging


def _build_app() -> typer.Typer:
    app = typer.Typer(
        name="intercom",
        help="Intercom contacts CLI",
        no_args_is_help=True,
    )

    app.add_typer(config_cmd.app, name="config")
    app.add_typer(contacts_cmd.app, name="contacts")
    app.command("request")(request_cmd.request)
    app.command("selftest")(request_cmd.selftest)

    @app.callback()
    def _main(
            verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose logs."),
    ):
        setup_logging(verbose)

    return app


app = _build_app()


def main() -> None:
    app()


if __name__ == "__main__":
    main()
