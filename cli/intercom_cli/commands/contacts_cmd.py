from __future__ import annotations

import typer

from ..config import load_config
from ..http import make_client
from ..options import emit_result, parse_json_option, parse_pairs, run_api

app = typer.Typer(help="Create, update and search Intercom contacts.")

EMAIL_OPT = typer.Option(None, "--email", help="Contact email.")
PHONE_OPT = typer.Option(None, "--phone", help="Contact phone number.")
NAME_OPT = typer.Option(None, "--name", help="Contact name.")
EXTERNAL_ID_OPT = typer.Option(None, "--external-id", help="Your own identifier for the contact.")
DATE_HELP = "Epoch seconds or a date (ISO 8601, 2023/11/14, \"Nov 14, 2023\", ...)."
SIGNED_UP_OPT = typer.Option(None, "--signed-up-at", help=DATE_HELP)
LAST_SEEN_OPT = typer.Option(None, "--last-seen-at", help=DATE_HELP)
OWNER_OPT = typer.Option(None, "--owner-id", help="Admin id owning the contact.")
ATTR_OPT = typer.Option(None, "--attr", help="Custom attribute KEY=VALUE (repeatable).")
TOKEN_OPT = typer.Option(None, "--token", help="Override access token.")
BASE_URL_OPT = typer.Option(None, "--base-url", help="Override base URL.")
JSON_OPT = typer.Option(False, "--json", help="Print raw result JSON.")


def _timestamp_arg(value: str | None) -> int | str | None:
    if value is None:
        return None
    text = value.strip()
    return int(text) if text.isdigit() else text


def _contact_fields(
        email: str | None,
        phone: str | None,
        name: str | None,
        external_id: str | None,
        signed_up_at: str | None,
        last_seen_at: str | None,
        owner_id: str | None,
        attrs: list[str] | None,
) -> dict:
    return {
        "email": email,
        "phone": phone,
        "name": name,
        "external_id": external_id,
        "signed_up_at": _timestamp_arg(signed_up_at),
        "last_seen_at": _timestamp_arg(last_seen_at),
        "owner_id": owner_id,
        "custom_attributes": parse_pairs(attrs) if attrs else None,
    }


@app.command("create")
def create_contact(
        email: str | None = EMAIL_OPT,
        phone: str | None = PHONE_OPT,
        name: str | None = NAME_OPT,
        external_id: str | None = EXTERNAL_ID_OPT,
        signed_up_at: str | None = SIGNED_UP_OPT,
        last_seen_at: str | None = LAST_SEEN_OPT,
        owner_id: str | None = OWNER_OPT,
        attrs: list[str] | None = ATTR_OPT,
        token: str | None = TOKEN_OPT,
        base_url: str | None = BASE_URL_OPT,
        json_out: bool = JSON_OPT,
) -> None:
    fields = _contact_fields(email, phone, name, external_id, signed_up_at, last_seen_at, owner_id, attrs)
    client = make_client(load_config(), token_override=token, base_url_override=base_url)
    result = run_api(client.create_contact(**fields))
    emit_result(result, json_out=json_out, success_msg="Contact created.")


@app.command("update")
def update_contact(
        contact_id: str = typer.Argument(..., help="Intercom contact id."),
        email: str | None = EMAIL_OPT,
        phone: str | None = PHONE_OPT,
        name: str | None = NAME_OPT,
        external_id: str | None = EXTERNAL_ID_OPT,
        signed_up_at: str | None = SIGNED_UP_OPT,
        last_seen_at: str | None = LAST_SEEN_OPT,
        owner_id: str | None = OWNER_OPT,
        attrs: list[str] | None = ATTR_OPT,
        token: str | None = TOKEN_OPT,
        base_url: str | None = BASE_URL_OPT,
        json_out: bool = JSON_OPT,
) -> None:
    fields = _contact_fields(email, phone, name, external_id, signed_up_at, last_seen_at, owner_id, attrs)
    client = make_client(load_config(), token_override=token, base_url_override=base_url)
    result = run_api(client.update_contact(contact_id, **fields))
    emit_result(result, json_out=json_out, success_msg="Contact updated.")


@app.command("search")
def search_contacts(
        field: str | None = typer.Option(None, "--field", help="Contact field to filter on."),
        operator: str = typer.Option("=", "--operator", help="Filter operator."),
        value: str | None = typer.Option(None, "--value", help="Value to compare against."),
        query_json: str | None = typer.Option(None, "--query-json", help="Full search query as JSON."),
        token: str | None = TOKEN_OPT,
        base_url: str | None = BASE_URL_OPT,
        json_out: bool = JSON_OPT,
) -> None:
    query = parse_json_option(query_json, option="--query-json")
    if query is None and field:
        query = {"field": field, "operator": operator, "value": value}
    client = make_client(load_config(), token_override=token, base_url_override=base_url)
    result = run_api(client.search_contacts(query))
    emit_result(result, json_out=json_out)
