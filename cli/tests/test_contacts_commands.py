from __future__ import annotations

import pytest
import typer

from intercom_cli.commands import contacts_cmd
from intercom_cli.config import AppConfig
from intercom_client import Failure, Success


class _FakeClient:
    def __init__(self, result=None) -> None:
        self.result = result or Success(data={"type": "contact", "id": "c_1"}, status=200)
        self.calls: list[tuple[str, tuple, dict]] = []

    async def create_contact(self, **fields):
        self.calls.append(("create", (), fields))
        return self.result

    async def update_contact(self, contact_id, **fields):
        self.calls.append(("update", (contact_id,), fields))
        return self.result

    async def search_contacts(self, query):
        self.calls.append(("search", (query,), {}))
        return self.result


@pytest.fixture
def client(monkeypatch) -> _FakeClient:
    fake = _FakeClient()
    monkeypatch.setattr(contacts_cmd, "load_config", lambda: AppConfig())
    monkeypatch.setattr(contacts_cmd, "make_client", lambda *_args, **_kwargs: fake)
    return fake


def _create(**overrides) -> None:
    kwargs = dict(
        email=None,
        phone=None,
        name=None,
        external_id=None,
        signed_up_at=None,
        last_seen_at=None,
        owner_id=None,
        attrs=None,
        token=None,
        base_url=None,
        json_out=False,
    )
    kwargs.update(overrides)
    contacts_cmd.create_contact(**kwargs)


def test_create_passes_fields(client) -> None:
    _create(email="a@b.com", signed_up_at="1700000000", last_seen_at="2023-11-14", attrs=["plan=pro"])

    op, _, fields = client.calls[0]
    assert op == "create"
    assert fields["email"] == "a@b.com"
    assert fields["signed_up_at"] == 1700000000
    assert fields["last_seen_at"] == "2023-11-14"
    assert fields["custom_attributes"] == {"plan": "pro"}


def test_create_rejects_malformed_attribute(client) -> None:
    with pytest.raises(typer.Exit) as exc:
        _create(email="a@b.com", attrs=["plan"])

    assert exc.value.exit_code == 2
    assert client.calls == []


def test_local_failure_exits_with_2(client) -> None:
    client.result = Failure("email, phone, or externalId required")

    with pytest.raises(typer.Exit) as exc:
        _create(name="Jo")

    assert exc.value.exit_code == 2


def test_http_failure_exits_with_1(client) -> None:
    client.result = Failure("unauthorized", status=401, data="unauthorized")

    with pytest.raises(typer.Exit) as exc:
        _create(email="a@b.com")

    assert exc.value.exit_code == 1


def test_update_passes_id(client) -> None:
    contacts_cmd.update_contact(
        contact_id="42",
        email=None,
        phone=None,
        name="Jo",
        external_id=None,
        signed_up_at=None,
        last_seen_at=None,
        owner_id="0",
        attrs=None,
        token=None,
        base_url=None,
        json_out=True,
    )

    op, args, fields = client.calls[0]
    assert (op, args) == ("update", ("42",))
    assert fields["name"] == "Jo"
    assert fields["owner_id"] == "0"


def test_search_builds_simple_filter(client) -> None:
    contacts_cmd.search_contacts(
        field="email", operator="=", value="a@b.com", query_json=None, token=None, base_url=None, json_out=False
    )

    assert client.calls[0] == ("search", ({"field": "email", "operator": "=", "value": "a@b.com"},), {})


def test_search_accepts_json_query(client) -> None:
    raw = '{"operator": "AND", "value": [{"field": "role", "operator": "=", "value": "user"}]}'

    contacts_cmd.search_contacts(
        field=None, operator="=", value=None, query_json=raw, token=None, base_url=None, json_out=False
    )

    assert client.calls[0][1][0]["operator"] == "AND"


def test_search_rejects_invalid_json(client) -> None:
    with pytest.raises(typer.Exit) as exc:
        contacts_cmd.search_contacts(
            field=None, operator="=", value=None, query_json="{", token=None, base_url=None, json_out=False
        )

    assert exc.value.exit_code == 2
    assert client.calls == []
