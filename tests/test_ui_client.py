from __future__ import annotations

import contextlib

import pytest
import requests

from crud_ui import forms
from crud_ui.components import load_items
from crud_ui.config import ALERT_REFRESH_SECONDS, ALERT_TTL_SECONDS
from crud_ui.api_client import ApiError, ResourceClient
from crud_ui.state import active_alerts, dismiss_alert, init, push_alert


class FakeResponse:
    def __init__(self, status_code: int, body=None):
        self.status_code = status_code
        self._body = body

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    def json(self):
        if self._body is None:
            raise ValueError("no body")
        return self._body


class FakeSession:
    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def request(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        result = self.responses.pop(0)
        if isinstance(result, Exception):
            raise result
        return result


def test_list_sends_active_filter_only_when_set():
    session = FakeSession(FakeResponse(200, []), FakeResponse(200, [{"id": 1}]))
    client = ResourceClient("http://api:3000/", "users", session=session)

    assert client.list() == []
    assert client.list(active=False) == [{"id": 1}]

    assert session.calls[0][:2] == ("GET", "http://api:3000/users")
    assert session.calls[0][2]["params"] == {}
    assert session.calls[1][2]["params"] == {"active": "false"}


def test_create_and_update_send_json():
    session = FakeSession(FakeResponse(201, {"id": 7}), FakeResponse(200, {"id": 7, "age": 31}))
    client = ResourceClient("http://api", "users", session=session)

    assert client.create({"name": "Ana"}) == {"id": 7}
    assert client.update(7, {"age": 31})["age"] == 31
    assert session.calls[0][0] == "POST"
    assert session.calls[1][:2] == ("PATCH", "http://api/users/7")
    assert session.calls[1][2]["json"] == {"age": 31}


def test_server_message_is_surfaced():
    session = FakeSession(FakeResponse(400, {"statusCode": 400, "message": "email: value is not a valid email address"}))
    client = ResourceClient("http://api", "users", session=session)
    with pytest.raises(ApiError) as exc:
        client.create({"name": "Ana", "email": "x"})
    assert exc.value.status_code == 400
    assert exc.value.message == "email: value is not a valid email address"


def test_fallback_message_when_server_has_none():
    session = FakeSession(FakeResponse(500), FakeResponse(404, {}))
    client = ResourceClient("http://api", "filmes", session=session)
    with pytest.raises(ApiError) as exc:
        client.delete(3)
    assert exc.value.message == "Erro ao excluir filme"
    with pytest.raises(ApiError) as exc:
        client.get(3)
    assert exc.value.message == "Erro ao carregar filme"


def test_network_errors_become_api_errors():
    session = FakeSession(requests.ConnectionError("connection refused"))
    client = ResourceClient("http://api", "users", session=session)
    with pytest.raises(ApiError) as exc:
        client.list()
    assert exc.value.message.startswith("Erro ao carregar usuários")
    assert exc.value.status_code is None


def test_alerts_expire_and_can_be_dismissed():
    store = {}
    ui = init("users", store)
    assert store["users_ui"] is ui
    assert init("users", store) is ui

    first = push_alert(ui, "Usuário criado com sucesso!", now=100.0)
    second = push_alert(ui, "Erro ao criar usuário", "error", now=103.0)

    assert [a["id"] for a in active_alerts(ui, now=104.0, ttl=5)] == [first["id"], second["id"]]
    assert [a["id"] for a in active_alerts(ui, now=106.0, ttl=5)] == [second["id"]]

    dismiss_alert(ui, second["id"])
    assert active_alerts(ui, now=106.0, ttl=5) == []


def test_user_payload_normalizes_age():
    assert forms.user_payload(" Ana ", "ana@x.com", None, True) == {
        "name": "Ana",
        "email": "ana@x.com",
        "age": None,
        "isActive": True,
    }
    assert forms.user_payload("Ana", "ana@x.com", "", False)["age"] is None
    assert forms.user_payload("Ana", "ana@x.com", 30.0, True)["age"] == 30
    with pytest.raises(ValueError):
        forms.user_payload("Ana", "ana@x.com", "trinta", True)


def test_form_defaults_follow_edited_entity():
    assert forms.user_form_defaults(None)["isActive"] is True
    editing = {"id": 1, "name": "Ana", "email": "ana@x.com", "age": None, "isActive": False}
    assert forms.user_form_defaults(editing) == {"name": "Ana", "email": "ana@x.com", "age": None, "isActive": False}
    assert forms.filme_form_defaults({"nome": "Bacurau", "duracao": 131})["duracao"] == 131


def test_format_date():
    assert forms.format_date("2024-03-05T10:20:30.123456") == "05/03/2024"
    assert forms.format_date("2024-03-05T10:20:30Z") == "05/03/2024"
    assert forms.format_date(None) == "-"
    assert forms.format_date("ontem") == "-"


class FakeSlot:
    def __init__(self):
        self.renders = 0

    def container(self):
        self.renders += 1
        return contextlib.nullcontext()


def test_load_items_draws_loading_placeholder_before_fetching():
    ui = init("users", {})
    ui["error"] = "antigo"
    slot = FakeSlot()
    seen = []
    client = ResourceClient("http://api", "users", session=FakeSession(FakeResponse(200, [{"id": 7}])))

    load_items(client, ui, slot, lambda: seen.append((ui["loading"], list(ui["items"]), ui["error"])), active=True)

    assert seen == [(True, [], ""), (False, [{"id": 7}], "")]
    assert slot.renders == 2
    assert client.session.calls[0][2]["params"] == {"active": "true"}


def test_load_items_keeps_error_and_clears_loading_flag():
    ui = init("filmes", {})
    seen = []
    client = ResourceClient("http://api", "filmes", session=FakeSession(requests.ConnectionError("down")))

    load_items(client, ui, FakeSlot(), lambda: seen.append(ui["loading"]))

    assert seen == [True, False]
    assert ui["loading"] is False
    assert ui["error"].startswith("Erro ao carregar filmes")
    assert ui["items"] == []


def test_alert_banners_refresh_well_within_their_ttl():
    assert 0 < ALERT_REFRESH_SECONDS <= 1.0 < ALERT_TTL_SECONDS
