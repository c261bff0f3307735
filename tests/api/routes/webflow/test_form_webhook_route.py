"""Testes dos endpoints de webhook do Webflow."""

from __future__ import annotations

import json
from types import SimpleNamespace

import pytest
from starlette.requests import Request

from api.connectors.webflow.signature import (
    SIGNATURE_HEADER,
    TIMESTAMP_HEADER,
    compute_webflow_signature,
)
from api.routes.webflow import webhook
from tests.fakes.fake_contact_gateway import FakeContactGateway


def _build_request(
    *,
    body: bytes = b"",
    headers: dict[str, str] | None = None,
    gateway: object | None = None,
    path: str = "/api/webhooks/form",
) -> Request:
    header_items = headers or {}
    raw_headers = [(k.lower().encode("utf-8"), v.encode("utf-8")) for k, v in header_items.items()]
    scope = {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": "POST",
        "path": path,
        "raw_path": path.encode("utf-8"),
        "query_string": b"",
        "headers": raw_headers,
        "app": SimpleNamespace(state=SimpleNamespace(contact_gateway=gateway)),
    }
    sent = False

    async def _receive() -> dict[str, object]:
        nonlocal sent
        if sent:
            return {"type": "http.request", "body": b"", "more_body": False}
        sent = True
        return {"type": "http.request", "body": body, "more_body": False}

    return Request(scope, _receive)


@pytest.fixture
def no_secret(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        webhook, "get_webflow_settings", lambda: SimpleNamespace(webhook_secret="")
    )


@pytest.fixture
def with_secret(monkeypatch: pytest.MonkeyPatch) -> str:
    monkeypatch.setattr(
        webhook, "get_webflow_settings", lambda: SimpleNamespace(webhook_secret="secret")
    )
    return "secret"


def _envelope(form_id: str, data: dict[str, object]) -> bytes:
    return json.dumps({"payload": {"formId": form_id, "data": data}}).encode("utf-8")


@pytest.mark.asyncio
async def test_marketing_declined_unsubscribes(no_secret: None) -> None:
    gateway = FakeContactGateway()
    request = _build_request(
        body=json.dumps(
            {
                "email": "a@b.co",
                "firstname": "Ann",
                "marketing": "false",
                "formId": "66d84d72633d424869c060b0",
            }
        ).encode("utf-8"),
        gateway=gateway,
    )

    response = await webhook.receive_form_submission(request)

    assert response == {
        "success": True,
        "message": "Contact unsubscribed from marketing communications",
        "data": {"result": True},
    }
    assert gateway.operations() == ["unsubscribe_contact"]
    assert gateway.calls[0][2] == "963387"


@pytest.mark.asyncio
async def test_privacy_declined_returns_failure_without_call(no_secret: None) -> None:
    gateway = FakeContactGateway()
    request = _build_request(
        body=_envelope("66d84d72633d424869c060b0", {"email": "a@b.co", "privacypolicy": False}),
        gateway=gateway,
    )

    response = await webhook.receive_form_submission(request)

    assert response == {
        "success": False,
        "error": "Privacy policy must be accepted to process form submission",
    }
    assert gateway.calls == []


@pytest.mark.asyncio
async def test_unmapped_form_id_goes_to_default(no_secret: None) -> None:
    gateway = FakeContactGateway(default_address_book_id="961879")
    request = _build_request(body=_envelope("unknown", {"email": "a@b.co"}), gateway=gateway)

    response = await webhook.receive_form_submission(request)

    assert response["success"] is True
    assert response["message"] == "Contact subscribed successfully"
    assert gateway.calls[0][2] == "961879"


@pytest.mark.asyncio
async def test_invalid_signature_forbidden(with_secret: str) -> None:
    gateway = FakeContactGateway()
    request = _build_request(
        body=_envelope("unknown", {"email": "a@b.co"}),
        headers={SIGNATURE_HEADER: "deadbeef", TIMESTAMP_HEADER: "1700000000"},
        gateway=gateway,
    )

    response = await webhook.receive_form_submission(request)

    assert response.status_code == 403
    assert json.loads(response.body) == {"error": "Forbidden"}
    assert gateway.calls == []


@pytest.mark.asyncio
async def test_valid_signature_accepted(with_secret: str) -> None:
    gateway = FakeContactGateway()
    body = _envelope("66d84d72633d424869c060d2", {"email": "a@b.co"})
    request = _build_request(
        body=body,
        headers={
            SIGNATURE_HEADER: compute_webflow_signature(body, with_secret, "1700000000"),
            TIMESTAMP_HEADER: "1700000000",
        },
        gateway=gateway,
    )

    response = await webhook.receive_form_submission(request)

    assert response["success"] is True
    assert gateway.calls[0][2] == "963392"


@pytest.mark.asyncio
async def test_invalid_json_reported_with_200(no_secret: None) -> None:
    request = _build_request(body=b"{not json", gateway=FakeContactGateway())

    response = await webhook.receive_form_submission(request)

    assert response == {"success": False, "error": "Invalid JSON payload"}


@pytest.mark.asyncio
async def test_missing_gateway_reported_with_200(no_secret: None) -> None:
    request = _build_request(body=_envelope("x", {"email": "a@b.co"}), gateway=None)

    response = await webhook.receive_form_submission(request)

    assert response == {"success": False, "error": "SendPulse service is not configured"}


@pytest.mark.asyncio
async def test_subscription_webhook_echoes_payload() -> None:
    payload = {"triggerType": "subscription", "email": "a@b.co"}
    request = _build_request(
        body=json.dumps(payload).encode("utf-8"), path="/api/webhooks/subscription"
    )

    assert await webhook.receive_subscription_event(request) == payload


@pytest.mark.asyncio
async def test_subscription_webhook_invalid_json() -> None:
    request = _build_request(body=b"nope", path="/api/webhooks/subscription")

    assert await webhook.receive_subscription_event(request) == {
        "error": "Webhook processing failed"
    }
