"""Testes do use case de submissão de formulário Webflow."""

from __future__ import annotations

import pytest

from app.use_cases.webflow import (
    PRIVACY_REQUIRED_MESSAGE,
    SUBSCRIBED_MESSAGE,
    UNSUBSCRIBED_MESSAGE,
    ProcessFormSubmissionUseCase,
    is_consent_declined,
)
from tests.fakes.fake_contact_gateway import FakeContactGateway
from utils.errors import VendorApiError

DEMO_REQUEST_FORM_ID = "66d84d72633d424869c060b0"


@pytest.mark.parametrize(
    ("value", "declined"),
    [(False, True), ("false", True), (True, False), ("true", False), (None, False), ("", False)],
)
def test_is_consent_declined(value: object, declined: bool) -> None:
    assert is_consent_declined(value) is declined


@pytest.mark.asyncio
async def test_marketing_declined_unsubscribes_from_mapped_book() -> None:
    gateway = FakeContactGateway()
    use_case = ProcessFormSubmissionUseCase(gateway)

    result = await use_case.execute(
        {"email": "a@b.co", "firstname": "Ann", "marketing": "false"},
        DEMO_REQUEST_FORM_ID,
    )

    assert result.success is True
    assert result.message == UNSUBSCRIBED_MESSAGE
    assert gateway.operations() == ["unsubscribe_contact"]
    _, contact, address_book_id = gateway.calls[0]
    assert address_book_id == "963387"
    assert contact is not None and contact.email == "a@b.co"


@pytest.mark.asyncio
async def test_privacy_declined_makes_no_vendor_call() -> None:
    gateway = FakeContactGateway()
    use_case = ProcessFormSubmissionUseCase(gateway)

    result = await use_case.execute(
        {"email": "a@b.co", "privacypolicy": False}, DEMO_REQUEST_FORM_ID
    )

    assert result.success is False
    assert result.error == PRIVACY_REQUIRED_MESSAGE
    assert gateway.calls == []


@pytest.mark.asyncio
async def test_privacy_checked_before_email() -> None:
    gateway = FakeContactGateway()

    result = await ProcessFormSubmissionUseCase(gateway).execute({"privacypolicy": "false"})

    assert result.error == PRIVACY_REQUIRED_MESSAGE


@pytest.mark.asyncio
async def test_unmapped_form_uses_default_book() -> None:
    gateway = FakeContactGateway(default_address_book_id="961879")

    result = await ProcessFormSubmissionUseCase(gateway).execute(
        {"email": "a@b.co"}, "not-a-known-form"
    )

    assert result.success is True
    assert result.message == SUBSCRIBED_MESSAGE
    assert gateway.calls[0][0] == "add_contact"
    assert gateway.calls[0][2] == "961879"


@pytest.mark.asyncio
async def test_without_form_id_delegates_default_to_gateway() -> None:
    gateway = FakeContactGateway()

    result = await ProcessFormSubmissionUseCase(gateway).execute({"email": "a@b.co"})

    assert result.success is True
    assert gateway.calls[0][2] is None


@pytest.mark.asyncio
async def test_missing_email_reported_as_failure() -> None:
    gateway = FakeContactGateway()

    result = await ProcessFormSubmissionUseCase(gateway).execute({"firstname": "Ann"})

    assert result.success is False
    assert result.error is not None
    assert result.error.startswith("Email is required but not found in form data")
    assert gateway.calls == []


@pytest.mark.asyncio
async def test_vendor_failure_reported_as_failure() -> None:
    gateway = FakeContactGateway(
        failures={"add_contact": VendorApiError("Book not found", status_code=404)}
    )

    result = await ProcessFormSubmissionUseCase(gateway).execute(
        {"email": "a@b.co"}, DEMO_REQUEST_FORM_ID
    )

    assert result.success is False
    assert result.error == "Vendor API error: Book not found"
    assert result.status_code == 200


@pytest.mark.asyncio
async def test_subscribed_contact_keeps_consent_attributes() -> None:
    gateway = FakeContactGateway()

    await ProcessFormSubmissionUseCase(gateway).execute(
        {"email": "a@b.co", "privacypolicy": True, "marketing": True}
    )

    contact = gateway.calls[0][1]
    assert contact is not None
    assert contact.attributes["marketing"] == "true"
    assert contact.variables() == {}
