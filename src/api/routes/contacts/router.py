"""Endpoints da API de contatos.

Endpoints (todos exigem header x-api-key):
- POST /api/subscribe: adiciona emails a um address book
- POST /api/unsubscribe: adiciona e em seguida descadastra emails
- GET /api/test-addressbook: lista address books (diagnóstico)
- POST /api/test-addressbook: adiciona contato de teste (diagnóstico)
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from api.routes.dependencies import (
    gateway_unavailable_response,
    get_contact_gateway,
    is_api_key_valid,
    unauthorized_response,
)
from app.bootstrap.dependencies import create_subscriptions_use_case
from app.domain.results import OperationResult
from app.use_cases.contacts import (
    EMAILS_REQUIRED_MESSAGE,
    TEST_CONTACT_REQUIRED_MESSAGE,
    EmailSubscription,
)

logger = logging.getLogger(__name__)

router = APIRouter()


class AddressBookRequest(BaseModel):
    """Base para corpos que trazem addressBookId (string ou número)."""

    model_config = ConfigDict(populate_by_name=True)

    address_book_id: str | None = Field(default=None, alias="addressBookId")

    @field_validator("address_book_id", mode="before")
    @classmethod
    def coerce_address_book_id(cls, value: Any) -> Any:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value


class EmailEntryModel(BaseModel):
    """Email com variables opcionais."""

    email: str = Field(min_length=1)
    variables: dict[str, Any] | None = None


class EmailsRequest(AddressBookRequest):
    """Corpo de /api/subscribe e /api/unsubscribe."""

    emails: list[EmailEntryModel] = Field(default_factory=list)

    def to_subscriptions(self) -> list[EmailSubscription]:
        return [
            EmailSubscription(email=entry.email, variables=entry.variables or {})
            for entry in self.emails
        ]


class DiagnosticContactRequest(AddressBookRequest):
    """Corpo de POST /api/test-addressbook."""

    email: str | None = None


def _to_response(result: OperationResult) -> JSONResponse:
    return JSONResponse(content=result.as_dict(), status_code=result.status_code)


def _bad_request(error: str) -> JSONResponse:
    return JSONResponse(
        content={"success": False, "error": error},
        status_code=status.HTTP_400_BAD_REQUEST,
    )


async def _parse_body(request: Request, model: type[BaseModel]) -> BaseModel | None:
    try:
        return model.model_validate(await request.json())
    except (ValueError, ValidationError) as exc:
        logger.warning(
            "contacts_api_invalid_body",
            extra={"path": request.url.path, "error_type": type(exc).__name__},
        )
        return None


@router.post("/subscribe")
async def subscribe(request: Request) -> JSONResponse:
    """Adiciona os emails ao address book informado (ou ao padrão)."""
    if not is_api_key_valid(request):
        return unauthorized_response(request)

    body = await _parse_body(request, EmailsRequest)
    if body is None:
        return _bad_request(EMAILS_REQUIRED_MESSAGE)

    gateway = get_contact_gateway(request)
    if gateway is None:
        return gateway_unavailable_response(status.HTTP_503_SERVICE_UNAVAILABLE)

    result = await create_subscriptions_use_case(gateway).subscribe(
        body.to_subscriptions(), body.address_book_id
    )
    return _to_response(result)


@router.post("/unsubscribe")
async def unsubscribe(request: Request) -> JSONResponse:
    """Descadastra os emails do address book informado (ou do padrão)."""
    if not is_api_key_valid(request):
        return unauthorized_response(request)

    body = await _parse_body(request, EmailsRequest)
    if body is None:
        return _bad_request(EMAILS_REQUIRED_MESSAGE)

    gateway = get_contact_gateway(request)
    if gateway is None:
        return gateway_unavailable_response(status.HTTP_503_SERVICE_UNAVAILABLE)

    result = await create_subscriptions_use_case(gateway).unsubscribe(
        body.to_subscriptions(), body.address_book_id
    )
    return _to_response(result)


@router.get("/test-addressbook")
async def list_address_books(request: Request) -> JSONResponse:
    """Lista os address books acessíveis com as credenciais configuradas."""
    if not is_api_key_valid(request):
        return unauthorized_response(request)

    gateway = get_contact_gateway(request)
    if gateway is None:
        return gateway_unavailable_response(status.HTTP_500_INTERNAL_SERVER_ERROR)

    result = await create_subscriptions_use_case(gateway).list_address_books()
    return _to_response(result)


@router.post("/test-addressbook")
async def add_test_contact(request: Request) -> JSONResponse:
    """Adiciona um contato de teste ao address book informado."""
    if not is_api_key_valid(request):
        return unauthorized_response(request)

    body = await _parse_body(request, DiagnosticContactRequest)
    if body is None:
        return _bad_request(TEST_CONTACT_REQUIRED_MESSAGE)

    gateway = get_contact_gateway(request)
    if gateway is None:
        return gateway_unavailable_response(status.HTTP_500_INTERNAL_SERVER_ERROR)

    result = await create_subscriptions_use_case(gateway).add_test_contact(
        body.address_book_id, body.email
    )
    return _to_response(result)
