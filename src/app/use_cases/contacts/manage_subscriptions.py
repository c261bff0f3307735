"""Use cases da API de contatos (subscribe/unsubscribe em lote).

Cada email da requisição vira um ContactData (variables como atributos)
e é enviado individualmente ao provedor. Falhas não são compensadas:
emails já processados antes da falha permanecem no estado novo.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from app.domain.contact import ContactData
from app.domain.results import OperationResult
from app.observability import get_correlation_id, record_contact_sync
from app.services.field_extractor import stringify_value
from utils.errors import VendorApiError

if TYPE_CHECKING:
    from app.protocols.contact_gateway import ContactGatewayProtocol

logger = logging.getLogger(__name__)

EMAILS_REQUIRED_MESSAGE = "addressBookId and emails are required"
TEST_CONTACT_REQUIRED_MESSAGE = "addressBookId and email are required"
TEST_CONTACT_ATTRIBUTES = {"name": "Test Contact", "source": "api_test"}


@dataclass(frozen=True, slots=True)
class EmailSubscription:
    """Email da requisição com variables opcionais."""

    email: str
    variables: Mapping[str, Any] = field(default_factory=dict)

    def to_contact(self) -> ContactData:
        attributes = {
            key: stringify_value(value)
            for key, value in self.variables.items()
            if value is not None
        }
        return ContactData(email=self.email, attributes=attributes)


class ManageSubscriptionsUseCase:
    """Operações em lote sobre address books do provedor."""

    def __init__(self, gateway: ContactGatewayProtocol) -> None:
        self._gateway = gateway

    async def subscribe(
        self,
        emails: Sequence[EmailSubscription],
        address_book_id: str | None = None,
    ) -> OperationResult:
        """Adiciona cada email ao address book (padrão quando None)."""
        if not emails:
            return OperationResult.failed(EMAILS_REQUIRED_MESSAGE, status_code=400)

        try:
            results = await self._add_all(emails, address_book_id)
        except VendorApiError as exc:
            return self._vendor_failure("subscribe", exc, address_book_id)

        return OperationResult.ok(f"Successfully added {len(emails)} email(s)", results)

    async def unsubscribe(
        self,
        emails: Sequence[EmailSubscription],
        address_book_id: str | None = None,
    ) -> OperationResult:
        """Descadastra cada email do address book.

        O SendPulse só descadastra contatos existentes na lista, então todos
        os emails são adicionados antes.
        """
        if not emails:
            return OperationResult.failed(EMAILS_REQUIRED_MESSAGE, status_code=400)

        try:
            await self._add_all(emails, address_book_id)
            results = []
            for entry in emails:
                results.append(
                    await self._gateway.unsubscribe_contact(entry.to_contact(), address_book_id)
                )
                record_contact_sync("unsubscribed", address_book_id, get_correlation_id())
        except VendorApiError as exc:
            return self._vendor_failure("unsubscribe", exc, address_book_id)

        return OperationResult.ok(f"Successfully unsubscribed {len(emails)} email(s)", results)

    async def list_address_books(self) -> OperationResult:
        """Diagnóstico: lista os address books acessíveis com as credenciais."""
        try:
            books = await self._gateway.get_address_books()
        except VendorApiError as exc:
            logger.error(
                "address_books_list_failed",
                extra={"status_code": exc.status_code, "error": exc.message},
            )
            return OperationResult.failed(str(exc), status_code=500)

        logger.info(
            "address_books_listed",
            extra={"count": len(books) if isinstance(books, list) else None},
        )
        return OperationResult.ok("Address books retrieved successfully", books)

    async def add_test_contact(
        self,
        address_book_id: str | None,
        email: str | None,
    ) -> OperationResult:
        """Diagnóstico: adiciona um contato de teste a um address book."""
        if not address_book_id or not email:
            return OperationResult.failed(TEST_CONTACT_REQUIRED_MESSAGE, status_code=400)

        contact = ContactData(email=email, attributes=dict(TEST_CONTACT_ATTRIBUTES))
        try:
            result = await self._gateway.add_contact(contact, address_book_id)
        except VendorApiError as exc:
            logger.error(
                "test_contact_failed",
                extra={
                    "address_book_id": address_book_id,
                    "status_code": exc.status_code,
                    "error": exc.message,
                },
            )
            return OperationResult.failed(str(exc), status_code=500)

        return OperationResult.ok(
            f"Contact successfully added to address book {address_book_id}", result
        )

    async def _add_all(
        self,
        emails: Sequence[EmailSubscription],
        address_book_id: str | None,
    ) -> list[Any]:
        results = []
        for entry in emails:
            results.append(await self._gateway.add_contact(entry.to_contact(), address_book_id))
            record_contact_sync("subscribed", address_book_id, get_correlation_id())
        return results

    def _vendor_failure(
        self,
        operation: str,
        exc: VendorApiError,
        address_book_id: str | None,
    ) -> OperationResult:
        logger.error(
            "contacts_api_failed",
            extra={
                "operation": operation,
                "address_book_id": address_book_id,
                "status_code": exc.status_code,
                "error": exc.message,
            },
        )
        record_contact_sync("failed", address_book_id, get_correlation_id())
        return OperationResult.failed(str(exc), status_code=exc.http_status)
