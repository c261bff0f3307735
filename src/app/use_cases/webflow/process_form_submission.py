"""Use case de submissão de formulário Webflow → SendPulse.

Fluxo:
1. Consentimento de privacidade recusado → rejeita sem chamar o SendPulse
2. Extrai ContactData do formulário (email obrigatório)
3. Resolve o address book pelo formId (ou usa o padrão do gateway)
4. Marketing recusado → unsubscribe; caso contrário → add contact

Nenhuma falha é propagada: o resultado sempre vira OperationResult, para
que o webhook responda 200 e o Webflow não reenvie o evento.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from app.domain.contact import MARKETING_CONSENT_FIELD, PRIVACY_CONSENT_FIELD
from app.domain.results import OperationResult
from app.observability import get_correlation_id, record_contact_sync
from app.services.address_book_resolver import resolve_address_book
from app.services.field_extractor import extract_contact_data
from utils.errors import ConsentRequiredError, ContactValidationError, VendorApiError

if TYPE_CHECKING:
    from app.protocols.contact_gateway import ContactGatewayProtocol

logger = logging.getLogger(__name__)

PRIVACY_REQUIRED_MESSAGE = "Privacy policy must be accepted to process form submission"
SUBSCRIBED_MESSAGE = "Contact subscribed successfully"
UNSUBSCRIBED_MESSAGE = "Contact unsubscribed from marketing communications"


def is_consent_declined(value: Any) -> bool:
    """Webflow envia checkbox desmarcado como False ou "false".

    Ausência do campo não conta como recusa.
    """
    return value is False or value == "false"


def ensure_privacy_consent(form_data: Mapping[str, Any]) -> None:
    """Raises ConsentRequiredError se a política de privacidade foi recusada."""
    if is_consent_declined(form_data.get(PRIVACY_CONSENT_FIELD)):
        raise ConsentRequiredError(PRIVACY_CONSENT_FIELD, PRIVACY_REQUIRED_MESSAGE)


class ProcessFormSubmissionUseCase:
    """Sincroniza uma submissão de formulário com o provedor de contatos."""

    def __init__(self, gateway: ContactGatewayProtocol) -> None:
        self._gateway = gateway

    async def execute(
        self,
        form_data: Mapping[str, Any],
        form_id: str | None = None,
    ) -> OperationResult:
        """Processa a submissão.

        Args:
            form_data: Campos do formulário (mapa solto).
            form_id: ID do formulário no Webflow, quando conhecido.

        Returns:
            OperationResult com success=False para falhas de validação,
            consentimento ou provedor.
        """
        correlation_id = get_correlation_id()

        try:
            ensure_privacy_consent(form_data)
            contact = extract_contact_data(form_data)
        except ContactValidationError as exc:
            logger.warning(
                "form_submission_rejected",
                extra={
                    "form_id": form_id,
                    "error_type": type(exc).__name__,
                    "error": str(exc),
                },
            )
            record_contact_sync("rejected", correlation_id=correlation_id)
            return OperationResult.failed(str(exc))

        address_book_id = (
            resolve_address_book(form_id, self._gateway.default_address_book_id).id
            if form_id
            else None
        )
        marketing_declined = is_consent_declined(form_data.get(MARKETING_CONSENT_FIELD))

        try:
            if marketing_declined:
                data = await self._gateway.unsubscribe_contact(contact, address_book_id)
                outcome, message = "unsubscribed", UNSUBSCRIBED_MESSAGE
            else:
                data = await self._gateway.add_contact(contact, address_book_id)
                outcome, message = "subscribed", SUBSCRIBED_MESSAGE
        except VendorApiError as exc:
            logger.error(
                "form_submission_sync_failed",
                extra={
                    "form_id": form_id,
                    "address_book_id": address_book_id,
                    "marketing_declined": marketing_declined,
                    "status_code": exc.status_code,
                    "error": exc.message,
                },
            )
            record_contact_sync("failed", address_book_id, correlation_id)
            return OperationResult.failed(str(exc))

        logger.info(
            "form_submission_synced",
            extra={
                "form_id": form_id,
                "address_book_id": address_book_id,
                "outcome": outcome,
                "attributes_count": len(contact.attributes),
            },
        )
        record_contact_sync(outcome, address_book_id, correlation_id)
        return OperationResult.ok(message, data)
