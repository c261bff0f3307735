"""Factories de dependências: criação de implementações concretas.

Único ponto em app/ que conhece a camada api/ (conector SendPulse).
As rotas recebem o gateway já construído via app.state.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.use_cases.contacts import ManageSubscriptionsUseCase
from app.use_cases.webflow import ProcessFormSubmissionUseCase

if TYPE_CHECKING:
    from api.connectors.sendpulse import SendPulseHttpService
    from app.protocols.contact_gateway import ContactGatewayProtocol

logger = logging.getLogger(__name__)


def create_contact_gateway() -> SendPulseHttpService:
    """Cria o serviço SendPulse com settings do ambiente.

    Raises:
        ConfigurationError: Se credenciais não estiverem configuradas.
    """
    from api.connectors.sendpulse import create_sendpulse_service

    service = create_sendpulse_service()
    logger.info(
        "contact_gateway_created",
        extra={
            "component": "bootstrap",
            "provider": "sendpulse",
            "default_address_book_id": service.default_address_book_id,
        },
    )
    return service


def create_form_submission_use_case(
    gateway: ContactGatewayProtocol,
) -> ProcessFormSubmissionUseCase:
    return ProcessFormSubmissionUseCase(gateway)


def create_subscriptions_use_case(
    gateway: ContactGatewayProtocol,
) -> ManageSubscriptionsUseCase:
    return ManageSubscriptionsUseCase(gateway)
