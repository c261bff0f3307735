"""Helpers compartilhados pelas rotas: gateway do app.state e API key."""

from __future__ import annotations

import hmac
import logging
from typing import TYPE_CHECKING

from fastapi import Request, status
from fastapi.responses import JSONResponse

from config.settings import get_contacts_api_settings

if TYPE_CHECKING:
    from app.protocols.contact_gateway import ContactGatewayProtocol

logger = logging.getLogger(__name__)

API_KEY_HEADER = "x-api-key"
GATEWAY_UNAVAILABLE_MESSAGE = "SendPulse service is not configured"


def get_contact_gateway(request: Request) -> ContactGatewayProtocol | None:
    """Gateway criado no lifespan (None se as credenciais faltarem)."""
    return getattr(request.app.state, "contact_gateway", None)


def is_api_key_valid(request: Request) -> bool:
    """Compara o header x-api-key com API_AUTH_KEY em tempo constante.

    Sem API_AUTH_KEY configurada, nenhuma chave é aceita.
    """
    expected = get_contacts_api_settings().auth_key
    provided = request.headers.get(API_KEY_HEADER)
    if not expected or not provided:
        return False
    return hmac.compare_digest(provided.encode(), expected.encode())


def unauthorized_response(request: Request) -> JSONResponse:
    logger.warning(
        "api_key_rejected",
        extra={
            "path": request.url.path,
            "api_key_present": API_KEY_HEADER in request.headers,
        },
    )
    return JSONResponse(
        content={"message": "Unauthorized"},
        status_code=status.HTTP_401_UNAUTHORIZED,
    )


def gateway_unavailable_response(status_code: int) -> JSONResponse:
    logger.error("contact_gateway_unavailable", extra={"component": "routes"})
    return JSONResponse(
        content={"success": False, "error": GATEWAY_UNAVAILABLE_MESSAGE},
        status_code=status_code,
    )
