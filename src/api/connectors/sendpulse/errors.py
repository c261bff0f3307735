"""Erros e helpers de parsing para a API SendPulse."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from utils.errors import VendorApiError, VendorAuthenticationError

if TYPE_CHECKING:
    import httpx

UNAUTHORIZED_STATUS = 401
UNAUTHORIZED_MARKER = "Unauthorized"


class SendPulseApiError(VendorApiError):
    """Falha retornada pela API SendPulse (ou pelo transporte HTTP)."""

    prefix = "SendPulse API error"

    @property
    def is_unauthorized(self) -> bool:
        """True para 401 ou mensagem contendo "Unauthorized"."""
        return self.status_code == UNAUTHORIZED_STATUS or UNAUTHORIZED_MARKER in self.message


class SendPulseAuthenticationError(SendPulseApiError, VendorAuthenticationError):
    """SendPulse rejeitou as credenciais (token ou requisição re-autenticada)."""

    prefix = "Failed to authenticate with SendPulse API"


def parse_error_message(body: Any) -> str | None:
    """Extrai a mensagem de erro de um corpo JSON do SendPulse.

    Formatos conhecidos:
        {"error_code": 213, "message": "Book not found"}
        {"error": "invalid_client", "error_description": "...", "message": "..."}
    """
    if not isinstance(body, dict):
        return None
    for key in ("message", "error_description", "error"):
        value = body.get(key)
        if isinstance(value, str) and value:
            return value
    return None


def error_from_response(
    response: httpx.Response,
    error_cls: type[SendPulseApiError] = SendPulseApiError,
) -> SendPulseApiError:
    """Constrói o erro uniforme para uma resposta HTTP de erro."""
    try:
        body: Any = response.json()
    except ValueError:
        body = None

    message = parse_error_message(body) or (
        f"Request failed with status code {response.status_code}"
    )
    return error_cls(message, status_code=response.status_code, payload=body)


def error_from_transport(
    exc: Exception,
    error_cls: type[SendPulseApiError] = SendPulseApiError,
) -> SendPulseApiError:
    """Constrói o erro uniforme para falha de rede/timeout."""
    return error_cls(str(exc) or type(exc).__name__)
