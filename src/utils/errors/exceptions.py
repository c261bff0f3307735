"""Exceções de domínio compartilhadas pelo serviço."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


class IntegrationError(Exception):
    """Base para falhas do fluxo Webflow → SendPulse."""


class ConfigurationError(IntegrationError):
    """Configuração obrigatória ausente ou inválida no startup.

    Fatal: nunca é tratada em tempo de requisição.
    """

    def __init__(self, errors: Iterable[str]) -> None:
        self.errors = list(errors)
        details = "; ".join(self.errors) or "configuração inválida"
        super().__init__(f"Invalid configuration: {details}")


class ContactValidationError(IntegrationError):
    """Dados de contato inválidos; nenhuma chamada ao SendPulse é feita."""


class MissingRequiredFieldError(ContactValidationError):
    """Campo obrigatório ausente no formulário."""

    def __init__(self, field: str, available_fields: Iterable[str]) -> None:
        self.field = field
        self.available_fields = list(available_fields)
        super().__init__(
            f"{field.capitalize()} is required but not found in form data. "
            f"Available fields: {', '.join(self.available_fields)}"
        )


class ConsentRequiredError(ContactValidationError):
    """Consentimento obrigatório recusado no formulário."""

    def __init__(self, consent_field: str, message: str) -> None:
        self.consent_field = consent_field
        super().__init__(message)


class VendorApiError(IntegrationError):
    """Falha do provedor de email marketing (não relacionada a credenciais).

    Attributes:
        message: Mensagem do provedor, ou do transporte quando não há corpo
        status_code: Status HTTP do provedor (None para falhas de rede)
        payload: Corpo de erro decodificado, quando disponível
    """

    prefix = "Vendor API error"

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        payload: Any = None,
    ) -> None:
        super().__init__(f"{self.prefix}: {message}")
        self.message = message
        self.status_code = status_code
        self.payload = payload

    @property
    def http_status(self) -> int:
        """Status a repassar ao chamador (500 quando desconhecido)."""
        return self.status_code or 500


class VendorAuthenticationError(VendorApiError):
    """Provedor rejeitou as credenciais após esgotar a recuperação local."""

    prefix = "Vendor authentication failed"
