"""Settings específicas de SendPulse.

Configurações da integração com a API REST do SendPulse
(autenticação OAuth client_credentials e address books).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

# Constantes da API SendPulse
SENDPULSE_API_BASE_URL: str = "https://api.sendpulse.com"
DEFAULT_ADDRESS_BOOK_ID: str = "961879"
DEFAULT_TOKEN_SAFETY_MARGIN_SECONDS: int = 300


@dataclass(frozen=True)
class SendPulseSettings:
    """Configurações da integração SendPulse.

    Attributes:
        api_base_url: URL base da API REST
        client_id: ID do usuário da API (client_id OAuth)
        client_secret: Secret da API (client_secret OAuth)
        default_address_book_id: Address book usado como destino padrão e fallback
        token_safety_margin_seconds: Margem antes da expiração em que o token
            passa a ser tratado como expirado
        request_timeout_seconds: Timeout para requisições HTTP
    """

    # Credenciais (carregadas de env)
    client_id: str = ""
    client_secret: str = ""

    # API
    api_base_url: str = SENDPULSE_API_BASE_URL
    default_address_book_id: str = DEFAULT_ADDRESS_BOOK_ID

    # Token e timeouts
    token_safety_margin_seconds: int = DEFAULT_TOKEN_SAFETY_MARGIN_SECONDS
    request_timeout_seconds: float = 30.0

    @property
    def has_credentials(self) -> bool:
        """Retorna True se client_id e client_secret estão configurados."""
        return bool(self.client_id and self.client_secret)

    def get_emails_endpoint(self, address_book_id: str) -> str:
        """Retorna path para inclusão de emails em um address book.

        Args:
            address_book_id: ID do address book de destino.

        Returns:
            Path no formato: /addressbooks/{id}/emails

        Raises:
            ValueError: Se address_book_id vazio.
        """
        if not address_book_id:
            raise ValueError("address_book_id é obrigatório")
        return f"/addressbooks/{address_book_id}/emails"

    def get_unsubscribe_endpoint(self, address_book_id: str) -> str:
        """Retorna path para descadastro de emails em um address book."""
        return f"{self.get_emails_endpoint(address_book_id)}/unsubscribe"

    def validate(self) -> list[str]:
        """Valida configurações mínimas de SendPulse.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.client_id:
            errors.append("SENDPULSE_API_USER_ID não configurado")

        if not self.client_secret:
            errors.append("SENDPULSE_API_SECRET não configurado")

        if not self.default_address_book_id:
            errors.append("SENDPULSE_DEFAULT_ADDRESS_BOOK_ID não pode ser vazio")

        if self.token_safety_margin_seconds < 0:
            errors.append("SENDPULSE_TOKEN_SAFETY_MARGIN_SECONDS deve ser >= 0")

        if self.request_timeout_seconds <= 0:
            errors.append("SENDPULSE_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _load_from_env() -> SendPulseSettings:
    """Carrega SendPulseSettings a partir de variáveis de ambiente."""
    return SendPulseSettings(
        client_id=os.getenv("SENDPULSE_API_USER_ID", ""),
        client_secret=os.getenv("SENDPULSE_API_SECRET", ""),
        api_base_url=os.getenv("SENDPULSE_API_BASE_URL", SENDPULSE_API_BASE_URL),
        default_address_book_id=os.getenv(
            "SENDPULSE_DEFAULT_ADDRESS_BOOK_ID", DEFAULT_ADDRESS_BOOK_ID
        ),
        token_safety_margin_seconds=int(
            os.getenv(
                "SENDPULSE_TOKEN_SAFETY_MARGIN_SECONDS",
                str(DEFAULT_TOKEN_SAFETY_MARGIN_SECONDS),
            )
        ),
        request_timeout_seconds=float(
            os.getenv("SENDPULSE_REQUEST_TIMEOUT_SECONDS", "30")
        ),
    )


@lru_cache(maxsize=1)
def get_sendpulse_settings() -> SendPulseSettings:
    """Retorna instância cacheada de SendPulseSettings.

    A cache garante singleton para múltiplas injeções.
    """
    return _load_from_env()
