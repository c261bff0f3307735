"""Settings da API interna de contatos (subscribe/unsubscribe)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class ContactsApiSettings:
    """Configurações da API de contatos.

    Attributes:
        auth_key: Chave esperada no header x-api-key
    """

    auth_key: str = ""

    def validate(self) -> list[str]:
        """Valida configurações da API de contatos."""
        errors: list[str] = []
        if not self.auth_key:
            errors.append("API_AUTH_KEY não configurado")
        return errors


def _load_from_env() -> ContactsApiSettings:
    """Carrega ContactsApiSettings de variáveis de ambiente."""
    return ContactsApiSettings(auth_key=os.getenv("API_AUTH_KEY", ""))


@lru_cache(maxsize=1)
def get_contacts_api_settings() -> ContactsApiSettings:
    """Retorna instância cacheada de ContactsApiSettings."""
    return _load_from_env()
