"""Settings específicas de Webflow.

Configurações do webhook de formulários do Webflow.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class WebflowSettings:
    """Configurações do canal Webflow.

    Attributes:
        webhook_secret: Secret para validação HMAC dos webhooks.
            Vazio desabilita a validação (apenas desenvolvimento).
    """

    webhook_secret: str = ""

    @property
    def signature_enforced(self) -> bool:
        """Retorna True se a validação de assinatura está ativa."""
        return bool(self.webhook_secret)

    def validate(self) -> list[str]:
        """Valida configurações de Webflow.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []
        if not self.webhook_secret:
            errors.append("WEBFLOW_WEBHOOK_SECRET não configurado")
        return errors


def _load_from_env() -> WebflowSettings:
    """Carrega WebflowSettings de variáveis de ambiente."""
    return WebflowSettings(
        webhook_secret=os.getenv(
            "WEBFLOW_WEBHOOK_SECRET", os.getenv("WEBFLOW_WEBHOOK_SECRET_LOCAL", "")
        ),
    )


@lru_cache(maxsize=1)
def get_webflow_settings() -> WebflowSettings:
    """Retorna instância cacheada de WebflowSettings."""
    return _load_from_env()
