"""correlation_id por requisição, injetado em todos os logs.

Vem do header `x-correlation-id` quando o chamador envia um; caso
contrário um UUID é gerado. ContextVar mantém o valor isolado por task.
"""

from __future__ import annotations

import uuid
from contextvars import ContextVar, Token

CORRELATION_ID_HEADER = "x-correlation-id"

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def get_correlation_id() -> str:
    """Retorna o correlation_id do contexto atual ("" se não definido)."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """Define o correlation_id no contexto atual.

    Args:
        correlation_id: ID a definir. Se None ou vazio, gera um novo UUID.

    Returns:
        Token para reset posterior via reset_correlation_id().
    """
    return _correlation_id.set(correlation_id or generate_correlation_id())


def reset_correlation_id(token: Token[str]) -> None:
    _correlation_id.reset(token)


def generate_correlation_id() -> str:
    return str(uuid.uuid4())
