"""Política de retry para requisições autenticadas no SendPulse.

Falha de autorização (401 ou "Unauthorized") invalida o token e repete a
requisição com um token novo, até `max_attempts` tentativas no total.
Qualquer outra falha é terminal e propaga imediatamente.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Protocol, TypeVar

from .errors import SendPulseApiError, SendPulseAuthenticationError

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_MAX_ATTEMPTS = 2


class TokenSupplier(Protocol):
    """Fonte de tokens usada pela política de retry."""

    async def get_token(self) -> str: ...

    def invalidate(self, token_value: str | None = None) -> None: ...


async def call_with_token_retry(
    request: Callable[[str], Awaitable[T]],
    token_supplier: TokenSupplier,
    *,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> T:
    """Executa `request(token)` com re-autenticação limitada.

    Args:
        request: Coroutine factory que recebe o bearer token.
        token_supplier: Fonte de tokens (TokenCache).
        max_attempts: Total de tentativas (padrão: 1 + 1 retry).

    Returns:
        Resultado de `request`.

    Raises:
        SendPulseAuthenticationError: Se todas as tentativas falharem por
            autorização, ou se o fetch do token falhar.
        SendPulseApiError: Para qualquer outra falha (sem retry).
    """
    if max_attempts < 1:
        raise ValueError("max_attempts deve ser >= 1")

    attempt = 1
    while True:
        token = await token_supplier.get_token()
        try:
            return await request(token)
        except SendPulseApiError as exc:
            if not exc.is_unauthorized:
                raise
            token_supplier.invalidate(token)
            if attempt >= max_attempts:
                logger.error(
                    "sendpulse_unauthorized_exhausted",
                    extra={"attempts": attempt, "status_code": exc.status_code},
                )
                raise SendPulseAuthenticationError(
                    exc.message,
                    status_code=exc.status_code,
                    payload=exc.payload,
                ) from exc
            logger.warning(
                "sendpulse_unauthorized_retry",
                extra={"attempt": attempt, "status_code": exc.status_code},
            )
            attempt += 1
