"""Cache do access token SendPulse com coalescência de fetch.

Estados:
- EMPTY: nenhum token
- FETCH_IN_FLIGHT: fetch pendente; novos chamadores aguardam o mesmo fetch
- VALID: token presente e now < expires_at - margem
- STALE: token presente mas dentro da margem (tratado como EMPTY)

No máximo um fetch em andamento por instância. O sucesso substitui o token
(nunca muta o existente); a falha volta para EMPTY e propaga o erro para
todos os chamadores que aguardavam.
"""

from __future__ import annotations

import asyncio
import enum
import logging
import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from .models import TokenResponse

logger = logging.getLogger(__name__)

Clock = Callable[[], float]
TokenFetcher = Callable[[], Awaitable[TokenResponse]]


class TokenState(str, enum.Enum):
    EMPTY = "empty"
    FETCH_IN_FLIGHT = "fetch_in_flight"
    VALID = "valid"
    STALE = "stale"


@dataclass(frozen=True, slots=True)
class AccessToken:
    """Bearer token e instante absoluto de expiração (no relógio do cache)."""

    value: str
    expires_at: float

    def is_usable(self, now: float, safety_margin_seconds: float) -> bool:
        return now < self.expires_at - safety_margin_seconds


class TokenCache:
    """Mantém um único token e coalesce fetches concorrentes."""

    def __init__(
        self,
        fetch_token: TokenFetcher,
        *,
        safety_margin_seconds: float = 300,
        clock: Clock = time.monotonic,
    ) -> None:
        self._fetch_token = fetch_token
        self._safety_margin_seconds = safety_margin_seconds
        self._clock = clock
        self._token: AccessToken | None = None
        self._inflight: asyncio.Task[AccessToken] | None = None

    @property
    def state(self) -> TokenState:
        if self._inflight is not None:
            return TokenState.FETCH_IN_FLIGHT
        if self._token is None:
            return TokenState.EMPTY
        if self._token.is_usable(self._clock(), self._safety_margin_seconds):
            return TokenState.VALID
        return TokenState.STALE

    def current(self) -> AccessToken | None:
        """Token utilizável sem chamada de rede, ou None."""
        token = self._token
        if token is not None and token.is_usable(self._clock(), self._safety_margin_seconds):
            return token
        return None

    async def get_token(self) -> str:
        """Retorna um token utilizável, buscando um novo se necessário.

        Raises:
            SendPulseAuthenticationError: Se o fetch falhar.
        """
        token = self.current()
        if token is not None:
            return token.value

        # Sem await entre a checagem e a criação: seção crítica no event loop
        if self._inflight is None:
            self._inflight = asyncio.create_task(self._refresh())
            self._inflight.add_done_callback(_consume_fetch_error)
        else:
            logger.debug("sendpulse_token_fetch_joined")

        # shield: cancelar um chamador não cancela o fetch compartilhado
        token = await asyncio.shield(self._inflight)
        return token.value

    def invalidate(self, token_value: str | None = None) -> None:
        """Descarta o token atual (volta para EMPTY).

        Com `token_value`, só descarta se ainda for o token em cache, para
        não derrubar um token novo obtido por outra requisição.
        """
        if self._token is None:
            return
        if token_value is not None and self._token.value != token_value:
            return
        self._token = None
        logger.info("sendpulse_token_invalidated")

    async def _refresh(self) -> AccessToken:
        self._token = None
        try:
            response = await self._fetch_token()
            token = AccessToken(
                value=response.access_token,
                expires_at=self._clock() + response.expires_in,
            )
            self._token = token
            return token
        finally:
            self._inflight = None


def _consume_fetch_error(task: asyncio.Task[AccessToken]) -> None:
    # Marca a exceção como lida mesmo quando todos os chamadores cancelaram
    if not task.cancelled() and task.exception() is not None:
        logger.debug("sendpulse_token_fetch_failed")
