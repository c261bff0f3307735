"""Cliente HTTP da API SendPulse.

Responsável por toda comunicação autenticada com o SendPulse:
- Token OAuth client_credentials em cache, com fetch coalescido
- Bearer auth + um único retry após 401/"Unauthorized"
- Erros uniformes (SendPulseApiError) com mensagem e status do SendPulse
- Fallback para o address book padrão em add/unsubscribe

Uma instância por processo, criada no lifespan da aplicação e injetada
nos handlers.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Any

import httpx

from app.observability import record_latency
from config.logging import log_fallback
from config.settings import SendPulseSettings, get_sendpulse_settings
from utils.errors import ConfigurationError

from .errors import (
    SendPulseApiError,
    SendPulseAuthenticationError,
    error_from_response,
    error_from_transport,
)
from .models import EmailEntry, TokenRequest, TokenResponse
from .retry import DEFAULT_MAX_ATTEMPTS, call_with_token_retry
from .sendpulse_logging import log_sendpulse_error, log_success, mask_email
from .token_cache import Clock, TokenCache

if TYPE_CHECKING:
    from app.domain.contact import ContactData

logger = logging.getLogger(__name__)

TOKEN_ENDPOINT = "/oauth/access_token"
ADDRESS_BOOKS_ENDPOINT = "/addressbooks"


class SendPulseHttpService:
    """Sessão autenticada com a API SendPulse.

    Único componente com estado mutável compartilhado (o token) e com
    efeitos externos (chamadas de rede).
    """

    def __init__(
        self,
        settings: SendPulseSettings | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
        clock: Clock = time.monotonic,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    ) -> None:
        """Inicializa o serviço.

        Args:
            settings: SendPulseSettings. Se None, carrega do ambiente.
            http_client: Cliente httpx opcional (testes). Se None, o serviço
                cria e é dono do próprio cliente.
            clock: Relógio monotônico usado para expiração do token.
            max_attempts: Tentativas por requisição autenticada.

        Raises:
            ConfigurationError: Se credenciais não estiverem configuradas.
        """
        self._settings = settings or get_sendpulse_settings()
        errors = self._settings.validate()
        if errors:
            raise ConfigurationError(errors)

        self._owns_http_client = http_client is None
        self._http = http_client or httpx.AsyncClient(
            base_url=self._settings.api_base_url,
            timeout=self._settings.request_timeout_seconds,
        )
        self._max_attempts = max_attempts
        self._tokens = TokenCache(
            self._fetch_access_token,
            safety_margin_seconds=self._settings.token_safety_margin_seconds,
            clock=clock,
        )

    @property
    def default_address_book_id(self) -> str:
        return self._settings.default_address_book_id

    @property
    def token_cache(self) -> TokenCache:
        return self._tokens

    async def aclose(self) -> None:
        """Fecha o cliente HTTP (apenas se criado pelo serviço)."""
        if self._owns_http_client:
            await self._http.aclose()

    # ──────────────────────────────────────────────────────────────────────
    # Operações públicas
    # ──────────────────────────────────────────────────────────────────────

    async def get_address_books(self) -> Any:
        """Lista os address books da conta (resposta bruta do SendPulse)."""
        return await self.request("GET", ADDRESS_BOOKS_ENDPOINT)

    async def add_contact(
        self,
        contact: ContactData,
        address_book_id: str | None = None,
    ) -> Any:
        """Adiciona um contato (email + variables) a um address book.

        Args:
            contact: Contato normalizado.
            address_book_id: Destino. Se None, usa o address book padrão.

        Returns:
            Resposta bruta do SendPulse.

        Raises:
            SendPulseApiError: Se o destino padrão falhar, ou se o fallback
                para o padrão também falhar.
        """
        entry = EmailEntry(email=contact.email, variables=contact.variables())
        body = {"emails": [entry.to_payload()]}

        async def _add(target: str) -> Any:
            logger.info(
                "sendpulse_add_contact",
                extra={
                    "address_book_id": target,
                    "email": mask_email(contact.email),
                    "variables_count": len(entry.variables or {}),
                },
            )
            return await self.request(
                "POST", self._settings.get_emails_endpoint(target), json=body
            )

        return await self._with_address_book_fallback("add_contact", address_book_id, _add)

    async def unsubscribe_contact(
        self,
        contact: ContactData,
        address_book_id: str | None = None,
    ) -> Any:
        """Descadastra um contato de um address book (envia apenas o email).

        Mesma política de destino e fallback de add_contact.
        """
        body = {"emails": [EmailEntry(email=contact.email).to_payload()]}

        async def _unsubscribe(target: str) -> Any:
            logger.info(
                "sendpulse_unsubscribe_contact",
                extra={"address_book_id": target, "email": mask_email(contact.email)},
            )
            return await self.request(
                "POST", self._settings.get_unsubscribe_endpoint(target), json=body
            )

        return await self._with_address_book_fallback(
            "unsubscribe_contact", address_book_id, _unsubscribe
        )

    async def request(
        self,
        method: str,
        endpoint: str,
        json: dict[str, Any] | None = None,
    ) -> Any:
        """Executa requisição autenticada com retry único após 401."""

        async def _send(token: str) -> Any:
            return await self._send(method, endpoint, token, json)

        return await call_with_token_retry(
            _send, self._tokens, max_attempts=self._max_attempts
        )

    # ──────────────────────────────────────────────────────────────────────
    # Internos
    # ──────────────────────────────────────────────────────────────────────

    async def _with_address_book_fallback(
        self,
        operation: str,
        address_book_id: str | None,
        call: Callable[[str], Awaitable[Any]],
    ) -> Any:
        default_id = self.default_address_book_id
        target = address_book_id or default_id
        try:
            return await call(target)
        except SendPulseApiError as exc:
            logger.error(
                "sendpulse_address_book_failed",
                extra={
                    "operation": operation,
                    "address_book_id": target,
                    "status_code": exc.status_code,
                    "error": exc.message,
                },
            )
            if target == default_id:
                raise
            log_fallback(
                logger,
                f"sendpulse_{operation}",
                reason="address_book_failed",
                failed_address_book_id=target,
                address_book_id=default_id,
            )
            return await call(default_id)

    async def _send(
        self,
        method: str,
        endpoint: str,
        token: str,
        json: dict[str, Any] | None,
    ) -> Any:
        headers = {
            "Authorization": f"Bearer {token}",
            "Content-Type": "application/json",
        }
        started_at = time.perf_counter()
        try:
            response = await self._http.request(method, endpoint, json=json, headers=headers)
        except httpx.HTTPError as exc:
            error = error_from_transport(exc)
            log_sendpulse_error(error, method, endpoint)
            raise error from exc
        finally:
            record_latency("sendpulse", f"{method} {endpoint}", (time.perf_counter() - started_at) * 1000)

        if response.is_error:
            error = error_from_response(response)
            log_sendpulse_error(error, method, endpoint)
            raise error

        log_success(method, endpoint, response.status_code)
        return _decode_body(response)

    async def _fetch_access_token(self) -> TokenResponse:
        """POST /oauth/access_token com client_credentials."""
        body = TokenRequest(
            client_id=self._settings.client_id,
            client_secret=self._settings.client_secret,
        )
        started_at = time.perf_counter()
        try:
            response = await self._http.post(TOKEN_ENDPOINT, json=body.model_dump())
        except httpx.HTTPError as exc:
            logger.error("sendpulse_auth_failed", extra={"error_type": type(exc).__name__})
            raise error_from_transport(exc, SendPulseAuthenticationError) from exc
        finally:
            record_latency("sendpulse", "token_fetch", (time.perf_counter() - started_at) * 1000)

        if response.is_error:
            error = error_from_response(response, SendPulseAuthenticationError)
            logger.error(
                "sendpulse_auth_failed",
                extra={"status_code": error.status_code, "error": error.message},
            )
            raise error

        try:
            token = TokenResponse.model_validate(response.json())
        except ValueError as exc:
            logger.error("sendpulse_auth_invalid_response", extra={"status_code": response.status_code})
            raise SendPulseAuthenticationError(
                "invalid token response", status_code=response.status_code
            ) from exc

        logger.info(
            "sendpulse_token_obtained",
            extra={"token_type": token.token_type, "expires_in": token.expires_in},
        )
        return token


def _decode_body(response: httpx.Response) -> Any:
    if not response.content:
        return {}
    try:
        return response.json()
    except ValueError as exc:
        raise SendPulseApiError(
            "invalid JSON response", status_code=response.status_code
        ) from exc


def create_sendpulse_service(
    settings: SendPulseSettings | None = None,
) -> SendPulseHttpService:
    """Factory para criar o serviço SendPulse com config do ambiente.

    Raises:
        ConfigurationError: Se credenciais não estiverem configuradas.
    """
    return SendPulseHttpService(settings or get_sendpulse_settings())
