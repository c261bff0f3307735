"""Configuração centralizada de logging.

Uso:
    from config.logging import configure_logging, get_logger

    # Na inicialização do serviço (app/bootstrap/)
    configure_logging(level="INFO", service_name="webflow-sendpulse")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("contact_added", extra={"address_book_id": "963387"})
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "webflow-sendpulse"

# Loggers de bibliotecas que logam cada request (podem conter tokens em query)
_NOISY_LOGGERS = ("httpx", "httpcore")


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
) -> None:
    """Configura logging JSON estruturado para o serviço.

    Deve ser chamada uma vez na inicialização (app/bootstrap/).

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função que retorna o correlation_id
            do contexto atual (ex: de ContextVar).

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))

    root = logging.getLogger()
    root.setLevel(level_upper)
    # Substituir handlers existentes para evitar duplicação
    root.handlers = [handler]

    for noisy in _NOISY_LOGGERS:
        logging.getLogger(noisy).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Retorna logger para o módulo especificado.

    O filter injeta automaticamente service e correlation_id.
    """
    return logging.getLogger(name)


def log_fallback(
    logger: logging.Logger,
    component: str,
    reason: str | None = None,
    **fields: object,
) -> None:
    """Log observável de fallback aplicado.

    Usado quando um caminho alternativo determinístico é tomado
    (ex: address book padrão no lugar do address book do formulário).

    Args:
        logger: Logger instance.
        component: Nome do componente (ex: "address_book_resolver").
        reason: Razão do fallback (ex: "unmapped_form").
        **fields: Campos adicionais sem PII (ex: address_book_id).

    Exemplo:
        log_fallback(
            logger,
            "sendpulse_add_contact",
            reason="address_book_failed",
            failed_address_book_id="963387",
        )
    """
    extra: dict[str, object] = {
        "fallback_used": True,
        "component": component,
    }
    if reason:
        extra["reason"] = reason
    extra.update(fields)

    logger.warning(
        "Fallback applied for %s",
        component,
        extra=extra,
    )
