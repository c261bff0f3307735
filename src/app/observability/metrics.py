"""Registro de métricas via structured logging.

As métricas são registradas como logs estruturados e agregadas
posteriormente pelo coletor de logs.

Métricas suportadas:
- Latência: tempo de cada chamada ao SendPulse por operação
- Contatos: counter de contatos sincronizados por resultado

Uso:
    from app.observability.metrics import record_latency, record_contact_sync

    start = time.perf_counter()
    # ... chamada ...
    record_latency("sendpulse", "add_contact", (time.perf_counter() - start) * 1000)
    record_contact_sync("subscribed", address_book_id="963387")
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
    correlation_id: str | None = None,
) -> None:
    """Registra latência de operação.

    Args:
        component: Nome do componente (ex: "sendpulse")
        operation: Nome da operação (ex: "add_contact", "token_fetch")
        latency_ms: Latência em milissegundos
        correlation_id: ID de correlação para rastreamento
    """
    extra: dict[str, object] = {
        "metric_type": "latency",
        "component": component,
        "operation": operation,
        "latency_ms": round(latency_ms, 2),
    }
    if correlation_id:
        extra["correlation_id"] = correlation_id
    logger.info("metric_latency", extra=extra)


def record_contact_sync(
    outcome: str,
    address_book_id: str | None = None,
    correlation_id: str | None = None,
) -> None:
    """Registra resultado de sincronização de contato.

    Args:
        outcome: "subscribed", "unsubscribed", "rejected" ou "failed"
        address_book_id: Address book de destino (quando conhecido)
        correlation_id: ID de correlação para rastreamento
    """
    extra: dict[str, object] = {
        "metric_type": "counter",
        "outcome": outcome,
        "address_book_id": address_book_id,
    }
    if correlation_id:
        extra["correlation_id"] = correlation_id
    logger.info("metric_contact_sync", extra=extra)
