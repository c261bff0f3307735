"""Observabilidade: logs estruturados e métricas.

Uso:
    from app.observability import get_correlation_id, set_correlation_id
    from app.observability import record_latency, record_contact_sync
"""

from app.observability.correlation import (
    CORRELATION_ID_HEADER,
    generate_correlation_id,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)
from app.observability.metrics import record_contact_sync, record_latency

__all__ = [
    "CORRELATION_ID_HEADER",
    "generate_correlation_id",
    "get_correlation_id",
    "record_contact_sync",
    "record_latency",
    "reset_correlation_id",
    "set_correlation_id",
]
