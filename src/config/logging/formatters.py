"""Formatters de logging estruturado.

Todo log sai como JSON com os campos:
- asctime, level, logger, message
- correlation_id e service (injetados por CorrelationIdFilter)

Campos extras passados via `extra={...}` são anexados ao JSON.
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Campos obrigatórios em todo log estruturado (ordem de saída)
REQUIRED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com campos padronizados.

    Exemplo de output:
        {
            "asctime": "2026-10-19 10:30:00,123",
            "level": "INFO",
            "logger": "api.connectors.sendpulse.http_client",
            "message": "sendpulse_token_obtained",
            "correlation_id": "abc-123",
            "service": "webflow-sendpulse",
            "expires_in": 3600
        }
    """
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)

    return JsonFormatter(
        format_string,
        rename_fields=FIELD_RENAME_MAP,
    )
