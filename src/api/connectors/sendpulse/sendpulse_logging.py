"""Helpers de logging para API SendPulse (sem PII)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .errors import SendPulseApiError

logger = logging.getLogger(__name__)


def mask_email(email: str) -> str:
    """Mascara o email para logs: "jane.doe@acme.com" -> "j***@acme.com"."""
    local, sep, domain = email.partition("@")
    if not sep:
        return "***"
    return f"{local[:1]}***@{domain}"


def log_sendpulse_error(
    error: SendPulseApiError,
    method: str,
    endpoint: str,
) -> None:
    """Loga erro do SendPulse sem expor token ou dados do contato."""
    logger.warning(
        "sendpulse_api_error",
        extra={
            "method": method,
            "endpoint": endpoint,
            "status_code": error.status_code,
            "error": error.message,
            "unauthorized": error.is_unauthorized,
        },
    )


def log_success(
    method: str,
    endpoint: str,
    status_code: int,
) -> None:
    logger.debug(
        "sendpulse_request_ok",
        extra={
            "method": method,
            "endpoint": endpoint,
            "status_code": status_code,
        },
    )
