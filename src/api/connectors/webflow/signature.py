"""Validação de assinatura HMAC-SHA256 dos webhooks do Webflow.

Assinatura: hex(HMAC_SHA256(secret, "{timestamp}:{raw_body}")) no header
x-webflow-signature, com o timestamp de x-webflow-timestamp. Sem timestamp,
o HMAC é calculado apenas sobre o corpo.
"""

from __future__ import annotations

import hashlib
import hmac
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)

SIGNATURE_HEADER = "x-webflow-signature"
TIMESTAMP_HEADER = "x-webflow-timestamp"


@dataclass(frozen=True, slots=True)
class SignatureResult:
    """Resultado da validação de assinatura."""

    valid: bool
    skipped: bool = False
    error: str | None = None


def compute_webflow_signature(raw_body: bytes, secret: str, timestamp: str | None = None) -> str:
    signed = f"{timestamp}:".encode() + raw_body if timestamp else raw_body
    return hmac.new(secret.encode("utf-8"), signed, hashlib.sha256).hexdigest()


def verify_webflow_signature(
    raw_body: bytes,
    headers: Mapping[str, str],
    secret: str | None,
) -> SignatureResult:
    """Valida a assinatura do webhook.

    Args:
        raw_body: Corpo bruto do request
        headers: Headers recebidos (chaves em minúsculas)
        secret: Secret do webhook; vazio pula a validação (desenvolvimento)

    Returns:
        SignatureResult (valid=False apenas para assinatura divergente)
    """
    if not secret:
        logger.warning("webflow_signature_skipped", extra={"reason": "secret_not_configured"})
        return SignatureResult(valid=True, skipped=True)

    incoming = headers.get(SIGNATURE_HEADER)
    if not incoming:
        logger.warning("webflow_signature_skipped", extra={"reason": "missing_signature_header"})
        return SignatureResult(valid=True, skipped=True)

    expected = compute_webflow_signature(raw_body, secret, headers.get(TIMESTAMP_HEADER))
    if not hmac.compare_digest(expected.encode(), incoming.strip().lower().encode()):
        return SignatureResult(valid=False, error="invalid_signature")
    return SignatureResult(valid=True)
