"""Webhook Webflow: assinatura e parsing seguro."""

from ..signature import SignatureResult, verify_webflow_signature
from .receive import (
    InvalidJsonError,
    InvalidSignatureError,
    WebhookRequestError,
    parse_json_body,
    parse_webhook_request,
)

__all__ = [
    "InvalidJsonError",
    "InvalidSignatureError",
    "SignatureResult",
    "WebhookRequestError",
    "parse_json_body",
    "parse_webhook_request",
    "verify_webflow_signature",
]
