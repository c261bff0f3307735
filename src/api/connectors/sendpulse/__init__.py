"""Conector SendPulse: API REST de email marketing (address books)."""

from .errors import SendPulseApiError, SendPulseAuthenticationError
from .http_client import SendPulseHttpService, create_sendpulse_service
from .retry import call_with_token_retry
from .token_cache import AccessToken, TokenCache, TokenState

__all__ = [
    "AccessToken",
    "SendPulseApiError",
    "SendPulseAuthenticationError",
    "SendPulseHttpService",
    "TokenCache",
    "TokenState",
    "call_with_token_retry",
    "create_sendpulse_service",
]
