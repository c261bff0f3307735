"""Use cases do webhook de formulários Webflow."""

from .process_form_submission import (
    PRIVACY_REQUIRED_MESSAGE,
    SUBSCRIBED_MESSAGE,
    UNSUBSCRIBED_MESSAGE,
    ProcessFormSubmissionUseCase,
    ensure_privacy_consent,
    is_consent_declined,
)

__all__ = [
    "PRIVACY_REQUIRED_MESSAGE",
    "SUBSCRIBED_MESSAGE",
    "UNSUBSCRIBED_MESSAGE",
    "ProcessFormSubmissionUseCase",
    "ensure_privacy_consent",
    "is_consent_declined",
]
