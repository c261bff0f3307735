"""Use cases da API de contatos."""

from .manage_subscriptions import (
    EMAILS_REQUIRED_MESSAGE,
    TEST_CONTACT_REQUIRED_MESSAGE,
    EmailSubscription,
    ManageSubscriptionsUseCase,
)

__all__ = [
    "EMAILS_REQUIRED_MESSAGE",
    "TEST_CONTACT_REQUIRED_MESSAGE",
    "EmailSubscription",
    "ManageSubscriptionsUseCase",
]
