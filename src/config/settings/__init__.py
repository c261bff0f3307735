"""Agregador de settings do serviço webflow-sendpulse.

Re-exporta todas as settings e funções de cada módulo.
Organização por integração para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)

# API interna de contatos
from config.settings.contacts_api import (
    ContactsApiSettings,
    get_contacts_api_settings,
)

# SendPulse
from config.settings.sendpulse import (
    DEFAULT_ADDRESS_BOOK_ID,
    SENDPULSE_API_BASE_URL,
    SendPulseSettings,
    get_sendpulse_settings,
)

# Webflow
from config.settings.webflow import (
    WebflowSettings,
    get_webflow_settings,
)

__all__ = [
    # Constants
    "DEFAULT_ADDRESS_BOOK_ID",
    "SENDPULSE_API_BASE_URL",
    # Base
    "BaseSettings",
    "ContactsApiSettings",
    "Environment",
    # Integrations
    "SendPulseSettings",
    "WebflowSettings",
    "get_base_settings",
    "get_contacts_api_settings",
    "get_sendpulse_settings",
    "get_webflow_settings",
]
