"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    ConfigurationError,
    ConsentRequiredError,
    ContactValidationError,
    IntegrationError,
    MissingRequiredFieldError,
    VendorApiError,
    VendorAuthenticationError,
)

__all__ = [
    "ConfigurationError",
    "ConsentRequiredError",
    "ContactValidationError",
    "IntegrationError",
    "MissingRequiredFieldError",
    "VendorApiError",
    "VendorAuthenticationError",
]
