"""Serviços de aplicação.

Unidades puras reutilizáveis (sem IO): extração de contato do formulário
e resolução de address book por formulário.
"""

from app.services.address_book_resolver import (
    DEFAULT_ADDRESS_BOOK_TITLE,
    FORM_TO_ADDRESS_BOOK,
    resolve_address_book,
)
from app.services.field_extractor import (
    extract_contact_data,
    extract_email,
    normalize_field_name,
    stringify_value,
)

__all__ = [
    "DEFAULT_ADDRESS_BOOK_TITLE",
    "FORM_TO_ADDRESS_BOOK",
    "extract_contact_data",
    "extract_email",
    "normalize_field_name",
    "resolve_address_book",
    "stringify_value",
]
