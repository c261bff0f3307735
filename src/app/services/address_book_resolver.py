"""Mapeamento de formulário Webflow → address book SendPulse.

Lookup puro sobre tabela estática; formulário sem mapeamento usa o
address book padrão e registra o fallback (nunca é erro).
"""

from __future__ import annotations

import logging
from types import MappingProxyType

from app.domain.contact import AddressBookMapping
from config.logging import log_fallback

logger = logging.getLogger(__name__)

DEFAULT_ADDRESS_BOOK_TITLE = "My emails"

FORM_TO_ADDRESS_BOOK = MappingProxyType(
    {
        "66d84d72633d424869c060b0": AddressBookMapping(title="Demo Request", id="963387"),
        "676402d3d986b33c56662f7d": AddressBookMapping(title="Ebook Page Sub", id="963397"),
        "66d84d72633d424869c060d0": AddressBookMapping(title="Ebook Sub", id="963398"),
        "66d84d72633d424869c060aa": AddressBookMapping(title="Event Sub", id="963395"),
        "66d84d72633d424869c060bc": AddressBookMapping(title="Blog Sub", id="963393"),
        "66d84d72633d424869c060e9": AddressBookMapping(title="Contact Us", id="963390"),
        "66d84d72633d424869c060df": AddressBookMapping(title="Demo Day", id="963388"),
        "66d84d72633d424869c060d2": AddressBookMapping(title="Pricing", id="963392"),
    }
)


def default_address_book(default_address_book_id: str) -> AddressBookMapping:
    return AddressBookMapping(title=DEFAULT_ADDRESS_BOOK_TITLE, id=default_address_book_id)


def resolve_address_book(form_id: str, default_address_book_id: str) -> AddressBookMapping:
    """Resolve o address book de destino para um formulário.

    Args:
        form_id: ID do formulário no Webflow.
        default_address_book_id: Address book usado quando não há mapeamento.

    Returns:
        AddressBookMapping do formulário ou o padrão.
    """
    mapping = FORM_TO_ADDRESS_BOOK.get(form_id)
    if mapping is None:
        log_fallback(
            logger,
            "address_book_resolver",
            reason="unmapped_form",
            form_id=form_id,
            address_book_id=default_address_book_id,
        )
        return default_address_book(default_address_book_id)

    logger.info(
        "address_book_resolved",
        extra={
            "form_id": form_id,
            "address_book_title": mapping.title,
            "address_book_id": mapping.id,
        },
    )
    return mapping
