"""Protocolo do gateway de contatos (provedor de email marketing).

Evita dependência direta de app/ na camada api/ (SendPulse).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from app.domain.contact import ContactData


class ContactGatewayProtocol(Protocol):
    """Contrato mínimo para sincronizar contatos com o provedor.

    Falhas do provedor são levantadas como utils.errors.VendorApiError.
    """

    @property
    def default_address_book_id(self) -> str: ...

    async def get_address_books(self) -> Any: ...

    async def add_contact(
        self,
        contact: ContactData,
        address_book_id: str | None = None,
    ) -> Any: ...

    async def unsubscribe_contact(
        self,
        contact: ContactData,
        address_book_id: str | None = None,
    ) -> Any: ...
