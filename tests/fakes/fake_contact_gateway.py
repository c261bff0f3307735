"""Fake in-memory do gateway de contatos para testes deterministas."""

from __future__ import annotations

from typing import Any

from app.domain.contact import ContactData
from utils.errors import VendorApiError


class FakeContactGateway:
    """Implementa ContactGatewayProtocol registrando cada chamada.

    `failures` mapeia nome da operação → erro a levantar.
    """

    def __init__(
        self,
        default_address_book_id: str = "961879",
        failures: dict[str, VendorApiError] | None = None,
        address_books: Any = None,
    ) -> None:
        self._default_address_book_id = default_address_book_id
        self._failures = failures or {}
        self._address_books = address_books if address_books is not None else []
        self.calls: list[tuple[str, ContactData | None, str | None]] = []

    @property
    def default_address_book_id(self) -> str:
        return self._default_address_book_id

    async def get_address_books(self) -> Any:
        self._record("get_address_books", None, None)
        return self._address_books

    async def add_contact(
        self,
        contact: ContactData,
        address_book_id: str | None = None,
    ) -> Any:
        self._record("add_contact", contact, address_book_id)
        return {"result": True}

    async def unsubscribe_contact(
        self,
        contact: ContactData,
        address_book_id: str | None = None,
    ) -> Any:
        self._record("unsubscribe_contact", contact, address_book_id)
        return {"result": True}

    def operations(self) -> list[str]:
        return [operation for operation, _, _ in self.calls]

    def _record(
        self,
        operation: str,
        contact: ContactData | None,
        address_book_id: str | None,
    ) -> None:
        self.calls.append((operation, contact, address_book_id))
        failure = self._failures.get(operation)
        if failure is not None:
            raise failure
