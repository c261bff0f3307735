"""Modelos de domínio do contato sincronizado com o SendPulse.

ContactData é construído a cada requisição a partir do formulário bruto,
nunca é persistido e é descartado após a chamada ao SendPulse.
"""

from __future__ import annotations

from dataclasses import dataclass, field

# Campos de consentimento do formulário: significativos para o fluxo de
# webhook, mas nunca enviados ao SendPulse como variáveis.
PRIVACY_CONSENT_FIELD = "privacypolicy"
MARKETING_CONSENT_FIELD = "marketing"
CONSENT_FIELDS = frozenset({PRIVACY_CONSENT_FIELD, MARKETING_CONSENT_FIELD})


@dataclass(frozen=True, slots=True)
class ContactData:
    """Contato canônico: email obrigatório + atributos string."""

    email: str
    attributes: dict[str, str] = field(default_factory=dict)

    def variables(self) -> dict[str, str]:
        """Atributos enviados ao SendPulse como `variables`.

        Exclui o email e os campos de consentimento.
        """
        return {
            key: value
            for key, value in self.attributes.items()
            if key != "email" and key not in CONSENT_FIELDS and value is not None
        }


@dataclass(frozen=True, slots=True)
class AddressBookMapping:
    """Address book (lista de emails) de destino no SendPulse."""

    title: str
    id: str
