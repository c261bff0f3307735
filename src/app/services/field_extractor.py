"""Extração de contato a partir do payload de formulário do Webflow.

O formulário chega como mapa solto (nome do campo → str | bool | None) com
nomes controlados por quem edita o site. Este módulo normaliza o payload
para ContactData antes de qualquer outro processamento.

Regras:
- `email` é obrigatório e vem sempre da chave fixa "email"
- campos conhecidos são promovidos a atributos nomeados
- todo campo não vazio também é copiado com chave normalizada
  (colisões: vence o último na ordem do formulário; chaves que
  normalizam para "email" são ignoradas)
"""

from __future__ import annotations

import json
import re
from collections.abc import Mapping
from typing import Any

from app.domain.contact import ContactData
from utils.errors import MissingRequiredFieldError

FormData = Mapping[str, Any]

EMAIL_FIELD = "email"

_WHITESPACE_RE = re.compile(r"\s+")
_INVALID_CHARS_RE = re.compile(r"[^a-z0-9_]")

# campo do formulário -> atributo do contato (apenas valores string)
_TEXT_FIELDS: tuple[tuple[str, str], ...] = (
    ("firstname", "firstname"),
    ("lastname", "lastname"),
    ("companyname", "companyname"),
    ("messages", "message"),
)

# campo do formulário -> atributo do contato (qualquer valor, convertido)
_STRINGIFIED_FIELDS: tuple[tuple[str, str], ...] = (
    ("phone", "phone"),
    ("numberofemployees", "numberofemployees"),
)


def normalize_field_name(field_name: str) -> str:
    """Converte nome de campo para snake_case aceito pelo SendPulse.

    Idempotente: "Company Name!" -> "company_name" -> "company_name".
    """
    lowered = field_name.lower()
    underscored = _WHITESPACE_RE.sub("_", lowered)
    return _INVALID_CHARS_RE.sub("", underscored)


def stringify_value(value: Any) -> str:
    """Converte valor do formulário para string.

    Booleanos viram "true"/"false" (formato enviado pelo Webflow) e
    estruturas viram JSON.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list, tuple)):
        return json.dumps(value, ensure_ascii=False, default=str)
    return str(value)


def _is_empty(value: Any) -> bool:
    return value is None or value == ""


def extract_email(form_data: FormData) -> str | None:
    value = form_data.get(EMAIL_FIELD)
    return value if isinstance(value, str) and value else None


def _extract_text(form_data: FormData, key: str) -> str | None:
    value = form_data.get(key)
    return value if isinstance(value, str) and value else None


def _extract_stringified(form_data: FormData, key: str) -> str | None:
    value = form_data.get(key)
    return stringify_value(value) if value else None


def extract_contact_data(form_data: FormData) -> ContactData:
    """Extrai e normaliza o contato do formulário.

    Args:
        form_data: Campos do formulário (já fora do envelope `payload.data`).

    Returns:
        ContactData com email e atributos string.

    Raises:
        MissingRequiredFieldError: Se email ausente, nulo ou vazio.
    """
    email = extract_email(form_data)
    if email is None:
        raise MissingRequiredFieldError(EMAIL_FIELD, form_data.keys())

    record: dict[str, str] = {}

    for form_key, attribute in _TEXT_FIELDS:
        text = _extract_text(form_data, form_key)
        if text is not None:
            record[attribute] = text

    for form_key, attribute in _STRINGIFIED_FIELDS:
        text = _extract_stringified(form_data, form_key)
        if text is not None:
            record[attribute] = text

    # Copia todos os campos, inclusive os já promovidos
    for key, value in form_data.items():
        if _is_empty(value):
            continue
        normalized = normalize_field_name(key)
        if normalized == EMAIL_FIELD:
            continue
        record[normalized] = stringify_value(value)

    return ContactData(email=email, attributes=record)

