"""Extrator do payload de submissão de formulário do Webflow.

Estrutura do webhook `form_submission`:
    {
        "triggerType": "form_submission",
        "payload": {
            "name": "Demo Request",
            "formId": "66d84d72633d424869c060b0",
            "data": {"email": "...", "firstname": "...", "marketing": "false"}
        }
    }

Payloads sem o envelope `payload.data` são tratados como os próprios
campos do formulário; nesse caso um `formId` no nível raiz identifica o
formulário e não é repassado como campo.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

logger = logging.getLogger(__name__)

FORM_ID_KEY = "formId"


@dataclass(frozen=True, slots=True)
class FormSubmission:
    """Campos do formulário e ID do formulário de origem."""

    form_data: dict[str, Any] = field(default_factory=dict)
    form_id: str | None = None
    form_name: str | None = None


def extract_form_submission(payload: dict[str, Any]) -> FormSubmission:
    """Desembrulha o envelope do webhook quando presente."""
    envelope = payload.get("payload")
    if isinstance(envelope, dict) and isinstance(envelope.get("data"), dict):
        logger.debug("webflow_payload_envelope_used")
        form_id = envelope.get(FORM_ID_KEY)
        form_name = envelope.get("name")
        return FormSubmission(
            form_data=dict(envelope["data"]),
            form_id=str(form_id) if form_id else None,
            form_name=form_name if isinstance(form_name, str) else None,
        )

    form_data = dict(payload)
    form_id = form_data.pop(FORM_ID_KEY, None)
    return FormSubmission(form_data=form_data, form_id=str(form_id) if form_id else None)
