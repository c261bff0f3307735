"""Normalizers: conversão de payloads externos para modelos internos.

Estrutura:
- webflow/: envelope de submissão de formulário
"""

from .webflow import FormSubmission, extract_form_submission

__all__ = [
    "FormSubmission",
    "extract_form_submission",
]
