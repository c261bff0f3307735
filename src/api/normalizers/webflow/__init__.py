"""Normalizer Webflow: envelope de submissão de formulário."""

from .extractor import FormSubmission, extract_form_submission

__all__ = ["FormSubmission", "extract_form_submission"]
