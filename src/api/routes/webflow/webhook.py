"""Endpoints de webhook do Webflow.

Endpoints:
- POST /api/webhooks/form: submissão de formulário → SendPulse
- POST /api/webhooks/subscription: eco do payload recebido

Segurança:
- Validação HMAC quando WEBFLOW_WEBHOOK_SECRET e a assinatura existem
- Assinatura inválida → 403; qualquer outra falha → 200 com success=false,
  para que o Webflow não reenvie o evento
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from api.connectors.webflow.webhook import (
    InvalidJsonError,
    InvalidSignatureError,
    parse_json_body,
    parse_webhook_request,
)
from api.normalizers.webflow import extract_form_submission
from api.routes.dependencies import GATEWAY_UNAVAILABLE_MESSAGE, get_contact_gateway
from app.bootstrap.dependencies import create_form_submission_use_case
from config.settings import get_webflow_settings

logger = logging.getLogger(__name__)

router = APIRouter()

INVALID_JSON_MESSAGE = "Invalid JSON payload"
WEBHOOK_FAILED_MESSAGE = "Webhook processing failed"


def _failure(error: str) -> dict[str, Any]:
    return {"success": False, "error": error}


@router.post("/form", response_model=None)
async def receive_form_submission(request: Request) -> JSONResponse | dict[str, Any]:
    """Recebe uma submissão de formulário e sincroniza o contato.

    Validações:
    1. Assinatura HMAC (x-webflow-signature + x-webflow-timestamp)
    2. JSON válido (objeto)

    Returns:
        {success, message?, error?, data?} ou 403 para assinatura inválida.
    """
    raw_body = await request.body()

    try:
        payload, signature_result = parse_webhook_request(
            raw_body=raw_body,
            headers=request.headers,
            secret=get_webflow_settings().webhook_secret or None,
        )
    except InvalidSignatureError as exc:
        logger.warning(
            "webhook_signature_invalid",
            extra={"channel": "webflow", "error": str(exc)},
        )
        return JSONResponse(
            content={"error": "Forbidden"},
            status_code=status.HTTP_403_FORBIDDEN,
        )
    except InvalidJsonError as exc:
        logger.warning(
            "webhook_json_invalid",
            extra={"channel": "webflow", "error": str(exc)},
        )
        return _failure(INVALID_JSON_MESSAGE)

    submission = extract_form_submission(payload)
    logger.info(
        "webhook_received",
        extra={
            "channel": "webflow",
            "form_id": submission.form_id,
            "form_name": submission.form_name,
            "field_count": len(submission.form_data),
            "signature_valid": signature_result.valid,
            "signature_skipped": signature_result.skipped,
            "payload_size": len(raw_body),
        },
    )

    gateway = get_contact_gateway(request)
    if gateway is None:
        logger.error("webhook_gateway_unavailable", extra={"channel": "webflow"})
        return _failure(GATEWAY_UNAVAILABLE_MESSAGE)

    use_case = create_form_submission_use_case(gateway)
    result = await use_case.execute(submission.form_data, submission.form_id)
    return result.as_dict()


@router.post("/subscription", response_model=None)
async def receive_subscription_event(request: Request) -> dict[str, Any]:
    """Ecoa o payload do webhook de inscrição (sem efeitos colaterais)."""
    raw_body = await request.body()
    try:
        payload = parse_json_body(raw_body)
    except InvalidJsonError as exc:
        logger.warning(
            "webhook_json_invalid",
            extra={"channel": "webflow_subscription", "error": str(exc)},
        )
        return {"error": WEBHOOK_FAILED_MESSAGE}

    logger.info(
        "webhook_received",
        extra={"channel": "webflow_subscription", "payload_size": len(raw_body)},
    )
    return payload
