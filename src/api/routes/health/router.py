"""Endpoints de health check (liveness e readiness)."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any, Literal

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from api.routes.dependencies import get_contact_gateway
from config.settings import get_base_settings

logger = logging.getLogger(__name__)

router = APIRouter()


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    service: str
    timestamp: str
    version: str = "1.0.0"


@dataclass(frozen=True, slots=True)
class DependencyCheck:
    """Resultado de checagem de dependência."""

    status: Literal["ok", "degraded", "failed"]
    error: str | None = None
    detail: dict[str, Any] | None = None

    def as_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {
            "status": self.status,
            "error": self.error,
        }
        if self.detail:
            body.update(self.detail)
        return body


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness probe: verifica se o serviço está rodando."""
    return HealthResponse(
        status="healthy",
        service=get_base_settings().service_name,
        timestamp=datetime.now(UTC).isoformat(),
    )


@router.get("/ready")
async def readiness_check(request: Request) -> JSONResponse:
    """Readiness probe: exige o serviço SendPulse configurado no app.state.

    Não chama o SendPulse; o estado do token é apenas informativo.
    """
    sendpulse_check = _check_sendpulse(get_contact_gateway(request))
    ready = sendpulse_check.status == "ok"

    payload = {
        "status": "ready" if ready else "not_ready",
        "checks": {"sendpulse": sendpulse_check.as_dict()},
        "timestamp": datetime.now(UTC).isoformat(),
    }
    if not ready:
        logger.warning("readiness_not_ready", extra={"error": sendpulse_check.error})
    return JSONResponse(content=payload, status_code=200 if ready else 503)


def _check_sendpulse(gateway: Any | None) -> DependencyCheck:
    if gateway is None:
        return DependencyCheck(status="failed", error="not_configured")
    token_cache = getattr(gateway, "token_cache", None)
    detail: dict[str, Any] = {"default_address_book_id": gateway.default_address_book_id}
    if token_cache is not None:
        detail["token_state"] = token_cache.state.value
    return DependencyCheck(status="ok", detail=detail)
