"""Middleware HTTP da aplicação."""

from __future__ import annotations

import logging
import time
from collections.abc import Awaitable, Callable

from fastapi import Request, Response

from app.observability import (
    CORRELATION_ID_HEADER,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)

logger = logging.getLogger(__name__)


async def bind_correlation_id(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    """Define o correlation_id da requisição e o devolve no header da resposta.

    Usa o header x-correlation-id do chamador quando presente.
    """
    token = set_correlation_id(request.headers.get(CORRELATION_ID_HEADER))
    started_at = time.perf_counter()
    try:
        response = await call_next(request)
        response.headers[CORRELATION_ID_HEADER] = get_correlation_id()
        logger.info(
            "http_request_handled",
            extra={
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "latency_ms": round((time.perf_counter() - started_at) * 1000, 2),
            },
        )
        return response
    finally:
        reset_correlation_id(token)
