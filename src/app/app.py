"""Entrypoint da aplicação webflow-sendpulse.

Este módulo é o ponto de entrada principal do serviço.
Inicializa o bootstrap e expõe a aplicação ASGI (FastAPI).

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 8080

Uso (desenvolvimento):
    uvicorn app.app:app --reload --host 0.0.0.0 --port 8080
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI

from api.middleware import bind_correlation_id
from api.routes import create_api_router
from app.bootstrap import initialize_app, validate_runtime_settings
from app.bootstrap.dependencies import create_contact_gateway
from config.logging import get_logger
from config.settings import get_base_settings
from utils.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

# Inicializar logging ANTES de qualquer import que use logger
initialize_app()

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Gerencia ciclo de vida da aplicação.

    Startup:
    - Valida configurações
    - Cria o serviço SendPulse (um por processo)

    Shutdown:
    - Fecha o cliente HTTP do SendPulse
    """
    settings = get_base_settings()
    logger.info("app_starting", extra={"environment": settings.environment})
    validate_runtime_settings()
    app.state.contact_gateway = None

    try:
        app.state.contact_gateway = create_contact_gateway()
    except ConfigurationError as exc:
        if settings.strict_validation:
            raise
        logger.warning(
            "contact_gateway_not_ready",
            extra={"error_type": type(exc).__name__, "errors": exc.errors},
        )

    yield

    logger.info("app_shutting_down")
    gateway = app.state.contact_gateway
    if gateway is not None:
        await gateway.aclose()
        app.state.contact_gateway = None


def create_app() -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Returns:
        Aplicação FastAPI configurada.
    """
    settings = get_base_settings()
    fastapi_app = FastAPI(
        title="webflow-sendpulse",
        description="Integração de formulários Webflow com listas do SendPulse",
        version="1.0.0",
        lifespan=lifespan,
        docs_url=None if settings.is_production else "/docs",
        redoc_url=None,
        openapi_url=None if settings.is_production else "/openapi.json",
    )

    fastapi_app.middleware("http")(bind_correlation_id)
    fastapi_app.include_router(create_api_router())

    logger.info("app_configured", extra={"service_name": settings.service_name})

    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta (desenvolvimento)."""
    import uvicorn

    logger.info("Starting webflow-sendpulse in development mode")
    uvicorn.run(
        "app.app:app",
        host="0.0.0.0",
        port=8080,
        reload=True,
    )


if __name__ == "__main__":
    main()
