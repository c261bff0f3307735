"""Agregador de rotas: registra todos os routers da API.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router())
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.contacts.router import router as contacts_router
from api.routes.health.router import router as health_router
from api.routes.webflow.router import router as webflow_router


def create_api_router() -> APIRouter:
    """Cria router principal com todos os sub-routers registrados.

    Returns:
        APIRouter configurado com todos os endpoints.
    """
    api_router = APIRouter()

    # Health checks (sem prefixo para /health e /ready na raiz)
    api_router.include_router(health_router, tags=["health"])

    # Webhooks do Webflow
    api_router.include_router(
        webflow_router,
        prefix="/api/webhooks",
        tags=["webflow"],
    )

    # API de contatos (x-api-key)
    api_router.include_router(
        contacts_router,
        prefix="/api",
        tags=["contacts"],
    )

    return api_router
