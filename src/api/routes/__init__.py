"""Rotas HTTP da API: adapters de entrada.

Responsabilidades:
- Definir endpoints HTTP (webhooks, API de contatos, health)
- Validação inicial de request (headers, assinatura, corpo)
- Delegação para use cases
- Respostas HTTP apropriadas

Estrutura:
- routes/webflow/: webhooks de formulário e de inscrição
- routes/contacts/: subscribe/unsubscribe e diagnóstico de address books
- routes/health/: health checks e readiness

Agregação:
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
