"""Bootstrap da aplicação: inicialização e wiring.

Este módulo é o composition root: configura logging, valida settings e
conecta implementações concretas aos protocolos.

Uso:
    from app.bootstrap import initialize_app, validate_runtime_settings

    # Na inicialização do serviço
    initialize_app()
    validate_runtime_settings()
"""

from __future__ import annotations

import logging

from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import (
    get_base_settings,
    get_contacts_api_settings,
    get_sendpulse_settings,
    get_webflow_settings,
)
from utils.errors import ConfigurationError

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Inicializa a aplicação com todas as configurações necessárias.

    Deve ser chamada uma vez no início do serviço.
    Configura logging estruturado JSON com correlation_id.
    """
    settings = get_base_settings()
    configure_logging(
        level=settings.log_level,
        service_name=settings.service_name,
        correlation_id_getter=get_correlation_id,
    )


def collect_settings_errors() -> list[str]:
    """Agrega erros de validação de todas as settings, prefixados por integração."""
    errors: list[str] = []
    errors.extend(f"base: {error}" for error in get_base_settings().validate())
    errors.extend(f"sendpulse: {error}" for error in get_sendpulse_settings().validate())
    errors.extend(f"webflow: {error}" for error in get_webflow_settings().validate())
    errors.extend(f"contacts_api: {error}" for error in get_contacts_api_settings().validate())
    return errors


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` mantém alerta sem bloquear execução local.

    Raises:
        ConfigurationError: Em modo estrito, se houver erros.
    """
    settings = get_base_settings()
    errors = collect_settings_errors()

    if not errors:
        logger.info(
            "settings_validated",
            extra={
                "component": "bootstrap",
                "result": "ok",
                "environment": settings.environment,
            },
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": settings.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if settings.strict_validation:
        raise ConfigurationError(errors)
