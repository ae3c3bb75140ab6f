"""Bootstrap: composition root do serviço.

Uso:
    from app.bootstrap import initialize_app, validate_runtime_settings

    initialize_app()             # no import de app/app.py
    validate_runtime_settings()  # no startup do lifespan

As factories de store e client de inferência ficam em dependencies.py.
"""

from __future__ import annotations

import logging

from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import get_base_settings, get_inference_settings, get_mongo_settings
from utils.errors import ConfigurationError

# Ambientes em que settings inválidas impedem o boot
STRICT_VALIDATION_ENVS = frozenset({"staging", "production"})

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Instala o logging JSON com service, environment e correlation_id."""
    settings = get_base_settings()
    configure_logging(
        level=settings.log_level,
        service_name=settings.service_name,
        environment=settings.environment,
        correlation_id_getter=get_correlation_id,
    )


def collect_settings_errors() -> list[str]:
    """Erros de validação de todos os blocos de settings, prefixados."""
    sections = (
        ("base", get_base_settings()),
        ("mongodb", get_mongo_settings()),
        ("inference", get_inference_settings()),
    )
    return [f"{name}: {error}" for name, settings in sections for error in settings.validate()]


def validate_runtime_settings() -> None:
    """Valida settings no startup.

    Staging/production: qualquer erro aborta o boot.
    Development: só registra warning.

    Raises:
        ConfigurationError: settings inválidas em ambiente estrito.
    """
    environment = get_base_settings().environment
    errors = collect_settings_errors()

    if not errors:
        logger.info("settings_validated", extra={"environment": environment})
        return

    logger.warning(
        "settings_invalid",
        extra={"environment": environment, "error_count": len(errors), "errors": errors},
    )
    if environment in STRICT_VALIDATION_ENVS:
        details = "; ".join(errors)
        raise ConfigurationError(f"Configuração inválida para {environment}: {details}")
