"""Setup do logging do processo: um handler JSON no root logger."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.logging.filters import RequestContextFilter
from config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "digicard_api"

# Bibliotecas de transporte ficam em WARNING mesmo com LOG_LEVEL=DEBUG
THIRD_PARTY_LOGGERS = ("httpx", "httpcore", "pymongo")


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    environment: str = "development",
    correlation_id_getter: Callable[[], str] | None = None,
) -> None:
    """Instala o handler JSON no root logger.

    Idempotente: os handlers do root são substituídos, não acumulados.

    Args:
        level: Nível de log (case-insensitive).
        service_name: Valor do campo `service`.
        environment: Valor do campo `environment`.
        correlation_id_getter: Leitor do correlation_id da requisição
            corrente (app/observability).

    Raises:
        ValueError: Nível de log desconhecido.
    """
    level_name = level.upper()
    if level_name not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setFormatter(create_json_formatter())
    handler.addFilter(
        RequestContextFilter(
            {"service": service_name, "environment": environment},
            correlation_id_getter,
        )
    )

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(level_name)

    third_party_level = max(logging.getLevelName(level_name), logging.WARNING)
    for name in THIRD_PARTY_LOGGERS:
        logging.getLogger(name).setLevel(third_party_level)


def get_logger(name: str) -> logging.Logger:
    """Logger do módulo; contexto vem do filter do handler raiz."""
    return logging.getLogger(name)
