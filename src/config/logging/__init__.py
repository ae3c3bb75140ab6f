"""Logging estruturado em JSON (python-json-logger).

Uso:
    from config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="digicard_api", environment="production")

    logger = get_logger(__name__)
    logger.info("card_created", extra={"card_id": card_id})

Mensagens são nomes de evento em snake_case; dados vão em `extra`.
Conteúdo de cartões e texto bruto do modelo nunca entram nos logs.
"""

from config.logging.config import configure_logging, get_logger
from config.logging.filters import RequestContextFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "RequestContextFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
]
