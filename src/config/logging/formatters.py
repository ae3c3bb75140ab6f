"""Formatter JSON dos logs do serviço."""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Campos presentes em toda linha; `extra` do chamador vem em seguida
REQUIRED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "service",
    "environment",
    "correlation_id",
)

FIELD_RENAME_MAP = {"levelname": "level", "name": "logger"}


def create_json_formatter() -> JsonFormatter:
    """Cria o formatter de uma linha JSON por record.

    Exemplo:
        {"asctime": "2026-10-18 10:30:00,123", "level": "INFO",
         "logger": "app.infra.stores.mongo_card_store", "message": "card_created",
         "service": "digicard_api", "environment": "production",
         "correlation_id": "9f1c...", "card_id": "665f..."}
    """
    return JsonFormatter(
        " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS),
        rename_fields=FIELD_RENAME_MAP,
    )
