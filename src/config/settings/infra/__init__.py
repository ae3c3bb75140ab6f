"""Settings de persistência (MongoDB / store em memória)."""

from __future__ import annotations

from config.settings.infra.mongodb import (
    CardStoreBackend,
    MongoSettings,
    get_mongo_settings,
)

__all__ = ["CardStoreBackend", "MongoSettings", "get_mongo_settings"]
