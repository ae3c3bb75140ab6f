"""Factory do cliente MongoDB."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from pymongo import MongoClient

from config.settings import MongoSettings, get_mongo_settings
from utils.errors import ConfigurationError

if TYPE_CHECKING:
    from pymongo.collection import Collection

logger = logging.getLogger(__name__)


def create_mongo_client(settings: MongoSettings | None = None) -> MongoClient[dict[str, Any]]:
    """Cria MongoClient com pool de conexões.

    A conexão é preguiçosa: a disponibilidade é verificada com `ping`
    no lifespan.

    Raises:
        ConfigurationError: Se MONGODB_URI não configurado
    """
    cfg = settings or get_mongo_settings()
    if not cfg.uri:
        msg = "MONGODB_URI não configurado"
        raise ConfigurationError(msg)

    client: MongoClient[dict[str, Any]] = MongoClient(
        cfg.uri,
        serverSelectionTimeoutMS=cfg.server_selection_timeout_ms,
    )
    logger.info("mongo_client_created", extra={"database": cfg.database})
    return client


def get_cards_collection(
    client: MongoClient[dict[str, Any]],
    settings: MongoSettings | None = None,
) -> Collection[dict[str, Any]]:
    """Retorna a collection de cards configurada."""
    cfg = settings or get_mongo_settings()
    return client[cfg.database][cfg.collection_cards]
