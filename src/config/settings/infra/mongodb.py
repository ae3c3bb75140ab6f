"""Settings do MongoDB.

Configurações para o store de cartões.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

CardStoreBackend = Literal["mongodb", "memory"]


@dataclass(frozen=True)
class MongoSettings:
    """Configurações do MongoDB.

    Attributes:
        uri: Connection string (obrigatória com backend mongodb)
        database: Nome do database
        collection_cards: Collection dos cartões
        server_selection_timeout_ms: Timeout de seleção de servidor do driver
        store_backend: Backend do store de cartões (mongodb|memory)
    """

    uri: str = ""
    database: str = "digicard_db"
    collection_cards: str = "cards"
    server_selection_timeout_ms: int = 5000
    store_backend: CardStoreBackend = "mongodb"

    def validate(self) -> list[str]:
        """Valida configurações do MongoDB.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []

        if self.store_backend not in ("mongodb", "memory"):
            errors.append(f"CARD_STORE_BACKEND inválido: {self.store_backend}")

        if self.store_backend == "mongodb" and not self.uri:
            errors.append("MONGODB_URI não configurado")

        if not self.database:
            errors.append("MONGODB_DATABASE não pode ser vazio")

        if self.server_selection_timeout_ms <= 0:
            errors.append("MONGODB_SERVER_SELECTION_TIMEOUT_MS deve ser > 0")

        return errors


def _load_mongo_from_env() -> MongoSettings:
    """Carrega MongoSettings de variáveis de ambiente."""
    return MongoSettings(
        uri=os.getenv("MONGODB_URI", ""),
        database=os.getenv("MONGODB_DATABASE", "digicard_db"),
        collection_cards=os.getenv("MONGODB_COLLECTION", "cards"),
        server_selection_timeout_ms=int(os.getenv("MONGODB_SERVER_SELECTION_TIMEOUT_MS", "5000")),
        store_backend=os.getenv("CARD_STORE_BACKEND", "mongodb").lower(),  # type: ignore[arg-type]
    )


@lru_cache(maxsize=1)
def get_mongo_settings() -> MongoSettings:
    """Retorna instância cacheada de MongoSettings."""
    return _load_mongo_from_env()
