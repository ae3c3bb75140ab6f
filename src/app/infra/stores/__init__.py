"""Stores: implementações concretas de persistência.

Módulos disponíveis:
    - mongo_card_store: Store de Card usando MongoDB
    - memory_stores: Store em memória para desenvolvimento/testes
"""

from __future__ import annotations

from app.infra.stores.memory_stores import MemoryCardStore
from app.infra.stores.mongo_card_store import MongoCardStore

__all__ = [
    "MemoryCardStore",
    "MongoCardStore",
]
