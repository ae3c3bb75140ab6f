"""Store em memória para desenvolvimento e testes.

NÃO usar em produção: dados não sobrevivem ao processo.
"""

from __future__ import annotations

import itertools
import logging
from collections.abc import Mapping
from typing import Any

from bson import ObjectId

from app.domain.card import Card, CardPatch, build_new_card
from app.protocols.card_store import CardStoreProtocol
from utils.errors import NotFoundError

logger = logging.getLogger(__name__)

CARD_NOT_FOUND_MESSAGE = "Cartão não encontrado."


class MemoryCardStore(CardStoreProtocol):
    """Store de Card em memória com a mesma semântica do MongoCardStore."""

    def __init__(self) -> None:
        self._cards: dict[str, tuple[int, Card]] = {}
        self._sequence = itertools.count()

    async def list_cards(self) -> list[Card]:
        entries = sorted(
            self._cards.values(),
            key=lambda entry: (entry[1].creation_timestamp, entry[0]),
            reverse=True,
        )
        return [card for _, card in entries]

    async def create_card(self, fields: Mapping[str, Any]) -> Card:
        card = build_new_card(fields)
        card_id = str(ObjectId())
        stored = Card.from_document({"_id": card_id, **card.to_document()})
        self._cards[card_id] = (next(self._sequence), stored)
        logger.info("card_created", extra={"backend": "memory", "card_id": card_id})
        return stored

    async def update_card(self, card_id: str, patch: CardPatch) -> Card:
        updates = patch.to_update()
        entry = self._cards.get(card_id)
        if entry is None:
            raise NotFoundError(CARD_NOT_FOUND_MESSAGE)

        sequence, current = entry
        merged = Card.from_document({"_id": card_id, **current.to_document(), **updates})
        self._cards[card_id] = (sequence, merged)
        logger.info(
            "card_updated",
            extra={"backend": "memory", "card_id": card_id, "fields_count": len(updates)},
        )
        return merged

    async def delete_card(self, card_id: str) -> bool:
        if self._cards.pop(card_id, None) is None:
            raise NotFoundError(CARD_NOT_FOUND_MESSAGE)
        logger.info("card_deleted", extra={"backend": "memory", "card_id": card_id})
        return True

    async def ping(self) -> None:
        return None

    def __len__(self) -> int:
        return len(self._cards)
