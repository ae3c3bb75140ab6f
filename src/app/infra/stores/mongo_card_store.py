"""MongoDB Card Store.

Operações do driver (pymongo, bloqueante) rodam via asyncio.to_thread;
o pool de conexões do MongoClient é compartilhado entre requisições.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from bson import ObjectId
from bson.errors import InvalidId
from pymongo import DESCENDING, ReturnDocument
from pymongo.errors import PyMongoError

from app.domain.card import Card, CardPatch, build_new_card
from app.protocols.card_store import CardStoreProtocol
from utils.errors import NotFoundError, StoreUnavailableError

if TYPE_CHECKING:
    from pymongo.collection import Collection

logger = logging.getLogger(__name__)

CARD_NOT_FOUND_MESSAGE = "Cartão não encontrado."

# Empate de timestamp resolvido pelo _id (ObjectId cresce com o tempo)
LIST_SORT = [("creationTimestamp", DESCENDING), ("_id", DESCENDING)]


def _parse_object_id(card_id: str) -> ObjectId | None:
    try:
        return ObjectId(card_id)
    except (InvalidId, TypeError):
        return None


class MongoCardStore(CardStoreProtocol):
    """Store de Card usando uma collection do MongoDB."""

    def __init__(self, collection: Collection[dict[str, Any]]) -> None:
        self._collection = collection

    async def list_cards(self) -> list[Card]:
        return await asyncio.to_thread(self._list_sync)

    def _list_sync(self) -> list[Card]:
        try:
            documents = list(self._collection.find().sort(LIST_SORT))
        except PyMongoError as exc:
            logger.error(
                "card_list_failed",
                extra={"error": str(exc), "error_type": type(exc).__name__},
            )
            raise StoreUnavailableError("Falha ao buscar dados do banco.") from exc
        return [Card.from_document(doc) for doc in documents]

    async def create_card(self, fields: Mapping[str, Any]) -> Card:
        card = build_new_card(fields)
        return await asyncio.to_thread(self._insert_sync, card)

    def _insert_sync(self, card: Card) -> Card:
        document = card.to_document()
        try:
            result = self._collection.insert_one(document)
        except PyMongoError as exc:
            logger.error(
                "card_insert_failed",
                extra={"error": str(exc), "error_type": type(exc).__name__},
            )
            raise StoreUnavailableError("Falha ao salvar dados no banco.") from exc

        card_id = str(result.inserted_id)
        logger.info("card_created", extra={"backend": "mongodb", "card_id": card_id})
        return card.model_copy(update={"id": card_id})

    async def update_card(self, card_id: str, patch: CardPatch) -> Card:
        updates = patch.to_update()
        object_id = _parse_object_id(card_id)
        if object_id is None:
            raise NotFoundError(CARD_NOT_FOUND_MESSAGE)
        return await asyncio.to_thread(self._update_sync, object_id, updates)

    def _update_sync(self, object_id: ObjectId, updates: dict[str, Any]) -> Card:
        try:
            if updates:
                document = self._collection.find_one_and_update(
                    {"_id": object_id},
                    {"$set": updates},
                    return_document=ReturnDocument.AFTER,
                )
            else:
                # `$set` vazio é rejeitado pelo servidor
                document = self._collection.find_one({"_id": object_id})
        except PyMongoError as exc:
            logger.error(
                "card_update_failed",
                extra={"error": str(exc), "error_type": type(exc).__name__},
            )
            raise StoreUnavailableError("Falha ao atualizar dados no banco.") from exc

        if document is None:
            raise NotFoundError(CARD_NOT_FOUND_MESSAGE)

        logger.info(
            "card_updated",
            extra={"backend": "mongodb", "card_id": str(object_id), "fields_count": len(updates)},
        )
        return Card.from_document(document)

    async def delete_card(self, card_id: str) -> bool:
        object_id = _parse_object_id(card_id)
        if object_id is None:
            raise NotFoundError(CARD_NOT_FOUND_MESSAGE)
        return await asyncio.to_thread(self._delete_sync, object_id)

    def _delete_sync(self, object_id: ObjectId) -> bool:
        try:
            result = self._collection.delete_one({"_id": object_id})
        except PyMongoError as exc:
            logger.error(
                "card_delete_failed",
                extra={"error": str(exc), "error_type": type(exc).__name__},
            )
            raise StoreUnavailableError("Falha ao excluir dados do banco.") from exc

        if result.deleted_count == 0:
            raise NotFoundError(CARD_NOT_FOUND_MESSAGE)

        logger.info("card_deleted", extra={"backend": "mongodb", "card_id": str(object_id)})
        return True

    async def ping(self) -> None:
        await asyncio.to_thread(self._ping_sync)

    def _ping_sync(self) -> None:
        try:
            self._collection.database.client.admin.command("ping")
        except PyMongoError as exc:
            logger.error(
                "mongodb_ping_failed",
                extra={"error": str(exc), "error_type": type(exc).__name__},
            )
            raise StoreUnavailableError("Banco de dados indisponível.") from exc

    def close(self) -> None:
        """Fecha o MongoClient dono da collection."""
        self._collection.database.client.close()
