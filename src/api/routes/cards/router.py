"""Endpoints CRUD de cards.

Endpoints:
- GET /api/cards: lista, criação mais recente primeiro
- POST /api/cards: cria (name e company obrigatórios)
- PUT /api/cards/{card_id}: substituição parcial de campos
- DELETE /api/cards/{card_id}: remove
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, Response, status

from api.routes.dependencies import get_card_store
from app.domain.card import build_card_patch
from app.protocols.card_store import CardStoreProtocol

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/cards")
async def list_cards(
    store: CardStoreProtocol = Depends(get_card_store),
) -> dict[str, Any]:
    cards = await store.list_cards()
    return {"cards": [card.to_response() for card in cards]}


@router.post("/cards", status_code=status.HTTP_201_CREATED)
async def create_card(
    fields: dict[str, Any] = Body(...),
    store: CardStoreProtocol = Depends(get_card_store),
) -> dict[str, Any]:
    card = await store.create_card(fields)
    return card.to_response()


@router.put("/cards/{card_id}")
async def update_card(
    card_id: str,
    fields: dict[str, Any] = Body(...),
    store: CardStoreProtocol = Depends(get_card_store),
) -> dict[str, Any]:
    """Aplica os campos enviados; `id`/`_id` no corpo são ignorados.

    Responde com o identificador e os campos aplicados.
    """
    patch = build_card_patch(fields)
    await store.update_card(card_id, patch)
    return {"id": card_id, **patch.to_update()}


@router.delete("/cards/{card_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_card(
    card_id: str,
    store: CardStoreProtocol = Depends(get_card_store),
) -> Response:
    await store.delete_card(card_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
