"""Protocolo para persistência de Card."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol

from app.domain.card import Card, CardPatch


class CardStoreProtocol(Protocol):
    """Contrato para store de Card (uma única collection)."""

    async def list_cards(self) -> list[Card]:
        """Lista todos os cards, criação mais recente primeiro."""
        ...

    async def create_card(self, fields: Mapping[str, Any]) -> Card:
        """Cria card com identificador e timestamp de criação atribuídos."""
        ...

    async def update_card(self, card_id: str, patch: CardPatch) -> Card:
        """Aplica substituição parcial já validada e retorna o card atualizado."""
        ...

    async def delete_card(self, card_id: str) -> bool:
        """Remove o card; retorna True em caso de sucesso."""
        ...

    async def ping(self) -> None:
        """Verifica conectividade com o backend."""
        ...
