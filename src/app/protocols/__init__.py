"""Protocolos e contratos do core da aplicação."""

from .card_store import CardStoreProtocol

__all__ = [
    "CardStoreProtocol",
]
