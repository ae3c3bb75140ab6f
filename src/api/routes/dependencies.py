"""Dependências FastAPI: leem as instâncias montadas no lifespan.

Nenhum singleton de módulo: tudo vem de `request.app.state`.
"""

from __future__ import annotations

from fastapi import Request

from ai.services import CardExtractorService, FollowUpEmailService
from app.protocols.card_store import CardStoreProtocol


def get_card_store(request: Request) -> CardStoreProtocol:
    """Store de cards da aplicação."""
    return request.app.state.card_store


def get_card_extractor(request: Request) -> CardExtractorService:
    """Serviço de extração de campos de contato."""
    return request.app.state.card_extractor


def get_follow_up_email_service(request: Request) -> FollowUpEmailService:
    """Serviço de rascunho de e-mail de follow-up."""
    return request.app.state.follow_up_email
