"""Agregador de rotas.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router())
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.assistant.router import router as assistant_router
from api.routes.cards.router import router as cards_router
from api.routes.health.router import router as health_router

API_PREFIX = "/api"


def create_api_router() -> APIRouter:
    """Cria router principal com todos os sub-routers registrados."""
    api_router = APIRouter()

    # Health checks (sem prefixo para /health e /ready na raiz)
    api_router.include_router(health_router, tags=["health"])

    api_router.include_router(assistant_router, prefix=API_PREFIX, tags=["assistant"])
    api_router.include_router(cards_router, prefix=API_PREFIX, tags=["cards"])

    return api_router
