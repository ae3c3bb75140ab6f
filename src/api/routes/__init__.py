"""Rotas HTTP da API.

Responsabilidades:
- Definir endpoints HTTP (cards, assistente LLM, health)
- Validação de presença dos campos obrigatórios
- Delegação para serviços/stores injetados via app.state
- Tradução de erros em respostas JSON (error_handlers.py)
"""

from __future__ import annotations

from api.routes.error_handlers import register_exception_handlers
from api.routes.router import create_api_router

__all__ = ["create_api_router", "register_exception_handlers"]
