"""Entrypoint da aplicação Digicard API.

Este módulo é o ponto de entrada principal do serviço.
Inicializa o bootstrap e expõe a aplicação ASGI (FastAPI).

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 3000

Uso (desenvolvimento):
    digicard-api
"""

from __future__ import annotations

import inspect
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, Any

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from ai.services import CardExtractorService, FollowUpEmailService
from api.routes import create_api_router, register_exception_handlers
from app.bootstrap import initialize_app, validate_runtime_settings
from app.bootstrap.dependencies import create_card_store, create_inference_client
from app.observability import CORRELATION_ID_HEADER, correlation_scope
from config.logging import get_logger
from config.settings import get_base_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Awaitable, Callable

    from fastapi import Response

    from ai.core.inference_client import InferenceClientProtocol
    from app.protocols.card_store import CardStoreProtocol

# Inicializar logging ANTES de qualquer import que use logger
initialize_app()

logger = get_logger(__name__)


async def _close_resource(resource: Any) -> None:
    """Fecha recurso com `aclose()` ou `close()` (sync ou async)."""
    close = getattr(resource, "aclose", None) or getattr(resource, "close", None)
    if not callable(close):
        return
    result = close()
    if inspect.isawaitable(result):
        await result


def _build_lifespan(
    card_store: CardStoreProtocol | None,
    inference_client: InferenceClientProtocol | None,
) -> Callable[[FastAPI], Any]:
    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Gerencia ciclo de vida da aplicação.

        Startup:
        - Valida configurações
        - Cria store e verifica conexão (falha aborta o boot)
        - Cria cliente de inferência e serviços do assistente

        Shutdown:
        - Fecha apenas os clientes criados aqui
        """
        logger.info("app_starting")
        validate_runtime_settings()
        owned: list[Any] = []

        store = card_store
        if store is None:
            store = create_card_store()
            owned.append(store)
        try:
            await store.ping()
        except Exception as exc:
            logger.critical("card_store_unavailable", extra={"error_type": type(exc).__name__})
            for resource in owned:
                await _close_resource(resource)
            raise

        client = inference_client
        if client is None:
            client = create_inference_client()
            owned.append(client)

        app.state.card_store = store
        app.state.inference_client = client
        app.state.card_extractor = CardExtractorService(client)
        app.state.follow_up_email = FollowUpEmailService(client)
        logger.info("app_started", extra={"inference_configured": client.is_configured})

        yield

        logger.info("app_shutting_down")
        for resource in owned:
            await _close_resource(resource)

    return lifespan


async def correlation_id_middleware(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    """Propaga `X-Correlation-Id` para logs e devolve o header na resposta."""
    with correlation_scope(request.headers.get(CORRELATION_ID_HEADER)) as correlation_id:
        response = await call_next(request)
    response.headers[CORRELATION_ID_HEADER] = correlation_id
    return response


def create_app(
    card_store: CardStoreProtocol | None = None,
    inference_client: InferenceClientProtocol | None = None,
) -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Args:
        card_store: Store já construído (testes); None cria pelo ambiente.
        inference_client: Cliente de inferência já construído; None cria
            pelo provedor configurado.

    Returns:
        Aplicação FastAPI configurada.
    """
    fastapi_app = FastAPI(
        title="Digicard API",
        description="Cartões de contato e assistente de follow-up",
        version="1.0.0",
        lifespan=_build_lifespan(card_store, inference_client),
    )

    # Qualquer origem pode chamar a API
    fastapi_app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[CORRELATION_ID_HEADER],
    )
    fastapi_app.middleware("http")(correlation_id_middleware)

    register_exception_handlers(fastapi_app)
    fastapi_app.include_router(create_api_router())

    logger.info("app_configured")

    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta."""
    import uvicorn

    settings = get_base_settings()
    logger.info(
        "app_serving",
        extra={"host": settings.host, "port": settings.port, "environment": settings.environment},
    )
    uvicorn.run(
        "app.app:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    main()
