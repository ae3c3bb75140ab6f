"""Factories de stores e serviços baseadas em configuração de ambiente."""

from __future__ import annotations

import logging

from ai.core.inference_client import InferenceClientProtocol
from app.bootstrap.clients import create_mongo_client, get_cards_collection
from app.infra.ai import OpenAIInferenceClient, ReplicateInferenceClient
from app.infra.stores import MemoryCardStore, MongoCardStore
from app.protocols.card_store import CardStoreProtocol
from config.settings import get_base_settings, get_inference_settings, get_mongo_settings

logger = logging.getLogger(__name__)


def create_card_store() -> CardStoreProtocol:
    """Cria store de cards baseado na configuração.

    Raises:
        ConfigurationError: backend mongodb sem MONGODB_URI
        ValueError: backend desconhecido
    """
    settings = get_mongo_settings()
    backend = settings.store_backend

    if backend == "mongodb":
        client = create_mongo_client(settings)
        store = MongoCardStore(get_cards_collection(client, settings))
        logger.info("card_store_created", extra={"backend": "mongodb"})
        return store

    if backend == "memory":
        environment = get_base_settings().environment
        if environment != "development":
            logger.warning(
                "memory_store_in_non_dev",
                extra={"backend": "memory", "environment": environment},
            )
        logger.info("card_store_created", extra={"backend": "memory"})
        return MemoryCardStore()

    msg = f"CARD_STORE_BACKEND inválido: {backend}"
    raise ValueError(msg)


def create_inference_client() -> InferenceClientProtocol:
    """Cria client de inferência do provedor configurado.

    Credencial ausente não impede a criação: falha por requisição.
    """
    settings = get_inference_settings()
    provider = settings.provider

    if provider == "replicate":
        client: InferenceClientProtocol = ReplicateInferenceClient(settings=settings)
    elif provider == "openai":
        client = OpenAIInferenceClient(settings=settings)
    else:
        msg = f"INFERENCE_PROVIDER inválido: {provider}"
        raise ValueError(msg)

    logger.info(
        "inference_client_created",
        extra={"provider": provider, "configured": client.is_configured},
    )
    return client
