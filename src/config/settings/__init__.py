"""Settings do Digicard API, carregadas de variáveis de ambiente.

Cada domínio expõe um dataclass imutável com `validate()` e um getter
cacheado (`get_*_settings`).
"""

from __future__ import annotations

from config.settings.ai import (
    InferenceProvider,
    InferenceSettings,
    get_inference_settings,
)
from config.settings.base import (
    DEFAULT_PORT,
    BaseSettings,
    Environment,
    get_base_settings,
)
from config.settings.infra import (
    CardStoreBackend,
    MongoSettings,
    get_mongo_settings,
)

__all__ = [
    "DEFAULT_PORT",
    "BaseSettings",
    "CardStoreBackend",
    "Environment",
    "InferenceProvider",
    "InferenceSettings",
    "MongoSettings",
    "get_base_settings",
    "get_inference_settings",
    "get_mongo_settings",
]
