"""Settings do processo: ambiente, servidor HTTP e log."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

Environment = Literal["development", "staging", "production"]

DEFAULT_PORT = 3000

# Apelidos aceitos em ENVIRONMENT; valor desconhecido cai em development
_ENVIRONMENT_ALIASES: dict[str, Environment] = {
    "dev": "development",
    "development": "development",
    "local": "development",
    "stage": "staging",
    "staging": "staging",
    "prod": "production",
    "production": "production",
}

_TRUTHY = frozenset({"1", "true", "yes", "on"})


@dataclass(frozen=True)
class BaseSettings:
    """Settings comuns ao serviço.

    Attributes:
        environment: development|staging|production
        service_name: Campo `service` dos logs e da liveness probe
        debug: Habilita reload do uvicorn em `main()`
        host: Interface de escuta
        port: Porta de escuta (3000 por padrão)
        log_level: Nível do root logger
    """

    environment: Environment = "development"
    service_name: str = "digicard-api"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    log_level: str = "INFO"

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    def validate(self) -> list[str]:
        """Lista de problemas encontrados (vazia = OK)."""
        errors: list[str] = []
        if not self.service_name:
            errors.append("SERVICE_NAME não pode ser vazio")
        if not 0 < self.port < 65536:
            errors.append(f"PORT fora do intervalo válido: {self.port}")
        return errors


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in _TRUTHY


def _env_port() -> int:
    raw = os.getenv("PORT", "").strip()
    return int(raw) if raw.isdigit() else DEFAULT_PORT


def _load_base_from_env() -> BaseSettings:
    environment = os.getenv("ENVIRONMENT", "development").strip().lower()
    return BaseSettings(
        environment=_ENVIRONMENT_ALIASES.get(environment, "development"),
        service_name=os.getenv("SERVICE_NAME", "digicard-api"),
        debug=_env_flag("DEBUG"),
        host=os.getenv("HOST", "0.0.0.0"),
        port=_env_port(),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )


@lru_cache(maxsize=1)
def get_base_settings() -> BaseSettings:
    """BaseSettings do ambiente, lida uma única vez por processo."""
    return _load_base_from_env()
