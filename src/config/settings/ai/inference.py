"""Settings do provedor de inferência.

Um único bloco para os dois provedores suportados; INFERENCE_PROVIDER
escolhe qual client o bootstrap monta.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

InferenceProvider = Literal["replicate", "openai"]

REPLICATE_API_URL = "https://api.replicate.com/v1"
DEFAULT_REPLICATE_MODEL = "ibm-granite/granite-3.3-8b-instruct"
DEFAULT_OPENAI_MODEL = "gpt-4o-mini"


@dataclass(frozen=True)
class InferenceSettings:
    """Configurações de inferência.

    Attributes:
        provider: Provedor ativo (replicate|openai)
        replicate_api_token: Credencial do Replicate
        replicate_model: Modelo no formato owner/name
        replicate_api_url: URL base da API do Replicate
        poll_interval_seconds: Intervalo entre consultas de predição pendente
        openai_api_key: Credencial do OpenAI (provider=openai)
        openai_model: Modelo de chat completions
        timeout_seconds: Timeout de transporte por requisição, ambos provedores
    """

    provider: InferenceProvider = "replicate"

    replicate_api_token: str = ""
    replicate_model: str = DEFAULT_REPLICATE_MODEL
    replicate_api_url: str = REPLICATE_API_URL
    poll_interval_seconds: float = 1.0

    openai_api_key: str = ""
    openai_model: str = DEFAULT_OPENAI_MODEL

    timeout_seconds: float = 60.0

    @property
    def has_credential(self) -> bool:
        """True se o provedor ativo tem credencial configurada."""
        if self.provider == "openai":
            return bool(self.openai_api_key)
        return bool(self.replicate_api_token)

    def validate(self) -> list[str]:
        """Valida configurações de inferência.

        Credencial ausente não é erro de startup: falha por requisição.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []

        if self.provider not in ("replicate", "openai"):
            errors.append(f"INFERENCE_PROVIDER inválido: {self.provider}")

        if self.provider == "replicate" and "/" not in self.replicate_model:
            errors.append("REPLICATE_MODEL deve estar no formato owner/name")

        if self.provider == "openai" and not self.openai_model:
            errors.append("OPENAI_MODEL não pode ser vazio")

        if self.timeout_seconds <= 0:
            errors.append("INFERENCE_TIMEOUT_SECONDS deve ser > 0")

        if self.poll_interval_seconds < 0:
            errors.append("REPLICATE_POLL_INTERVAL_SECONDS deve ser >= 0")

        return errors


def _load_inference_from_env() -> InferenceSettings:
    """Carrega InferenceSettings de variáveis de ambiente."""
    return InferenceSettings(
        provider=os.getenv("INFERENCE_PROVIDER", "replicate").lower(),  # type: ignore[arg-type]
        replicate_api_token=os.getenv("REPLICATE_API_TOKEN", ""),
        replicate_model=os.getenv("REPLICATE_MODEL", DEFAULT_REPLICATE_MODEL),
        replicate_api_url=os.getenv("REPLICATE_API_URL", REPLICATE_API_URL).rstrip("/"),
        poll_interval_seconds=float(os.getenv("REPLICATE_POLL_INTERVAL_SECONDS", "1.0")),
        openai_api_key=os.getenv("OPENAI_API_KEY", ""),
        openai_model=os.getenv("OPENAI_MODEL", DEFAULT_OPENAI_MODEL),
        timeout_seconds=float(os.getenv("INFERENCE_TIMEOUT_SECONDS", "60")),
    )


@lru_cache(maxsize=1)
def get_inference_settings() -> InferenceSettings:
    """Retorna instância cacheada de InferenceSettings."""
    return _load_inference_from_env()
