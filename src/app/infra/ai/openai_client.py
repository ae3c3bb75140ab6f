"""Cliente OpenAI como provedor alternativo de inferência.

Selecionado com INFERENCE_PROVIDER=openai. O prompt vai como mensagem
única de usuário; nenhum system prompt é adicionado.
"""

from __future__ import annotations

import logging
import time
from typing import Any

from openai import AsyncOpenAI, OpenAIError

from app.observability import record_latency
from config.settings.ai.inference import InferenceSettings, get_inference_settings
from utils.errors import ConfigurationError, InferenceError

logger = logging.getLogger(__name__)

INFERENCE_FAILED_MESSAGE = "Falha ao obter resposta da IA."
MISSING_KEY_MESSAGE = "OPENAI_API_KEY não configurado."


class OpenAIInferenceClient:
    """Cliente de inferência via chat completions do SDK oficial."""

    __slots__ = ("_api_key", "_sdk", "_settings")

    def __init__(
        self,
        *,
        settings: InferenceSettings | None = None,
        api_key: str | None = None,
        sdk: AsyncOpenAI | None = None,
    ) -> None:
        self._settings = settings or get_inference_settings()
        self._api_key = api_key if api_key is not None else self._settings.openai_api_key
        self._sdk = sdk

    @property
    def is_configured(self) -> bool:
        return self._sdk is not None or bool(self._api_key)

    def _get_sdk(self) -> AsyncOpenAI:
        if self._sdk is None:
            self._sdk = AsyncOpenAI(api_key=self._api_key, timeout=self._settings.timeout_seconds)
        return self._sdk

    async def invoke(self, prompt: str, *, max_tokens: int | None = None) -> str:
        if not self.is_configured:
            logger.error("openai_api_key_missing")
            raise ConfigurationError(MISSING_KEY_MESSAGE)

        request: dict[str, Any] = {
            "model": self._settings.openai_model,
            "messages": [{"role": "user", "content": prompt}],
        }
        if max_tokens is not None:
            request["max_tokens"] = max_tokens

        started_at = time.perf_counter()
        try:
            completion = await self._get_sdk().chat.completions.create(**request)
        except OpenAIError as exc:
            logger.warning(
                "openai_request_failed",
                extra={"model": self._settings.openai_model, "error_type": type(exc).__name__},
            )
            raise InferenceError(INFERENCE_FAILED_MESSAGE) from exc

        content = completion.choices[0].message.content if completion.choices else None
        if not content or not content.strip():
            logger.warning("openai_empty_output", extra={"model": self._settings.openai_model})
            raise InferenceError(INFERENCE_FAILED_MESSAGE)

        record_latency("inference", "openai_invoke", (time.perf_counter() - started_at) * 1000)
        return content

    async def aclose(self) -> None:
        """Fecha o SDK (e seu pool HTTP) se já foi criado."""
        if self._sdk is not None:
            await self._sdk.close()
            self._sdk = None
