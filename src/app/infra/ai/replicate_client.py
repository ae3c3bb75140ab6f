"""Cliente HTTP para predições do Replicate.

Implementação de IO: pertence a app/infra.

Fluxo:
1. POST /models/{owner}/{name}/predictions com `Prefer: wait`
2. Se a predição ainda não terminou, GET em `urls.get` até status terminal
3. `output` (lista de chunks de texto) é concatenado na ordem
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Any

import httpx

from app.observability import record_latency
from config.settings.ai.inference import InferenceSettings, get_inference_settings
from utils.errors import ConfigurationError, InferenceError

logger = logging.getLogger(__name__)

_TERMINAL_STATUSES = frozenset({"succeeded", "failed", "canceled"})

INFERENCE_FAILED_MESSAGE = "Falha ao obter resposta da IA."
MISSING_TOKEN_MESSAGE = "REPLICATE_API_TOKEN não configurado."


def join_output(output: Any) -> str:
    """Concatena a saída do modelo (lista de chunks ou string única)."""
    if output is None:
        return ""
    if isinstance(output, str):
        return output
    if isinstance(output, list):
        return "".join(str(chunk) for chunk in output if chunk is not None)
    return str(output)


class ReplicateInferenceClient:
    """Cliente de inferência sobre a API de predições do Replicate."""

    __slots__ = ("_api_token", "_http_client", "_owns_http_client", "_settings")

    def __init__(
        self,
        *,
        settings: InferenceSettings | None = None,
        api_token: str | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings or get_inference_settings()
        self._api_token = api_token if api_token is not None else self._settings.replicate_api_token
        self._http_client = http_client
        self._owns_http_client = http_client is None

    @property
    def is_configured(self) -> bool:
        return bool(self._api_token)

    def _get_http_client(self) -> httpx.AsyncClient:
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(timeout=self._settings.timeout_seconds)
        return self._http_client

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._api_token}",
            "Content-Type": "application/json",
            "Prefer": "wait",
        }

    async def invoke(self, prompt: str, *, max_tokens: int | None = None) -> str:
        """Executa predição e retorna a saída concatenada."""
        if not self._api_token:
            logger.error("replicate_api_token_missing")
            raise ConfigurationError(MISSING_TOKEN_MESSAGE)

        model_input: dict[str, Any] = {"prompt": prompt}
        if max_tokens is not None:
            model_input["max_new_tokens"] = max_tokens

        started_at = time.perf_counter()
        try:
            prediction = await self._create_prediction(model_input)
            prediction = await self._wait_for_completion(prediction)
        except httpx.TimeoutException as exc:
            logger.warning(
                "replicate_timeout",
                extra={"timeout": self._settings.timeout_seconds},
            )
            raise InferenceError(INFERENCE_FAILED_MESSAGE) from exc
        except httpx.HTTPStatusError as exc:
            logger.warning(
                "replicate_http_error",
                extra={
                    "status_code": exc.response.status_code,
                    "error": _error_detail(exc.response),
                },
            )
            raise InferenceError(INFERENCE_FAILED_MESSAGE) from exc
        except (httpx.HTTPError, ValueError) as exc:
            logger.error("replicate_unexpected_error", extra={"error_type": type(exc).__name__})
            raise InferenceError(INFERENCE_FAILED_MESSAGE) from exc

        status = prediction.get("status")
        if status != "succeeded":
            logger.warning(
                "replicate_prediction_not_succeeded",
                extra={"status": status, "prediction_id": prediction.get("id")},
            )
            raise InferenceError(INFERENCE_FAILED_MESSAGE)

        output = join_output(prediction.get("output"))
        if not output.strip():
            logger.warning("replicate_empty_output", extra={"prediction_id": prediction.get("id")})
            raise InferenceError(INFERENCE_FAILED_MESSAGE)

        record_latency(
            "inference",
            "replicate_invoke",
            (time.perf_counter() - started_at) * 1000,
        )
        return output

    async def _create_prediction(self, model_input: dict[str, Any]) -> dict[str, Any]:
        url = f"{self._settings.replicate_api_url}/models/{self._settings.replicate_model}/predictions"
        response = await self._get_http_client().post(
            url,
            headers=self._headers(),
            json={"input": model_input},
        )
        response.raise_for_status()
        return response.json()

    async def _wait_for_completion(self, prediction: dict[str, Any]) -> dict[str, Any]:
        while prediction.get("status") not in _TERMINAL_STATUSES:
            poll_url = (prediction.get("urls") or {}).get("get")
            if not poll_url:
                raise ValueError("predição pendente sem URL de consulta")
            await asyncio.sleep(self._settings.poll_interval_seconds)
            response = await self._get_http_client().get(poll_url, headers=self._headers())
            response.raise_for_status()
            prediction = response.json()
            logger.debug(
                "replicate_prediction_polled",
                extra={"status": prediction.get("status"), "prediction_id": prediction.get("id")},
            )
        return prediction

    async def aclose(self) -> None:
        """Fecha o httpx.AsyncClient criado pelo próprio cliente."""
        if self._http_client is not None and self._owns_http_client:
            await self._http_client.aclose()
            self._http_client = None


def _error_detail(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text[:500]
    if isinstance(body, dict):
        return str(body.get("detail") or body.get("title") or body)[:500]
    return str(body)[:500]
