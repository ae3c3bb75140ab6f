"""Testes do ReplicateInferenceClient com transporte HTTP mockado."""

from __future__ import annotations

import json
from collections.abc import Callable

import httpx
import pytest

from app.infra.ai.replicate_client import ReplicateInferenceClient, join_output
from config.settings.ai.inference import InferenceSettings
from utils.errors import ConfigurationError, InferenceError

API_URL = "https://replicate.test/v1"
MODEL = "ibm-granite/granite-3.3-8b-instruct"
CREATE_URL = f"{API_URL}/models/{MODEL}/predictions"
POLL_URL = f"{API_URL}/predictions/p1"

SETTINGS = InferenceSettings(
    replicate_api_token="r8_test",
    replicate_model=MODEL,
    replicate_api_url=API_URL,
    poll_interval_seconds=0,
)


def _client(handler: Callable[[httpx.Request], httpx.Response]) -> ReplicateInferenceClient:
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return ReplicateInferenceClient(settings=SETTINGS, http_client=http_client)


class TestJoinOutput:
    """Testes de join_output."""

    def test_joins_chunks_in_order(self) -> None:
        assert join_output(["{\"na", "me\": ", "\"Ana\"}"]) == '{"name": "Ana"}'

    def test_string_and_none(self) -> None:
        assert join_output("texto") == "texto"
        assert join_output(None) == ""
        assert join_output(["a", None, "b"]) == "ab"


class TestReplicateInferenceClient:
    """Testes de invoke."""

    @pytest.mark.asyncio
    async def test_sync_prediction_success(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(
                201,
                json={"id": "p1", "status": "succeeded", "output": ["Hello", " ", "Ana"]},
            )

        client = _client(handler)
        output = await client.invoke("prompt", max_tokens=256)

        assert output == "Hello Ana"
        request = seen[0]
        assert str(request.url) == CREATE_URL
        assert request.headers["Authorization"] == "Bearer r8_test"
        assert request.headers["Prefer"] == "wait"
        assert json.loads(request.content) == {
            "input": {"prompt": "prompt", "max_new_tokens": 256}
        }

    @pytest.mark.asyncio
    async def test_max_tokens_omitted_when_none(self) -> None:
        bodies: list[dict[str, object]] = []

        def handler(request: httpx.Request) -> httpx.Response:
            bodies.append(json.loads(request.content))
            return httpx.Response(201, json={"status": "succeeded", "output": ["ok"]})

        await _client(handler).invoke("prompt")

        assert bodies[0] == {"input": {"prompt": "prompt"}}

    @pytest.mark.asyncio
    async def test_polls_until_terminal_status(self) -> None:
        polls: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            if request.method == "POST":
                return httpx.Response(
                    201,
                    json={"id": "p1", "status": "starting", "urls": {"get": POLL_URL}},
                )
            polls.append(str(request.url))
            if len(polls) < 2:
                return httpx.Response(
                    200,
                    json={"id": "p1", "status": "processing", "urls": {"get": POLL_URL}},
                )
            return httpx.Response(200, json={"id": "p1", "status": "succeeded", "output": ["done"]})

        output = await _client(handler).invoke("prompt")

        assert output == "done"
        assert polls == [POLL_URL, POLL_URL]

    @pytest.mark.asyncio
    async def test_failed_prediction_raises(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(201, json={"id": "p1", "status": "failed", "error": "boom"})

        with pytest.raises(InferenceError, match="Falha ao obter resposta da IA."):
            await _client(handler).invoke("prompt")

    @pytest.mark.asyncio
    async def test_empty_output_raises(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(201, json={"status": "succeeded", "output": []})

        with pytest.raises(InferenceError):
            await _client(handler).invoke("prompt")

    @pytest.mark.asyncio
    async def test_http_error_raises(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(401, json={"detail": "Unauthenticated"})

        with pytest.raises(InferenceError):
            await _client(handler).invoke("prompt")

    @pytest.mark.asyncio
    async def test_timeout_raises(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        with pytest.raises(InferenceError):
            await _client(handler).invoke("prompt")

    @pytest.mark.asyncio
    async def test_pending_without_poll_url_raises(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(201, json={"status": "processing"})

        with pytest.raises(InferenceError):
            await _client(handler).invoke("prompt")

    @pytest.mark.asyncio
    async def test_missing_token_raises_configuration_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise AssertionError("não deveria chamar a API")

        http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        client = ReplicateInferenceClient(settings=SETTINGS, api_token="", http_client=http_client)

        assert client.is_configured is False
        with pytest.raises(ConfigurationError, match="REPLICATE_API_TOKEN não configurado."):
            await client.invoke("prompt")

    @pytest.mark.asyncio
    async def test_aclose_keeps_injected_http_client(self) -> None:
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(lambda r: httpx.Response(200)))
        client = ReplicateInferenceClient(settings=SETTINGS, http_client=http_client)

        await client.aclose()

        assert http_client.is_closed is False
        await http_client.aclose()
