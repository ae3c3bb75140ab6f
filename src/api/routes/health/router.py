"""Probes de liveness (/health) e readiness (/ready).

Readiness:
- card_store: crítico; falha no ping → 503
- inference: informativo; credencial ausente só marca `degraded`
"""

from __future__ import annotations

import asyncio
import time
from dataclasses import asdict, dataclass
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Literal

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from config.settings import get_base_settings

if TYPE_CHECKING:
    from ai.core.inference_client import InferenceClientProtocol
    from app.protocols.card_store import CardStoreProtocol

router = APIRouter()

STORE_PING_TIMEOUT_SECONDS = 3.0

CheckStatus = Literal["ok", "degraded", "failed"]


class HealthResponse(BaseModel):
    """Resposta da liveness probe."""

    status: Literal["healthy"] = "healthy"
    service: str
    environment: str
    timestamp: str


@dataclass(frozen=True, slots=True)
class DependencyCheck:
    """Resultado da checagem de uma dependência."""

    status: CheckStatus
    latency_ms: float | None = None
    error: str | None = None


def _now_iso() -> str:
    return datetime.now(UTC).isoformat()


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Processo vivo; não toca dependências."""
    settings = get_base_settings()
    return HealthResponse(
        service=settings.service_name,
        environment=settings.environment,
        timestamp=_now_iso(),
    )


@router.get("/ready")
async def readiness_check(request: Request) -> JSONResponse:
    state = request.app.state
    checks = {
        "card_store": await _check_card_store(getattr(state, "card_store", None)),
        "inference": _check_inference(getattr(state, "inference_client", None)),
    }
    ready = checks["card_store"].status == "ok"

    return JSONResponse(
        status_code=status.HTTP_200_OK if ready else status.HTTP_503_SERVICE_UNAVAILABLE,
        content={
            "status": "ready" if ready else "not_ready",
            "checks": {name: asdict(check) for name, check in checks.items()},
            "timestamp": _now_iso(),
        },
    )


async def _check_card_store(store: CardStoreProtocol | None) -> DependencyCheck:
    if store is None:
        return DependencyCheck(status="failed", error="not_configured")

    started_at = time.perf_counter()
    try:
        await asyncio.wait_for(store.ping(), timeout=STORE_PING_TIMEOUT_SECONDS)
    except TimeoutError:
        return DependencyCheck(status="failed", error="timeout")
    except Exception as exc:
        return DependencyCheck(status="failed", error=type(exc).__name__)

    elapsed_ms = (time.perf_counter() - started_at) * 1000
    return DependencyCheck(status="ok", latency_ms=round(elapsed_ms, 2))


def _check_inference(client: InferenceClientProtocol | None) -> DependencyCheck:
    # Só verifica credencial; não chama o provedor
    if client is None:
        return DependencyCheck(status="failed", error="not_configured")
    if not client.is_configured:
        return DependencyCheck(status="degraded", error="credential_missing")
    return DependencyCheck(status="ok")
