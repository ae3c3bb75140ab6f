"""Métricas emitidas como logs estruturados (`metric_type` no payload).

A agregação acontece fora do processo, a partir do stream de logs JSON.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def record_latency(component: str, operation: str, latency_ms: float) -> None:
    """Registra latência de uma operação externa.

    Args:
        component: Área do sistema (ex: "inference", "card_store")
        operation: Operação medida (ex: "replicate_invoke")
        latency_ms: Duração em milissegundos
    """
    logger.info(
        "metric_latency",
        extra={
            "metric_type": "latency",
            "component": component,
            "operation": operation,
            "latency_ms": round(latency_ms, 2),
        },
    )
