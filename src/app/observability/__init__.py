"""Observabilidade: correlation_id e métricas via logs estruturados.

Uso:
    from app.observability import correlation_scope, record_latency

    with correlation_scope(request.headers.get(CORRELATION_ID_HEADER)) as correlation_id:
        ...
"""

from app.observability.correlation import (
    CORRELATION_ID_HEADER,
    accept_correlation_id,
    correlation_scope,
    get_correlation_id,
)
from app.observability.metrics import record_latency

__all__ = [
    "CORRELATION_ID_HEADER",
    "accept_correlation_id",
    "correlation_scope",
    "get_correlation_id",
    "record_latency",
]
