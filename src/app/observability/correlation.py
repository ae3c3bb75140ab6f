"""Correlation ID por requisição.

O middleware HTTP abre um `correlation_scope` com o header
`X-Correlation-Id` recebido; dentro dele todo log carrega o mesmo ID
(via filter de config/logging) e a resposta devolve o header.
"""

from __future__ import annotations

import re
import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

CORRELATION_ID_HEADER = "X-Correlation-Id"

# IDs do chamador vão para logs e headers: só caracteres seguros
_ACCEPTED_ID = re.compile(r"[A-Za-z0-9._:-]{1,128}")

_current: ContextVar[str] = ContextVar("correlation_id", default="")


def get_correlation_id() -> str:
    """ID da requisição corrente ("" fora de um escopo)."""
    return _current.get()


def accept_correlation_id(incoming: str | None) -> str:
    """Reaproveita o ID recebido se bem formado; senão gera um UUID4 hex."""
    if incoming and _ACCEPTED_ID.fullmatch(incoming):
        return incoming
    return uuid.uuid4().hex


@contextmanager
def correlation_scope(incoming: str | None = None) -> Iterator[str]:
    """Define o correlation_id durante o bloco e restaura o anterior ao sair."""
    correlation_id = accept_correlation_id(incoming)
    token = _current.set(correlation_id)
    try:
        yield correlation_id
    finally:
        _current.reset(token)
