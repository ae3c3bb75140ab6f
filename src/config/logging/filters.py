"""Filter que carimba contexto do processo e da requisição nos logs."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping


class RequestContextFilter(logging.Filter):
    """Adiciona campos fixos (service, environment) e o correlation_id.

    Nunca descarta records. Um correlation_id já presente no record
    (passado via `extra`) prevalece sobre o do contexto.
    """

    def __init__(
        self,
        static_fields: Mapping[str, str],
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._static_fields = dict(static_fields)
        self._correlation_id_getter = correlation_id_getter

    def filter(self, record: logging.LogRecord) -> bool:
        for key, value in self._static_fields.items():
            setattr(record, key, value)
        if not getattr(record, "correlation_id", ""):
            getter = self._correlation_id_getter
            record.correlation_id = getter() if getter else ""
        return True
