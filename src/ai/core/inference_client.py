"""Protocolo para clientes de inferência.

ai/ não faz IO direto: implementações concretas ficam em app/infra/ai/.
"""

from __future__ import annotations

from typing import Protocol


class InferenceClientProtocol(Protocol):
    """Contrato para clientes de modelo remoto (prompt → texto)."""

    @property
    def is_configured(self) -> bool:
        """True se a credencial do provedor está configurada."""
        ...

    async def invoke(self, prompt: str, *, max_tokens: int | None = None) -> str:
        """Executa o prompt e retorna a saída concatenada.

        Args:
            prompt: Texto completo do prompt
            max_tokens: Limite de tokens de saída (None = padrão do provedor)

        Raises:
            ConfigurationError: credencial ausente
            InferenceError: falha remota ou saída vazia
        """
        ...
