"""Exceções do domínio e da infraestrutura do serviço de cartões.

Cada classe corresponde a um status HTTP fixo, traduzido na borda
(api/routes/error_handlers.py). Nenhuma exceção carrega dados do cartão na mensagem.
"""

from __future__ import annotations


class ValidationError(ValueError):
    """Campo obrigatório ausente ou vazio na entrada do chamador."""


class NotFoundError(LookupError):
    """Identificador sem registro correspondente no store."""


class ConfigurationError(RuntimeError):
    """Configuração obrigatória ausente (ex.: credencial de inferência)."""


class InfrastructureError(RuntimeError):
    """Base para falhas de infraestrutura (store, inferência)."""


class StoreUnavailableError(InfrastructureError):
    """Banco indisponível ou operação de leitura/escrita falhou."""


class InferenceError(InfrastructureError):
    """Chamada ao modelo remoto falhou ou não retornou saída."""


class MalformedModelOutputError(ValueError):
    """Resposta do modelo não pôde ser interpretada no formato esperado."""
