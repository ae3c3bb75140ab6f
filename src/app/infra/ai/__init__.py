"""Implementações concretas de IO para inferência.

ai/ define o protocolo; aqui ficam os clientes HTTP reais.
"""

from app.infra.ai.openai_client import OpenAIInferenceClient
from app.infra.ai.replicate_client import ReplicateInferenceClient

__all__ = [
    "OpenAIInferenceClient",
    "ReplicateInferenceClient",
]
