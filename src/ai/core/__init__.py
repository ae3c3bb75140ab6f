"""Core do módulo AI.

Exporta protocols para uso externo.
As implementações concretas estão em app/infra/ai/ (IO).
"""

from ai.core.inference_client import InferenceClientProtocol

__all__ = [
    "InferenceClientProtocol",
]
