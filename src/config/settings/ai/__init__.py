"""Settings de inferência (Replicate e OpenAI)."""

from __future__ import annotations

from config.settings.ai.inference import (
    DEFAULT_OPENAI_MODEL,
    DEFAULT_REPLICATE_MODEL,
    REPLICATE_API_URL,
    InferenceProvider,
    InferenceSettings,
    get_inference_settings,
)

__all__ = [
    "DEFAULT_OPENAI_MODEL",
    "DEFAULT_REPLICATE_MODEL",
    "REPLICATE_API_URL",
    "InferenceProvider",
    "InferenceSettings",
    "get_inference_settings",
]
