"""Modelos/DTOs para IA."""

from ai.models.card_extraction import EXTRACTION_KEYS, CardExtraction

__all__ = [
    "EXTRACTION_KEYS",
    "CardExtraction",
]
