"""Utilitários de IA."""

from ai.utils._json_extractor import parse_json_object, strip_code_fences

__all__ = [
    "parse_json_object",
    "strip_code_fences",
]
