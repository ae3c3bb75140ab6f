"""Contrato de saída da extração de cartão.

Efêmero: não é persistido; o chamador decide se cria um Card com ele.
"""

from __future__ import annotations

from typing import TypedDict

EXTRACTION_KEYS = ("name", "jobTitle", "company", "phoneNumber", "email")


class CardExtraction(TypedDict, total=False):
    """Campos extraídos (string vazia quando ausentes no texto)."""

    name: str
    jobTitle: str
    company: str
    phoneNumber: str
    email: str
