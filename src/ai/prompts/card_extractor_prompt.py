"""Prompt do extrator de cartão de visita.

O texto do chamador entra literalmente no fim do prompt.
"""

from __future__ import annotations

# Limite de saída da extração (JSON com 5 campos curtos)
CARD_EXTRACTOR_MAX_TOKENS = 256

CARD_EXTRACTOR_PROMPT = (
    "You are an expert business card parser. Extract the name, job title, company, "
    "phone number and email from the following text. Reply ONLY with a valid JSON "
    'object with the keys: "name", "jobTitle", "company", "phoneNumber", "email". '
    "If a field is not found, use an empty string. Text: \n\n"
)


def format_card_extractor_prompt(raw_text: str) -> str:
    """Monta o prompt de extração com o texto bruto anexado."""
    return f"{CARD_EXTRACTOR_PROMPT}{raw_text}"
