"""Prompts do módulo AI.

Arquivos:
- card_extractor_prompt.py: extração dos 5 campos de contato (JSON)
- follow_up_email_prompt.py: rascunho de e-mail de follow-up (texto livre)
"""

from ai.prompts.card_extractor_prompt import (
    CARD_EXTRACTOR_MAX_TOKENS,
    CARD_EXTRACTOR_PROMPT,
    format_card_extractor_prompt,
)
from ai.prompts.follow_up_email_prompt import (
    DEFAULT_JOB_TITLE,
    FOLLOW_UP_EMAIL_TEMPLATE,
    format_follow_up_email_prompt,
)

__all__ = [
    "CARD_EXTRACTOR_MAX_TOKENS",
    "CARD_EXTRACTOR_PROMPT",
    "DEFAULT_JOB_TITLE",
    "FOLLOW_UP_EMAIL_TEMPLATE",
    "format_card_extractor_prompt",
    "format_follow_up_email_prompt",
]
