"""Serviço de rascunho de e-mail de follow-up para um card.

A saída do modelo é devolvida sem pós-processamento.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from ai.prompts.follow_up_email_prompt import format_follow_up_email_prompt
from utils.errors import ValidationError

if TYPE_CHECKING:
    from ai.core.inference_client import InferenceClientProtocol

logger = logging.getLogger(__name__)

MISSING_CARD_MESSAGE = "Os dados do cartão não podem ser vazios."


class FollowUpEmailService:
    """Gera rascunho de e-mail para revisão humana (não envia)."""

    def __init__(self, client: InferenceClientProtocol) -> None:
        self._client = client

    async def draft_follow_up(self, card: Mapping[str, Any] | None) -> str:
        """Gera o rascunho.

        Raises:
            ValidationError: card ausente
            InferenceError: propagado do client
        """
        if card is None or not isinstance(card, Mapping):
            raise ValidationError(MISSING_CARD_MESSAGE)

        draft = await self._client.invoke(format_follow_up_email_prompt(card))
        logger.info(
            "follow_up_email_drafted",
            extra={
                "component": "follow_up_email",
                "has_job_title": bool(card.get("jobTitle")),
                "draft_length": len(draft),
            },
        )
        return draft
