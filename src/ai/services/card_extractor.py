"""Serviço de extração de campos de contato a partir de texto livre.

Monta o prompt, chama o client via protocolo e parseia o JSON retornado.
Sem nova tentativa: saída malformada chega ao chamador como erro.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, cast

from ai.models.card_extraction import EXTRACTION_KEYS, CardExtraction
from ai.prompts.card_extractor_prompt import (
    CARD_EXTRACTOR_MAX_TOKENS,
    format_card_extractor_prompt,
)
from ai.utils._json_extractor import parse_json_object
from utils.errors import MalformedModelOutputError, ValidationError

if TYPE_CHECKING:
    from ai.core.inference_client import InferenceClientProtocol

logger = logging.getLogger(__name__)

EMPTY_TEXT_MESSAGE = "O texto não pode ser vazio."


class CardExtractorService:
    """Extrai name, jobTitle, company, phoneNumber e email de texto bruto."""

    def __init__(self, client: InferenceClientProtocol) -> None:
        self._client = client

    async def extract(self, raw_text: str) -> CardExtraction:
        """Executa extração.

        Raises:
            ValidationError: texto vazio
            InferenceError: propagado do client
            ConfigurationError: propagado do client
            MalformedModelOutputError: resposta não é objeto JSON
        """
        if not raw_text:
            raise ValidationError(EMPTY_TEXT_MESSAGE)

        output = await self._client.invoke(
            format_card_extractor_prompt(raw_text),
            max_tokens=CARD_EXTRACTOR_MAX_TOKENS,
        )

        try:
            data = parse_json_object(output)
        except MalformedModelOutputError:
            logger.warning(
                "card_extraction_parse_failed",
                extra={
                    "component": "card_extractor",
                    "action": "parse",
                    "result": "malformed",
                    "output_length": len(output),
                },
            )
            raise

        logger.info(
            "card_extracted",
            extra={
                "component": "card_extractor",
                "action": "extract",
                "result": "ok",
                "filled_fields": [key for key in EXTRACTION_KEYS if data.get(key)],
            },
        )
        return cast(CardExtraction, data)
