"""Endpoints de assistência por LLM.

Endpoints:
- POST /api/process-text: texto livre → campos de contato
- POST /api/generate-email: card → rascunho de e-mail de follow-up

Validação mínima: apenas presença dos campos obrigatórios.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, field_validator

from ai.services import CardExtractorService, FollowUpEmailService
from api.routes.dependencies import get_card_extractor, get_follow_up_email_service

router = APIRouter()


class ProcessTextRequest(BaseModel):
    """Corpo de /api/process-text."""

    model_config = ConfigDict(extra="ignore")

    text: str | None = None

    @field_validator("text", mode="before")
    @classmethod
    def number_as_text(cls, value: Any) -> Any:
        """Números são aceitos como texto; outros tipos seguem para a validação."""
        if isinstance(value, int | float) and not isinstance(value, bool):
            return str(value)
        return value


class GenerateEmailRequest(BaseModel):
    """Corpo de /api/generate-email."""

    model_config = ConfigDict(extra="ignore")

    card: dict[str, Any] | None = None


@router.post("/process-text")
async def process_text(
    body: ProcessTextRequest,
    extractor: CardExtractorService = Depends(get_card_extractor),
) -> dict[str, Any]:
    data = await extractor.extract(body.text or "")
    return {"data": data}


@router.post("/generate-email")
async def generate_email(
    body: GenerateEmailRequest,
    service: FollowUpEmailService = Depends(get_follow_up_email_service),
) -> dict[str, str]:
    email = await service.draft_follow_up(body.card)
    return {"email": email}
