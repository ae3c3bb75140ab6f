"""Módulo AI do Digicard API.

Serviços sobre um modelo de linguagem hospedado:
1. CardExtractorService - texto livre → 5 campos de contato (JSON)
2. FollowUpEmailService - card → rascunho de e-mail de follow-up

ai/ não faz IO: o client concreto é injetado (app/infra/ai/).
"""

from ai.core import InferenceClientProtocol
from ai.models import EXTRACTION_KEYS, CardExtraction
from ai.services import CardExtractorService, FollowUpEmailService

__all__ = [
    "EXTRACTION_KEYS",
    "CardExtraction",
    "CardExtractorService",
    "FollowUpEmailService",
    "InferenceClientProtocol",
]
