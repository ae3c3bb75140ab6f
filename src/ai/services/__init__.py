"""Serviços do módulo AI."""

from ai.services.card_extractor import CardExtractorService
from ai.services.follow_up_email import FollowUpEmailService

__all__ = [
    "CardExtractorService",
    "FollowUpEmailService",
]
