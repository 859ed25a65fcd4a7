"""
Interleave - Services
"""
from interleave.services.openai_client import TranslationClient
from interleave.services.query_service import TranslationQueryService
from interleave.services.translator import TranslationService

__all__ = [
    "TranslationClient",
    "TranslationQueryService",
    "TranslationService"
]
