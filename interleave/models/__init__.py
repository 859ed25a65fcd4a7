"""
Interleave - Data Models
"""
from interleave.models.translation import (
    TranslationEntry,
    WordDefinition,
    TranslationPayload
)
from interleave.models.schemas import HealthStatus

__all__ = [
    "TranslationEntry",
    "WordDefinition",
    "TranslationPayload",
    "HealthStatus"
]
