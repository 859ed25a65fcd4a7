"""
Interleave - Configuration Module
"""
from interleave.config.settings import Config, config
from interleave.config.constants import (
    SOURCE_LANGUAGE,
    TRANSLATION_INSTRUCTIONS,
    Collection
)

__all__ = [
    "Config",
    "config",
    "SOURCE_LANGUAGE",
    "TRANSLATION_INSTRUCTIONS",
    "Collection"
]
