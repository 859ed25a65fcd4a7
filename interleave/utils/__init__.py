"""
Interleave - Utility Functions
"""
from interleave.utils.text_processing import (
    clean_model_output,
    strip_code_fence,
    strip_enclosing_quotes
)
from interleave.utils.validators import (
    validate_text,
    parse_translation_id
)
from interleave.utils.logging import (
    AppLogger,
    get_logger
)

__all__ = [
    "clean_model_output",
    "strip_code_fence",
    "strip_enclosing_quotes",
    "validate_text",
    "parse_translation_id",
    "AppLogger",
    "get_logger"
]
