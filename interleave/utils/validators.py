"""
Validation Utilities
====================
Functions for validating inbound request data.
"""
import re
from typing import Optional, Tuple

from interleave.config import config

_ID_PATTERN = re.compile(r'^[+-]?[0-9]+$')


def validate_text(text: str) -> Tuple[bool, Optional[str]]:
    """
    Validate text submitted for translation.

    Args:
        text: The raw request body

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not text or not text.strip():
        return False, "No text provided"

    max_length = config.request.max_text_length
    if len(text) > max_length:
        return False, f"Text too long. Maximum length: {max_length} characters"

    return True, None


def parse_translation_id(value: str) -> Optional[int]:
    """Parse a decimal translation id, or return None if it is malformed."""
    if value is None or not _ID_PATTERN.match(value.strip()):
        return None
    translation_id = int(value)
    # ids are stored as signed 64-bit integers
    if not -2 ** 63 <= translation_id < 2 ** 63:
        return None
    return translation_id
