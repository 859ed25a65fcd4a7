"""
Text Processing Utilities
=========================
Helpers for cleaning raw model output before it is parsed.
"""
import re

_CODE_FENCE = re.compile(r'^```[a-zA-Z]*\s*\n?(.*?)\n?\s*```$', re.DOTALL)


def strip_code_fence(text: str) -> str:
    """Remove a Markdown code fence wrapping the whole text, if any."""
    match = _CODE_FENCE.match(text)
    return match.group(1).strip() if match else text


def strip_enclosing_quotes(text: str, quote: str = '"') -> str:
    """Remove exactly one layer of enclosing quote characters."""
    if len(text) >= 2 and text.startswith(quote) and text.endswith(quote):
        return text[1:-1]
    return text


def clean_model_output(text: str) -> str:
    """
    Clean the model reply so it can be parsed as JSON.

    Trims whitespace, unwraps a code fence and strips a single layer of
    enclosing double quotes.
    """
    if not text:
        return ""
    text = text.strip()
    text = strip_code_fence(text)
    text = strip_enclosing_quotes(text).strip()
    return text
