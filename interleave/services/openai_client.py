"""
OpenAI API Client
=================
Client for the OpenAI Responses API that turns German text into a
translation plus per-word glosses.
"""
import json
import requests
from typing import Any, Dict, List, Optional, Tuple

from interleave.config import config, TRANSLATION_INSTRUCTIONS
from interleave.exceptions import (
    APIError,
    ConfigError,
    EmptyResponseError,
    MalformedPayloadError,
    NetworkError
)
from interleave.models.translation import TranslationPayload
from interleave.utils.logging import get_logger
from interleave.utils.text_processing import clean_model_output


def extract_output_text(envelope: Dict[str, Any]) -> str:
    """Return the text of the first content block of the first output message."""
    output = envelope.get('output') if isinstance(envelope, dict) else None
    if not output or not isinstance(output, list):
        raise EmptyResponseError("no translation provided in response")

    for message in output:
        content = message.get('content') if isinstance(message, dict) else None
        if not content or not isinstance(content, list):
            continue
        text = content[0].get('text') if isinstance(content[0], dict) else None
        if isinstance(text, str):
            return text

    raise EmptyResponseError("no translation provided in response")


def parse_translation_payload(raw: str) -> TranslationPayload:
    """
    Parse cleaned model output into a TranslationPayload.

    Expected shape:
        {"translation": "...", "words": [{"<word>": ["...", ...]}, ...]}
    """
    try:
        data = json.loads(clean_model_output(raw))
    except json.JSONDecodeError as e:
        raise MalformedPayloadError(f"error unmarshaling translation payload: {e}") from e

    if not isinstance(data, dict):
        raise MalformedPayloadError("error unmarshaling translation payload: expected a JSON object")

    translated = data.get('translation')
    if not isinstance(translated, str):
        raise MalformedPayloadError("error unmarshaling translation payload: 'translation' must be a string")

    words = data.get('words')
    if words is None:
        words = []
    if not isinstance(words, list):
        raise MalformedPayloadError("error unmarshaling translation payload: 'words' must be a list")

    pairs: List[Tuple[str, List[str]]] = []
    for item in words:
        if not isinstance(item, dict):
            raise MalformedPayloadError(
                f"error unmarshaling translation payload: word entry {item!r} is not an object"
            )
        for word, meanings in item.items():
            if not isinstance(meanings, list) or not all(isinstance(m, str) for m in meanings):
                raise MalformedPayloadError(
                    f"error unmarshaling translation payload: meanings of {word!r} must be a list of strings"
                )
            pairs.append((word, meanings))

    return TranslationPayload(translated_text=translated, words=pairs)


class TranslationClient:
    """Client for OpenAI Responses API interactions."""

    def __init__(
        self,
        api_key: str = None,
        api_url: str = None,
        model: str = None,
        max_output_tokens: int = None,
        timeout: float = None
    ):
        self.api_key = api_key if api_key is not None else config.openai.api_key
        self.api_url = api_url or config.openai.api_url
        self.model = model or config.openai.model
        self.max_output_tokens = max_output_tokens or config.openai.max_output_tokens
        self.timeout = timeout or config.openai.timeout
        self.instructions = TRANSLATION_INSTRUCTIONS
        self.logger = get_logger().llm_logger

        # Pooled session; failed requests are never retried
        self.session = requests.Session()
        adapter = requests.adapters.HTTPAdapter(
            max_retries=0,
            pool_connections=config.openai.pool_size,
            pool_maxsize=config.openai.pool_size
        )
        self.session.mount('http://', adapter)
        self.session.mount('https://', adapter)

    def is_configured(self) -> bool:
        """Check whether an API key is available."""
        return bool(self.api_key)

    def build_request(self, text: str) -> Dict[str, Any]:
        """Build the Responses API request body."""
        return {
            'model': self.model,
            'input': text,
            'max_output_tokens': self.max_output_tokens,
            'instructions': self.instructions,
        }

    def translate(self, text: str) -> TranslationPayload:
        """
        Translate text and extract word glosses.

        Args:
            text: German source text

        Returns:
            TranslationPayload with the translation and word/meanings pairs

        Raises:
            ConfigError: no API key configured
            NetworkError: the request could not be completed
            APIError: the API answered with a non-success status
            EmptyResponseError: the response carried no output message
            MalformedPayloadError: the output was not the expected JSON
        """
        if not self.is_configured():
            raise ConfigError("OpenAI API key not configured")

        headers = {
            'Content-Type': 'application/json',
            'Authorization': f'Bearer {self.api_key}',
        }

        try:
            response = self.session.post(
                self.api_url,
                json=self.build_request(text),
                headers=headers,
                timeout=self.timeout
            )
        except requests.Timeout as e:
            raise NetworkError(f"error sending request: timed out after {self.timeout}s") from e
        except requests.RequestException as e:
            raise NetworkError(f"error sending request: {e}") from e

        if not 200 <= response.status_code < 300:
            self.logger.warning(f"OpenAI API returned {response.status_code}")
            raise APIError(response.status_code, response.text)

        try:
            envelope = response.json()
        except ValueError as e:
            raise MalformedPayloadError(f"error parsing response: {e}") from e

        raw = extract_output_text(envelope)
        self.logger.debug(f"Translation: {raw}")

        return parse_translation_payload(raw)

    def close(self):
        """Close the session."""
        self.session.close()


# Global client instance
_client_instance: Optional[TranslationClient] = None


def get_translation_client() -> TranslationClient:
    """Get or create the global translation client instance."""
    global _client_instance
    if _client_instance is None:
        _client_instance = TranslationClient()
    return _client_instance
