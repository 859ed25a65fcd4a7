"""
Exceptions
==========
Error taxonomy shared by the translation client, the store and the API.
"""


class InterleaveError(Exception):
    """Base class for all errors surfaced to the HTTP layer."""


class ConfigError(InterleaveError):
    """Required configuration (such as the API key) is missing."""


class NetworkError(InterleaveError):
    """Transport failure while talking to the LLM API."""


class APIError(InterleaveError):
    """The LLM API answered with a non-success status."""

    def __init__(self, status: int, body: str):
        self.status = status
        self.body = body
        super().__init__(f"API request failed with status code {status}: {body}")


class EmptyResponseError(InterleaveError):
    """The LLM response carried no output message."""


class MalformedPayloadError(InterleaveError):
    """The LLM output could not be parsed into the expected shape."""


class CounterMissingError(InterleaveError):
    """The translation counter document is absent or not an integer."""


class PersistError(InterleaveError):
    """A document store read or write failed."""


class NotFoundError(InterleaveError):
    """The addressed document does not exist."""
