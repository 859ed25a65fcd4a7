"""
Constants for Interleave
"""
from enum import Enum

# Every stored translation is German -> English
SOURCE_LANGUAGE = 'de'

# Maximum number of glosses requested per word
MAX_MEANINGS = 3

TRANSLATION_INSTRUCTIONS = (
    'You will output the following json structure: '
    '{"translation": "<translated text>", "words": [{"<word>": [<word translations>]}]}. '
    '<translated text> is the translation of the text from German to English. '
    'Try to follow idioms instead of translating word for word. '
    '"words" contains pairs of a German word and its '
    f'{MAX_MEANINGS} most common translations in English. '
    'Every word from the original text should be in the list. '
    'Please do not include any additional information in the output.'
)


class Collection(str, Enum):
    """Logical collections in the document store."""
    TRANSLATIONS = "translations"
    WORDS = "words"
    COUNTERS = "counters"


# Document holding the last issued translation id
TRANSLATION_COUNTER_KEY = "translationsCounter"
COUNTER_FIELD = "idx"

