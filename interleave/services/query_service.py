"""
Query Service
=============
Read-only access to saved translations and word definitions.
"""
import json
import sqlite3
from typing import List

from interleave.config.constants import Collection
from interleave.database.connection import Database, get_database
from interleave.exceptions import NotFoundError, PersistError
from interleave.models.translation import TranslationEntry, WordDefinition
from interleave.utils.logging import get_logger


class TranslationQueryService:
    """Reads translations and word definitions from the document store."""

    def __init__(self, database: Database = None):
        self.db = database or get_database()
        self.logger = get_logger().db_logger

    def get_translation(self, translation_id: int) -> TranslationEntry:
        """Get translation by ID."""
        try:
            data = self.db.get(Collection.TRANSLATIONS.value, str(translation_id))
        except (sqlite3.Error, ValueError) as e:
            raise PersistError(f"failed to get translation {translation_id}: {e}") from e

        if data is None:
            raise NotFoundError(f"translation with ID {translation_id} not found")

        try:
            return TranslationEntry.from_dict(data)
        except (KeyError, TypeError, ValueError) as e:
            raise PersistError(f"failed to parse translation data: {e}") from e

    def get_word_definition(self, word: str) -> WordDefinition:
        """Get the stored definition record for a word."""
        try:
            data = self.db.get(Collection.WORDS.value, word)
        except (sqlite3.Error, ValueError) as e:
            raise PersistError(f"failed to get word definitions for {word!r}: {e}") from e

        if data is None:
            raise NotFoundError(f"word {word} not found")

        try:
            return WordDefinition.from_dict(data)
        except (KeyError, TypeError, ValueError) as e:
            raise PersistError(f"failed to parse word definition data: {e}") from e

    def get_word_definitions(self, word: str) -> List[str]:
        """Get the meanings stored for a word."""
        return list(self.get_word_definition(word).meanings)

    def list_translations(self) -> List[TranslationEntry]:
        """
        Get all saved translations in the store's natural order.

        A document that cannot be read fails the whole listing rather than
        silently truncating it.
        """
        translations = []
        try:
            for key, raw in self.db.iter_documents(Collection.TRANSLATIONS.value):
                try:
                    translations.append(TranslationEntry.from_dict(json.loads(raw)))
                except (KeyError, TypeError, ValueError) as e:
                    raise PersistError(f"failed to parse translation {key}: {e}") from e
        except sqlite3.Error as e:
            raise PersistError(f"failed to list translations: {e}") from e

        return translations
