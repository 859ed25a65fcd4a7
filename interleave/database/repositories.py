"""
Database Repositories
=====================
Data access for translations, word definitions and the id counter.
"""
import sqlite3
from typing import Dict

from interleave.config.constants import Collection, COUNTER_FIELD, TRANSLATION_COUNTER_KEY
from interleave.database.connection import Database, get_database
from interleave.exceptions import CounterMissingError, NotFoundError, PersistError
from interleave.models.translation import TranslationEntry, WordDefinition
from interleave.utils.logging import get_logger


class CounterAllocator:
    """Mints translation ids from the persisted counter."""

    def __init__(self, database: Database = None):
        self.db = database or get_database()
        self.logger = get_logger().db_logger

    def next_id(self) -> int:
        """Increment the counter and return the new value as the next id."""
        try:
            new_id = self.db.increment(
                Collection.COUNTERS.value, TRANSLATION_COUNTER_KEY, COUNTER_FIELD
            )
        except sqlite3.Error as e:
            raise PersistError(f"failed to update translation counter: {e}") from e

        if new_id is None:
            raise CounterMissingError(
                "failed to get translation counter: document missing or not an integer"
            )

        self.logger.debug(f"Allocated translation id {new_id}")
        return new_id

    def current(self) -> int:
        """Return the last issued id without changing it."""
        try:
            data = self.db.get(Collection.COUNTERS.value, TRANSLATION_COUNTER_KEY)
        except (sqlite3.Error, ValueError) as e:
            raise PersistError(f"failed to read translation counter: {e}") from e

        value = (data or {}).get(COUNTER_FIELD)
        if not isinstance(value, int) or isinstance(value, bool):
            raise CounterMissingError(
                "failed to get translation counter: document missing or not an integer"
            )
        return value


class TranslationStore:
    """
    Write side of the translations and words collections.

    Entries are keyed by their decimal id, word definitions by the word text.
    Word keys are global: saving a word that already exists replaces it,
    whichever translation wrote it before.
    """

    def __init__(self, database: Database = None):
        self.db = database or get_database()
        self.logger = get_logger().db_logger

    def save(self, entry: TranslationEntry, words: Dict[str, WordDefinition]) -> None:
        """Persist an entry, then its word definitions as one batch."""
        try:
            self.db.set(Collection.TRANSLATIONS.value, entry.key, entry.to_dict())
        except sqlite3.Error as e:
            raise PersistError(f"failed to save translation {entry.id}: {e}") from e

        self.logger.info(f"Saved translation {entry.id}")

        if not words:
            return

        # The entry stays committed if the word batch fails
        try:
            count = self.db.set_many(
                Collection.WORDS.value,
                ((word, definition.to_dict()) for word, definition in words.items())
            )
        except sqlite3.Error as e:
            raise PersistError(f"failed to bulk write word definitions: {e}") from e

        self.logger.info(f"Saved {count} word definitions for translation {entry.id}")

    def delete(self, translation_id: int) -> None:
        """
        Delete a translation entry.

        Word definitions written alongside it are kept; other translations
        may share them.
        """
        try:
            deleted = self.db.delete(Collection.TRANSLATIONS.value, str(translation_id))
        except sqlite3.Error as e:
            raise PersistError(f"failed to delete translation {translation_id}: {e}") from e

        if not deleted:
            raise NotFoundError(f"translation with ID {translation_id} not found")

        self.logger.info(f"Translation {translation_id} deleted")

