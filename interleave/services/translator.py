"""
Translation Service
===================
Write path for new translations: ask the model, mint an id, persist.
"""
from interleave.config.constants import SOURCE_LANGUAGE
from interleave.database.repositories import CounterAllocator, TranslationStore
from interleave.models.translation import TranslationEntry, utcnow
from interleave.services.openai_client import TranslationClient
from interleave.utils.logging import get_logger


class TranslationService:
    """Coordinates the translation client, the id counter and the store."""

    def __init__(
        self,
        client: TranslationClient,
        counter: CounterAllocator,
        store: TranslationStore
    ):
        self.client = client
        self.counter = counter
        self.store = store
        self.logger = get_logger().app_logger

    def create_translation(self, text: str) -> TranslationEntry:
        """
        Translate text and save the result with its word definitions.

        The counter is only touched once the model call has succeeded, so a
        failed translation leaves no trace in the store. Errors from any
        step propagate unchanged.
        """
        payload = self.client.translate(text)

        entry = TranslationEntry(
            id=self.counter.next_id(),
            original_text=text,
            translation=payload.translated_text,
            language=SOURCE_LANGUAGE,
            created_at=utcnow(),
        )

        self.store.save(entry, payload.word_map(entry.id))

        self.logger.info(
            f"Translation {entry.id} created ({len(text)} chars, {len(payload.words)} words)"
        )
        return entry
