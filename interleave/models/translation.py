"""
Translation Data Models
=======================
Core data structures for translations and word glosses.
"""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Tuple

from interleave.config.constants import SOURCE_LANGUAGE


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class TranslationEntry:
    """A saved translation."""
    id: int
    original_text: str
    translation: str
    language: str = SOURCE_LANGUAGE
    created_at: datetime = field(default_factory=utcnow)

    @property
    def key(self) -> str:
        """Document key in the translations collection."""
        return str(self.id)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            'id': self.id,
            'originalText': self.original_text,
            'translation': self.translation,
            'language': self.language,
            'createdAt': self.created_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'TranslationEntry':
        return cls(
            id=int(data['id']),
            original_text=data['originalText'],
            translation=data['translation'],
            language=data.get('language', SOURCE_LANGUAGE),
            created_at=datetime.fromisoformat(data['createdAt']),
        )


@dataclass
class WordDefinition:
    """A word and its candidate glosses, tagged with the translation that produced it."""
    translation_id: int
    original_word: str
    meanings: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'translationId': self.translation_id,
            'originalWord': self.original_word,
            'meanings': list(self.meanings),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'WordDefinition':
        return cls(
            translation_id=int(data['translationId']),
            original_word=data['originalWord'],
            meanings=list(data.get('meanings') or []),
        )


@dataclass
class TranslationPayload:
    """Structured output parsed from the model reply."""
    translated_text: str
    words: List[Tuple[str, List[str]]] = field(default_factory=list)

    def word_map(self, translation_id: int) -> Dict[str, WordDefinition]:
        """
        Collapse the word pairs into definitions keyed by word text.

        Exact (case-sensitive) duplicates keep the meanings of their last
        occurrence.
        """
        words: Dict[str, WordDefinition] = {}
        for word, meanings in self.words:
            words[word] = WordDefinition(
                translation_id=translation_id,
                original_word=word,
                meanings=list(meanings),
            )
        return words
