"""
Database Module
===============
Document store connection and repository implementations.
"""
from interleave.database.connection import Database, get_database, reset_database
from interleave.database.repositories import CounterAllocator, TranslationStore

__all__ = [
    'Database',
    'get_database',
    'reset_database',
    'CounterAllocator',
    'TranslationStore'
]
