"""
Response Schemas
================
Small response payloads that are not stored documents.
"""
from dataclasses import dataclass


@dataclass
class HealthStatus:
    """Health check response."""
    status: str
    database_connected: bool
    llm_configured: bool
    version: str

    def to_dict(self) -> dict:
        return {
            'status': self.status,
            'database': 'connected' if self.database_connected else 'disconnected',
            'llm': 'configured' if self.llm_configured else 'missing api key',
            'version': self.version,
        }
