"""
Interleave - German reading assistant backend
=============================================
This package provides a Flask-based backend that translates German text
with an OpenAI model, extracts per-word glosses, stores the results in a
document store and serves the single-page frontend.

Version: 1.0.0
"""

__version__ = "1.0.0"

from interleave.app import create_app, run_server

__all__ = ["create_app", "run_server", "__version__"]
