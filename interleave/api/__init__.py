"""
API Module
==========
Flask API routes and blueprints.
"""
from interleave.api.routes import (
    create_translation_blueprint,
    create_health_blueprint
)

__all__ = [
    'create_translation_blueprint',
    'create_health_blueprint'
]
