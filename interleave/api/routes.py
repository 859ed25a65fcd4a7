"""
API Routes
==========
Flask blueprints for all API endpoints.
"""
from flask import Blueprint, request, jsonify

from interleave import __version__
from interleave.database.connection import Database
from interleave.exceptions import InterleaveError
from interleave.models.schemas import HealthStatus
from interleave.services.openai_client import TranslationClient
from interleave.services.query_service import TranslationQueryService
from interleave.services.translator import TranslationService
from interleave.database.repositories import TranslationStore
from interleave.utils.validators import validate_text, parse_translation_id
from interleave.utils.logging import get_logger


def create_translation_blueprint(
    service: TranslationService,
    queries: TranslationQueryService,
    store: TranslationStore
) -> Blueprint:
    """Create translation routes blueprint."""
    bp = Blueprint('translations', __name__, url_prefix='/api')
    logger = get_logger().api_logger

    def error_response(e: InterleaveError, status: int = 500):
        logger.error(f"{request.method} {request.path} failed: {e}")
        return jsonify({'error': str(e)}), status

    @bp.route('/newtranslation', methods=['POST'])
    def new_translation():
        """Translate the raw request body and save the result."""
        text = request.get_data(as_text=True)
        logger.info(f"Received text ({len(text)} chars)")

        is_valid, error = validate_text(text)
        if not is_valid:
            return jsonify({'error': error}), 400

        try:
            entry = service.create_translation(text)
        except InterleaveError as e:
            return error_response(e)

        return jsonify(entry.to_dict())

    @bp.route('/translations', methods=['GET'])
    def list_translations():
        """List all translations."""
        try:
            translations = queries.list_translations()
        except InterleaveError as e:
            return error_response(e)

        return jsonify([entry.to_dict() for entry in translations])

    @bp.route('/translations/<translation_id>', methods=['GET'])
    def get_translation(translation_id: str):
        """Get a single translation."""
        iid = parse_translation_id(translation_id)
        if iid is None:
            return jsonify({'error': 'Invalid ID'}), 400

        try:
            entry = queries.get_translation(iid)
        except InterleaveError as e:
            return error_response(e)

        return jsonify(entry.to_dict())

    @bp.route('/definitions/<path:word>', methods=['GET'])
    def get_definitions(word: str):
        """Get the meanings stored for a word."""
        try:
            meanings = queries.get_word_definitions(word)
        except InterleaveError as e:
            return error_response(e)

        return jsonify(meanings)

    @bp.route('/translations/<translation_id>', methods=['DELETE'])
    def delete_translation(translation_id: str):
        """Delete a translation."""
        iid = parse_translation_id(translation_id)
        if iid is None:
            return jsonify({'error': 'Invalid ID'}), 400

        try:
            store.delete(iid)
        except InterleaveError as e:
            return error_response(e)

        return jsonify({'message': 'Translation deleted'})

    return bp


def create_health_blueprint(database: Database, client: TranslationClient) -> Blueprint:
    """Create health check routes blueprint."""
    bp = Blueprint('health', __name__, url_prefix='/api')

    @bp.route('/health', methods=['GET'])
    def health_check():
        """Health check endpoint."""
        database_ok = database.ping()
        llm_ok = client.is_configured()

        status = HealthStatus(
            status='healthy' if database_ok and llm_ok else 'degraded',
            database_connected=database_ok,
            llm_configured=llm_ok,
            version=__version__
        )
        return jsonify(status.to_dict())

    return bp
