"""
Interleave Application
======================
Flask application factory and main entry point.
"""
import os
from flask import Flask, abort, send_from_directory
from flask_cors import CORS

from interleave.config import config
from interleave.database.connection import Database, get_database
from interleave.database.repositories import CounterAllocator, TranslationStore
from interleave.services.openai_client import TranslationClient, get_translation_client
from interleave.services.query_service import TranslationQueryService
from interleave.services.translator import TranslationService
from interleave.api.routes import create_translation_blueprint, create_health_blueprint
from interleave.utils.logging import get_logger


def create_app(
    testing: bool = False,
    database: Database = None,
    client: TranslationClient = None
) -> Flask:
    """
    Application factory for Flask app.

    Args:
        testing: If True, configure for testing
        database: Document store to use instead of the global one
        client: Translation client to use instead of the global one

    Returns:
        Configured Flask application
    """
    app = Flask(
        __name__,
        static_folder=config.paths.static_folder,
        static_url_path='/static'
    )

    # Configuration
    app.config.update(
        SECRET_KEY=config.server.secret_key,
        MAX_CONTENT_LENGTH=config.request.max_text_length * 4,
        TESTING=testing
    )
    app.json.sort_keys = False

    # CORS configuration
    cors_origins = config.server.cors_origins
    if testing:
        cors_origins = ['*']

    CORS(
        app,
        resources={r"/api/*": {"origins": cors_origins}},
        supports_credentials=True
    )

    # Wire services
    if database is None:
        database = get_database()
    else:
        database.initialize()
    if client is None:
        client = get_translation_client()

    store = TranslationStore(database)
    service = TranslationService(client, CounterAllocator(database), store)
    queries = TranslationQueryService(database)

    # Register blueprints
    app.register_blueprint(create_translation_blueprint(service, queries, store))
    app.register_blueprint(create_health_blueprint(database, client))

    # Error handlers
    @app.errorhandler(400)
    def bad_request(e):
        return {'error': 'Bad request', 'details': str(e)}, 400

    @app.errorhandler(404)
    def not_found(e):
        return {'error': 'Resource not found'}, 404

    @app.errorhandler(405)
    def method_not_allowed(e):
        return {'error': 'Method not allowed'}, 405

    @app.errorhandler(413)
    def text_too_large(e):
        return {'error': 'Request body too large'}, 413

    @app.errorhandler(500)
    def internal_error(e):
        logger = get_logger().api_logger
        logger.error(f"Internal error: {e}")
        return {'error': 'Internal server error'}, 500

    # Serve the frontend bundle; unknown paths fall back to index.html
    @app.route('/', defaults={'path': ''})
    @app.route('/<path:path>')
    def frontend(path):
        if path.startswith('api/'):
            abort(404)
        static_folder = config.paths.static_folder
        if path and os.path.isfile(os.path.join(static_folder, path)):
            return send_from_directory(static_folder, path)
        return send_from_directory(static_folder, 'index.html')

    # Log startup
    logger = get_logger()
    logger.app_logger.info(f"Interleave started on {config.server.host}:{config.server.port}")

    return app


def run_server():
    """Run the Flask development server."""
    app = create_app()

    print(f"""
Interleave
  Server: http://{config.server.host}:{config.server.port}
  Model:  {config.openai.model}
  Debug:  {'Enabled' if config.server.debug else 'Disabled'}
    """)

    app.run(
        host=config.server.host,
        port=config.server.port,
        debug=config.server.debug,
        threaded=True
    )


if __name__ == '__main__':
    run_server()
