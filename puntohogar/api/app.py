"""
Property API Server

Flask server for the public listing site: read-only property search over
the SQLite catalog, plus the prebuilt browsing UI for every other path.
"""

import atexit
import logging
from typing import Any, Dict, Optional

from flask import Flask, jsonify, request
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from puntohogar.api.routes.frontend import frontend_bp
from puntohogar.api.routes.health import health_bp
from puntohogar.api.routes.properties import DB_EXTENSION_KEY, properties_bp
from puntohogar.core.database import PuntoHogarDatabase
from puntohogar.core.exceptions import InvalidFilterError, PropertyNotFound
from puntohogar.core.seed import sample_properties
from puntohogar.utils.config import get_db_path, load_config
from puntohogar.utils.logging import setup_logging

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = 'Error interno del servidor'


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(PropertyNotFound)
    def handle_not_found(e):
        return jsonify({'error': e.message}), 404

    @app.errorhandler(InvalidFilterError)
    def handle_invalid_filter(e):
        logger.info(f"Rejected filter on {request.path}: {e}")
        return jsonify({'error': str(e)}), 400

    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        # UI paths keep Flask's default pages; the API always answers JSON
        if not request.path.startswith('/api/'):
            return e
        return jsonify({'error': e.description}), e.code

    @app.errorhandler(Exception)
    def handle_unexpected(e):
        logger.exception(f"Unhandled error on {request.method} {request.path}")
        return jsonify({'error': INTERNAL_ERROR_MESSAGE}), 500


def create_app(config: Optional[Dict[str, Any]] = None) -> Flask:
    """
    Build the Flask application.

    Opens the store once for the whole process (seeding the sample catalog
    into an empty table when configured to) and closes it at exit.

    Args:
        config: Configuration dict as returned by load_config(); loaded
            from config/config.yaml and the environment when omitted
    """
    if config is None:
        config = load_config()

    log_config = config.get('logging', {})
    setup_logging(level=log_config.get('level', 'INFO'), log_file=log_config.get('file'))

    app = Flask(__name__, static_folder=None)
    app.config['PUNTOHOGAR'] = config

    # Enable CORS for the API only
    origins = config.get('cors', {}).get('origins', ['*'])
    CORS(app, resources={r"/api/*": {"origins": origins}})

    db = PuntoHogarDatabase(get_db_path(config))
    if config.get('database', {}).get('seed_on_startup', True):
        db.seed_if_empty(sample_properties())
    app.extensions[DB_EXTENSION_KEY] = db
    atexit.register(db.close)

    app.register_blueprint(properties_bp, url_prefix='/api')
    app.register_blueprint(health_bp)
    app.register_blueprint(frontend_bp)

    _register_error_handlers(app)

    @app.after_request
    def log_request(response):
        logger.debug(f"{request.method} {request.full_path.rstrip('?')} -> {response.status_code}")
        return response

    logger.info(f"Property API ready (database: {db.db_path})")
    return app


def main() -> None:
    """Run the development server."""
    config = load_config()
    app = create_app(config)
    server = config.get('server', {})
    app.run(
        host=server.get('host', '0.0.0.0'),
        port=int(server.get('port', 3000)),
        debug=bool(server.get('debug', False)),
        use_reloader=False,
    )


if __name__ == '__main__':
    main()
