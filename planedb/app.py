"""
PlaneDB Flask Application.

Serves registration lookups over HTTP. Loads the FAA files once at
startup; if they are missing the app still starts and lookups answer
503 instead of crashing.

Usage:
    python -m planedb.app

Or with gunicorn:
    gunicorn 'planedb.app:create_app()'
"""

import atexit
import logging
import os
from typing import Optional

from flask import Flask
from flask_cors import CORS

from planedb.api import registry_bp
from planedb.config import config
from planedb.database import PlaneDb, init_db, close_db

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if config.debug else logging.INFO,
    format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S',
)
logger = logging.getLogger(__name__)


def create_app(db: Optional[PlaneDb] = None, load_data: bool = True) -> Flask:
    """
    Application factory for Flask.

    Args:
        db: An already loaded PlaneDb. Tests pass one in directly.
        load_data: Whether to load the FAA files when no db is given.

    Returns:
        Configured Flask application instance.
    """
    app = Flask(__name__)

    # Configuration
    app.config['SECRET_KEY'] = config.secret_key

    # Enable CORS for API endpoints
    CORS(app, resources={r'/api/*': {'origins': '*'}})

    if db is None and load_data:
        logger.info('Loading plane database...')
        db = init_db()
        if db is None:
            logger.warning('Plane database unavailable; lookups will return 503')
        else:
            atexit.register(close_db, db)

    app.config['PLANE_DB'] = db

    # Register API blueprints
    app.register_blueprint(registry_bp)

    @app.route('/health')
    def health():
        """Simple health check endpoint."""
        return {'status': 'ok'}

    # -------------------------------------------------------------------------
    # Error handlers
    # -------------------------------------------------------------------------

    @app.errorhandler(404)
    def not_found(e):
        return {'error': 'Not found'}, 404

    @app.errorhandler(500)
    def server_error(e):
        logger.error(f'Server error: {e}')
        return {'error': 'Internal server error'}, 500

    return app


def run_development_server():
    """Run the development server."""
    app = create_app()

    # Get port from environment or default
    port = int(os.environ.get('PORT', 5000))

    logger.info(f'Starting PlaneDB on http://localhost:{port}')

    app.run(
        host='0.0.0.0',
        port=port,
        debug=config.debug,
        use_reloader=False,  # Reloader would load the FAA files twice
    )


if __name__ == '__main__':
    run_development_server()
