"""
Browsing UI fallback.

Serves files from the prebuilt UI directory and answers every other
non-API path with its index.html so client-side routing works. Paths under
/api/ are never handled here.
"""

from pathlib import Path

from flask import Blueprint, abort, current_app, send_from_directory

frontend_bp = Blueprint('frontend', __name__)

INDEX_FILE = 'index.html'


def _static_dir() -> Path:
    config = current_app.config.get('PUNTOHOGAR', {})
    return Path(config.get('server', {}).get('static_dir', './dist')).resolve()


@frontend_bp.route('/', defaults={'path': ''})
@frontend_bp.route('/<path:path>')
def serve_frontend(path):
    """Static asset if it exists, otherwise the SPA entry point."""
    if path == 'api' or path.startswith('api/'):
        abort(404)

    static_dir = _static_dir()
    if not (static_dir / INDEX_FILE).is_file():
        abort(404)

    if path and (static_dir / path).is_file():
        return send_from_directory(str(static_dir), path)
    return send_from_directory(str(static_dir), INDEX_FILE)
