"""
Health check endpoint for the Property API.
"""

import logging

from flask import Blueprint, jsonify

from puntohogar.api.routes.properties import get_db
from puntohogar.core.exceptions import DatabaseError

logger = logging.getLogger(__name__)

health_bp = Blueprint('health', __name__)


@health_bp.route('/health')
def health_check():
    """Basic health check, including a store round-trip."""
    try:
        count = get_db().count_properties()
    except DatabaseError:
        logger.exception("Health check could not reach the database")
        return jsonify({
            'status': 'unhealthy',
            'service': 'puntohogar-api',
            'error': 'database unavailable'
        }), 503

    return jsonify({
        'status': 'healthy',
        'service': 'puntohogar-api',
        'properties': count
    })
