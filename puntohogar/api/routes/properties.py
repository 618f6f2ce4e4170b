"""
Property listing endpoints.

Endpoints:
    GET /api/properties       - Filtered listing search
    GET /api/properties/:id   - Single listing detail
"""

import logging

from flask import Blueprint, current_app, jsonify, request

from puntohogar.core.database import PuntoHogarDatabase
from puntohogar.core.exceptions import PropertyNotFound
from puntohogar.core.filters import parse_listing_filter
from puntohogar.core.models import SQLITE_MAX_INTEGER

logger = logging.getLogger(__name__)

properties_bp = Blueprint('properties', __name__)

DB_EXTENSION_KEY = 'puntohogar_db'


def get_db() -> PuntoHogarDatabase:
    """Get the process-wide store opened by create_app()."""
    return current_app.extensions[DB_EXTENSION_KEY]


@properties_bp.route('/properties', methods=['GET'])
def list_properties():
    """
    Search listings.

    Query parameters (all optional, combined with AND):
        type      - sale | rental (venta | alquiler accepted)
        category  - house | apartment | land | commercial
        minPrice  - Minimum price, inclusive
        maxPrice  - Maximum price, inclusive
        search    - Case-insensitive text found in title or location

    Returns a JSON array, empty when nothing matches.
    """
    filters = parse_listing_filter(request.args)
    properties = get_db().list_properties(filters)
    return jsonify(properties)


@properties_bp.route('/properties/<property_id>', methods=['GET'])
def get_property(property_id):
    """Get a single listing by ID."""
    # Plain ASCII digits only; int() would also take '1_0' or '١'
    if not (property_id.isascii() and property_id.isdigit()):
        raise PropertyNotFound(property_id)
    numeric_id = int(property_id)
    if numeric_id > SQLITE_MAX_INTEGER:
        raise PropertyNotFound(property_id)

    return jsonify(get_db().get_property(numeric_id))
