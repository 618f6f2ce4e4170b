"""
Punto Hogar Property API

Flask application serving the listing catalog over HTTP.
"""

from puntohogar.api.app import create_app

__all__ = ["create_app"]
