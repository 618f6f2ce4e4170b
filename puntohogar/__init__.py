"""
Punto Hogar
Listing service for the Punto Hogar real-estate agency

Serves the property catalog (sales and rentals in Lima) to the public
browsing site through a small read-only REST API.
"""

__version__ = "0.1.0"

from .core.database import PuntoHogarDatabase

__all__ = ["PuntoHogarDatabase"]
