"""
Punto Hogar Core Package

Listing catalog logic:
- Property model
- Filter predicates
- SQLite store
- Seeding and imports
"""

from puntohogar.core.database import PuntoHogarDatabase
from puntohogar.core.filters import ListingFilter, parse_listing_filter
from puntohogar.core.models import Property

__all__ = [
    "PuntoHogarDatabase",
    "ListingFilter",
    "Property",
    "parse_listing_filter",
]
