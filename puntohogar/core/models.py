"""
Punto Hogar Data Model

Canonical Property representation shared by the store, the importer and
the API. Enumerated values are stored in English; the Spanish vocabulary
used by the agency's UI and spreadsheets is accepted as input aliases.
"""

import math
from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Dict, Optional

from puntohogar.core.exceptions import InvalidPropertyError


class TransactionType(str, Enum):
    SALE = "sale"
    RENTAL = "rental"


class Category(str, Enum):
    HOUSE = "house"
    APARTMENT = "apartment"
    LAND = "land"
    COMMERCIAL = "commercial"


TRANSACTION_TYPE_ALIASES = {
    'venta': TransactionType.SALE.value,
    'alquiler': TransactionType.RENTAL.value,
    'rent': TransactionType.RENTAL.value,
}

CATEGORY_ALIASES = {
    'casa': Category.HOUSE.value,
    'apartamento': Category.APARTMENT.value,
    'departamento': Category.APARTMENT.value,
    'terreno': Category.LAND.value,
    'comercial': Category.COMMERCIAL.value,
}

# Column order of the properties table (and of the JSON payload)
PROPERTY_COLUMNS = (
    'id', 'title', 'description', 'price', 'location', 'type',
    'bedrooms', 'bathrooms', 'area', 'image_url', 'category',
)

TEXT_FIELDS = ('title', 'description', 'location', 'type', 'image_url', 'category')

# SQLite INTEGER is a signed 64-bit value
SQLITE_MAX_INTEGER = 2 ** 63 - 1


def _parse_count(value: Any) -> int:
    """Coerce a whole-number field; blank means 0."""
    number = int(value or 0)
    if not -SQLITE_MAX_INTEGER - 1 <= number <= SQLITE_MAX_INTEGER:
        raise ValueError(f"{number} does not fit in a 64-bit integer")
    return number


def normalize_transaction_type(value: Optional[str]) -> Optional[str]:
    """Map 'venta'/'alquiler' etc. to the canonical value; unknown values pass through."""
    if value is None:
        return None
    key = value.strip().lower()
    return TRANSACTION_TYPE_ALIASES.get(key, key)


def normalize_category(value: Optional[str]) -> Optional[str]:
    """Map 'casa'/'apartamento' etc. to the canonical value; unknown values pass through."""
    if value is None:
        return None
    key = value.strip().lower()
    return CATEGORY_ALIASES.get(key, key)


@dataclass
class Property:
    """Canonical listing representation"""
    title: str
    price: float
    location: str
    type: str  # sale, rental
    category: str  # house, apartment, land, commercial
    description: Optional[str] = None
    bedrooms: int = 0
    bathrooms: int = 0
    area: int = 0  # square meters
    image_url: Optional[str] = None

    # Assigned by the store on insert
    id: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for database storage"""
        return {
            'id': self.id,
            'title': self.title,
            'description': self.description,
            'price': self.price,
            'location': self.location,
            'type': self.type,
            'bedrooms': self.bedrooms,
            'bathrooms': self.bathrooms,
            'area': self.area,
            'image_url': self.image_url,
            'category': self.category,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Property":
        """
        Build a Property from a loosely typed mapping (JSON object, CSV row).

        Enum aliases are normalized, numbers are coerced. Missing required
        fields, non-text strings, non-numeric numbers and integers SQLite
        can't hold raise InvalidPropertyError; enum membership is left to
        the store's constraints.
        """
        known = {f.name for f in fields(cls)}
        data = {k: v for k, v in data.items() if k in known}

        missing = [k for k in ('title', 'price', 'location', 'type', 'category')
                   if data.get(k) in (None, '')]
        if missing:
            raise InvalidPropertyError(f"Missing required fields: {', '.join(missing)}")

        not_text = [k for k in TEXT_FIELDS
                    if data.get(k) is not None and not isinstance(data[k], str)]
        if not_text:
            raise InvalidPropertyError(f"Expected text in fields: {', '.join(not_text)}")

        try:
            price = float(data['price'])
            bedrooms = _parse_count(data.get('bedrooms'))
            bathrooms = _parse_count(data.get('bathrooms'))
            area = _parse_count(data.get('area'))
            prop_id = _parse_count(data['id']) if data.get('id') not in (None, '') else None
        except (TypeError, ValueError, OverflowError) as e:
            raise InvalidPropertyError(f"Invalid numeric field: {e}") from e
        if not math.isfinite(price):
            raise InvalidPropertyError(f"Invalid price: {data['price']!r}")

        return cls(
            id=prop_id,
            title=data['title'].strip(),
            description=data.get('description') or None,
            price=price,
            location=data['location'].strip(),
            type=normalize_transaction_type(data['type']),
            bedrooms=bedrooms,
            bathrooms=bathrooms,
            area=area,
            image_url=data.get('image_url') or None,
            category=normalize_category(data['category']),
        )
