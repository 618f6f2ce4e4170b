"""
Sample catalog used to populate an empty database.
"""

from typing import List

from puntohogar.core.models import Property

# (title, description, price, location, type, bedrooms, bathrooms, area, image_url, category)
_SAMPLE_ROWS = [
    ("Apartamento Moderno en Miraflores", "Hermoso apartamento con vista al mar, acabados de lujo.",
     150000, "Lima, Miraflores", "sale", 2, 2, 85, "/img/imagen1.png", "apartment"),
    ("Apartamento Moderno en Miraflores", "Hermoso apartamento con vista al mar, acabados de lujo.",
     150000, "Lima, Miraflores", "sale", 2, 2, 85, "/img/imagen2.png", "apartment"),
    ("Apartamento Moderno en Miraflores", "Hermoso apartamento con vista al mar, acabados de lujo.",
     150000, "Lima, Miraflores", "sale", 2, 2, 85, "/img/imagen4.png", "apartment"),
    ("Apartamento Moderno en Miraflores", "Hermoso apartamento con vista al mar, acabados de lujo.",
     150000, "Lima, Miraflores", "sale", 2, 2, 85, "/img/imagen5.png", "apartment"),
    ("Apartamento Moderno en Miraflores", "Hermoso apartamento con vista al mar, acabados de lujo.",
     150000, "Lima, Miraflores", "sale", 2, 2, 85, "/img/imagen6.png", "apartment"),
    ("Casa Familiar en La Molina", "Espaciosa casa ideal para familias, zona tranquila y segura.",
     320000, "Lima, La Molina", "sale", 4, 3, 250, "/img/imagen7.png", "house"),
    ("Estudio Luminoso en Barranco", "Pequeño pero acogedor estudio cerca del malecón.",
     800, "Lima, Barranco", "rental", 1, 1, 40, "/img/imagen6.png", "apartment"),
    ("Chalet de Lujo en San Isidro", "Increíble chalet con todas las comodidades y acabados premium.",
     850000, "Lima, San Isidro", "sale", 5, 4, 400, "/img/imagen6.png", "house"),
    ("Local Comercial en San Borja", "Excelente ubicación para tu negocio, gran afluencia de público.",
     1200, "Lima, San Borja", "rental", 0, 1, 120, "/img/imagen6.png", "commercial"),
    ("Terreno en Pachacamac", "Oportunidad de inversión en zona de crecimiento campestre.",
     90000, "Lima, Pachacamac", "sale", 0, 0, 1000, "/img/imagen6.png", "land"),
    ("Departamento de Estreno en Surco", "Cerca a centros comerciales y parques, excelente distribución.",
     185000, "Lima, Santiago de Surco", "sale", 3, 2, 110, "/img/imagen6.png", "apartment"),
    ("Oficina Moderna en Magdalena", "Edificio empresarial de primer nivel, zona estratégica.",
     1500, "Lima, Magdalena del Mar", "rental", 0, 2, 90, "/img/imagen4.png", "commercial"),
    ("Penthouse en Miraflores", "Vistas espectaculares, terraza privada y acabados de mármol.",
     450000, "Lima, Miraflores", "sale", 3, 3, 180, "/img/imagen5.png", "apartment"),
    ("Casa de Playa en Asia", "Ubicada en exclusivo condominio, piscina propia y club house.",
     250000, "Lima, Asia", "sale", 4, 4, 200, "/img/imagen7.png", "house"),
]


def sample_properties() -> List[Property]:
    """Fresh Property objects for the sample catalog, in insertion order."""
    return [
        Property(
            title=title,
            description=description,
            price=price,
            location=location,
            type=tx_type,
            bedrooms=bedrooms,
            bathrooms=bathrooms,
            area=area,
            image_url=image_url,
            category=category,
        )
        for (title, description, price, location, tx_type,
             bedrooms, bathrooms, area, image_url, category) in _SAMPLE_ROWS
    ]
