# =========================================================================
# CUSTOM EXCEPTIONS
# =========================================================================

class PuntoHogarError(Exception):
    """Base exception for the listing service"""
    pass

class PropertyNotFound(PuntoHogarError):
    """No property has the requested identifier"""

    def __init__(self, property_id=None, message: str = "Propiedad no encontrada"):
        super().__init__(message)
        self.property_id = property_id
        self.message = message

class InvalidFilterError(PuntoHogarError):
    """Query parameters could not be turned into a listing filter"""
    pass

class InvalidPropertyError(PuntoHogarError):
    """Property record rejected at write time"""
    pass

class DatabaseError(PuntoHogarError):
    """Store is closed or unreachable"""
    pass
