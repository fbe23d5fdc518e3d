"""Domain services for the Apêgo backend."""

from services.auth_service import AuthService
from services.property_service import PropertyService
from services.rental_service import RentalService

__all__ = ["AuthService", "PropertyService", "RentalService"]
