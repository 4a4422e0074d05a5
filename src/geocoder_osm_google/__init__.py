"""Google Maps / Nominatim (OpenStreetMap) を使った正引き・逆引きジオコーディング"""
from .features.geocoding.domain.enums import GeocodingProvider
from .features.geocoding.domain.models import GeocodeResult, GeoLocation
from .features.geocoding.services.geocoding_service import Geocoder
from .shared.exceptions.errors import ValidationError

__all__ = [
    "GeocodeResult",
    "Geocoder",
    "GeocodingProvider",
    "GeoLocation",
    "ValidationError",
]
