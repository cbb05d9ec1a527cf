# safepin/schemas/geocode.py
from pydantic import BaseModel


class GeocodeResult(BaseModel):
    latitude: float
    longitude: float
    address: str | None = None


class ReverseGeocodeResult(BaseModel):
    address: str | None = None
