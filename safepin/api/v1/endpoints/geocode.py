# safepin/api/v1/endpoints/geocode.py
from fastapi import APIRouter, Depends, Query

from safepin.core.exceptions import NotFoundError, ValidationError
from safepin.schemas.geocode import GeocodeResult, ReverseGeocodeResult
from safepin.services.geocoding_client import NaverGeocoder, get_geocoder

router = APIRouter(prefix="/geocode", tags=["geocode"])


def search_query(query: str = "") -> str:
    """Rejects a blank search before the geocoder is resolved."""
    query = query.strip()
    if not query:
        raise ValidationError("query is required")
    return query


# dependencies resolve in parameter order, so the query check runs first
@router.get("", response_model=GeocodeResult)
def geocode(
    query: str = Depends(search_query),
    geocoder: NaverGeocoder = Depends(get_geocoder),
):
    """Address search for the map widget."""
    result = geocoder.geocode(query)
    if result is None:
        raise NotFoundError("No location matches this address")
    return result


@router.get("/reverse", response_model=ReverseGeocodeResult)
def reverse_geocode(
    lat: float = Query(ge=-90, le=90),
    lng: float = Query(ge=-180, le=180),
    geocoder: NaverGeocoder = Depends(get_geocoder),
):
    """Address for a clicked map point; ``address`` is null when unknown."""
    return ReverseGeocodeResult(address=geocoder.reverse_geocode(lat, lng))
