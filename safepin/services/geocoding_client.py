# safepin/services/geocoding_client.py
"""
Naver Maps geocoding, the server side of the map widget's address search.

- forward: free-form query -> first matching coordinate, or None
- reverse: coordinate -> human readable address, or None
"""
import logging
from functools import lru_cache

import httpx

from safepin.core.config import settings
from safepin.core.exceptions import UpstreamError
from safepin.schemas.geocode import GeocodeResult

logger = logging.getLogger(__name__)

# reverse geocoding status code for "no result"
NO_RESULTS = 3


def _format_address(result: dict) -> str | None:
    region = result.get("region") or {}
    parts = [(region.get(f"area{i}") or {}).get("name") for i in range(1, 5)]

    land = result.get("land") or {}
    if result.get("name") == "roadaddr":
        parts.append(land.get("name"))
    number = land.get("number1")
    if number and land.get("number2"):
        number = f"{number}-{land['number2']}"
    parts.append(number)

    address = " ".join(p for p in parts if p)
    return address or None


class NaverGeocoder:
    def __init__(
        self,
        client_id: str,
        client_secret: str,
        *,
        timeout: float = 5.0,
        geocode_url: str = settings.NAVER_GEOCODE_URL,
        reverse_url: str = settings.NAVER_REVERSE_GEOCODE_URL,
        transport: httpx.BaseTransport | None = None,
    ):
        self.geocode_url = geocode_url
        self.reverse_url = reverse_url
        self._client = httpx.Client(
            headers={
                "X-NCP-APIGW-API-KEY-ID": client_id,
                "X-NCP-APIGW-API-KEY": client_secret,
                "Accept": "application/json",
            },
            timeout=timeout,
            transport=transport,
        )

    def _get(self, url: str, params: dict) -> dict:
        try:
            response = self._client.get(url, params=params)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPError as e:
            logger.error("Geocoding request to %s failed: %s", url, e, exc_info=True)
            raise UpstreamError(f"Geocoding failed: {e}")
        except ValueError as e:
            raise UpstreamError(f"Geocoding returned invalid JSON: {e}")

    def geocode(self, query: str) -> GeocodeResult | None:
        data = self._get(self.geocode_url, {"query": query.strip()})
        if data.get("status") != "OK":
            raise UpstreamError(f"Geocoding failed: {data.get('errorMessage') or data.get('status')}")

        addresses = data.get("addresses") or []
        if not addresses:
            return None
        first = addresses[0]
        try:
            latitude, longitude = float(first["y"]), float(first["x"])
        except (KeyError, TypeError, ValueError):
            return None
        return GeocodeResult(
            latitude=latitude,
            longitude=longitude,
            address=first.get("roadAddress") or first.get("jibunAddress") or None,
        )

    def reverse_geocode(self, latitude: float, longitude: float) -> str | None:
        # Naver expects "lng,lat"
        data = self._get(
            self.reverse_url,
            {
                "coords": f"{longitude},{latitude}",
                "orders": "roadaddr,addr",
                "output": "json",
            },
        )
        code = (data.get("status") or {}).get("code")
        if code == NO_RESULTS:
            return None
        if code != 0:
            raise UpstreamError(f"Reverse geocoding failed: {(data.get('status') or {}).get('message')}")

        for result in data.get("results") or []:
            address = _format_address(result)
            if address:
                return address
        return None


@lru_cache
def _build_geocoder() -> NaverGeocoder:
    return NaverGeocoder(
        settings.NAVER_MAP_CLIENT_ID,
        settings.NAVER_MAP_CLIENT_SECRET,
        timeout=settings.GEOCODE_TIMEOUT,
    )


def get_geocoder() -> NaverGeocoder:
    if not settings.NAVER_MAP_CLIENT_ID or not settings.NAVER_MAP_CLIENT_SECRET:
        raise UpstreamError("Geocoding is not configured")
    return _build_geocoder()
