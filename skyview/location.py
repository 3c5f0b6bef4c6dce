"""
Location resolution.

Decides where a fetch should look: device coordinates from a geolocation
capability, or a place name typed by the user. No weather requests are made
here.

Usage:
    from skyview.location import LocationResolver, IPGeolocation

    resolver = LocationResolver(IPGeolocation())
    resolution = await resolver.resolve_automatic()
    # Coordinates(latitude=..., longitude=...) or LocationUnavailable(...)
"""

import logging
from typing import Optional, Protocol, Tuple

import httpx

from .config import get_settings
from .errors import GeolocationError, InputError
from .models import (
    Coordinates,
    LocationResolution,
    LocationUnavailable,
    PlaceName,
    UnavailableReason,
)

logger = logging.getLogger(__name__)

CAPABILITY_ABSENT_MESSAGE = (
    "Geolocation is not supported by your browser. Please enter a city manually."
)
CAPABILITY_FAILED_MESSAGE = "Unable to retrieve your location. Please enter a city manually."


class GeolocationProvider(Protocol):
    """One-shot, best-effort position source."""

    async def current_position(self) -> Tuple[float, float]:
        ...


class FixedGeolocation:
    """Reports a position the caller already obtained, e.g. from a browser."""

    def __init__(self, latitude: float, longitude: float):
        self.latitude = latitude
        self.longitude = longitude

    async def current_position(self) -> Tuple[float, float]:
        return self.latitude, self.longitude


class ReportedFailure:
    """A capability that already told the caller it could not locate the device."""

    def __init__(self, message: str = "Position unavailable"):
        self.message = message

    async def current_position(self) -> Tuple[float, float]:
        raise GeolocationError(self.message)


class IPGeolocation:
    """Approximates the device position from its public IP address."""

    def __init__(
        self,
        url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        settings = get_settings()
        self.url = url or settings.geolocation_url
        self.timeout = timeout or settings.timeout
        self.transport = transport

    async def current_position(self) -> Tuple[float, float]:
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                r = await client.get(self.url)
                r.raise_for_status()
                data = r.json()
        except (httpx.HTTPError, ValueError) as e:
            raise GeolocationError(f"Location could not be determined: {e}")

        try:
            return float(data["latitude"]), float(data["longitude"])
        except (KeyError, TypeError, ValueError) as e:
            raise GeolocationError(f"Location payload missing coordinates: {e}")


class LocationResolver:
    """Chooses between device coordinates and a typed place name."""

    def __init__(self, geolocation: Optional[GeolocationProvider] = None):
        self.geolocation = geolocation

    async def resolve_automatic(self) -> LocationResolution:
        """
        Ask the geolocation capability for a position.

        Never raises. Returns Coordinates on success, or LocationUnavailable
        telling apart a missing capability from one that failed.
        """
        if self.geolocation is None:
            logger.info("No geolocation capability configured")
            return LocationUnavailable(
                reason=UnavailableReason.CAPABILITY_ABSENT,
                message=CAPABILITY_ABSENT_MESSAGE,
            )

        try:
            latitude, longitude = await self.geolocation.current_position()
            return Coordinates(latitude=latitude, longitude=longitude)
        except Exception as e:
            # any fault from the platform capability is a resolution failure
            logger.warning(f"Geolocation failed: {e}")
            return LocationUnavailable(
                reason=UnavailableReason.CAPABILITY_FAILED,
                message=CAPABILITY_FAILED_MESSAGE,
            )

    def resolve_manual(self, text: Optional[str]) -> PlaceName:
        """
        Turn user-typed text into a PlaceName.

        Raises InputError when nothing but whitespace was entered.
        """
        cleaned = (text or "").strip()
        if not cleaned:
            raise InputError()
        return PlaceName(text=cleaned)
