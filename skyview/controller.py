import logging
from typing import List, Optional

from .errors import InputError
from .location import LocationResolver
from .models import (
    FetchSuccess,
    ForecastDay,
    LocationQuery,
    LocationUnavailable,
    TemperatureUnit,
    WeatherSnapshot,
)
from .services import WeatherFetcher

logger = logging.getLogger(__name__)


class AppController:
    """
    Session state for one viewer.

    State only changes through the outcomes returned by the resolver and the
    fetcher. The three error channels are independent of each other.
    """

    def __init__(self, resolver: LocationResolver, fetcher: WeatherFetcher):
        self.resolver = resolver
        self.fetcher = fetcher

        self.snapshot: Optional[WeatherSnapshot] = None
        self.forecast: List[ForecastDay] = []
        self.unit = TemperatureUnit.CELSIUS
        self.loading = False

        self.input_error: Optional[str] = None
        self.fetch_error: Optional[str] = None
        self.location_error: Optional[str] = None

    async def start(self) -> bool:
        """Initial load: try the device location."""
        return await self.use_my_location()

    async def use_my_location(self, resolver: Optional[LocationResolver] = None) -> bool:
        """
        Fetch for the device position.

        ``resolver`` overrides the session's resolver for this one call, e.g.
        with a position the front-end reported.
        """
        if self.loading:
            logger.info("Fetch already in flight, ignoring location request")
            return False

        resolution = await (resolver or self.resolver).resolve_automatic()
        if isinstance(resolution, LocationUnavailable):
            self.location_error = resolution.message
            return False
        return await self.fetch(resolution)

    async def search(self, text: Optional[str]) -> bool:
        self.input_error = None
        try:
            query = self.resolver.resolve_manual(text)
        except InputError as e:
            self.input_error = str(e)
            return False
        return await self.fetch(query)

    async def fetch(self, query: LocationQuery) -> bool:
        """
        Run one fetch and apply its outcome.

        Returns False without doing anything while another fetch is running.
        """
        if self.loading:
            logger.info("Fetch already in flight, ignoring new request")
            return False

        self.loading = True
        self.fetch_error = None
        try:
            outcome = await self.fetcher.fetch(query)
        finally:
            self.loading = False

        if isinstance(outcome, FetchSuccess):
            # snapshot and forecast always come from the same fetch
            self.snapshot, self.forecast = outcome.snapshot, list(outcome.forecast)
            return True

        self.fetch_error = outcome.message
        return False

    def toggle_unit(self) -> TemperatureUnit:
        self.unit = self.unit.toggled()
        return self.unit

    def set_unit(self, unit: TemperatureUnit) -> None:
        self.unit = TemperatureUnit(unit)

    def clear_errors(
        self, input_error: bool = False, fetch_error: bool = False, location_error: bool = False
    ) -> None:
        if input_error:
            self.input_error = None
        if fetch_error:
            self.fetch_error = None
        if location_error:
            self.location_error = None
