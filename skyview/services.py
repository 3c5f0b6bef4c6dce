import asyncio
import logging
from datetime import tzinfo
from typing import Any, Dict, Optional, Tuple

import httpx
from pydantic import ValidationError

from .config import UNITS, Settings, get_settings
from .errors import MalformedResponseError, UpstreamError
from .models import (
    Coordinates,
    CurrentConditionsPayload,
    FailureReason,
    FetchFailure,
    FetchOutcome,
    FetchSuccess,
    ForecastPayload,
    LocationQuery,
    PlaceName,
    WeatherSnapshot,
)
from .sampler import MAX_FORECAST_DAYS, sample

logger = logging.getLogger(__name__)

CURRENT_PATH = "/weather"
FORECAST_PATH = "/forecast"
USER_AGENT = {"User-Agent": "SkyView/1.0"}


def build_request_params(query: LocationQuery, settings: Settings) -> Dict[str, Any]:
    """
    Query parameters shared by the current and forecast endpoints.

    Coordinates add lat/lon, a place name adds q; never both.
    """
    params: Dict[str, Any] = {"appid": settings.api_key, "units": UNITS}
    if isinstance(query, Coordinates):
        params["lat"] = query.latitude
        params["lon"] = query.longitude
    elif isinstance(query, PlaceName):
        params["q"] = query.text
    else:
        raise TypeError(f"Unsupported location query: {query!r}")
    return params


def to_snapshot(payload: CurrentConditionsPayload) -> WeatherSnapshot:
    return WeatherSnapshot(
        city=payload.name,
        temp=payload.main.temp,
        description=payload.weather[0].description,
        humidity=payload.main.humidity,
        wind_speed=payload.wind.speed,
    )


class WeatherFetcher:
    """
    Fetches current conditions and the forecast for one location.

    Both upstream requests run concurrently and are joined before either
    result is used. Any fault ends in a single FetchFailure; nothing is
    retried and nothing propagates to the caller.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        client: Optional[httpx.AsyncClient] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        tz: Optional[tzinfo] = None,
        max_days: int = MAX_FORECAST_DAYS,
    ):
        """
        Args:
            settings: Upstream base URL, credential and timeout
            client: Shared client to reuse; one is opened per fetch otherwise
            transport: Transport for the per-fetch client (tests, proxies)
            tz: Viewer's time zone for forecast dates (local when None)
            max_days: Forecast length cap
        """
        self.settings = settings or get_settings()
        self.client = client
        self.transport = transport
        self.tz = tz
        self.max_days = max_days

    async def fetch(self, query: Optional[LocationQuery]) -> FetchOutcome:
        if query is None:
            logger.warning("Fetch requested without a location: No location provided")
            return FetchFailure(reason=FailureReason.NO_LOCATION_PROVIDED)

        params = build_request_params(query, self.settings)
        logger.info(f"Fetching weather for {query!r}")

        try:
            current_body, forecast_body = await self._get_both(params)
            current = CurrentConditionsPayload.model_validate(current_body)
            forecast = ForecastPayload.model_validate(forecast_body)
            snapshot = to_snapshot(current)
            days = sample(forecast.samples, self.max_days, self.tz)
        except UpstreamError as e:
            logger.warning(f"Weather provider unavailable: {e}")
            return FetchFailure(reason=FailureReason.UPSTREAM_UNAVAILABLE)
        except (MalformedResponseError, ValidationError, ValueError, OverflowError, OSError) as e:
            # out-of-range timestamps fail in datetime, not in validation
            logger.warning(f"Weather provider sent an unexpected payload: {e}")
            return FetchFailure(reason=FailureReason.MALFORMED_RESPONSE)

        logger.info(f"Fetched weather for {current.name} with {len(days)} forecast days")
        return FetchSuccess(snapshot=snapshot, forecast=days)

    async def _get_both(self, params: Dict[str, Any]) -> Tuple[Any, Any]:
        if self.client is not None:
            return await self._gather(self.client, params)
        async with httpx.AsyncClient(timeout=self.settings.timeout, transport=self.transport) as client:
            return await self._gather(client, params)

    async def _gather(self, client: httpx.AsyncClient, params: Dict[str, Any]) -> Tuple[Any, Any]:
        base = self.settings.api_base_url.rstrip("/")
        results = await asyncio.gather(
            client.get(base + CURRENT_PATH, params=params, headers=USER_AGENT),
            client.get(base + FORECAST_PATH, params=params, headers=USER_AGENT),
            return_exceptions=True,
        )

        # status of both legs is settled before either body is parsed
        for result in results:
            if isinstance(result, httpx.HTTPError):
                raise UpstreamError(f"{type(result).__name__}: {result}")
            if isinstance(result, BaseException):
                raise result
            if not result.is_success:
                raise UpstreamError(f"HTTP {result.status_code} from {result.url.path}")

        current_response, forecast_response = results
        return _json(current_response), _json(forecast_response)


def _json(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError as e:
        raise MalformedResponseError(f"Invalid JSON from {response.url.path}: {e}")
