from datetime import datetime, timezone, tzinfo
from typing import List, Optional, Sequence

from .models import ForecastDay, RawSample


SAMPLES_PER_DAY = 8  # upstream reports every 3 hours
MAX_FORECAST_DAYS = 5


def sample_date(dt: int, tz: Optional[tzinfo] = None):
    """Calendar date of an epoch-seconds timestamp in the viewer's zone (local when tz is None)."""
    moment = datetime.fromtimestamp(dt, tz=timezone.utc)
    return moment.astimezone(tz).date()


def to_forecast_day(raw: RawSample, tz: Optional[tzinfo] = None) -> ForecastDay:
    return ForecastDay(
        date=sample_date(raw.dt, tz),
        temp=raw.main.temp,
        min_temp=raw.main.temp_min,
        max_temp=raw.main.temp_max,
        description=raw.weather[0].description,
    )


def sample(
    series: Sequence[RawSample],
    max_days: int = MAX_FORECAST_DAYS,
    tz: Optional[tzinfo] = None,
) -> List[ForecastDay]:
    """
    Reduce a 3-hourly series to one sample per day.

    Takes indices 0, 8, 16, ... in order and keeps the first ``max_days``.
    The stride assumes the feed starts on a day boundary; an offset feed
    still gets one sample per 24 hours, just not at the same hour of day.
    An empty series yields an empty list.
    """
    picked = series[::SAMPLES_PER_DAY][:max(max_days, 0)]
    return [to_forecast_day(raw, tz) for raw in picked]
