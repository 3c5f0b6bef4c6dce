from datetime import date, timezone

from conftest import forecast_body
from skyview.models import ForecastPayload
from skyview.sampler import sample, to_forecast_day


def _series(count):
    return ForecastPayload.model_validate(forecast_body(count)).samples


def test_forty_samples_give_five_days_at_stride_eight():
    series = _series(40)
    days = sample(series, 5, tz=timezone.utc)

    assert len(days) == 5
    for i, day in enumerate(days):
        assert day == to_forecast_day(series[8 * i], timezone.utc)
    assert [d.date for d in days] == [date(2023, 11, 15 + i) for i in range(5)]


def test_short_series_gives_single_day():
    series = _series(3)
    days = sample(series, 5, tz=timezone.utc)
    assert days == [to_forecast_day(series[0], timezone.utc)]


def test_empty_series_gives_empty_list():
    assert sample([], 5) == []


def test_truncates_to_max_days():
    days = sample(_series(40), 2, tz=timezone.utc)
    assert len(days) == 2


def test_partial_last_day_is_kept():
    # indices 0, 8, 16 -> three days
    assert len(sample(_series(17), 5, tz=timezone.utc)) == 3


def test_projection_copies_fields():
    day = to_forecast_day(_series(1)[0], timezone.utc)
    assert day.temp == 0.0
    assert day.min_temp == -2.0
    assert day.max_temp == 2.0
    assert day.description == "sample 0"
