from typing import Any, Dict, List, Optional, Sequence

from .models import ForecastDay, TemperatureUnit, WeatherSnapshot
from .units import format_temperature


def render_current(snapshot: WeatherSnapshot, unit: TemperatureUnit) -> Dict[str, Any]:
    return {
        "city": snapshot.city,
        "temp": format_temperature(snapshot.temp, unit),
        "description": snapshot.description.title(),
        "humidity": f"{snapshot.humidity}%",
        "wind": f"{snapshot.wind_speed} m/s",
    }


def render_forecast(days: Sequence[ForecastDay], unit: TemperatureUnit) -> List[Dict[str, Any]]:
    return [
        {
            "date": day.date.strftime("%x"),  # locale date format
            "temp": format_temperature(day.temp, unit),
            "description": day.description.title(),
            "min": format_temperature(day.min_temp, unit),
            "max": format_temperature(day.max_temp, unit),
        }
        for day in days
    ]


def render_state(controller) -> Dict[str, Any]:
    """Everything a front-end needs to draw the page for one session."""
    unit = controller.unit
    current: Optional[Dict[str, Any]] = None
    forecast: List[Dict[str, Any]] = []
    # cards are hidden while a fetch is in flight
    if controller.snapshot is not None and not controller.loading:
        current = render_current(controller.snapshot, unit)
        forecast = render_forecast(controller.forecast, unit)

    return {
        "unit": unit.value,
        "toggle_label": f"Switch to {unit.toggled().label}",
        "loading": controller.loading,
        "errors": {
            "input": controller.input_error,
            "fetch": controller.fetch_error,
            "location": controller.location_error,
        },
        "current": current,
        "forecast": forecast,
    }
