from .models import TemperatureUnit


def to_display(celsius: float, unit: TemperatureUnit = TemperatureUnit.CELSIUS) -> float:
    """
    Convert a stored Celsius value to the active display unit.

    Stored data is never touched; call this for every temperature field
    (current, min, max) at render time.
    """
    if TemperatureUnit(unit) is TemperatureUnit.FAHRENHEIT:
        return (celsius * 9 / 5) + 32
    return celsius


def format_temperature(celsius: float, unit: TemperatureUnit = TemperatureUnit.CELSIUS) -> str:
    """Render a temperature with one decimal and the unit symbol, e.g. ``15.0°C``."""
    unit = TemperatureUnit(unit)
    return f"{to_display(celsius, unit):.1f}{unit.symbol}"
