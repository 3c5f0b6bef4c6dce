class SkyViewError(Exception):
    """Base class for every error raised inside skyview."""


class InputError(SkyViewError):
    """User supplied location text that cannot be used."""

    EMPTY = "empty"

    def __init__(self, message: str = "Please enter a city name", kind: str = EMPTY):
        super().__init__(message)
        self.kind = kind


class GeolocationError(SkyViewError):
    """The platform location capability could not supply a position."""


class UpstreamError(SkyViewError):
    """The weather provider could not be reached or answered with an error."""


class MalformedResponseError(SkyViewError):
    """The weather provider answered, but not with the expected structure."""
