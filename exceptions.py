class ForecastError(Exception):
    """Base error of the forecast package."""


class InvalidArgument(ForecastError, ValueError):
    pass


class MalformedSample(ForecastError):
    """Raw feed entry is missing a required field or carries a wrong type."""


class LocationNotFound(ForecastError):
    def __init__(self, query: str):
        super().__init__(f'Location not found: {query!r}')
        self.query = query


class UpstreamError(ForecastError):
    """Weather API could not be reached or answered with an error status."""
