import re

from config import logging
from aggregation import aggregate
from api_client import OpenWeatherAPI, parse_current_weather, parse_forecast_list
from exceptions import InvalidArgument
from models import CurrentWeather, ForecastEnvelope, Location, WeatherAlerts
from utils import DEFAULT_FORECAST_DAYS, DEFAULT_LOCATION, SEARCH_LIMIT


logger = logging.getLogger(__name__)

LEADING_INT = re.compile(r'\s*[+-]?\d+')


def parse_days(days) -> int:
    """
    Количество дней прогноза: пусто, не число или 0 - значение по умолчанию
    """
    if days is None or isinstance(days, bool):
        return DEFAULT_FORECAST_DAYS
    # leading integer prefix: '2.5' -> 2, '3abc' -> 3
    match = LEADING_INT.match(str(days))
    if not match:
        return DEFAULT_FORECAST_DAYS
    return int(match.group()) or DEFAULT_FORECAST_DAYS


class WeatherService:
    def __init__(self, api: OpenWeatherAPI, default_location: Location | None = None):
        self.api = api
        self.default_location = default_location or Location(**DEFAULT_LOCATION)

    def _location(self, query: str | None) -> Location:
        if not query:
            return self.default_location
        return self.api.resolve(query)

    def forecast(self, location: str | None = None, days=None) -> ForecastEnvelope:
        max_days = parse_days(days)
        loc = self._location(location)
        logger.info('Forecast for %s, %d day(s)', loc.name, max_days)
        raw = self.api.get_forecast_raw(loc)
        samples = parse_forecast_list(raw.get('list') or [])
        city = raw.get('city') or {}
        return ForecastEnvelope(
            location=loc.name,
            country=city.get('country', loc.country),
            timezone=city.get('timezone'),
            forecast=aggregate(samples, max_days),
        )

    def current(self, location: str | None = None) -> CurrentWeather:
        loc = self._location(location)
        return parse_current_weather(loc, self.api.get_current_raw(loc))

    def alerts(self, location: str | None = None) -> WeatherAlerts:
        loc = self._location(location)
        raw = self.api.get_alerts_raw(loc)
        return WeatherAlerts(location=loc.name, alerts=raw.get('alerts') or [])

    def search_locations(self, query: str) -> list[Location]:
        if not query or not query.strip():
            raise InvalidArgument('search query is required')
        return self.api.geocode(query, limit=SEARCH_LIMIT)
