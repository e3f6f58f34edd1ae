from datetime import datetime, timezone

import requests
from pydantic import TypeAdapter, ValidationError

import config
from config import logging
from aggregation import round_half_away
from exceptions import LocationNotFound, MalformedSample, UpstreamError
from models import CurrentWeather, ForecastSample, Location
from utils import MS_TO_KMH


logger = logging.getLogger(__name__)

DT_TXT_FORMAT = '%Y-%m-%d %H:%M:%S'

_samples_adapter = TypeAdapter(list[ForecastSample])


class OpenWeatherAPI:
    """
    Клиент OpenWeatherMap: геокодинг, текущая погода, прогноз, предупреждения
    """
    def __init__(
        self,
        api_key: str = config.OPENWEATHER_API_KEY,
        base_url: str = config.OPENWEATHER_BASE_URL,
        geo_base_url: str = config.OPENWEATHER_GEO_URL,
        lang: str = config.OPENWEATHER_LANG,
        timeout: float = config.OPENWEATHER_TIMEOUT,
        session: requests.Session | None = None,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip('/')
        self.geo_base_url = geo_base_url.rstrip('/')
        self.lang = lang
        self.timeout = timeout
        self.session = session or requests.Session()

    def _get(self, url: str, params: dict):
        logger.debug('GET %s %s', url, params)
        try:
            resp = self.session.get(url, params={**params, 'appid': self.api_key}, timeout=self.timeout)
            resp.raise_for_status()
            return resp.json()
        except requests.RequestException as err:
            logger.error('Request to %s failed: %s', url, err)
            raise UpstreamError(str(err)) from err

    def geocode(self, query: str, limit: int = 1) -> list[Location]:
        data = self._get(f'{self.geo_base_url}/direct', {'q': query, 'limit': limit})
        return [
            Location(name=x['name'], lat=x['lat'], lon=x['lon'], country=x.get('country'), state=x.get('state'))
            for x in data
        ]

    def resolve(self, query: str) -> Location:
        found = self.geocode(query, limit=1)
        if not found:
            raise LocationNotFound(query)
        return found[0]

    def _weather_params(self, location: Location) -> dict:
        return {'lat': location.lat, 'lon': location.lon, 'units': 'metric', 'lang': self.lang}

    def get_forecast_raw(self, location: Location) -> dict:
        return self._get(f'{self.base_url}/forecast', self._weather_params(location))

    def get_current_raw(self, location: Location) -> dict:
        return self._get(f'{self.base_url}/weather', self._weather_params(location))

    def get_alerts_raw(self, location: Location) -> dict:
        params = {'lat': location.lat, 'lon': location.lon, 'exclude': 'current,minutely,hourly,daily'}
        return self._get(f'{self.base_url}/onecall', params)


def _sample_fields(entry: dict) -> dict:
    weather = entry['weather'][0]
    return {
        'timestamp': datetime.strptime(entry['dt_txt'], DT_TXT_FORMAT),
        'temperature': entry['main']['temp'],
        'condition': weather['main'],
        'condition_description': weather.get('description', ''),
        'condition_icon': weather.get('icon', ''),
        'humidity_percent': entry['main']['humidity'],
        'wind_speed_mps': entry['wind']['speed'],
        'precipitation_probability': entry.get('pop', 0.0),
        'precipitation_volume_mm': (entry.get('rain') or {}).get('3h'),
    }


def parse_forecast_list(entries: list[dict]) -> list[ForecastSample]:
    """
    Разбор поля list ответа /forecast в список ForecastSample
    """
    try:
        fields = [_sample_fields(x) for x in entries]
        return _samples_adapter.validate_python(fields)
    except (KeyError, IndexError, TypeError, ValueError) as err:
        # ValidationError is a ValueError subclass
        logger.error('Malformed forecast entry: %s', err)
        raise MalformedSample(str(err)) from err


def _utc(ts: int) -> datetime:
    return datetime.fromtimestamp(ts, tz=timezone.utc)


def parse_current_weather(location: Location, raw: dict) -> CurrentWeather:
    try:
        main = raw['main']
        weather = raw['weather'][0]
        visibility = raw.get('visibility')
        return CurrentWeather(
            location=location.name,
            country=raw.get('sys', {}).get('country', location.country),
            temperature=round_half_away(main['temp']),
            feels_like=round_half_away(main['feels_like']),
            temp_min=round_half_away(main['temp_min']),
            temp_max=round_half_away(main['temp_max']),
            condition=weather['main'],
            description=weather.get('description', ''),
            icon=weather.get('icon', ''),
            humidity=main['humidity'],
            wind_speed=round_half_away(raw['wind']['speed'] * MS_TO_KMH),
            pressure=main['pressure'],
            visibility=visibility / 1000 if visibility is not None else None,
            sunrise=_utc(raw['sys']['sunrise']),
            sunset=_utc(raw['sys']['sunset']),
            timezone=raw.get('timezone'),
            last_update=datetime.now(tz=timezone.utc),
        )
    except (KeyError, IndexError, TypeError, ValidationError) as err:
        logger.error('Malformed current weather response: %s', err)
        raise MalformedSample(str(err)) from err
