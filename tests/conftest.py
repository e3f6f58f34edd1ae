import json
from datetime import datetime
from pathlib import Path

import pytest

from api_client import OpenWeatherAPI
from models import ForecastSample
from service import WeatherService
from tests.helpers import BERLIN_GEO, CURRENT, FakeSession


FIXTURE = Path(__file__).parent / 'forecast.json'


@pytest.fixture
def forecast_raw():
    with open(FIXTURE, 'r', encoding='utf-8') as file:
        return json.load(file)


@pytest.fixture
def make_session(forecast_raw):
    def wrapper(**overrides):
        routes = {
            '/direct': BERLIN_GEO,
            '/forecast': forecast_raw,
            '/weather': CURRENT,
            '/onecall': {'lat': 52.52, 'lon': 13.4},
        }
        routes.update({f'/{k}': v for k, v in overrides.items()})
        return FakeSession(routes)
    return wrapper


@pytest.fixture
def api(make_session):
    return OpenWeatherAPI(api_key='test-key', session=make_session())


@pytest.fixture
def service(api):
    return WeatherService(api)


@pytest.fixture
def make_sample():
    def wrapper(ts: str, temperature: float = 10.0, condition: str = 'Clear', **kwargs):
        fields = {
            'timestamp': datetime.fromisoformat(ts),
            'temperature': temperature,
            'condition': condition,
            'condition_description': f'{condition.lower()} sky',
            'condition_icon': f'{condition[:2].lower()}d',
            'humidity_percent': 50,
            'wind_speed_mps': 1.0,
        }
        fields.update(kwargs)
        return ForecastSample(**fields)
    return wrapper
