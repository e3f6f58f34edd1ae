import pytest

from api_client import OpenWeatherAPI
from exceptions import InvalidArgument, LocationNotFound
from service import WeatherService, parse_days


@pytest.mark.parametrize(
    'days, expected',
    [
        (None, 5),
        ('', 5),
        ('abc', 5),
        ('0', 5),
        (0, 5),
        ('3', 3),
        ('2.5', 2),
        ('3abc', 3),
        (' 4 ', 4),
        (2, 2),
        (-1, -1),
    ]
)
def test_parse_days(days, expected):
    assert parse_days(days) == expected


def test_forecast_default_location(make_session):
    session = make_session()
    service = WeatherService(OpenWeatherAPI(api_key='k', session=session))

    envelope = service.forecast()

    assert envelope.location == 'Berlin'
    assert envelope.country == 'DE'
    assert envelope.timezone == 7200
    assert len(envelope.forecast) == 3
    assert not any(url.endswith('/direct') for url, _ in session.calls)


def test_forecast_resolves_location(make_session):
    session = make_session(direct=[{'name': 'München', 'lat': 48.137154, 'lon': 11.576124, 'country': 'DE'}])
    service = WeatherService(OpenWeatherAPI(api_key='k', session=session))

    envelope = service.forecast('Munich', days='2')

    assert envelope.location == 'München'
    assert len(envelope.forecast) == 2
    _, params = session.calls[1]
    assert (params['lat'], params['lon']) == (48.137154, 11.576124)


def test_forecast_negative_days(service):
    with pytest.raises(InvalidArgument):
        service.forecast(days=-2)


def test_forecast_unknown_location(make_session):
    service = WeatherService(OpenWeatherAPI(api_key='k', session=make_session(direct=[])))

    with pytest.raises(LocationNotFound):
        service.forecast('Atlantis')


def test_current(service):
    current = service.current()

    assert current.location == 'Berlin'
    assert current.condition == 'Clear'


def test_alerts_empty(service):
    alerts = service.alerts()

    assert alerts.location == 'Berlin'
    assert alerts.alerts == []


def test_search_locations(service):
    found = service.search_locations('ber')

    assert [x.id for x in found] == ['berlin_de']


@pytest.mark.parametrize('query', ['', '   '])
def test_search_requires_query(service, query):
    with pytest.raises(InvalidArgument):
        service.search_locations(query)


def test_forecast_partial_payload(make_session):
    service = WeatherService(OpenWeatherAPI(api_key='k', session=make_session(forecast={'list': None, 'city': None})))

    envelope = service.forecast()

    assert envelope.forecast == []
    assert envelope.country == 'DE'
    assert envelope.timezone is None
