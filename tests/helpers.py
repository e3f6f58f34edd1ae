import requests


BERLIN_GEO = [{'name': 'Berlin', 'lat': 52.520008, 'lon': 13.404954, 'country': 'DE', 'state': 'Berlin'}]

CURRENT = {
    'main': {'temp': 21.5, 'feels_like': 20.4, 'temp_min': 19.6, 'temp_max': 23.5, 'humidity': 48, 'pressure': 1013},
    'weather': [{'main': 'Clear', 'description': 'Klarer Himmel', 'icon': '01d'}],
    'wind': {'speed': 2.5},
    'visibility': 10000,
    'sys': {'country': 'DE', 'sunrise': 1714534200, 'sunset': 1714588800},
    'timezone': 7200,
}


class FakeResponse:
    def __init__(self, payload, status_code=200):
        self.payload = payload
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f'{self.status_code} Error')

    def json(self):
        return self.payload


class FakeSession:
    """Отвечает заготовками по окончанию URL и запоминает запросы"""
    def __init__(self, routes: dict):
        self.routes = routes
        self.calls = []

    def get(self, url, params=None, timeout=None):
        self.calls.append((url, params))
        for suffix, answer in self.routes.items():
            if url.endswith(suffix):
                if isinstance(answer, Exception):
                    raise answer
                if isinstance(answer, FakeResponse):
                    return answer
                return FakeResponse(answer)
        return FakeResponse({}, status_code=404)
