DEFAULT_LOCATION = {
    'name': 'Berlin',
    'country': 'DE',
    'lat': 52.520008,
    'lon': 13.404954,
}

DEFAULT_FORECAST_DAYS = 5
SEARCH_LIMIT = 5

MS_TO_KMH = 3.6

MAX_WKRS = 4
FILEPATH = 'forecast.xlsx'
