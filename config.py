import os
import logging


LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')

logging.basicConfig(
    level=LOG_LEVEL,
    format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
)

OPENWEATHER_API_KEY = os.getenv('OPENWEATHER_API_KEY', '')
OPENWEATHER_BASE_URL = os.getenv('OPENWEATHER_BASE_URL', 'https://api.openweathermap.org/data/2.5')
OPENWEATHER_GEO_URL = os.getenv('OPENWEATHER_GEO_URL', 'https://api.openweathermap.org/geo/1.0')
OPENWEATHER_LANG = os.getenv('OPENWEATHER_LANG', 'de')
OPENWEATHER_TIMEOUT = float(os.getenv('OPENWEATHER_TIMEOUT', '10'))
