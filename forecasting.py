import argparse

from config import logging
from api_client import OpenWeatherAPI
from service import WeatherService
from tasks import DataFetchingTask, DataExportTask
from utils import DEFAULT_FORECAST_DAYS, FILEPATH


logger = logging.getLogger(__name__)


def forecast_weather(locations: list[str], days: int = DEFAULT_FORECAST_DAYS, filepath: str = FILEPATH):
    """
    Дневной прогноз по списку мест с выгрузкой в таблицу
    """
    logger.info('Forecast Weather started')
    service = WeatherService(OpenWeatherAPI())
    data_fetch = DataFetchingTask(service, locations, days)
    forecasts = data_fetch.get_data()
    return DataExportTask(filepath).export(forecasts)


def main(argv=None):
    parser = argparse.ArgumentParser(description='Daily weather forecast summary')
    parser.add_argument('locations', nargs='*', default=['Berlin'])
    parser.add_argument('--days', type=int, default=DEFAULT_FORECAST_DAYS)
    parser.add_argument('--output', default=FILEPATH)
    args = parser.parse_args(argv)
    forecast_weather(args.locations, args.days, args.output)


if __name__ == "__main__":
    main()
    logger.info('Forecast Weather finished')
