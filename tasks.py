from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Iterable

import pandas as pd

from config import logging
from exceptions import ForecastError
from models import ForecastEnvelope
from service import WeatherService
from ttm import measure_time
from utils import MAX_WKRS


logger = logging.getLogger(__name__)


class DataFetchingTask:
    def __init__(self, service: WeatherService, locations: Iterable[str], days: int | None = None):
        self.service = service
        self.locations = list(locations)
        self.days = days

    def _fetch(self, location: str) -> ForecastEnvelope | None:
        try:
            return self.service.forecast(location, self.days)
        except ForecastError as err:
            logger.error('%s: %s', location, err)
            return None

    @measure_time
    def get_data(self) -> list[ForecastEnvelope]:
        logger.info('DataFetching started')
        with ThreadPoolExecutor(max_workers=MAX_WKRS) as pool:
            data = list(pool.map(self._fetch, self.locations))
        logger.info('DataFetching completed')
        return [x for x in data if x is not None]


class DataExportTask:
    def __init__(self, filepath: str | Path):
        self.filepath = Path(filepath)

    def _flatten(self, envelopes: Iterable[ForecastEnvelope]) -> list[dict]:
        rows = []
        for env in envelopes:
            for day in env.forecast:
                rows.append({'Location': env.location, 'Country': env.country} | day.model_dump())
        return rows

    @measure_time
    def export(self, envelopes: Iterable[ForecastEnvelope]) -> pd.DataFrame:
        logger.info('Export to %s started', self.filepath)
        df = pd.DataFrame.from_records(self._flatten(envelopes))
        if self.filepath.suffix == '.csv':
            df.to_csv(self.filepath, index=False)
        else:
            df.to_excel(self.filepath, index=False)
        logger.info('Exported %d row(s)', len(df))
        return df
