from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, computed_field, field_validator


class ForecastSample(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    timestamp: datetime
    temperature: float
    condition: str
    condition_description: str = ''
    condition_icon: str = ''
    humidity_percent: float
    wind_speed_mps: float
    precipitation_probability: float = 0.0
    precipitation_volume_mm: float = 0.0

    @field_validator('precipitation_volume_mm', mode='before')
    @classmethod
    def _absent_volume_is_zero(cls, value):
        return 0.0 if value is None else value

    @property
    def date_key(self) -> date:
        return self.timestamp.date()


class DailySummary(BaseModel):
    date: date
    temperature_min: int
    temperature_max: int
    dominant_condition: str
    dominant_condition_description: str
    dominant_condition_icon: str
    humidity_average: int
    wind_speed_average_kmh: int
    precipitation_probability_max: int
    precipitation_volume_total_mm: float


class Location(BaseModel):
    name: str
    lat: float
    lon: float
    country: str | None = None
    state: str | None = None

    @computed_field
    @property
    def id(self) -> str:
        return f'{self.name}_{self.country or ""}'.lower()


class ForecastEnvelope(BaseModel):
    location: str
    country: str | None
    timezone: int | None
    forecast: list[DailySummary]


class CurrentWeather(BaseModel):
    location: str
    country: str | None
    temperature: int
    feels_like: int
    temp_min: int
    temp_max: int
    condition: str
    description: str
    icon: str
    humidity: float
    wind_speed: int
    pressure: float
    visibility: float | None
    sunrise: datetime
    sunset: datetime
    timezone: int | None
    last_update: datetime


class WeatherAlerts(BaseModel):
    location: str
    alerts: list[dict]
