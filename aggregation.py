from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from typing import Callable, Iterable, Sequence, TypeVar

from config import logging
from exceptions import InvalidArgument
from models import ForecastSample, DailySummary
from utils import DEFAULT_FORECAST_DAYS, MS_TO_KMH


logger = logging.getLogger(__name__)

T = TypeVar('T')


def round_half_away(value: float) -> int:
    """
    Округление до ближайшего целого, половины - от нуля (2.5 -> 3, -2.5 -> -3)
    """
    return int(Decimal(value).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def first_matching(items: Iterable[T], predicate: Callable[[T], bool]) -> T | None:
    for item in items:
        if predicate(item):
            return item
    return None


def group_by_date(samples: Iterable[ForecastSample]) -> dict[date, list[ForecastSample]]:
    groups: dict[date, list[ForecastSample]] = {}
    for sample in samples:
        groups.setdefault(sample.date_key, []).append(sample)
    return groups


def dominant_condition(group: Sequence[ForecastSample]) -> str:
    counts: dict[str, int] = {}
    seen_order: list[str] = []
    for sample in group:
        if sample.condition not in counts:
            counts[sample.condition] = 0
            seen_order.append(sample.condition)
        counts[sample.condition] += 1

    dominant = seen_order[0]
    for condition in seen_order[1:]:
        if counts[condition] > counts[dominant]:
            dominant = condition
    return dominant


def summarize_day(day: date, group: Sequence[ForecastSample]) -> DailySummary:
    temperatures = [x.temperature for x in group]
    condition = dominant_condition(group)
    reference = first_matching(group, lambda x: x.condition == condition)
    count = len(group)

    return DailySummary(
        date=day,
        temperature_min=round_half_away(min(temperatures)),
        temperature_max=round_half_away(max(temperatures)),
        dominant_condition=condition,
        dominant_condition_description=reference.condition_description,
        dominant_condition_icon=reference.condition_icon,
        humidity_average=round_half_away(sum(x.humidity_percent for x in group) / count),
        wind_speed_average_kmh=round_half_away(sum(x.wind_speed_mps for x in group) / count * MS_TO_KMH),
        precipitation_probability_max=round_half_away(max(x.precipitation_probability * 100 for x in group)),
        precipitation_volume_total_mm=sum(x.precipitation_volume_mm for x in group),
    )


def aggregate(samples: Sequence[ForecastSample], max_days: int = DEFAULT_FORECAST_DAYS) -> list[DailySummary]:
    """
    Сводка 3-часовых прогнозов по календарным дням.

    Дни идут в порядке первого появления даты во входных данных,
    дни сверх max_days отбрасываются целиком.
    """
    if max_days <= 0:
        raise InvalidArgument(f'max_days must be positive, got {max_days}')

    groups = group_by_date(samples)
    days = list(groups)[:max_days]
    if len(groups) > len(days):
        logger.debug('Discarded %d day(s) beyond max_days=%d', len(groups) - len(days), max_days)

    return [summarize_day(day, groups[day]) for day in days]
