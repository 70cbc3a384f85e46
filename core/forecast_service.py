from __future__ import annotations

import logging
import random
from abc import ABC, abstractmethod
from datetime import date, datetime, timedelta, timezone
from typing import Callable, List, Optional

from core.schemas import TEMPERATURE_MAX_C, TEMPERATURE_MIN_C, Summary, WeatherForecast

logger = logging.getLogger(__name__)

SUMMARIES: tuple[Summary, ...] = tuple(Summary)


def utc_today() -> date:
    return datetime.now(timezone.utc).date()


class ForecastService(ABC):
    """Contract for forecast generation."""

    @abstractmethod
    def generate(self, days: int = 5) -> List[WeatherForecast]:
        """Return forecasts for the next `days` days, starting tomorrow."""


class WeatherForecastService(ForecastService):
    """Random forecasts. Keeps no state between calls apart from the random source.

    `rng` is shared by every call made through this instance; pass a seeded
    `random.Random` to get reproducible values. `today` supplies the current
    UTC date and can be replaced to pin the date sequence.
    """

    def __init__(self, rng: Optional[random.Random] = None, today: Callable[[], date] = utc_today):
        self.rng = rng if rng is not None else random.Random()
        self.today = today

    def generate(self, days: int = 5) -> List[WeatherForecast]:
        if days <= 0:
            raise ValueError(f"days must be a positive number, got {days}")

        start = self.today()
        forecasts = [self._forecast_for_day(start, offset) for offset in range(1, days + 1)]
        logger.debug("Generated %d forecast(s) starting %s", len(forecasts), forecasts[0].forecast_date)
        return forecasts

    def _forecast_for_day(self, start: date, day_offset: int) -> WeatherForecast:
        return WeatherForecast(
            forecast_date=start + timedelta(days=day_offset),
            temperature_c=self.rng.randint(TEMPERATURE_MIN_C, TEMPERATURE_MAX_C),
            summary=self.rng.choice(SUMMARIES),
        )
