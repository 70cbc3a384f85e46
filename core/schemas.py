from __future__ import annotations

import math
from datetime import date
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field

TEMPERATURE_MIN_C = -20
TEMPERATURE_MAX_C = 54


class Summary(str, Enum):
    freezing = "Freezing"
    bracing = "Bracing"
    chilly = "Chilly"
    cool = "Cool"
    mild = "Mild"
    warm = "Warm"
    balmy = "Balmy"
    hot = "Hot"
    sweltering = "Sweltering"
    scorching = "Scorching"


class WeatherForecast(BaseModel):
    """One day of forecast. Fahrenheit is derived from Celsius on read."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    forecast_date: date = Field(alias="date")
    temperature_c: int = Field(alias="temperatureInCelsius", ge=TEMPERATURE_MIN_C, le=TEMPERATURE_MAX_C)
    summary: Optional[Summary] = None

    @computed_field(alias="temperatureInFahrenheit")  # type: ignore[prop-decorator]
    @property
    def temperature_f(self) -> int:
        return 32 + math.floor(self.temperature_c / 0.5556)
