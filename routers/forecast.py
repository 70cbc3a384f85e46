from __future__ import annotations

from fastapi import APIRouter, Depends, FastAPI, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse

from core.forecast_service import ForecastService
from core.schemas import WeatherForecast

router = APIRouter(tags=["WeatherForecast"])

DEFAULT_DAYS = 5
MAX_DAYS = 30


def install_forecast_service(app: FastAPI, service: ForecastService | None) -> None:
    """Attach the generator that `/weatherforecast` delegates to."""
    if service is None:
        raise ValueError("forecast service must not be None")
    app.state.forecast_service = service


def get_forecast_service(request: Request) -> ForecastService:
    return request.app.state.forecast_service


@router.get(
    "/weatherforecast",
    response_model=list[WeatherForecast],
    responses={400: {"description": "Invalid days parameter", "content": {"text/plain": {}}}},
)
def get_weather_forecast(
    days: int = Query(DEFAULT_DAYS, description=f"Number of days to forecast (1..{MAX_DAYS})"),
    service: ForecastService = Depends(get_forecast_service),
):
    """Random forecast for the next `days` days, starting tomorrow."""
    if days <= 0 or days > MAX_DAYS:
        return PlainTextResponse(f"Days parameter must be between 1 and {MAX_DAYS}.", status_code=400)

    try:
        return service.generate(days)
    except ValueError as e:
        return PlainTextResponse(str(e), status_code=400)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> PlainTextResponse:
    """Unparseable query values are bad requests, same as out-of-range ones."""
    messages = []
    for err in exc.errors():
        field = ".".join(str(part) for part in err.get("loc", ())[1:]) or "request"
        messages.append(f"Invalid value for {field}: {err.get('msg', 'invalid input')}")
    return PlainTextResponse("; ".join(messages), status_code=400)
