import logging
import random

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from config import settings
from core.forecast_service import ForecastService, WeatherForecastService
from core.logger import configure_logging
from routers.forecast import install_forecast_service, validation_error_handler
from routers.forecast import router as forecast_router

configure_logging(settings.log_level)
logger = logging.getLogger(__name__)


def create_app(forecast_service: ForecastService | None = None) -> FastAPI:
    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        description="Randomly generated daily weather forecasts",
    )

    if forecast_service is None:
        forecast_service = WeatherForecastService(rng=random.Random(settings.random_seed))
    install_forecast_service(app, forecast_service)

    app.include_router(forecast_router, prefix="/api")
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    logger.info("Application created with %s", type(forecast_service).__name__)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port)
