# weather_server/api/route.py

from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, Depends

from weather_server.schemas.weather_schema import ErrorResponse, HealthOut, WeatherResponse
from weather_server.services.cwa_client import CwaClient
from weather_server.services.forecast import get_weather_by_location
from weather_server.utils.config import Settings, get_settings
from weather_server.utils.errors import ClientInputError

router = APIRouter(tags=["weather"])

MISSING_CITY_MESSAGE = "Specify a city name in the path, e.g. /api/weather/臺北市"


def get_cwa_client(settings: Settings = Depends(get_settings)) -> Optional[CwaClient]:
    # without a key the forecast service raises before touching the network
    if not settings.cwa_api_key:
        return None
    return CwaClient(settings.cwa_api_key, settings.cwa_api_base_url, settings.cwa_dataset_id)


def _utc_timestamp() -> str:
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@router.get("/health", response_model=HealthOut)
def health():
    return HealthOut(status="OK", timestamp=_utc_timestamp())


@router.get("/weather", include_in_schema=False)
@router.get("/weather/", include_in_schema=False)
def weather_without_city():
    raise ClientInputError(MISSING_CITY_MESSAGE)


@router.get(
    "/weather/{location_name}",
    response_model=WeatherResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
def weather(
    location_name: str,
    settings: Settings = Depends(get_settings),
    client: Optional[CwaClient] = Depends(get_cwa_client),
):
    """Forecast for one city, e.g. GET /api/weather/臺北市"""
    location_name = location_name.strip()
    if not location_name:
        raise ClientInputError(MISSING_CITY_MESSAGE)

    return get_weather_by_location(location_name, settings, client)
