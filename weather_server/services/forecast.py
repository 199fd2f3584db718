# services/forecast.py
import logging
import re
from enum import Enum
from typing import Callable, Dict, List, Optional, Tuple

from weather_server.schemas.weather_schema import (
    NormalizedForecast,
    UpstreamLocation,
    UpstreamWeatherElement,
    WeatherData,
    WeatherResponse,
)
from weather_server.services.cwa_client import CwaClient
from weather_server.utils.config import Settings
from weather_server.utils.errors import (
    ServerConfigError,
    UpstreamDataError,
    UpstreamError,
    UpstreamNotFoundError,
)

logger = logging.getLogger(__name__)


class ElementTag(str, Enum):
    WEATHER = "Wx"
    RAIN_PROBABILITY = "PoP"
    MIN_TEMPERATURE = "MinT"
    MAX_TEMPERATURE = "MaxT"
    COMFORT = "CI"
    WIND_SPEED = "WS"


INTEGER_PATTERN = re.compile(r"-?[0-9]+")


def _as_int(element: UpstreamWeatherElement, index: int, raw: str) -> int:
    # plain ASCII digits only; int() alone would take "1_0" or Arabic-Indic digits
    if not INTEGER_PATTERN.fullmatch(raw.strip()):
        raise UpstreamDataError(
            f"{element.elementName} value {raw!r} at time slot {index} is not an integer"
        )
    return int(raw.strip())


def _as_text(element: UpstreamWeatherElement, index: int, raw: str) -> str:
    return raw


# Tag -> (NormalizedForecast field, converter). Tags not listed here are ignored.
ELEMENT_FIELDS: Dict[ElementTag, Tuple[str, Callable[[UpstreamWeatherElement, int, str], object]]] = {
    ElementTag.WEATHER: ("weather", _as_text),
    ElementTag.RAIN_PROBABILITY: ("rain", _as_int),
    ElementTag.MIN_TEMPERATURE: ("minTemp", _as_int),
    ElementTag.MAX_TEMPERATURE: ("maxTemp", _as_int),
    ElementTag.COMFORT: ("comfort", _as_text),
    ElementTag.WIND_SPEED: ("windSpeed", _as_text),
}


def _field_for(element_name: str):
    try:
        return ELEMENT_FIELDS[ElementTag(element_name)]
    except ValueError:
        return None


def select_location(locations: List[UpstreamLocation], location_name: str) -> Optional[UpstreamLocation]:
    """Pick the record for the queried city.

    The upstream query is already filtered by name, so when no record matches
    exactly the first one returned is used.
    """
    for location in locations:
        if location.locationName == location_name:
            return location
    return locations[0] if locations else None


def transform_location(location: UpstreamLocation, issue_time: Optional[str] = None) -> WeatherData:
    """Flatten the per-element time series into one forecast per time slot."""
    elements = location.weatherElement
    if not elements:
        raise UpstreamDataError(f"No weather elements returned for {location.locationName}")

    slots = elements[0].time
    time_count = len(slots)
    for element in elements:
        if len(element.time) != time_count:
            raise UpstreamDataError(
                f"{element.elementName} has {len(element.time)} time slots, expected {time_count}"
            )

    forecasts = []
    for i in range(time_count):
        values = {}
        for element in elements:
            field = _field_for(element.elementName)
            if field is None:
                continue
            name, convert = field
            values[name] = convert(element, i, element.time[i].parameter.parameterName)

        forecasts.append(NormalizedForecast(
            startTime=slots[i].startTime,
            endTime=slots[i].endTime,
            **values
        ))

    return WeatherData(city=location.locationName, updateTime=issue_time, forecasts=forecasts)


def get_weather_by_location(location_name: str, settings: Settings,
                            client: Optional[CwaClient] = None) -> WeatherResponse:
    if not settings.cwa_api_key:
        raise ServerConfigError("Set CWA_API_KEY in the .env file")

    if client is None:
        client = CwaClient(settings.cwa_api_key, settings.cwa_api_base_url, settings.cwa_dataset_id)

    try:
        payload = client.fetch_forecast(location_name)
    except UpstreamError as e:
        logger.error("Failed to fetch weather for %s: %s", location_name, e.__cause__ or e.message)
        raise

    location = select_location(payload.records.location, location_name)
    if location is None:
        raise UpstreamNotFoundError(
            f"Unable to get weather data for {location_name}, please check the city name"
        )

    data = transform_location(location, payload.records.issueTime)
    return WeatherResponse(success=True, data=data)
