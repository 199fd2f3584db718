from typing import Any, Dict, List, Optional, Union
from pydantic import BaseModel, Field


# --- Upstream (CWA F-C0032-001) payload ---
# Only the keys the transform reads are declared; pydantic ignores the rest.

class UpstreamParameter(BaseModel):
    parameterName: str
    parameterValue: Optional[str] = None
    parameterUnit: Optional[str] = None


class UpstreamTimeSlot(BaseModel):
    startTime: str
    endTime: str
    parameter: UpstreamParameter


class UpstreamWeatherElement(BaseModel):
    elementName: str
    time: List[UpstreamTimeSlot] = Field(default_factory=list)


class UpstreamLocation(BaseModel):
    locationName: str
    weatherElement: List[UpstreamWeatherElement] = Field(default_factory=list)


class UpstreamRecords(BaseModel):
    issueTime: Optional[str] = None
    location: List[UpstreamLocation] = Field(default_factory=list)


class UpstreamPayload(BaseModel):
    # CWA sends the flag as the string "true" / "false"
    success: Optional[Union[str, bool]] = None
    records: UpstreamRecords


# --- Responses sent to the front end ---

class NormalizedForecast(BaseModel):
    startTime: str
    endTime: str
    weather: str = ""
    rain: int = 0
    minTemp: int = 0
    maxTemp: int = 0
    comfort: str = ""
    windSpeed: str = ""


class WeatherData(BaseModel):
    city: str
    updateTime: Optional[str] = None
    forecasts: List[NormalizedForecast] = Field(default_factory=list)


class WeatherResponse(BaseModel):
    success: bool = True
    data: WeatherData


class ErrorResponse(BaseModel):
    error: str
    message: Optional[str] = None
    details: Optional[Any] = None


class HealthOut(BaseModel):
    status: str
    timestamp: str


class RootOut(BaseModel):
    message: str
    endpoints: Dict[str, str]
