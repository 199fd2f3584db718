from typing import Any, Dict, Optional

from weather_server.schemas.weather_schema import ErrorResponse


class WeatherServiceError(Exception):
    """Base error for everything the weather endpoint turns into a JSON error body."""

    status_code = 500
    error = "server error"

    def __init__(self, message: str, status_code: Optional[int] = None, details: Any = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.details = details

    def to_dict(self) -> Dict[str, Any]:
        body = ErrorResponse(error=self.error, message=self.message, details=self.details)
        # only the top-level details key is optional; upstream bodies pass through as-is
        return body.model_dump(exclude={"details"} if self.details is None else None)


class ClientInputError(WeatherServiceError):
    status_code = 400
    error = "bad request"


class ServerConfigError(WeatherServiceError):
    status_code = 500
    error = "server configuration error"


class UpstreamNotFoundError(WeatherServiceError):
    status_code = 404
    error = "no data found"


class UpstreamError(WeatherServiceError):
    # status_code mirrors the upstream response when there is one
    status_code = 500
    error = "CWA API error"


class UpstreamDataError(UpstreamError):
    """The upstream answered, but the payload cannot be reshaped."""

    error = "CWA API data error"
