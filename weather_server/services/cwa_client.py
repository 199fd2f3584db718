# services/cwa_client.py
from typing import Any, Optional

import requests

from weather_server.schemas.weather_schema import UpstreamPayload
from weather_server.utils.config import DEFAULT_CWA_API_BASE_URL, DEFAULT_CWA_DATASET_ID
from weather_server.utils.errors import UpstreamError


GENERIC_UPSTREAM_MESSAGE = "Unable to fetch weather data"


def _error_body(response: requests.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text or None


def _body_message(body: Any) -> Optional[str]:
    if isinstance(body, dict):
        message = body.get("message")
        if message:
            return str(message)
    return None


class CwaClient:
    """Thin wrapper around the CWA open-data datastore endpoint."""

    def __init__(self, api_key: str, base_url: str = DEFAULT_CWA_API_BASE_URL,
                 dataset_id: str = DEFAULT_CWA_DATASET_ID):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.dataset_id = dataset_id

    @property
    def url(self) -> str:
        return f"{self.base_url}/v1/rest/datastore/{self.dataset_id}"

    def fetch_forecast(self, location_name: str) -> UpstreamPayload:
        params = {
            "Authorization": self.api_key,
            "locationName": location_name,
        }
        try:
            response = requests.get(self.url, params=params)
            response.raise_for_status()
        except requests.HTTPError as e:
            body = _error_body(e.response)
            raise UpstreamError(
                _body_message(body) or GENERIC_UPSTREAM_MESSAGE,
                status_code=e.response.status_code,
                details=body,
            ) from e
        except requests.RequestException as e:
            raise UpstreamError(GENERIC_UPSTREAM_MESSAGE) from e

        data = response.json()
        if isinstance(data, dict) and str(data.get("success", "true")).lower() == "false":
            raise UpstreamError(_body_message(data) or GENERIC_UPSTREAM_MESSAGE, details=data)

        return UpstreamPayload.model_validate(data)
