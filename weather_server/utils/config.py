import os
from functools import lru_cache
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import BaseModel

# load .env located at the project root (relative, robust across machines)
BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
DOTENV_PATH = os.path.join(BASE_DIR, ".env")
load_dotenv(dotenv_path=DOTENV_PATH)

DEFAULT_PORT = 3000
DEFAULT_CWA_API_BASE_URL = "https://opendata.cwa.gov.tw/api"
# 36-hour general forecast, one record per county/city
DEFAULT_CWA_DATASET_ID = "F-C0032-001"


class Settings(BaseModel):
    port: int = DEFAULT_PORT
    env: str = "development"
    cwa_api_key: Optional[str] = None
    cwa_api_base_url: str = DEFAULT_CWA_API_BASE_URL
    cwa_dataset_id: str = DEFAULT_CWA_DATASET_ID
    cors_origins: List[str] = ["*"]
    log_level: str = "INFO"


def _split_origins(raw: Optional[str]) -> List[str]:
    origins = [o.strip() for o in (raw or "").split(",") if o.strip()]
    return origins or ["*"]


def load_settings(environ=None) -> Settings:
    """Build the settings object from environment variables.

    `environ` defaults to ``os.environ``; tests pass a plain dict.
    """
    environ = os.environ if environ is None else environ

    return Settings(
        port=int(environ.get("PORT") or DEFAULT_PORT),
        env=(environ.get("ENV") or environ.get("NODE_ENV") or "development").lower(),
        # an empty value counts as unset
        cwa_api_key=environ.get("CWA_API_KEY") or None,
        cwa_api_base_url=(environ.get("CWA_API_BASE_URL") or DEFAULT_CWA_API_BASE_URL).rstrip("/"),
        cwa_dataset_id=environ.get("CWA_DATASET_ID") or DEFAULT_CWA_DATASET_ID,
        cors_origins=_split_origins(environ.get("CORS_ORIGINS")),
        log_level=(environ.get("LOG_LEVEL") or "INFO").upper(),
    )


@lru_cache()
def get_settings() -> Settings:
    return load_settings()
