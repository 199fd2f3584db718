import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.cors import CORSMiddleware

from weather_server.api.route import router as api_router
from weather_server.schemas.weather_schema import ErrorResponse, RootOut
from weather_server.utils.config import get_settings
from weather_server.utils.errors import WeatherServiceError
from weather_server.utils.logging_config import configure_logging

settings = get_settings()
configure_logging(settings.log_level)
logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Unable to fetch weather data, please try again later"

app = FastAPI(title="CWA Weather Proxy API")


# registered before CORS so error responses still get the CORS headers
@app.middleware("http")
async def catch_unhandled_errors(request: Request, call_next):
    try:
        return await call_next(request)
    except Exception:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        body = ErrorResponse(error="server error", message=GENERIC_ERROR_MESSAGE)
        return JSONResponse(status_code=500, content=body.model_dump(exclude_none=True))


origins = settings.cors_origins

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    # browsers reject credentialed requests against a wildcard origin
    allow_credentials="*" not in origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix="/api")


@app.exception_handler(WeatherServiceError)
async def weather_error_handler(request: Request, exc: WeatherServiceError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    # every method on an unknown route, and non-GET methods on known ones
    if exc.status_code in (404, 405):
        body = ErrorResponse(error="path not found")
        return JSONResponse(status_code=404, content=body.model_dump(exclude_none=True))
    body = ErrorResponse(error=str(exc.detail))
    return JSONResponse(status_code=exc.status_code, content=body.model_dump(exclude_none=True),
                        headers=exc.headers)


@app.get("/", response_model=RootOut)
def read_root():
    return RootOut(
        message="Welcome to the CWA Weather Proxy API",
        endpoints={
            "dynamicWeather": "/api/weather/:locationName",
            "health": "/api/health",
        },
    )


@app.on_event("startup")
async def startup_event():
    logger.info("Server running at http://localhost:%s", settings.port)
    logger.info("Environment: %s", settings.env)


def run():
    uvicorn.run("weather_server.api.main:app", host="0.0.0.0", port=settings.port,
                reload=settings.env == "development")


if __name__ == "__main__":
    run()
