# http surface
# GET /hello           -> "hello!"
# GET /weather/{city}  -> averaged kelvin reading as a bare json number, or 500 with the error as plain text

from __future__ import annotations
import logging
from typing import Optional
from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from .config import load_settings
from .errors import WeatherError
from .providers import TemperatureProvider
from .service import build_composite

logger = logging.getLogger(__name__)


def json_number(value: float):
    # whole readings go out as integers, 285.0 is written 285
    return int(value) if float(value).is_integer() else value


def create_app(provider: Optional[TemperatureProvider] = None) -> FastAPI:
    # with no provider, wire the composite from the .env settings (used by the uvicorn factory)
    if provider is None:
        provider = build_composite(load_settings())

    app = FastAPI(title="multiweather", version="0.1.0", docs_url=None, redoc_url=None)
    app.state.provider = provider

    @app.exception_handler(WeatherError)
    async def weather_error_handler(request: Request, exc: WeatherError):
        logger.warning("%s %s failed: %s", request.method, request.url.path, exc)
        return PlainTextResponse(str(exc), status_code=500)

    @app.get("/hello", response_class=PlainTextResponse)
    def hello():
        return "hello!"

    # sync endpoint: fastapi runs it in the threadpool, provider calls block that worker only
    @app.get("/weather/{city:path}")
    def weather(city: str):
        if not city:
            raise HTTPException(status_code=404, detail="city missing from path")
        return JSONResponse(json_number(app.state.provider.temperature(city)))

    return app
