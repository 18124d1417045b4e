# concrete temperature providers, one per remote api
# each provider owns its response schema and converts its native unit to kelvin before returning

from __future__ import annotations
import logging
import math
from typing import Any, Optional, Protocol
from .client import WeatherHTTPClient
from .errors import EmptyPayloadError, PayloadError
from .models import ProviderConfig, kelvin_from_celsius

logger = logging.getLogger(__name__)


class TemperatureProvider(Protocol):
    # anything that can turn a city into a kelvin reading, the composite included
    name: str

    def temperature(self, city: str) -> float:
        ...


# pure parsers, kept apart from i/o so they can be tested on fixtures

def _temperature_value(value: Any, field: str, provider: str) -> float:
    # json numbers only: strings, booleans and non-finite literals (NaN, Infinity) break the schema
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise PayloadError(f"Unexpected {provider} payload: {field} is {type(value).__name__}, not a number")
    try:
        number = float(value)
    except OverflowError as exc:
        raise PayloadError(f"Unexpected {provider} payload: {field} is out of range") from exc
    if not math.isfinite(number):
        raise PayloadError(f"Unexpected {provider} payload: {field} is {number!r}")
    return number


def parse_openweathermap(data: Any) -> float:
    # openweathermap shape: data["main"]["temp"], already kelvin
    try:
        raw = data["main"]["temp"]
    except (KeyError, TypeError, IndexError) as exc:
        raise PayloadError(f"Unexpected openWeatherMap payload: missing main.temp ({exc!r})") from exc
    return _temperature_value(raw, "main.temp", "openWeatherMap")


def parse_weatherbit(data: Any) -> float:
    # weatherbit shape: data["data"][i]["temp"] in celsius, only the first observation counts
    try:
        observations = data["data"]
    except (KeyError, TypeError) as exc:
        raise PayloadError("Unexpected weatherBit payload: missing data array") from exc

    if not isinstance(observations, list):
        raise PayloadError(f"Unexpected weatherBit payload: data is {type(observations).__name__}, not a list")
    if not observations:
        raise EmptyPayloadError("weatherBit returned an empty data array")

    try:
        raw = observations[0]["temp"]
    except (KeyError, TypeError) as exc:
        raise PayloadError(f"Unexpected weatherBit payload: missing data[0].temp ({exc!r})") from exc
    return kelvin_from_celsius(_temperature_value(raw, "data[0].temp", "weatherBit"))


class _HTTPProvider:
    # shared plumbing: build the url, fetch json, hand it to the subclass parser, log the reading
    def __init__(self, config: ProviderConfig, client: Optional[WeatherHTTPClient] = None):
        self.config = config
        self.client = client or WeatherHTTPClient()

    @property
    def name(self) -> str:
        return self.config.name

    def parse(self, data: Any) -> float:
        raise NotImplementedError

    def temperature(self, city: str) -> float:
        payload = self.client.get_json(self.config.url_for(city), label=f"{self.name} {city!r}")
        try:
            kelvin = self.parse(payload)
        except PayloadError as exc:
            # re-raise with the city attached, the parser does not know it
            raise type(exc)(f"{exc} for {city!r}") from exc
        logger.info("%s: %s: %.2f", self.name, city, kelvin)
        return kelvin

    def __repr__(self) -> str:
        # never print the base url, it embeds the api key
        return f"{self.__class__.__name__}(name={self.name!r})"


class OpenWeatherMapProvider(_HTTPProvider):
    def parse(self, data: Any) -> float:
        return parse_openweathermap(data)


class WeatherBitProvider(_HTTPProvider):
    def parse(self, data: Any) -> float:
        return parse_weatherbit(data)
