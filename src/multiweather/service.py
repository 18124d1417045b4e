# orchestration and business rules
# the composite queries every provider in order and averages, failing on the first error

from __future__ import annotations
import logging
from typing import Iterable, List, Optional, Tuple
from .client import WeatherHTTPClient
from .config import Settings
from .errors import ConfigError, WeatherError
from .models import CityTemperature, mean
from .providers import OpenWeatherMapProvider, TemperatureProvider, WeatherBitProvider

logger = logging.getLogger(__name__)


class CompositeProvider:
    # averages a fixed, ordered set of providers, queried one after another
    # the first provider error propagates and readings already collected are dropped
    name = "composite"

    def __init__(self, providers: Iterable[TemperatureProvider]):
        self.providers: Tuple[TemperatureProvider, ...] = tuple(providers)
        if not self.providers:
            raise ConfigError("CompositeProvider needs at least one provider")

    def temperature(self, city: str) -> float:
        readings: List[float] = []
        for provider in self.providers:
            # no try/except here, fail fast
            readings.append(provider.temperature(city))
        avg = mean(readings)
        logger.debug("%s: %s: %.2f over %d providers", self.name, city, avg, len(readings))
        return avg

    def __len__(self) -> int:
        return len(self.providers)

    def __repr__(self) -> str:
        return f"CompositeProvider({list(self.providers)!r})"


def build_composite(settings: Settings, client: Optional[WeatherHTTPClient] = None) -> CompositeProvider:
    # one http client shared by every provider, sessions stay per thread inside it
    client = client or WeatherHTTPClient(timeout=settings.timeout)
    owm, wb = settings.provider_configs()
    return CompositeProvider([
        OpenWeatherMapProvider(owm, client=client),
        WeatherBitProvider(wb, client=client),
    ])


def lookup_all(provider: TemperatureProvider, cities: Iterable[str]) -> List[Tuple[str, Optional[CityTemperature], Optional[WeatherError]]]:
    # one row per city in input order; a failed city carries its error instead of a result
    rows = []
    for city in cities:
        try:
            rows.append((city, CityTemperature(city=city, kelvin=provider.temperature(city)), None))
        except WeatherError as exc:
            rows.append((city, None, exc))
    return rows
