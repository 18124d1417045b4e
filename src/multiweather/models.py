# value objects and the small unit/stats helpers shared by providers and the composite

from __future__ import annotations
from dataclasses import dataclass
from typing import Sequence

# offset between the celsius and kelvin scales
KELVIN_OFFSET = 273.15


@dataclass(frozen=True)
class ProviderConfig:
    # immutable per-provider record, built once at startup
    # base_url already embeds the api key and ends with the city query prefix
    name: str
    base_url: str

    def url_for(self, city: str) -> str:
        # the city is appended as is, no validation or escaping at this layer
        return self.base_url + city


@dataclass(frozen=True)
class CityTemperature:
    # output value object used by the cli lookup command
    city: str
    kelvin: float


def kelvin_from_celsius(celsius: float) -> float:
    return celsius + KELVIN_OFFSET


def mean(values: Sequence[float]) -> float:
    # callers guarantee a non-empty sequence, an empty one is a programming error
    if not values:
        raise ValueError("mean() of an empty sequence")
    return sum(values) / len(values)
