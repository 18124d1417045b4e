# startup configuration: read the .env file once, validate, and freeze everything into Settings
# nothing here is mutated after load_settings() returns

from __future__ import annotations
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, Tuple
from dotenv import load_dotenv
from .errors import ConfigError
from .models import ProviderConfig

OPENWEATHERMAP_URL = "http://api.openweathermap.org/data/2.5/weather?APPID={key}&q="
WEATHERBIT_URL = "https://api.weatherbit.io/v2.0/current?key={key}&city="

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080
DEFAULT_TIMEOUT = 10.0


@dataclass(frozen=True)
class Settings:
    openweather_key: str
    weatherbit_key: str
    timeout: float = DEFAULT_TIMEOUT
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = "INFO"

    def provider_configs(self) -> Tuple[ProviderConfig, ...]:
        # order is the query order of the composite
        return (
            ProviderConfig(name="openWeatherMap", base_url=OPENWEATHERMAP_URL.format(key=self.openweather_key)),
            ProviderConfig(name="weatherBit", base_url=WEATHERBIT_URL.format(key=self.weatherbit_key)),
        )

    def __repr__(self) -> str:
        # keys stay out of logs and tracebacks
        return f"Settings(host={self.host!r}, port={self.port}, timeout={self.timeout}, log_level={self.log_level!r})"


def _require(env: Mapping[str, str], name: str) -> str:
    value = (env.get(name) or "").strip()
    if not value:
        raise ConfigError(f"{name} not set")
    return value


def _number(env: Mapping[str, str], name: str, default, cast):
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = cast(raw)
    except ValueError as exc:
        raise ConfigError(f"{name} must be a number (got {raw!r})") from exc
    if value <= 0:
        raise ConfigError(f"{name} must be positive (got {raw!r})")
    return value


def settings_from_env(env: Mapping[str, str]) -> Settings:
    return Settings(
        openweather_key=_require(env, "OPENWEATHER"),
        weatherbit_key=_require(env, "WEATHERBIT"),
        timeout=_number(env, "WEATHER_TIMEOUT", DEFAULT_TIMEOUT, float),
        host=env.get("WEATHER_HOST") or DEFAULT_HOST,
        port=_number(env, "WEATHER_PORT", DEFAULT_PORT, int),
        log_level=(env.get("LOG_LEVEL") or "INFO").upper(),
    )


def load_settings(env_file: Optional[str] = ".env", require_env_file: bool = True) -> Settings:
    # a missing env file aborts startup, variables already in the environment win over the file
    if env_file is not None:
        path = Path(env_file)
        if not path.is_file():
            if require_env_file:
                raise ConfigError(f"Error loading {env_file} file")
        else:
            load_dotenv(path, override=False)
    return settings_from_env(os.environ)
