# exception hierarchy shared by every layer
# the http app maps WeatherError to a 500, the cli maps ConfigError to a fatal exit

from __future__ import annotations


class WeatherError(RuntimeError):
    # root of everything this package raises on purpose
    pass


class ConfigError(WeatherError):
    # missing .env file, missing api key, bad numeric setting, empty provider list
    pass


class WeatherAPIError(WeatherError):
    # transport failures, timeouts, http >= 400 and bodies that are not json
    pass


class PayloadError(WeatherError):
    # json that does not match the provider schema
    pass


class EmptyPayloadError(PayloadError):
    # provider answered with an empty observation list
    pass
