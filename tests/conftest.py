# shared fixtures; the requests_mock fixture comes from the requests-mock pytest plugin

import json
from pathlib import Path
import pytest
from multiweather.client import WeatherHTTPClient
from multiweather.models import ProviderConfig

DATA = Path(__file__).parent / "data"

OWM_URL = "http://owm.test/data/2.5/weather"
WB_URL = "https://wb.test/v2.0/current"


def load_payload(name: str):
    return json.loads((DATA / name).read_text())


@pytest.fixture
def client():
    return WeatherHTTPClient(timeout=2.0)


@pytest.fixture
def owm_config():
    return ProviderConfig(name="openWeatherMap", base_url=OWM_URL + "?APPID=owm-key&q=")


@pytest.fixture
def wb_config():
    return ProviderConfig(name="weatherBit", base_url=WB_URL + "?key=wb-key&city=")
