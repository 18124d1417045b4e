import pytest
from multiweather.config import load_settings, settings_from_env
from multiweather.errors import ConfigError

ENV_VARS = ("OPENWEATHER", "WEATHERBIT", "WEATHER_TIMEOUT", "WEATHER_HOST", "WEATHER_PORT", "LOG_LEVEL")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        # setenv first so teardown also drops whatever load_dotenv wrote
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


def test_settings_defaults():
    settings = settings_from_env({"OPENWEATHER": "a", "WEATHERBIT": "b"})

    assert settings.timeout == 10.0
    assert settings.port == 8080
    assert settings.host == "0.0.0.0"
    assert settings.log_level == "INFO"


def test_provider_configs_embed_keys_in_order():
    owm, wb = settings_from_env({"OPENWEATHER": "abc", "WEATHERBIT": "xyz"}).provider_configs()

    assert owm.name == "openWeatherMap"
    assert owm.url_for("London") == "http://api.openweathermap.org/data/2.5/weather?APPID=abc&q=London"
    assert wb.name == "weatherBit"
    assert wb.url_for("London") == "https://api.weatherbit.io/v2.0/current?key=xyz&city=London"


@pytest.mark.parametrize("missing", ["OPENWEATHER", "WEATHERBIT"])
def test_missing_key_is_a_config_error(missing):
    env = {"OPENWEATHER": "a", "WEATHERBIT": "b"}
    env[missing] = "  "
    with pytest.raises(ConfigError, match=missing):
        settings_from_env(env)


@pytest.mark.parametrize("name,value", [("WEATHER_TIMEOUT", "soon"), ("WEATHER_TIMEOUT", "0"), ("WEATHER_PORT", "80.5")])
def test_bad_numbers_are_config_errors(name, value):
    with pytest.raises(ConfigError, match=name):
        settings_from_env({"OPENWEATHER": "a", "WEATHERBIT": "b", name: value})


def test_missing_env_file_is_fatal(tmp_path):
    with pytest.raises(ConfigError, match="Error loading"):
        load_settings(str(tmp_path / "absent.env"))


def test_missing_env_file_allowed_when_not_required(tmp_path, monkeypatch):
    monkeypatch.setenv("OPENWEATHER", "a")
    monkeypatch.setenv("WEATHERBIT", "b")

    settings = load_settings(str(tmp_path / "absent.env"), require_env_file=False)

    assert settings.openweather_key == "a"


def test_env_file_is_loaded(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("OPENWEATHER=from-file\nWEATHERBIT=wb-file\nWEATHER_PORT=9090\n")

    settings = load_settings(str(env_file))

    assert settings.openweather_key == "from-file"
    assert settings.weatherbit_key == "wb-file"
    assert settings.port == 9090


def test_environment_wins_over_env_file(tmp_path, monkeypatch):
    env_file = tmp_path / ".env"
    env_file.write_text("OPENWEATHER=from-file\nWEATHERBIT=wb-file\n")
    monkeypatch.setenv("OPENWEATHER", "from-env")

    assert load_settings(str(env_file)).openweather_key == "from-env"


def test_repr_hides_keys():
    settings = settings_from_env({"OPENWEATHER": "secret-1", "WEATHERBIT": "secret-2"})
    assert "secret" not in repr(settings)
