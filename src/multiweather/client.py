# OOP boundary for outbound http
# timeouts, headers and error wrapping live here, providers only see parsed json
# uses a thread-local session per worker thread since fastapi runs sync endpoints in a threadpool

from __future__ import annotations
import threading
from typing import Any
import requests
from requests.adapters import HTTPAdapter
from .errors import ConfigError, WeatherAPIError


class WeatherHTTPClient:
    # shared by every provider; holds only immutable settings plus per-thread sessions
    DEFAULT_TIMEOUT = 10.0

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = "multiweather/0.1",
    ):
        if timeout <= 0:
            raise ConfigError(f"timeout must be positive (got {timeout})")

        self.timeout = timeout
        self.user_agent = user_agent

        # each worker thread lazily obtains its own session through _session()
        self._local = threading.local()

    def _build_session(self) -> requests.Session:
        # no retry policy, a failed call surfaces immediately
        s = requests.Session()
        s.headers.update({"User-Agent": self.user_agent, "Accept": "application/json"})
        adapter = HTTPAdapter(max_retries=0)
        s.mount("http://", adapter)
        s.mount("https://", adapter)
        return s

    def _session(self) -> requests.Session:
        sess = getattr(self._local, "session", None)
        if sess is None:
            sess = self._build_session()
            self._local.session = sess
        return sess

    def get_json(self, url: str, label: str) -> Any:
        # label names the provider and city in error messages, the url may carry an api key
        try:
            resp = self._session().get(url, timeout=self.timeout)
        except requests.Timeout as exc:
            raise WeatherAPIError(f"{label}: timed out after {self.timeout:g}s") from exc
        except requests.RequestException as exc:
            raise WeatherAPIError(f"{label}: request error: {exc.__class__.__name__}") from exc

        if resp.status_code >= 400:
            # include a short response snippet to speed up triage
            snippet = (resp.text or "")[:300]
            raise WeatherAPIError(f"{label}: HTTP {resp.status_code}. Body: {snippet}")

        try:
            return resp.json()
        except ValueError as exc:
            raise WeatherAPIError(f"{label}: invalid JSON: {exc}") from exc
