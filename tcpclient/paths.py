"""URL construction for the sensor-session REST API."""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

DEFAULT_BASE_URL = "http://127.0.0.1:7878"
BASE_URL_VARIABLE = "API_BASE_URL"


@dataclass(frozen=True)
class ApiPaths:
    """Builds endpoint URLs relative to a base URL."""

    base_url: str = DEFAULT_BASE_URL

    def user_url(self) -> str:
        return f"{self.base_url}/users"

    def profile_url(self) -> str:
        return f"{self.base_url}/users/profile"

    def username_url(self, username: str) -> str:
        return f"{self.base_url}/users/{username}"

    def login_url(self) -> str:
        return f"{self.base_url}/authentication/login"

    def logout_url(self) -> str:
        return f"{self.base_url}/authentication/logout"

    def renew_url(self) -> str:
        return f"{self.base_url}/authentication/renew"

    def sensor_url(self) -> str:
        return f"{self.base_url}/sensors"

    def sensor_id_url(self, sensor_id: str) -> str:
        return f"{self.base_url}/sensors/{sensor_id}"

    def sessions_url(self) -> str:
        return f"{self.base_url}/sessions"

    def sessions_exp_url(self, endpoint: str) -> str:
        return f"{self.base_url}/sessions/{endpoint}"

    def sessions_subpath_url(self, subpath: str, endpoint: str) -> str:
        return f"{self.base_url}/sessions/{subpath}/{endpoint}"

    def session_sensors_url(self) -> str:
        return f"{self.base_url}/sessions-sensors"

    def session_sensors_id_url(self, item_id: str) -> str:
        return f"{self.base_url}/sessions-sensors/{item_id}"

    def session_sensors_subpath_url(self, subpath: str, item_id: str) -> str:
        return f"{self.base_url}/sessions-sensors/{subpath}/{item_id}"

    def datapoint_url(self) -> str:
        return f"{self.base_url}/sessions-sensors-data"

    def batch_url(self) -> str:
        return f"{self.base_url}/sessions-sensors-data/batch"

    def datapoint_subpath_url(self, subpath: str, item_id: str) -> str:
        return f"{self.base_url}/sessions-sensors-data/{subpath}/{item_id}"


def paths_from_env() -> ApiPaths:
    """Load a .env file if present and build paths from API_BASE_URL."""
    load_dotenv(find_dotenv(usecwd=True))
    return ApiPaths(os.environ.get(BASE_URL_VARIABLE, DEFAULT_BASE_URL))