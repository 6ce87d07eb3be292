"""Client library for a REST API of users, sessions, sensors and sensor datapoints."""

__version__ = "0.1.0"

__all__ = [
    "auth",
    "main",
    "paths",
    "sensor",
    "session",
    "session_sensor",
    "session_sensor_data",
    "transport",
    "user",
]