"""Sensor endpoints."""

from __future__ import annotations

from requests import Session

from tcpclient.paths import ApiPaths
from tcpclient.transport import ApiResponse, send_request


def create_sensor(client: Session, paths: ApiPaths, session_id: str, sensor_type: str) -> ApiResponse:
    """Register a sensor of the given type."""
    return send_request(client, "POST", paths.sensor_url(), session_id, {"type": sensor_type})


def view_all_sensors(client: Session, paths: ApiPaths, session_id: str) -> ApiResponse:
    """List every sensor."""
    return send_request(client, "GET", paths.sensor_url(), session_id, None)


def view_sensor_by_id(client: Session, paths: ApiPaths, session_id: str, sensor_id: str) -> ApiResponse:
    """Fetch one sensor."""
    return send_request(client, "GET", paths.sensor_id_url(sensor_id), session_id, None)


def update_sensor(
    client: Session, paths: ApiPaths, session_id: str, sensor_id: str, sensor_type: str
) -> ApiResponse:
    """Change a sensor's type."""
    url = paths.sensor_id_url(sensor_id)
    return send_request(client, "PATCH", url, session_id, {"type": sensor_type})


def delete_sensor(client: Session, paths: ApiPaths, session_id: str, sensor_id: str) -> ApiResponse:
    """Remove a sensor."""
    return send_request(client, "DELETE", paths.sensor_id_url(sensor_id), session_id, None)