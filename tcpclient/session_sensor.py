"""Endpoints linking sensors to sessions."""

from __future__ import annotations

from requests import Session

from tcpclient.paths import ApiPaths
from tcpclient.transport import ApiResponse, send_request


def _link(session_id: str, sensor_id: str) -> dict[str, str]:
    return {"session_id": session_id, "sensor_id": sensor_id}


def create_session_sensor(client: Session, paths: ApiPaths, session_id: str, sensor_id: str) -> ApiResponse:
    """Attach a sensor to a session."""
    url = paths.session_sensors_url()
    return send_request(client, "POST", url, session_id, _link(session_id, sensor_id))


def view_all_sensor_sessions(client: Session, paths: ApiPaths, session_id: str) -> ApiResponse:
    """List every sensor-session link."""
    return send_request(client, "GET", paths.session_sensors_url(), session_id, None)


def view_sensors_by_session_id(client: Session, paths: ApiPaths, session_id: str) -> ApiResponse:
    """List the sensors attached to a session."""
    url = paths.session_sensors_subpath_url("session", session_id)
    return send_request(client, "GET", url, session_id, None)


def view_session_sensor_by_sensor_id(
    client: Session, paths: ApiPaths, session_id: str, sensor_id: str
) -> ApiResponse:
    """Fetch the link for one sensor."""
    url = paths.session_sensors_subpath_url("session-sensor", sensor_id)
    return send_request(client, "GET", url, session_id, None)


def update_sensor_session(client: Session, paths: ApiPaths, session_id: str, sensor_id: str) -> ApiResponse:
    """Move a sensor's link to the given session."""
    url = paths.session_sensors_id_url(sensor_id)
    return send_request(client, "PATCH", url, session_id, _link(session_id, sensor_id))


def delete_sensor_session(client: Session, paths: ApiPaths, session_id: str, sensor_id: str) -> ApiResponse:
    """Remove a sensor's link."""
    url = paths.session_sensors_id_url(sensor_id)
    return send_request(client, "DELETE", url, session_id, None)