"""Sensor datapoint endpoints."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

import requests

from tcpclient.paths import ApiPaths
from tcpclient.transport import ApiResponse, send_request


@dataclass(frozen=True)
class SessionSensorData:
    """One datapoint recorded by a session sensor."""

    id: str
    datetime: str
    data_blob: str


def create_datapoint(
    client: requests.Session,
    paths: ApiPaths,
    session_id: str,
    item_id: str,
    datetime: str,
    data_blob: str,
) -> ApiResponse:
    body = SessionSensorData(item_id, datetime, data_blob)
    return send_request(client, "POST", paths.datapoint_url(), session_id, body)


def batch_create_datapoint(
    client: requests.Session,
    paths: ApiPaths,
    session_id: str,
    datapoints: Iterable[SessionSensorData],
) -> ApiResponse:
    body = {"datapoints": list(datapoints)}
    return send_request(client, "POST", paths.batch_url(), session_id, body)


def view_all_datapoints(
    client: requests.Session, paths: ApiPaths, session_id: str
) -> ApiResponse:
    return send_request(client, "GET", paths.datapoint_url(), session_id, None)


def view_datapoints_by_session_id(
    client: requests.Session, paths: ApiPaths, session_id: str
) -> ApiResponse:
    url = paths.datapoint_subpath_url("session", session_id)
    return send_request(client, "GET", url, session_id, None)


def view_datapoints_by_session_sensor(
    client: requests.Session, paths: ApiPaths, session_id: str, item_id: str
) -> ApiResponse:
    url = paths.datapoint_subpath_url("id", item_id)
    return send_request(client, "GET", url, session_id, None)


def view_datapoints_by_id_datetime(
    client: requests.Session,
    paths: ApiPaths,
    session_id: str,
    item_id: str,
    datetime: str,
) -> ApiResponse:
    url = paths.datapoint_subpath_url(item_id, datetime)
    return send_request(client, "GET", url, session_id, None)


def update_datapoint(
    client: requests.Session,
    paths: ApiPaths,
    session_id: str,
    item_id: str,
    datetime: str,
    data_blob: str,
) -> ApiResponse:
    url = paths.datapoint_subpath_url(item_id, datetime)
    body = SessionSensorData(item_id, datetime, data_blob)
    return send_request(client, "PATCH", url, session_id, body)


def delete_datapoint(
    client: requests.Session,
    paths: ApiPaths,
    session_id: str,
    item_id: str,
    datetime: str,
) -> ApiResponse:
    url = paths.datapoint_subpath_url(item_id, datetime)
    return send_request(client, "DELETE", url, session_id, None)