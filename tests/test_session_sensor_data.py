import json

import pytest
import requests
import responses

from tcpclient.paths import ApiPaths
from tcpclient.session_sensor_data import (
    SessionSensorData,
    batch_create_datapoint,
    create_datapoint,
    delete_datapoint,
    update_datapoint,
    view_all_datapoints,
    view_datapoints_by_id_datetime,
    view_datapoints_by_session_id,
    view_datapoints_by_session_sensor,
)

BASE = "http://api.test"


@pytest.fixture
def paths():
    return ApiPaths(BASE)


@pytest.fixture
def client():
    return requests.Session()


def test_create_datapoint_body(client, paths):
    with responses.RequestsMock() as rsps:
        rsps.add(responses.POST, BASE + "/sessions-sensors-data", json={}, status=201)
        result = create_datapoint(client, paths, "sid", "p1", "2024-01-01", "blob")
        request = rsps.calls[0].request
    assert result.status == 201
    assert json.loads(request.body) == {
        "id": "p1",
        "datetime": "2024-01-01",
        "data_blob": "blob",
    }
    assert request.headers["Cookie"] == "session_id=sid"


def test_batch_create_datapoint(client, paths):
    points = [
        SessionSensorData("p1", "t1", "b1"),
        SessionSensorData("p2", "t2", "b2"),
    ]
    with responses.RequestsMock() as rsps:
        rsps.add(responses.POST, BASE + "/sessions-sensors-data/batch", json={"n": 2})
        result = batch_create_datapoint(client, paths, "sid", points)
        request = rsps.calls[0].request
    assert result.json == {"n": 2}
    assert json.loads(request.body) == {
        "datapoints": [
            {"id": "p1", "datetime": "t1", "data_blob": "b1"},
            {"id": "p2", "datetime": "t2", "data_blob": "b2"},
        ]
    }


def test_view_all_datapoints(client, paths):
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, paths.datapoint_url(), json=[1, 2])
        result = view_all_datapoints(client, paths, "sid")
    assert result.json == [1, 2]


def test_view_datapoints_by_session_id(client, paths):
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, BASE + "/sessions-sensors-data/session/sid", json=[])
        result = view_datapoints_by_session_id(client, paths, "sid")
    assert result.status == 200
    assert result.json == []


def test_view_datapoints_by_session_sensor(client, paths):
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, paths.datapoint_subpath_url("id", "p1"), json=[{"id": "p1"}])
        result = view_datapoints_by_session_sensor(client, paths, "sid", "p1")
    assert result.json == [{"id": "p1"}]


def test_view_datapoints_by_id_datetime(client, paths):
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, paths.datapoint_subpath_url("p1", "t1"), json={"id": "p1"})
        result = view_datapoints_by_id_datetime(client, paths, "sid", "p1", "t1")
    assert result.json == {"id": "p1"}


def test_update_datapoint(client, paths):
    with responses.RequestsMock() as rsps:
        rsps.add(responses.PATCH, paths.datapoint_subpath_url("p1", "t1"), json={})
        result = update_datapoint(client, paths, "sid", "p1", "t1", "new")
        request = rsps.calls[0].request
    assert result.status == 200
    assert json.loads(request.body) == {"id": "p1", "datetime": "t1", "data_blob": "new"}


def test_delete_datapoint(client, paths):
    with responses.RequestsMock() as rsps:
        rsps.add(responses.DELETE, paths.datapoint_subpath_url("p1", "t1"), status=204)
        result = delete_datapoint(client, paths, "sid", "p1", "t1")
    assert result.status == 204
    assert result.json is None


def test_datapoint_is_immutable():
    point = SessionSensorData("p1", "t1", "b1")
    with pytest.raises(AttributeError):
        point.id = "other"
    assert point.id == "p1"
    assert point.datetime == "t1"
    assert point.data_blob == "b1"