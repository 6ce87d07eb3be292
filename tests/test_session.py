import json

import pytest
import requests
import responses

from tcpclient.paths import ApiPaths
from tcpclient.session import (
    create_session,
    delete_session,
    update_session,
    view_all_sessions,
    view_session_by_id,
    view_sessions_by_user,
)

BASE = "http://api.test"
PATHS = ApiPaths(BASE)

SESSION_CALLS = [
    (create_session, ("alice",), "POST", "/sessions", {"username": "alice"}),
    (view_all_sessions, (), "GET", "/sessions", None),
    (view_sessions_by_user, ("alice",), "GET", "/sessions/user/alice", None),
    (view_session_by_id, (), "GET", "/sessions/id/sid", None),
    (update_session, ("bob",), "PATCH", "/sessions/sid", {"username": "bob"}),
    (delete_session, (), "DELETE", "/sessions/sid", None),
]


@pytest.mark.parametrize("call, extra, method, route, payload", SESSION_CALLS)
def test_session_endpoint(call, extra, method, route, payload):
    with responses.RequestsMock() as mock:
        mock.add(method, BASE + route, json=[{"u": 1}], status=200)
        result = call(requests.Session(), PATHS, "sid", *extra)
        request = mock.calls[0].request
    assert result.status == 200
    assert result.json == [{"u": 1}]
    assert request.headers["Cookie"] == "session_id=sid"
    assert (json.loads(request.body) if request.body else None) == payload


def test_create_session_content_length():
    with responses.RequestsMock() as mock:
        mock.add(responses.POST, PATHS.sessions_url(), json={"ok": True}, status=201)
        create_session(requests.Session(), PATHS, "sid", "alice")
        request = mock.calls[0].request
    assert request.headers["Content-Length"] == str(len(request.body))


def test_delete_session_non_json_body():
    with responses.RequestsMock() as mock:
        mock.add(responses.DELETE, PATHS.sessions_exp_url("sid"), body="gone", status=200)
        result = delete_session(requests.Session(), PATHS, "sid")
    assert (result.status, result.json) == (200, None)