"""Session endpoints."""

from __future__ import annotations

from requests import Session

from tcpclient.paths import ApiPaths
from tcpclient.transport import ApiResponse, send_request


def create_session(client: Session, paths: ApiPaths, session_id: str, username: str) -> ApiResponse:
    """Open a session for a user."""
    return send_request(client, "POST", paths.sessions_url(), session_id, {"username": username})


def view_all_sessions(client: Session, paths: ApiPaths, session_id: str) -> ApiResponse:
    """List every session."""
    return send_request(client, "GET", paths.sessions_url(), session_id, None)


def view_sessions_by_user(client: Session, paths: ApiPaths, session_id: str, username: str) -> ApiResponse:
    """List the sessions of one user."""
    url = paths.sessions_subpath_url("user", username)
    return send_request(client, "GET", url, session_id, None)


def view_session_by_id(client: Session, paths: ApiPaths, session_id: str) -> ApiResponse:
    """Fetch the session with the given id."""
    url = paths.sessions_subpath_url("id", session_id)
    return send_request(client, "GET", url, session_id, None)


def update_session(client: Session, paths: ApiPaths, session_id: str, username: str) -> ApiResponse:
    """Reassign a session to another user."""
    url = paths.sessions_exp_url(session_id)
    return send_request(client, "PATCH", url, session_id, {"username": username})


def delete_session(client: Session, paths: ApiPaths, session_id: str) -> ApiResponse:
    """Remove a session."""
    return send_request(client, "DELETE", paths.sessions_exp_url(session_id), session_id, None)