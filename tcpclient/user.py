"""User account endpoints."""

from __future__ import annotations

from requests import Session

from tcpclient.paths import ApiPaths
from tcpclient.transport import ApiResponse, send_request


def _account(username: str, password: str) -> dict[str, str]:
    return {"username": username, "password_hash": password}


def create_user(client: Session, paths: ApiPaths, username: str, password: str) -> ApiResponse:
    """Register a new user account."""
    return send_request(client, "POST", paths.user_url(), None, _account(username, password))


def view_all_users(client: Session, paths: ApiPaths, session_id: str) -> ApiResponse:
    """List every user."""
    return send_request(client, "GET", paths.user_url(), session_id, None)


def view_user_profile(client: Session, paths: ApiPaths, session_id: str) -> ApiResponse:
    """Fetch the profile of the logged-in user."""
    return send_request(client, "GET", paths.profile_url(), session_id, None)


def view_user_by_username(client: Session, paths: ApiPaths, username: str) -> ApiResponse:
    """Fetch one user by name."""
    return send_request(client, "GET", paths.username_url(username), None, None)


def update_user(client: Session, paths: ApiPaths, username: str, password: str) -> ApiResponse:
    """Change a user's password."""
    url = paths.username_url(username)
    return send_request(client, "PATCH", url, None, _account(username, password))


def delete_user(client: Session, paths: ApiPaths, username: str) -> ApiResponse:
    """Remove a user account."""
    return send_request(client, "DELETE", paths.username_url(username), None, None)