"""Login, logout and session renewal."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any, Optional

from requests import Session

from tcpclient.paths import ApiPaths
from tcpclient.transport import ApiResponse, send_request

_COOKIE_PREFIX = "session_id="


@dataclass(frozen=True)
class LoginResult:
    """Outcome of a login; session_id is None when the server set none."""

    status: int
    json: Optional[Any]
    session_id: Optional[str]


@dataclass(frozen=True)
class SessionResult:
    """Outcome of a logout or renewal, with the session id to use next."""

    status: int
    json: Optional[Any]
    session_id: str


def get_session_id(cookie: str) -> Optional[str]:
    """Extract the session_id value from a Set-Cookie string."""
    for part in cookie.split(";"):
        if part.startswith(_COOKIE_PREFIX):
            return part[len(_COOKIE_PREFIX):]
    print("Could not extract session_id", file=sys.stderr)
    return None


def _new_session_id(response: ApiResponse) -> Optional[str]:
    cookie = response.headers.get("Set-Cookie")
    return None if cookie is None else get_session_id(cookie)


def user_login(client: Session, paths: ApiPaths, username: str, password: str) -> LoginResult:
    """Log in and return the session id the server handed out."""
    credentials = dict(username=username, password_hash=password)
    response = send_request(client, "POST", paths.login_url(), None, credentials)
    return LoginResult(response.status, response.json, _new_session_id(response))


def _refresh(client: Session, url: str, session_id: str) -> SessionResult:
    response = send_request(client, "POST", url, session_id, None)
    new_id = _new_session_id(response)
    return SessionResult(response.status, response.json, new_id or session_id)


def user_logout(client: Session, paths: ApiPaths, session_id: str) -> SessionResult:
    """Log out; keeps the old session id when none is returned."""
    return _refresh(client, paths.logout_url(), session_id)


def renew_session(client: Session, paths: ApiPaths, session_id: str) -> SessionResult:
    """Renew the session; keeps the old session id when none is returned."""
    return _refresh(client, paths.renew_url(), session_id)