"""Sending JSON requests with an optional session cookie."""

from __future__ import annotations

import dataclasses
import json
import sys
from dataclasses import dataclass, field
from http import HTTPStatus
from typing import Any, Mapping, Optional

import requests
from requests.structures import CaseInsensitiveDict

_JSON_METHODS = frozenset({"POST", "PATCH"})


@dataclass
class ApiResponse:
    """Status, decoded JSON body (if any) and headers of a response."""

    status: int
    json: Optional[Any] = None
    headers: Mapping[str, str] = field(default_factory=CaseInsensitiveDict)


def _is_valid_header_value(value: str) -> bool:
    return all(ch == "\t" or (ord(ch) >= 32 and ord(ch) != 127) for ch in value)


def _jsonable(body: Any) -> Any:
    if dataclasses.is_dataclass(body) and not isinstance(body, type):
        return dataclasses.asdict(body)
    if isinstance(body, (list, tuple)):
        return [_jsonable(item) for item in body]
    if isinstance(body, dict):
        return {key: _jsonable(value) for key, value in body.items()}
    return body


def send_request(
    client: requests.Session,
    method: str,
    url: str,
    session_id: Optional[str] = None,
    body: Any = None,
) -> ApiResponse:
    """Send a request; transport failures yield a 500 response with no body."""
    method = method.upper()
    headers: dict[str, str] = {}

    if method in _JSON_METHODS:
        headers["Content-Type"] = "application/json"

    if session_id is not None:
        cookie = f"session_id={session_id}"
        if _is_valid_header_value(cookie):
            headers["Cookie"] = cookie
        else:
            print(
                f"Failed to parse session_id header: invalid header value {cookie!r}",
                file=sys.stderr,
            )

    payload: Optional[bytes] = None
    if body is not None:
        payload = json.dumps(
            _jsonable(body), separators=(",", ":"), ensure_ascii=False
        ).encode("utf-8")
        headers["Content-Length"] = str(len(payload))

    try:
        response = client.request(method, url, headers=headers, data=payload)
    except requests.RequestException:
        return ApiResponse(int(HTTPStatus.INTERNAL_SERVER_ERROR), None, CaseInsensitiveDict())

    status = int(response.status_code)
    decoded: Optional[Any] = None
    if status != HTTPStatus.NO_CONTENT:
        try:
            decoded = response.json()
        except ValueError:
            decoded = None

    return ApiResponse(status, decoded, CaseInsensitiveDict(response.headers))