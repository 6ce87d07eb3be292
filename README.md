# tcpclient

A small HTTP client library for a REST API that manages user accounts,
login sessions, sensors, recording sessions, the links between sensors
and sessions, and the datapoints sensors record.

Every call sends one request and hands back the HTTP status and the
decoded JSON body, if there was one. POST and PATCH requests carry a JSON
body with `Content-Type: application/json`; where a login is needed, the
session id travels in a `session_id` cookie. A request that cannot be
sent at all (connection refused, timeout and the like) is reported as
status 500 with no body and no headers, rather than raising. A `204 No
Content` reply, or a body that is not JSON, gives a body of `None`.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Configuration

The server address is taken from the `API_BASE_URL` environment
variable. A `.env` file found from the working directory upwards is
loaded first; variables already set in the environment are not
overridden. When `API_BASE_URL` is not set, `http://127.0.0.1:7878` is
used.

## Using the library

```python
from tcpclient.main import get_client, get_path
from tcpclient.auth import user_login, user_logout, renew_session
from tcpclient.user import create_user, view_user_profile
from tcpclient.sensor import create_sensor, view_all_sensors
from tcpclient.session_sensor_data import SessionSensorData, batch_create_datapoint

client = get_client()   # a requests.Session shared by all calls
paths = get_path()      # endpoint URLs built from API_BASE_URL

password = "password"
create_user(client, paths, "alice", password)

login = user_login(client, paths, "alice", password)
if login.session_id is not None:
    sensors = view_all_sensors(client, paths, login.session_id)
    print(sensors.status, sensors.json)
```

### Authentication (`tcpclient.auth`)

- `user_login(client, paths, username, password)` returns a
  `LoginResult` with `status`, `json` and `session_id`, the last taken
  from the server's `Set-Cookie` header, or `None` if that header is
  missing or holds no `session_id`.
- `user_logout(client, paths, session_id)` and
  `renew_session(client, paths, session_id)` return a `SessionResult`
  with the same fields; when the server sends no new session id, the one
  passed in is kept.
- `get_session_id(cookie)` pulls the value of `session_id=` out of a
  cookie string, or returns `None` (and prints a note to stderr).

### Other endpoints

These return an `ApiResponse` with `status`, `json` and `headers`:

- `tcpclient.user`: `create_user`, `view_all_users`, `view_user_profile`,
  `view_user_by_username`, `update_user`, `delete_user`
- `tcpclient.sensor`: `create_sensor`, `view_all_sensors`,
  `view_sensor_by_id`, `update_sensor`, `delete_sensor`
- `tcpclient.session`: `create_session`, `view_all_sessions`,
  `view_sessions_by_user`, `view_session_by_id`, `update_session`,
  `delete_session`
- `tcpclient.session_sensor`: `create_session_sensor`,
  `view_all_sensor_sessions`, `view_sensors_by_session_id`,
  `view_session_sensor_by_sensor_id`, `update_sensor_session`,
  `delete_sensor_session`
- `tcpclient.session_sensor_data`: `create_datapoint`,
  `batch_create_datapoint`, `view_all_datapoints`,
  `view_datapoints_by_session_id`, `view_datapoints_by_session_sensor`,
  `view_datapoints_by_id_datetime`, `update_datapoint`, `delete_datapoint`

Datapoints for a batch upload are given as an iterable of
`SessionSensorData` records, each with an `id`, a `datetime` and a
`data_blob`; they are sent as `{"datapoints": [...]}`.

### Lower level

`tcpclient.paths.ApiPaths` builds every endpoint URL from a base URL
(`ApiPaths("http://localhost:7878").sensor_url()` and so on), and
`paths_from_env()` builds one from the environment as described above.
Any request can be sent directly with
`tcpclient.transport.send_request(client, method, url, session_id, body)`;
the body may be a dict, a list or a dataclass. A session id that cannot
be put in a header (one holding control characters) is left out with a
note on stderr.

## Command line

```
tcp-client
```

prints `Starting client...` and exits. It takes no options besides
`--help`.

## What this package does not do

The command does nothing beyond announcing itself: there is no
interactive client, no command for any of the endpoints and no storage of
session ids between runs. All work with the API is done through the
library functions above. The package contains no server.