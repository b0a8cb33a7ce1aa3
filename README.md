# footballsys

footballsys is a small JSON web service for a football club, built on Flask
and SQLite. It keeps three kinds of record:

- **users**: accounts that can sign up and log in;
- **members**: the squad, with each person's identity (player, coach,
  manager and so on), age, position and jersey number;
- **training records**: the date, content, intensity, duration and injury
  flag of a session, tied to a user id.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running the server

```
footballsys
```

This serves the application on all interfaces. Options:

- `--port`: the port to listen on. Defaults to the `PORT` environment
  variable, or 8080 if it is not set.
- `--database`: the SQLite file to use. Defaults to `fbsys.db`; the tables are
  created if they do not exist.

Run `footballsys --help` to see them.

Templates are looked up in `templates/` and static files are served from
`static/` under the current working directory.

## Endpoints

Request bodies are JSON. Parameters marked as query parameters go in the URL
query string.

| Method | Path            | What it does |
|--------|-----------------|--------------|
| GET    | `/index/login`  | Renders the `admin/index.html` template. |
| POST   | `/index/login`  | Logs in with `username` and `password`. Returns the user, or 401 with `Invalid username or password`. |
| GET    | `/index/signin` | Adds a user from `username` and `password`. |
| GET    | `/index/test`   | Health check; answers with plain text `成功`. |
| GET    | `/club/add`     | Adds a member from the body and returns it with its assigned id. |
| GET    | `/club/delete`  | Deletes members by the `id` query parameter, or else by `name`. |
| GET    | `/club/search`  | Returns the first member with the `name` query parameter. |
| GET    | `/train/add`    | Adds a training record from the body. |
| GET    | `/train/search` | Returns the first training record by the `user_id` query parameter, or else by `name`. |

A member body looks like this:

```json
{"username": "jdoe", "identity": "player", "name": "John Doe",
 "age": 24, "position": "midfielder", "jersey_number": 8}
```

A member is returned with its id under the key `Id`.

A training record body looks like this:

```json
{"user_id": 1, "name": "John Doe", "date": "2024-03-01",
 "content": "passing drills", "intensity": "high",
 "duration": 90, "injury": false}
```

Keys are matched exactly first and then without regard to case. Missing keys
take empty or zero values; a value of the wrong JSON type is rejected.

### Errors

- A body that is not valid JSON, not an object, or has a value of the wrong
  type is answered with status 400 and an `error` message. On
  `POST /index/login` the login template is rendered with status 400 and the
  error `Invalid request data` instead.
- A search or delete without the query parameters it needs is answered with
  status 400 and `{"err": "没找到member"}`.
- A search that finds nothing, or a database failure, is answered with status
  500 and an `error` message.

## Using it from Python

```python
from footballsys.app import create_app
from footballsys.store import Store

with Store("club.db") as store:
    app = create_app(store, "secret")
    client = app.test_client()
    print(client.get("/index/test").get_data(as_text=True))
```

`footballsys.store.Store` can also be used on its own: `add_user`,
`find_user`, `add_member`, `delete_member_by_id`, `delete_member_by_name`,
`find_member_by_name`, `add_train`, `find_train_by_user_id` and
`find_train_by_name`. Finders return `None` when nothing matches; database
failures raise `StoreError`.

`footballsys.models` has the `User`, `Member` and `Train` dataclasses, each
with `to_dict()`, and `parse_user`, `parse_member` and `parse_train`, which
take bytes, a string or a mapping and raise `BindError` when the data does not
fit.

## What it does not do

- The package ships no templates or static files. `GET /index/login` needs an
  `admin/index.html` template under `templates/` in the working directory, and
  so does the 400 answer of `POST /index/login`.
- Logging in does not start a session: the application sets a session cookie
  name but no route reads or writes the session.
- Passwords are stored and compared as plain text.
- There is no way to update records or to list more than one at a time.