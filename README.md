# tinyservers

Two small network servers with no dependencies outside the standard library:

* **A static-file HTTP server** (`tinyservers-http`) that listens on
  `127.0.0.1:8080` and answers `GET` requests with files from a public
  directory.
* **A toy Redis-like server** (`tinyservers-redis`) that listens on
  `127.0.0.1:6379` and answers `PING`, `SET` (with optional `PX` expiry) and
  `GET`, echoing anything else back.

## Installation

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## The HTTP server

```
tinyservers-http
```

Files are served from the directory named by the `PUBLIC_PATH` environment
variable. When it is not set, the directory `public` inside the installed
`tinyservers` package is used; the package does not ship such a directory, so
set `PUBLIC_PATH` to serve anything:

```
PUBLIC_PATH=/srv/site tinyservers-http
```

The command takes no options besides `--help`.

Routing:

| Request        | Response                                          |
|----------------|---------------------------------------------------|
| `GET /`        | `200` with the contents of `index.html`           |
| `GET /hello`   | `200` with the contents of `hello.html`           |
| `GET /<path>`  | `200` with the file at `<path>`, or `404 Not Found` |
| other methods  | `404 Not Found`                                   |
| malformed      | `400 Bad Request`                                 |

For `/` and `/hello` the status is `200` even when the file is missing; the
body is then empty. Only `HTTP/1.1` request lines with the methods `GET`,
`POST`, `PUT` or `DELETE` are accepted. Paths that resolve outside the public
directory are refused.

### Limits

* Connections are served one at a time. Each connection gets one response
  and is then closed; only the first 1024 bytes of a request are read.
* Only the request line is parsed; headers and bodies are ignored.
* Responses carry a status line and a body, with no headers.

### Using the pieces from Python

```python
from tinyservers.request import parse_request
from tinyservers.response import Response
from tinyservers.status import StatusCode

request = parse_request(b"GET /search?name=abc&sort=1 HTTP/1.1\r\n")
request.path                 # "/search"
request.method               # Method.GET
request.query.get("name")    # "abc"

Response(StatusCode.OK, "hi").to_bytes()
# b"HTTP/1.1 200 ok\r\n\r\nhi"
```

`parse_request` raises `tinyservers.request.ParseError` for input that is not
UTF-8, lacks a method, path or protocol, uses a protocol other than
`HTTP/1.1`, or names an unknown method. A query key that appears more than once
maps to a list of its values (`tinyservers.query_string.parse_query_string`).

A custom handler subclasses `tinyservers.http_server.Handler`, overrides
`handle_request` (and optionally `handle_bad_request`), and is passed to
`Server("127.0.0.1:8080").run(handler)`. `tinyservers.website_handler.WebsiteHandler`
is the handler the command uses.

## The Redis-like server

```
tinyservers-redis
```

The command takes no options besides `--help`. Each connection is served
concurrently and keeps its own key/value store, which is lost when the
connection closes.

Commands are recognised loosely from RESP arrays sent as single chunks:

* a chunk containing `ping` gets `+PONG\r\n`;
* a chunk containing `set` stores the key and value and gets `+OK\r\n`; if it
  also contains `px`, the value expires after the given number of
  milliseconds;
* a chunk containing `get` gets `+<value>`, or `$-1` when the key is missing
  or expired (these two replies have no trailing `\r\n`);
* any other chunk gets `+` followed by its second-to-last line.

A malformed `SET` or `GET` closes the connection. For example:

```
printf '*1\r\n$4\r\nping\r\n' | nc 127.0.0.1 6379
```

`tinyservers.redis_server.RedisSession.handle` answers one chunk and can be
used without a network connection.

### What it does not do

This is not a Redis implementation: it has no shared or persistent store, no
other commands, no proper RESP parsing and no framing across reads, so
standard Redis clients may not work with it.