# styx

Building blocks for a small HTTP/1.1 server that serves files from a
`static` directory: loading and validating a JSON configuration,
fixed-size message buffers, connection state, MIME type lookup, reading
static files and building and sending responses, with an HTML page for
every error status.

## Configuration

The configuration is a JSON object. Every key is required:

```json
{
    "port": 8080,
    "ip": "127.0.0.1",
    "recv_header_sz": 8192,
    "recv_body_sz": 2048,
    "resp_header_sz": 16384,
    "resp_body_sz": 4194304,
    "timeout_s": 1,
    "max_clients": 10
}
```

Rules enforced while loading:

- numbers must be whole (`8080.0` is accepted, `80.5` is not);
- `port` must lie between 1 and 65535;
- `max_clients` must be greater than zero and at most 100;
- `ip` must be a string and is cut to its first 15 characters;
- unknown keys, values of the wrong type and empty objects are rejected;
- a key given twice produces a warning and the last value wins.

Any violation raises `styx.config.ConfigError`, a subclass of
`styx.errlog.ServerError`. `load_config` also raises it when the file
cannot be opened, is empty or is not valid JSON.

```python
from styx.config import load_config, parse_config

config = load_config("serverconfig.json")
print(config.port, config.addr, config.max_clients)

config = parse_config(open("serverconfig.json").read())
```

The result is a `ServerConfig` dataclass with the fields `port`, `addr`,
`recv_header_sz`, `recv_body_sz`, `resp_header_sz`, `resp_body_sz`,
`timeout_s` and `max_clients`.

## Buffers

`styx.buffers.setup_buffers(config)` returns a `MessageBuffers` with a
`recv` and a `resp` `Message`, each holding a `head` and a `body`
`Buffer`. Each buffer is one byte larger than the configured size and
holds no payload until allocated.

```python
from styx.buffers import setup_buffers

bufs = setup_buffers(config)
bufs.allocate()              # zeroed payloads; raises ServerError on a size <= 0
bufs.resp.head.append("HTTP/1.1 200 Ok\r\n")   # False, with a warning, if it does not fit
bufs.clear()                 # zero everything for the next request
bufs.release()               # drop the payloads
```

## Requests and connection state

`styx.headers.HeaderData` holds a request's `method`, `path`, `version`
and a list of `(name, value)` header pairs. `lookup(key)` returns the
value of the first header with that name, compared case-insensitively,
or `None`. `describe(data)` returns a readable dump of a `HeaderData`
(or `"NULL\n"` for `None`).

`styx.state.ConnectionState` tracks `timeout`, `keep_alive`,
`max_requests`, `current_request` and the current `code`, a
`styx.state.Status` value (`OK`, `NOT_FOUND`, `BAD_REQUEST`, and so on,
plus `CLOSE` and `NOT_PROCESSED`). `next_request()` uses up one request
and resets the code to `NOT_PROCESSED`.

## Responses

```python
from styx.response import get_mime_type, error_page

get_mime_type("/app/main.js")   # "text/javascript"
get_mime_type("/")              # "text/html"
get_mime_type("/README")        # "application/octet-stream"
print(error_page(404))          # the HTML page sent with a 404 response
```

`read_static_file(body, path, static_dir="static")` loads a file below
the static directory into a body buffer and returns a `Status`: `/` is
served from `index.html`, falling back to `index.htm`; a missing file
gives `NOT_FOUND`, an empty one `INTERNAL_SERVER_ERROR`, and one that
does not fit in the buffer `INSUFFICIENT_STORAGE`.

`build_response(bufs, request_data, state, static_dir="static")` fills
the response buffers. When the state is `NOT_PROCESSED` it reads the
requested file and sets `state.code` from the result. A `200 Ok`
response carries `Content-Type` and `Content-Length`, and on the first
request of a kept-alive connection also `Connection: Keep-Alive` and
`Keep-Alive: timeout=..., max=...`; a `HEAD` request gets no body. Any
other status gets its status line and the HTML error page. It returns
`False` if something did not fit in a buffer.

`send_response(sock, message)` sends the head and then the body of a
`Message` over a socket and returns whether that succeeded.
`response(sock, bufs, request_data, state, static_dir="static")` builds
and sends in one step, warning if the send fails.

## Errors and warnings

Fatal problems raise `styx.errlog.ServerError`. Recoverable ones are
printed to standard output by `warning(message)` with a coloured
`WARNING:` label; `format_error` and `format_warning` return a message
with the error or warning label in front.

## What this package does not do

There is no command to run and no server loop. The package does not
create, bind or listen on sockets, accept connections, read from them,
or turn raw request text into a `HeaderData`: the caller does all of
that and hands an open socket and a filled-in `HeaderData` to
`response`.

## Tests

```sh
pip install -e ".[test]"
pytest
```