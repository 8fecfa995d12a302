# saba

`saba` is a small HTTP/1.1 client. It is the networking core of a toy web
browser. It has these parts:

- `saba.url.Url` splits an `http://` URL into host, port, path and search part.
- `saba.http.parse_response` turns the text of an HTTP response into an
  `HttpResponse`. The response holds the version, status code, reason, headers
  and body.
- `saba.client.HttpClient` sends a plain `GET` request over TCP and parses the
  reply.
- `saba.cli.main` is the `saba` command.

Errors are raised as subclasses of `saba.errors.SabaError`: `NetworkError`,
`UnexpectedInputError`, `InvalidUIError` and `OtherError`. Two errors are
equal when they have the same class and the same message.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Parsing URLs

```python
from saba.url import Url

url = Url("http://example.com:8080/index.html?a=1&b=2").parse()
print(url.host)        # example.com
print(url.port)        # 8080
print(url.path)        # index.html
print(url.searchpart)  # a=1&b=2
```

`Url.parse` fills in the fields of the `Url` and returns the same object. A URL
that does not contain `http://` raises `UnexpectedInputError` with the message
`Only HTTP scheme is supported.`. If the URL gives no port, the port is `"80"`.
The port is kept as a string. The path does not include its leading `/`.

## Parsing responses

```python
from saba.http import parse_response

res = parse_response("HTTP/1.1 200 OK\nDate: xx xx xx\n\nbody message")
print(res.version, res.status_code, res.reason)  # HTTP/1.1 200 OK
print(res.header_value("Date"))                  # xx xx xx
print(res.body)                                  # body message
```

- Leading whitespace is dropped, and both `\r\n` and `\n` line endings are
  accepted.
- Headers are read only when a blank line ends them. Without a blank line,
  everything after the status line is the body.
- A status code that is not a number falls back to `404`.
- `HttpResponse.headers` is a tuple of `Header(name, value)`. Names and values
  are stripped of surrounding whitespace.
- `header_value(name)` returns the first header with exactly that name. It
  raises `KeyError` if there is none.

`parse_response` raises `NetworkError` in these cases: the input has no line
break, the status line has fewer than three space-separated parts, or a header
line has no `:`.

## Fetching a page

```python
from saba.client import HttpClient

response = HttpClient().get("example.com", 80, "index.html")
print(response.status_code)
print(response.body)
```

`get(host, port, path)` resolves `host` to an IPv4 address and connects to it.
It sends `GET /<path> HTTP/1.1` with `Host`, `Accept: text/html` and
`Connection: close` headers. It reads until the server closes the connection,
then decodes the reply as UTF-8 and parses it. `HttpClient(timeout=...)` sets
the socket timeout in seconds. The default is no timeout. A failure in any of
these steps raises `NetworkError`.

## Command line

The package installs a `saba` command. It fetches a page and prints the parsed
response, or the error if the fetch failed:

```
saba
saba --host example.com --port 80 --path index.html
```

The options default to `--host host.test`, `--port 8000` and
`--path /test.html`. The command exits with status 0 on success and 1 on error.

## What it does not do

`saba` only fetches and parses. It does not parse or render HTML, and it has no
browser window. It speaks plain `http://` only, with no TLS. It does not follow
redirects, and it does not decode chunked or compressed bodies.