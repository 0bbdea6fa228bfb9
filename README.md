# conduit

A small HTTP/1.1 client that talks to servers over plain TCP sockets. It comes
with its own JSON parser and serializer and needs nothing beyond the standard
library.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Making requests

```python
from conduit.http import HttpClient

client = HttpClient()
response = client.get("http://example.com/posts/1")

print(response.status_code)
print(response.content_type())   # "" when there is no Content-Type header
print(response.body)
print(response.get_header("Server"))

if response.json is not None and response.json.is_object():
    print(response.json.get_string("title"))
    print(response.json.get_int("userId"))
```

`HttpClient.get`, `HttpClient.post` and `HttpClient.post_json` each take a full
URL and open a connection for that one request. `get` sends the URL's query
string. `post` and `post_json` send only the path. `post` takes a body
(`str` or `bytes`) and a content type, which defaults to `application/json`.

To send several requests over one connection, use `HttpClient.connect(hostname, port=80)`.
A `Connection` is a context manager. Its `close()` method closes the socket, and
after that any request raises `ConnectionException`. The `connected` property
tells you whether the socket is still open.

```python
from conduit.http import HttpClient
from conduit.json import JsonValue

client = HttpClient()
body = JsonValue({"title": "Hello", "userId": 1.0})

with client.connect("example.com", 80) as connection:
    first = connection.get("/posts/1")
    created = connection.post_json("/posts", body)
    print(first.status_code, created.status_code)
```

If a response's `Content-Type` contains `application/json`, the body is parsed
and the result is put in `response.json`. Otherwise, or if the body does not
parse, `response.json` is `None`. Header lookups with `get_header` are exact
and case-sensitive.

A request is read until `Content-Length` bytes of body have arrived, or until
the server closes the connection. The body is decoded as UTF-8, and any
undecodable bytes are replaced.

You can also use the request and response formatting on their own.
`build_http_request(method, path, hostname, body, headers)` returns the request
bytes: the request line, then `Host`, then the given headers sorted by name,
then `Content-Length` when the body is not empty. `parse_http_response(data)`
turns raw response bytes into a `Response`.

## Configuration

`ClientConfig` holds the socket timeout in seconds (30 by default) and the
headers sent with every request (by default `User-Agent: Conduit/1.0`).
A header passed to a single request is sent only when it is not already among
the default headers. If the two share a name, the default header's value is used.

```python
from conduit.http import ClientConfig, HttpClient

config = ClientConfig(timeout=10)
config.default_headers["Accept"] = "application/json"
client = HttpClient(config)
```

`ClientConfig` also has `verify_ssl` and `user_agent` fields. The client does
not read them.

## JSON

```python
from conduit.json import JsonValue, parse_json, serialize_json

value = parse_json('{"name": "Test User", "age": 25, "active": true}')
value.get_string("name")   # "Test User"
value.get_int("age")       # 25
value.get_bool("active")   # True
value.get_number("age")    # 25.0
value.to_python()          # plain dicts, lists, strings, floats, bools and None

serialize_json(JsonValue({"b": 1.0, "a": "x"}))  # '{"a":"x","b":1}'
```

- **Parsing.** `parse_json` returns `None` when the input is empty or not valid JSON.
- **Getters.** The `get_*` methods return `None` when the value is not an object, when the key is missing, or when the member has a different type. `get_int` truncates toward zero.
- **Values.** A `JsonValue` can be built from plain Python data: `None`, bools, numbers, strings, lists, tuples and mappings with string keys. Numbers are stored as floats. `type` gives a `JsonType` member. The `is_null`, `is_bool`, `is_number`, `is_string`, `is_array` and `is_object` methods test for each kind.
- **Serializing.** Object keys are written in sorted order. Numbers with an integral value are written without a fraction. Any other number is written with six decimal places.

## URLs

```python
from conduit.url import parse_url

parsed = parse_url("http://example.com:8080/path?query=value")
parsed.scheme, parsed.host, parsed.port, parsed.path, parsed.query
# ('http', 'example.com', 8080, '/path', 'query=value')
```

If the URL gives no port, it defaults to 80 for `http` and 443 for `https`.
`parse_url` raises `ValueError` for anything that is not an `http` or `https` URL.

## Errors

Network failures raise subclasses of `conduit.errors.HttpException`:

- `ConnectionException` when a hostname cannot be resolved, a socket cannot be
  created or connected, or a request is made on a closed connection.
- `RequestException` when a request cannot be sent.
- `ResponseException` when a response cannot be received or is malformed.

`conduit.errors` also has an `ErrorCode` enum of low-level failure categories.
`get_error_message(code)` returns a description for a code, or
`"Unknown Error"` for a code it does not know.

## What it does not do

- It has no TLS. `https` URLs are parsed, but requests always go over plain
  TCP, so sending to port 443 will not work against a real HTTPS server.
- It does not decode chunked transfer encoding.
- It does not follow redirects.
- It does not decompress response bodies.
- It has no command-line interface.