"""HTTP/1.1 client over plain TCP sockets with persistent connections."""

from __future__ import annotations

import re
import socket
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import Any, Optional, Union

from .errors import ConnectionException, RequestException, ResponseException
from .json import JsonValue, parse_json, serialize_json
from .url import parse_url

__all__ = [
    "Response",
    "ClientConfig",
    "Connection",
    "HttpClient",
    "build_http_request",
    "parse_http_response",
]

_BUFFER_SIZE = 4096
_HEADER_END = b"\r\n\r\n"
_CONTENT_LENGTH = b"Content-Length: "
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _default_headers() -> dict[str, str]:
    return {"User-Agent": "Conduit/1.0"}


@dataclass
class ClientConfig:
    """Settings shared by every connection a client opens."""

    timeout: float = 30.0
    default_headers: dict[str, str] = field(default_factory=_default_headers)
    verify_ssl: bool = True
    user_agent: Optional[str] = None


class Response:
    """A received HTTP response; ``json`` is set for JSON content types."""

    def __init__(self, status_code: int, body: str, headers: Mapping[str, str]) -> None:
        self.status_code = status_code
        self.body = body
        self.headers = dict(headers)
        self.json: Optional[JsonValue] = None
        content_type = self.get_header("Content-Type")
        if content_type is not None and "application/json" in content_type:
            self.json = parse_json(body)

    def get_header(self, name: str) -> Optional[str]:
        """The value of header ``name`` (exact, case-sensitive match) or None."""
        return self.headers.get(name)

    def content_type(self) -> str:
        """The Content-Type header, or an empty string when absent."""
        return self.headers.get("Content-Type", "")

    def __repr__(self) -> str:
        return f"Response(status_code={self.status_code!r}, headers={self.headers!r})"


def _leading_int(text: str, what: str) -> int:
    match = _LEADING_INT.match(text)
    if match is None:
        raise ResponseException(f"Invalid {what}")
    return int(match.group(1))


def build_http_request(
    method: str,
    path: str,
    hostname: str,
    body: Union[str, bytes],
    headers: Mapping[str, str],
) -> bytes:
    """Render a request; headers go out sorted by name after Host."""
    payload = body.encode("utf-8") if isinstance(body, str) else bytes(body)
    lines = [f"{method} {path} HTTP/1.1", f"Host: {hostname}"]
    lines.extend(f"{name}: {headers[name]}" for name in sorted(headers))
    if payload:
        lines.append(f"Content-Length: {len(payload)}")
    head = "\r\n".join(lines) + "\r\n\r\n"
    return head.encode("utf-8") + payload


def parse_http_response(data: Union[bytes, str]) -> Response:
    """Split raw response bytes into status code, headers and body."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    header_end = data.find(_HEADER_END)
    if header_end == -1:
        raise ResponseException("Invalid HTTP response format")

    head = data[:header_end].decode("latin-1")
    body = data[header_end + len(_HEADER_END):].decode("utf-8", errors="replace")

    first_line_end = head.find("\r\n")
    if first_line_end == -1:
        raise ResponseException("Invalid HTTP status line")
    status_line = head[:first_line_end]

    first_space = status_line.find(" ")
    if first_space == -1:
        raise ResponseException("Invalid HTTP status line format")
    second_space = status_line.find(" ", first_space + 1)
    if second_space == -1:
        raise ResponseException("Invalid HTTP status line format")
    status_code = _leading_int(status_line[first_space + 1:second_space], "HTTP status code")

    headers: dict[str, str] = {}
    for line in head[first_line_end + 2:].split("\n"):
        name, sep, value = line.removesuffix("\r").partition(":")
        if sep:
            headers[name] = value.strip(" \t")
    return Response(status_code, body, headers)


def _receive(sock: socket.socket) -> bytes:
    data = bytearray()
    content_length = -1
    body_start: Optional[int] = None
    while True:
        try:
            chunk = sock.recv(_BUFFER_SIZE)
        except OSError as exc:
            raise ResponseException("Failed to receive response data") from exc
        if not chunk:
            break
        data += chunk

        if body_start is None:
            header_end = data.find(_HEADER_END)
            if header_end != -1:
                body_start = header_end + len(_HEADER_END)
                position = data.find(_CONTENT_LENGTH, 0, header_end)
                if position != -1:
                    start = position + len(_CONTENT_LENGTH)
                    end = data.find(b"\r\n", start)
                    if end != -1:
                        content_length = _leading_int(
                            data[start:end].decode("latin-1"), "Content-Length"
                        )

        if body_start is not None and content_length >= 0:
            if len(data) - body_start >= content_length:
                break
    return bytes(data)


class Connection:
    """A persistent connection to one server; close it when done."""

    def __init__(
        self, hostname: str, port: int = 80, config: Optional[ClientConfig] = None
    ) -> None:
        self.hostname = hostname
        self.port = port
        base = config if config is not None else ClientConfig()
        self.config = replace(base, default_headers=dict(base.default_headers))
        self._sock: Optional[socket.socket] = None
        self._connect()

    @property
    def connected(self) -> bool:
        return self._sock is not None

    def _connect(self) -> None:
        if self._sock is not None:
            return
        try:
            address = socket.gethostbyname(self.hostname)
        except (OSError, UnicodeError) as exc:
            raise ConnectionException(
                f"Hostname resolution failed for: {self.hostname}"
            ) from exc
        try:
            sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        except OSError as exc:
            raise ConnectionException("Socket creation failed") from exc
        try:
            sock.connect((address, self.port))
        except (OSError, OverflowError) as exc:
            sock.close()
            raise ConnectionException(
                f"Connection failed to {self.hostname}:{self.port}"
            ) from exc
        try:
            sock.settimeout(self.config.timeout)
        except (OSError, ValueError) as exc:
            sock.close()
            raise ConnectionException("Failed to set receive timeout") from exc
        self._sock = sock

    def close(self) -> None:
        """Close the socket; further requests raise ConnectionException."""
        if self._sock is not None:
            self._sock.close()
            self._sock = None

    def __enter__(self) -> "Connection":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def get(self, path: str, headers: Optional[Mapping[str, str]] = None) -> Response:
        return self._send_request("GET", path, "", headers or {})

    def post(
        self,
        path: str,
        body: Union[str, bytes],
        content_type: str = "application/json",
        headers: Optional[Mapping[str, str]] = None,
    ) -> Response:
        merged = dict(headers or {})
        merged["Content-Type"] = content_type
        return self._send_request("POST", path, body, merged)

    def post_json(
        self, path: str, json: JsonValue, headers: Optional[Mapping[str, str]] = None
    ) -> Response:
        return self.post(path, serialize_json(json), "application/json", headers)

    def _send_request(
        self,
        method: str,
        path: str,
        body: Union[str, bytes],
        headers: Mapping[str, str],
    ) -> Response:
        if self._sock is None:
            raise ConnectionException("Not connected to server")
        merged = dict(self.config.default_headers)
        for name, value in headers.items():
            merged.setdefault(name, value)
        request = build_http_request(method, path, self.hostname, body, merged)
        try:
            self._sock.sendall(request)
        except OSError as exc:
            raise RequestException("Failed to send data") from exc
        return parse_http_response(_receive(self._sock))


class HttpClient:
    """Makes one-off requests by URL and opens persistent connections."""

    def __init__(self, config: Optional[ClientConfig] = None) -> None:
        self.config = config if config is not None else ClientConfig()

    def connect(self, hostname: str, port: int = 80) -> Connection:
        return Connection(hostname, port, self.config)

    def get(self, url: str, headers: Optional[Mapping[str, str]] = None) -> Response:
        parsed = parse_url(url)
        target = parsed.path + (f"?{parsed.query}" if parsed.query else "")
        with self.connect(parsed.host, parsed.port) as connection:
            return connection.get(target, headers)

    def post(
        self,
        url: str,
        body: Union[str, bytes],
        content_type: str = "application/json",
        headers: Optional[Mapping[str, str]] = None,
    ) -> Response:
        parsed = parse_url(url)
        with self.connect(parsed.host, parsed.port) as connection:
            return connection.post(parsed.path, body, content_type, headers)

    def post_json(
        self, url: str, json: JsonValue, headers: Optional[Mapping[str, str]] = None
    ) -> Response:
        parsed = parse_url(url)
        with self.connect(parsed.host, parsed.port) as connection:
            return connection.post_json(parsed.path, json, headers)