"""Splitting http and https URLs into their parts."""

from __future__ import annotations

import re
from dataclasses import dataclass

__all__ = ["ParsedUrl", "parse_url"]

_URL_RE = re.compile(
    r"(https?)://([^:/]+)(?::([0-9]+))?([^?]*)(?:\?(.*))?",
    re.ASCII,
)

_DEFAULT_PORTS = {"http": 80, "https": 443}


@dataclass(frozen=True)
class ParsedUrl:
    """The parts of a URL the client needs to make a request."""

    scheme: str
    host: str
    port: int
    path: str
    query: str


def parse_url(url: str) -> ParsedUrl:
    """Split ``url`` into scheme, host, port, path and query.

    Raises ValueError if the URL is not an http or https URL.
    """
    match = _URL_RE.fullmatch(url)
    if match is None:
        raise ValueError(f"Invalid URL format: {url}")
    scheme, host, port, path, query = match.groups()
    return ParsedUrl(
        scheme=scheme,
        host=host,
        port=int(port) if port is not None else _DEFAULT_PORTS[scheme],
        path=path if path is not None else "/",
        query=query if query is not None else "",
    )