"""Exception types raised by the HTTP client and low-level error codes."""

from __future__ import annotations

from enum import IntEnum
from typing import Union

__all__ = [
    "HttpException",
    "ConnectionException",
    "RequestException",
    "ResponseException",
    "ErrorCode",
    "get_error_message",
]


class HttpException(Exception):
    """Base class for every error raised by the HTTP client."""

    prefix = ""

    def __init__(self, message: str) -> None:
        full = self.prefix + message
        super().__init__(full)
        self.message = full

    def __str__(self) -> str:
        return self.message


class ConnectionException(HttpException):
    """Name resolution, socket creation or connecting failed."""

    prefix = "Connection error: "


class RequestException(HttpException):
    """Sending a request failed."""

    prefix = "Request error: "


class ResponseException(HttpException):
    """Receiving or parsing a response failed."""

    prefix = "Response error: "


class ErrorCode(IntEnum):
    """Low-level failure categories of the socket layer."""

    HOSTNAME_RESOLUTION = 0
    SOCKET_CREATION = 1
    SERVER_CONNECTION = 2
    SEND_HTTP_REQ = 3
    BUFF_OVERFLOW = 4
    RECEIVING_DATA = 5


_MESSAGES = {
    ErrorCode.HOSTNAME_RESOLUTION: "Error: Could not resolve hostname",
    ErrorCode.SOCKET_CREATION: "Error creating socket",
    ErrorCode.SERVER_CONNECTION: "Error connecting to server",
    ErrorCode.SEND_HTTP_REQ: "Error sending http request",
    ErrorCode.BUFF_OVERFLOW: "Buffer Overflowed",
    ErrorCode.RECEIVING_DATA: "Error Revieving data",
}

_UNKNOWN = "Unknown Error"


def get_error_message(code: Union[ErrorCode, int]) -> str:
    """Describe an error code; unknown codes give a generic message."""
    try:
        return _MESSAGES[ErrorCode(code)]
    except (ValueError, TypeError):
        return _UNKNOWN