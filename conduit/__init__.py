"""HTTP/1.1 client over plain sockets with its own JSON parser, serializer and URL splitting."""

__version__ = "1.0.0"
__all__ = ["errors", "http", "json", "url"]