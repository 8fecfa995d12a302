"""A minimal blocking HTTP/1.1 client."""

from __future__ import annotations

import socket

from saba.errors import NetworkError
from saba.http import HttpResponse, parse_response

_BUFFER_SIZE = 4096


def _build_request(host: str, path: str) -> bytes:
    lines = [
        f"GET /{path} HTTP/1.1",
        f"Host: {host}",
        "Accept: text/html",
        "Connection: close",
        "",
        "",
    ]
    return "\n".join(lines).encode()


class HttpClient:
    """Sends GET requests and parses what comes back."""

    def __init__(self, timeout: float | None = None) -> None:
        self.timeout = timeout

    def get(self, host: str, port: int, path: str) -> HttpResponse:
        """Fetch ``/path`` from ``host:port`` and return the parsed response."""
        try:
            addresses = socket.getaddrinfo(
                host, port, socket.AF_INET, socket.SOCK_STREAM
            )
        except (OSError, UnicodeError) as exc:
            raise NetworkError(f"Failed to find IP addresses: {exc!r}") from exc
        if not addresses:
            raise NetworkError("Failed to find IP addresses")

        ip = addresses[0][4][0]
        try:
            stream = socket.create_connection((ip, port), timeout=self.timeout)
        except OSError as exc:
            raise NetworkError("Failed to connect to TCP stream") from exc

        with stream:
            try:
                stream.sendall(_build_request(host, path))
            except OSError as exc:
                raise NetworkError("Failed to send a request to TCP stream") from exc

            try:
                received = b"".join(iter(lambda: stream.recv(_BUFFER_SIZE), b""))
            except OSError as exc:
                raise NetworkError(
                    "Failed to receive a request from TCP stream"
                ) from exc

        try:
            text = received.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise NetworkError(f"Invalid received response: {exc}") from exc
        return parse_response(text)