"""Parsing of raw HTTP/1.1 responses."""

from __future__ import annotations

import re
from dataclasses import dataclass

from saba.errors import NetworkError

_STATUS_CODE = re.compile(r"\+?[0-9]+")
_MAX_STATUS_CODE = 2**32 - 1
_FALLBACK_STATUS_CODE = 404


@dataclass(frozen=True)
class Header:
    """A single response header."""

    name: str
    value: str


@dataclass(frozen=True)
class HttpResponse:
    """A parsed HTTP response."""

    version: str
    status_code: int
    reason: str
    headers: tuple[Header, ...] = ()
    body: str = ""

    def header_value(self, name: str) -> str:
        """Return the value of the first header called ``name``."""
        for header in self.headers:
            if header.name == name:
                return header.value
        raise KeyError(f"failed to find {name} in headers")


def _parse_status_code(text: str) -> int:
    if _STATUS_CODE.fullmatch(text):
        code = int(text)
        if code <= _MAX_STATUS_CODE:
            return code
    return _FALLBACK_STATUS_CODE


def _parse_header(line: str) -> Header:
    name, colon, value = line.partition(":")
    if not colon:
        raise NetworkError(f"Invalid http header: {line}")
    return Header(name.strip(), value.strip())


def parse_response(raw_response: str) -> HttpResponse:
    """Parse the text of an HTTP response into an :class:`HttpResponse`."""
    text = raw_response.lstrip().replace("\r\n", "\n")

    status_line, newline, remaining = text.partition("\n")
    if not newline:
        raise NetworkError(f"Invalid http response: {text}")

    head, blank_line, body = remaining.partition("\n\n")
    if blank_line:
        headers = tuple(_parse_header(line) for line in head.split("\n"))
    else:
        headers = ()
        body = remaining

    statuses = status_line.split(" ")
    if len(statuses) < 3:
        raise NetworkError(f"Invalid status line: {status_line}")

    return HttpResponse(
        version=statuses[0],
        status_code=_parse_status_code(statuses[1]),
        reason=statuses[2],
        headers=headers,
        body=body,
    )