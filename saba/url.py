"""Parsing of plain ``http://`` URLs."""

from __future__ import annotations

from dataclasses import dataclass

from saba.errors import UnexpectedInputError

_SCHEME = "http://"
_DEFAULT_PORT = "80"


@dataclass
class Url:
    """A URL split into host, port, path and search part."""

    url: str
    host: str = ""
    port: str = ""
    path: str = ""
    searchpart: str = ""

    def _without_scheme(self) -> str:
        rest = self.url
        while rest.startswith(_SCHEME):
            rest = rest[len(_SCHEME):]
        return rest

    def parse(self) -> Url:
        """Fill in the URL's parts and return it."""
        if _SCHEME not in self.url:
            raise UnexpectedInputError("Only HTTP scheme is supported.")

        authority, slash, rest = self._without_scheme().partition("/")
        host, colon, port = authority.partition(":")
        self.host = host
        self.port = port if colon else _DEFAULT_PORT

        if slash:
            path, _, searchpart = rest.partition("?")
        else:
            path, searchpart = "", ""
        self.path = path
        self.searchpart = searchpart
        return self