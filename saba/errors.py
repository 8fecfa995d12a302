"""Error types raised by the saba browser core."""


class SabaError(Exception):
    """Base class for every error saba raises."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SabaError):
            return NotImplemented
        return type(self) is type(other) and self.message == other.message

    def __hash__(self) -> int:
        return hash((type(self), self.message))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"


class NetworkError(SabaError):
    """A failure while talking to, or understanding, a remote server."""


class UnexpectedInputError(SabaError):
    """Input that does not have the expected shape."""


class InvalidUIError(SabaError):
    """A problem in the user interface layer."""


class OtherError(SabaError):
    """Any other failure."""