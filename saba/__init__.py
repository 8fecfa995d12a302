"""A small HTTP/1.1 client with URL and response parsing, and a fetch command."""

__version__ = "0.1.0"

__all__ = ["__version__"]