"""Command line entry point: fetch a page and print the parsed response."""

from __future__ import annotations

import argparse

from saba.client import HttpClient
from saba.errors import SabaError


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="saba", description="Fetch a page over HTTP and print the response."
    )
    parser.add_argument("--host", default="host.test", help="server host name")
    parser.add_argument("--port", type=int, default=8000, help="server port")
    parser.add_argument("--path", default="/test.html", help="path to request")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the command; return 0 on success and 1 on error."""
    args = _parser().parse_args(argv)
    try:
        response = HttpClient().get(args.host, args.port, args.path)
    except SabaError as exc:
        print(f"error: \n{exc!r}")
        return 1
    print(f"response: \n{response!r}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())