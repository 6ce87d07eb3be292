"""Client entry point and shared helpers."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

import requests

from tcpclient.paths import ApiPaths, paths_from_env


def get_client() -> requests.Session:
    """Return a fresh HTTP session."""
    return requests.Session()


def get_path() -> ApiPaths:
    """Return API paths configured from the environment."""
    return paths_from_env()


def _parser() -> argparse.ArgumentParser:
    return argparse.ArgumentParser(
        prog="tcpclient",
        description="Client for the sensor session API.",
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse the command line and announce the client start."""
    _parser().parse_args(argv)
    print("Starting client...")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())