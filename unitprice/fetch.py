"""Download a URL by running the curl command-line tool."""

from __future__ import annotations

import subprocess


class FetchError(RuntimeError):
    """Raised when a URL cannot be fetched."""


def fetch(url: str) -> str:
    """Return the body of ``url`` as fetched by ``curl -s``."""
    try:
        result = subprocess.run(
            ["curl", "-s", url], capture_output=True, check=False
        )
    except OSError as exc:
        raise FetchError(
            "Error: Failed to execute curl command, please make sure curl "
            "is installed and added to PATH"
        ) from exc

    body = result.stdout.decode("utf-8", errors="replace")
    if not body:
        raise FetchError(f'Error: Failed to fetch "{url}"')
    return body