"""Input document retrieval from local paths and http(s) URLs."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator
from pathlib import Path
from typing import Protocol
from urllib.parse import urlparse

import requests

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 30


class InputError(Exception):
    """Raised when an input document cannot be read or parsed."""

    def __init__(self, identifier: str, reason: str) -> None:
        super().__init__(f"Error reading input {identifier}: {reason}")
        self.identifier = identifier
        self.reason = reason


class HttpSession(Protocol):
    """Subset of `requests.Session` used for downloads."""

    def get(self, url: str, *, timeout: float) -> requests.Response:
        """Issue a GET request."""


def is_url(identifier: str) -> bool:
    """Return True when the identifier is an http(s) URL."""
    return urlparse(identifier).scheme in ("http", "https")


def fetch_input(
    identifier: str,
    *,
    session: HttpSession | None = None,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
) -> bytes:
    """Return the raw bytes of one input document.

    Raises:
      InputError: If the file cannot be read or the download fails.
    """
    if is_url(identifier):
        return _download(identifier, session=session, timeout=timeout)
    path = Path(identifier)
    logger.debug("Reading input file %s", path)
    try:
        return path.read_bytes()
    except OSError as exc:
        raise InputError(identifier, exc.strerror or str(exc)) from exc


def load_inputs(
    identifiers: Iterable[str],
    *,
    fetch: Callable[[str], bytes] | None = None,
    session: HttpSession | None = None,
) -> Iterator[tuple[str, bytes]]:
    """Yield `(identifier, content)` pairs in input order.

    `fetch` replaces `fetch_input` for every identifier; `session` is only used by the default.
    """
    for identifier in identifiers:
        if fetch is None:
            yield identifier, fetch_input(identifier, session=session)
        else:
            yield identifier, fetch(identifier)


def _download(url: str, *, session: HttpSession | None, timeout: float) -> bytes:
    logger.debug("Downloading input %s", url)
    client = session or requests
    try:
        response = client.get(url, timeout=timeout)
        # Raises an HTTPError if the response status code is 4XX/5XX
        response.raise_for_status()
    except requests.RequestException as exc:
        raise InputError(url, f"failed to download file: {exc}") from exc
    return response.content
