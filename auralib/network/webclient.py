"""A small HTTP client for probing sites, fetching JSON and downloading files."""

from __future__ import annotations

import http.client
import os
import urllib.error
import urllib.request
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO

__all__ = ["WebClient", "ProgressFunction"]

ProgressFunction = Callable[[int, int, int, int], object]
"""Called as (download_total, download_now, upload_total, upload_now).

A truthy return value aborts the transfer.
"""

_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64; rv:109.0) Gecko/20100101 Firefox/120.0"
)
_CHUNK_SIZE = 64 * 1024
_NETWORK_ERRORS = (urllib.error.URLError, http.client.HTTPException, OSError, ValueError)


class _TransferAborted(Exception):
    """Raised when a progress function asks to stop a transfer."""


def _copy(response: BinaryIO, out: BinaryIO, progress: ProgressFunction | None) -> None:
    headers = getattr(response, "headers", None)
    length = headers.get("Content-Length") if headers is not None else None
    total = int(length) if length and length.isdigit() else 0
    received = 0
    while chunk := response.read(_CHUNK_SIZE):
        out.write(chunk)
        received += len(chunk)
        if progress is not None and progress(total, received, 0, 0):
            raise _TransferAborted


class WebClient:
    """Performs simple HTTP requests, following redirects.

    As with a plain transfer, any answer from the server counts as success,
    whatever its status code; only failures to connect or transfer do not.
    """

    def __init__(self, timeout: float | None = None) -> None:
        self._timeout = timeout

    @contextmanager
    def _open(self, request: urllib.request.Request) -> Iterator[BinaryIO]:
        try:
            if self._timeout is None:
                response = urllib.request.urlopen(request)
            else:
                response = urllib.request.urlopen(request, timeout=self._timeout)
        except urllib.error.HTTPError as error:
            response = error
        with response:
            yield response

    def get_website_exists(self, url: str) -> bool:
        """Whether a server answers a HEAD request for url."""
        if not url:
            return False
        request = urllib.request.Request(url, method="HEAD")
        try:
            with self._open(request):
                return True
        except _NETWORK_ERRORS:
            return False

    def fetch_json(self, url: str) -> str:
        """The body returned for url as text, or an empty string on failure."""
        if not url:
            return ""
        request = urllib.request.Request(
            url,
            headers={"User-Agent": _USER_AGENT, "Content-Type": "application/json"},
        )
        try:
            with self._open(request) as response:
                body = response.read()
        except _NETWORK_ERRORS:
            return ""
        return body.decode("utf-8", errors="replace")

    def download_file(
        self,
        url: str,
        path: str | os.PathLike[str],
        progress: ProgressFunction | None = None,
        overwrite: bool = True,
    ) -> bool:
        """Save the body returned for url to path.

        Returns False when url is empty, when path exists and overwrite is
        False, when the transfer fails, or when progress aborts it.
        """
        if not url:
            return False
        target = Path(path)
        if target.exists() and not overwrite:
            return False
        request = urllib.request.Request(url)
        with target.open("wb") as out:
            try:
                with self._open(request) as response:
                    _copy(response, out, progress)
            except _TransferAborted:
                return False
            except _NETWORK_ERRORS:
                return False
        return True