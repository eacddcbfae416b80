"""Download the latest rates JSON into the local cache file."""

from __future__ import annotations

import os
from pathlib import Path
from typing import BinaryIO

import requests

from fx_convert.config import DEFAULT_RATES_URL
from fx_convert.errors import DownloadError
from fx_convert.utils.logger import get_logger

LOGGER = get_logger(__name__)


class RatesFetcher:
    """Single-shot streaming downloader for the rates feed.

    The response body is written verbatim as it arrives; neither the HTTP
    status nor the payload is validated here (the loader rejects bodies that
    are not rate JSON). There is no retry. The destination is truncated before
    the request is sent; when the transfer fails its modification time is reset
    to the epoch so the next run downloads again.
    """

    def __init__(
        self,
        url: str = DEFAULT_RATES_URL,
        *,
        session: requests.Session | None = None,
        timeout: float | None = None,
        chunk_size: int = 8192,
    ) -> None:
        self.url = url
        self.session = session or requests.Session()
        self.timeout = timeout
        self.chunk_size = chunk_size

    def refresh(self, destination: str | Path) -> Path:
        """Overwrite ``destination`` with the current rates payload."""

        path = Path(destination)
        try:
            handle = open(path, "wb")
        except OSError as exc:
            raise DownloadError(f"Couldn't create {path} (error: {exc}).") from exc

        LOGGER.info("Downloading rates from %s", self.url)
        try:
            with handle:
                written = self._stream_into(handle, path)
        except DownloadError:
            self._mark_stale(path)
            raise

        LOGGER.info("Saved %s bytes of rates → %s", written, path)
        return path

    def _stream_into(self, handle: BinaryIO, path: Path) -> int:
        try:
            response = self.session.get(self.url, stream=True, timeout=self.timeout)
        except requests.RequestException as exc:
            raise DownloadError(f"Error while download: {exc}") from exc
        written = 0
        try:
            if not 200 <= response.status_code < 300:
                LOGGER.warning("%s responded with HTTP %s", self.url, response.status_code)
            for chunk in response.iter_content(chunk_size=self.chunk_size):
                if chunk:
                    handle.write(chunk)
                    written += len(chunk)
        except requests.RequestException as exc:
            raise DownloadError(f"Error while download: {exc}") from exc
        except OSError as exc:
            raise DownloadError(f"Couldn't write {path} (error: {exc}).") from exc
        finally:
            response.close()
        return written

    @staticmethod
    def _mark_stale(path: Path) -> None:
        # The file is already truncated; an epoch mtime makes the next run
        # download again instead of loading an empty or partial body.
        try:
            os.utime(path, (0, 0))
        except OSError as exc:
            LOGGER.warning("Couldn't reset modification time of %s (error: %s).", path, exc)


__all__ = ["RatesFetcher"]
