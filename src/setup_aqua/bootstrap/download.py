"""Secure download utilities with SSL certificate handling.

Downloads use certifi's CA bundle so that standalone interpreters on macOS
and minimal CI images verify TLS the same way. Integrity does not rely on
TLS alone: every archive is checked against a pinned SHA-256 digest before
anything reads its contents.
"""

from __future__ import annotations

import hashlib
import shutil
import ssl
from pathlib import Path
from typing import Optional
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

import certifi

from setup_aqua import __version__
from setup_aqua.bootstrap.errors import ChecksumMismatchError, DownloadFailedError
from setup_aqua.core.logging import get_logger

LOGGER = get_logger(__name__)

# Read size used for both streaming the download and hashing the file
CHUNK_SIZE = 1024 * 1024

DEFAULT_TIMEOUT = 300.0


def get_ssl_context() -> ssl.SSLContext:
    """Get an SSL context that uses certifi's CA bundle.

    Returns:
        An SSL context configured with certifi's CA certificates.
    """
    return ssl.create_default_context(cafile=certifi.where())


def secure_urlopen(url: str, timeout: Optional[float] = DEFAULT_TIMEOUT):
    """Open a URL with proper SSL certificate verification.

    Args:
        url: The URL to open.
        timeout: Socket timeout in seconds.

    Returns:
        A file-like object for reading the response.

    Raises:
        URLError: If the URL cannot be opened.
        ValueError: If the URL is not HTTPS.
    """
    if not url.startswith("https://"):
        raise ValueError(f"Only HTTPS URLs are supported: {url}")

    request = Request(url, headers={"User-Agent": f"setup-aqua/{__version__}"})
    return urlopen(request, timeout=timeout, context=get_ssl_context())  # nosec B310


def download_file(url: str, dest_path: Path, timeout: Optional[float] = DEFAULT_TIMEOUT) -> Path:
    """Stream a file from a URL to ``dest_path``.

    Args:
        url: The HTTPS URL to download from.
        dest_path: Path to save the downloaded file.
        timeout: Socket timeout in seconds.

    Returns:
        ``dest_path``.

    Raises:
        DownloadFailedError: On a non-success HTTP status or network error.
    """
    LOGGER.info(f"Downloading {url} ...")

    try:
        with secure_urlopen(url, timeout=timeout) as response:
            total_size = response.getheader("Content-Length")
            if total_size:
                LOGGER.debug(f"Archive size: {int(total_size) / 1024 / 1024:.1f} MB")
            with open(dest_path, "wb") as f:
                shutil.copyfileobj(response, f, CHUNK_SIZE)
    except HTTPError as e:
        raise DownloadFailedError(url, status=e.code, reason=str(e.reason)) from e
    except URLError as e:
        raise DownloadFailedError(url, reason=str(e.reason)) from e
    except (OSError, ValueError) as e:
        raise DownloadFailedError(url, reason=str(e)) from e

    return dest_path


def sha256_file(path: Path) -> str:
    """Compute the SHA-256 hex digest of a file."""
    h = hashlib.sha256()
    with path.open("rb") as fh:
        for chunk in iter(lambda: fh.read(CHUNK_SIZE), b""):
            h.update(chunk)
    return h.hexdigest()


def verify_checksum(path: Path, expected_digest: str) -> None:
    """Verify a downloaded file against its pinned digest.

    Args:
        path: Downloaded archive.
        expected_digest: SHA-256 hex digest (any case).

    Raises:
        ChecksumMismatchError: If the digests differ.
    """
    LOGGER.info("Verifying checksum ...")

    actual = sha256_file(path)
    if actual.lower() != expected_digest.strip().lower():
        raise ChecksumMismatchError(expected_digest, actual, path=str(path))

    LOGGER.debug(f"Checksum OK: {actual}")
