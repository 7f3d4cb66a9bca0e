from __future__ import annotations

"""Lightweight HTTP client util with optional retry.

Uses stdlib urllib; the only upstream is a single static document, so a
plain GET returning the raw body is all that is needed.
"""
import http.client
import logging
import time
import urllib.error
import urllib.request
from typing import Optional

logger = logging.getLogger("eurofx.http")


class HttpError(Exception):
    pass


def get_bytes(
    url: str, *, timeout: float = 5.0, retries: int = 0, backoff: float = 0.5
) -> bytes:
    last_err: Optional[Exception] = None
    for attempt in range(retries + 1):
        try:
            with urllib.request.urlopen(url, timeout=timeout) as resp:  # nosec B310
                data = resp.read()
                if not data:
                    raise HttpError(f"empty response body from {url}")
                return data
        except (
            urllib.error.URLError,
            http.client.HTTPException,
            OSError,
            HttpError,
            ValueError,
        ) as e:  # HTTPException: dropped connection / short body; ValueError: malformed URL
            last_err = e
            if attempt == retries:
                break
            delay = backoff * (2**attempt)
            logger.warning(
                "GET %s failed (attempt %d/%d): %s; retrying in %.2fs",
                url,
                attempt + 1,
                retries + 1,
                e,
                delay,
            )
            time.sleep(delay)
    raise HttpError(f"Failed to fetch {url}: {last_err}")
