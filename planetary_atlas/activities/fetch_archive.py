"""Fetch archive activity: download a body's nomenclature KMZ.

The archive lives at ``{archive_base_url}/{usgs_name}_nomenclature_center_pts.kmz``.
Every request carries a bounded timeout. Network failures and non-success
statuses are raised as ``ArchiveFetchError`` so the loader can degrade to
curated data.
"""

from __future__ import annotations

import logging

import httpx

from planetary_atlas.core.constants import ARCHIVE_NAME_TEMPLATE
from planetary_atlas.core.exceptions import TransientError

logger = logging.getLogger("planetary_atlas.activities.fetch_archive")


class ArchiveFetchError(TransientError):
    """Raised when the archive cannot be downloaded.

    Attributes:
        status_code: HTTP status of the failed response, if one arrived.
    """

    default_stage = "fetch_archive"
    default_code = "ARCHIVE_FETCH_FAILED"

    def __init__(self, message: str, *, url: str = "", status_code: int | None = None) -> None:
        self.status_code = status_code
        # 4xx other than 408/429 will not recover on retry
        retryable = status_code is None or status_code >= 500 or status_code in (408, 429)
        super().__init__(message, key=url, retryable=retryable)


def archive_url(base_url: str, usgs_name: str) -> str:
    """Return the archive URL for a body's USGS name (e.g. ``"MARS"``)."""
    return f"{base_url.rstrip('/')}/{ARCHIVE_NAME_TEMPLATE.format(usgs_name=usgs_name)}"


async def fetch_archive(
    client: httpx.AsyncClient,
    url: str,
    *,
    timeout_s: float = 60.0,
) -> bytes:
    """Download the archive at *url* and return its bytes.

    Raises:
        ArchiveFetchError: On timeout, transport failure, or a non-2xx
            response.
    """
    logger.info("Fetching archive: %s", url)
    try:
        response = await client.get(url, timeout=timeout_s, follow_redirects=True)
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        status = exc.response.status_code
        msg = f"Archive request returned HTTP {status}"
        raise ArchiveFetchError(msg, url=url, status_code=status) from exc
    except httpx.TimeoutException as exc:
        msg = f"Archive request timed out after {timeout_s}s"
        raise ArchiveFetchError(msg, url=url) from exc
    except httpx.HTTPError as exc:
        msg = f"Archive request failed: {exc}"
        raise ArchiveFetchError(msg, url=url) from exc

    logger.info("Fetched archive %s (%d bytes)", url, len(response.content))
    return response.content
