from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional

import requests

from ..errors import DownloadError

logger = logging.getLogger(__name__)

CHUNK_SIZE = 8192


def download_file(
    url: str,
    dest: str,
    *,
    user_agent: str,
    timeout_s: float = 60.0,
    session: Optional[Any] = None,
) -> int:
    """Stream ``url`` into ``dest``; return the number of bytes written.

    Any non-2xx status, connection problem, timeout or local write failure
    raises DownloadError. The partial file is left for the caller to remove.
    """

    http = session if session is not None else requests
    logger.info("GET %s -> %s", url, dest)

    written = 0
    try:
        with http.get(
            url,
            headers={"User-Agent": user_agent},
            stream=True,
            timeout=timeout_s,
        ) as r:
            r.raise_for_status()
            with Path(dest).open("wb") as f:
                for chunk in r.iter_content(chunk_size=CHUNK_SIZE):
                    if chunk:
                        f.write(chunk)
                        written += len(chunk)
    except requests.RequestException as e:
        raise DownloadError(f"Download failed: {url}: {e}") from e
    except OSError as e:
        raise DownloadError(f"Unable to write download to {dest}: {e}") from e

    logger.info("Downloaded %d bytes", written)
    return written
