"""Utilities to download and cache a remote layoffs dataset."""

from __future__ import annotations

import hashlib
import logging
from pathlib import Path
from urllib.parse import urlparse

log = logging.getLogger(__name__)


def is_remote(source: str) -> bool:
    """Return True when `source` is an http(s) URL rather than a local path."""
    return urlparse(source).scheme in ("http", "https")


def cache_path_for(url: str, out_dir: Path) -> Path:
    """Return the local cache file used for `url`.

    The file keeps the URL's basename (and therefore its suffix) and is
    prefixed with a short hash so different URLs never collide.

    Args:
        url: Remote dataset URL.
        out_dir: Cache directory.

    Returns:
        Path inside `out_dir`.
    """
    name = Path(urlparse(url).path).name or "layoffs.csv"
    digest = hashlib.sha1(url.encode("utf-8")).hexdigest()[:10]
    return out_dir / f"{digest}_{name}"


def download_dataset(url: str, out_dir: Path, timeout: float = 60.0) -> Path:
    """Download or return the cached copy of a dataset.

    Args:
        url: Remote CSV or JSON URL.
        out_dir: Local directory to cache downloaded files.
        timeout: Request timeout in seconds.

    Returns:
        Path to the downloaded (or cached) file.

    Raises:
        requests.HTTPError if the remote request fails (non-2xx status).
    """
    out_dir.mkdir(parents=True, exist_ok=True)
    out_path = cache_path_for(url, out_dir)

    if out_path.exists() and out_path.stat().st_size > 0:
        log.info("Cache hit: %s", out_path)
        return out_path

    log.info("Downloading %s", url)
    import requests  # type: ignore[import-untyped]  # local import to avoid requiring type stubs at module import
    r = requests.get(url, timeout=timeout)
    r.raise_for_status()
    out_path.write_bytes(r.content)
    log.info("Saved: %s (%d bytes)", out_path, out_path.stat().st_size)
    return out_path
