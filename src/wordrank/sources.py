"""Loading document text from files, stdin and URLs."""

import hashlib
import sys
from dataclasses import dataclass
from pathlib import Path
from urllib.parse import urlparse

import requests

# Cache directory name for downloaded documents
CACHE_DIR_NAME = ".wordrank-cache"

# Default timeout for HTTP requests (in seconds)
DEFAULT_TIMEOUT = 30

DEFAULT_HEADERS = {
    "User-Agent": "wordrank/1.0 (word frequency ranking)",
}

STDIN_SOURCE = "-"


class SourceError(RuntimeError):
    """A document could not be read."""


def is_url(source: str) -> bool:
    """Check if a source is an HTTP/HTTPS URL."""
    return source.startswith("http://") or source.startswith("https://")


def get_url_filename(url: str) -> str:
    """Extract filename from URL, or 'download' if the path is empty."""
    path = urlparse(url).path.rstrip("/")
    if path:
        return Path(path).name
    return "download"


def get_cache_path(url: str, cache_dir: Path) -> Path:
    """Get deterministic cache path for a URL.

    Args:
        url: The URL to cache.
        cache_dir: Directory to store cached files.

    Returns:
        Path named after a hash of the URL and its original filename.
    """
    url_hash = hashlib.sha256(url.encode()).hexdigest()[:16]
    return cache_dir / f"{url_hash}_{get_url_filename(url)}"


@dataclass
class DownloadResult:
    """Result of downloading and caching a URL."""

    success: bool
    local_path: Path | None
    error: str | None = None
    from_cache: bool = False


def download_url(
    url: str,
    cache_dir: Path,
    timeout: int = DEFAULT_TIMEOUT,
    force: bool = False,
) -> DownloadResult:
    """Download a URL and cache it locally.

    Args:
        url: The URL to download.
        cache_dir: Directory to store cached files.
        timeout: Request timeout in seconds.
        force: If True, re-download even if cached.

    Returns:
        DownloadResult with success status and local path.
    """
    cache_path = get_cache_path(url, cache_dir)

    if not force and cache_path.exists():
        return DownloadResult(success=True, local_path=cache_path, from_cache=True)

    # Write to a partial file so an interrupted download is never reused
    partial = cache_path.with_name(cache_path.name + ".part")
    try:
        cache_dir.mkdir(parents=True, exist_ok=True)
        response = requests.get(url, timeout=timeout, stream=True, headers=DEFAULT_HEADERS)
        response.raise_for_status()

        with open(partial, "wb") as f:
            for chunk in response.iter_content(chunk_size=8192):
                f.write(chunk)
        partial.replace(cache_path)

        return DownloadResult(success=True, local_path=cache_path)

    except (requests.RequestException, OSError) as e:
        if partial.exists():
            partial.unlink()
        return DownloadResult(success=False, local_path=None, error=str(e))


def ensure_downloaded(url: str, cache_dir: Path) -> Path:
    """Download URL if needed and return local path.

    Raises:
        SourceError: If download fails.
    """
    result = download_url(url, cache_dir)
    if not result.success or result.local_path is None:
        raise SourceError(f"Failed to download URL {url}: {result.error}")
    return result.local_path


def read_document(source: str, cache_dir: Path, encoding: str = "utf-8") -> str:
    """Read the text of a document.

    Args:
        source: Local path, HTTP/HTTPS URL, or "-" for stdin.
        cache_dir: Directory for downloaded documents.
        encoding: Text encoding; undecodable bytes are replaced.

    Returns:
        Document text.

    Raises:
        SourceError: If the document cannot be read.
    """
    if source == STDIN_SOURCE:
        return sys.stdin.read()

    path = ensure_downloaded(source, cache_dir) if is_url(source) else Path(source)
    try:
        return path.read_text(encoding=encoding, errors="replace")
    except FileNotFoundError as e:
        raise SourceError(f"File not found: {path}") from e
    except LookupError as e:
        raise SourceError(f"Unknown encoding: {encoding}") from e
    except OSError as e:
        raise SourceError(f"Failed to read {path}: {e}") from e
