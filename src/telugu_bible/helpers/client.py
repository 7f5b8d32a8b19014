import os
from typing import Any, Optional
from urllib.parse import quote

import requests

from telugu_bible.constants import TELUGU_BIBLE_SERVER_DEFAULT_BASE_URL
from telugu_bible.helpers.models import BookNames, HealthResponse


def _get_base_url(explicit: Optional[str] = None) -> str:
    """Resolve the server base URL.

    Priority: explicit arg > TELUGU_BIBLE_API_URL env var > TELUGU_BIBLE_SERVER_DEFAULT_BASE_URL
    """
    if explicit:
        return explicit.rstrip("/")
    env_val = os.getenv("TELUGU_BIBLE_API_URL")
    return (env_val or TELUGU_BIBLE_SERVER_DEFAULT_BASE_URL).rstrip("/")


def health_check(base_url: Optional[str] = None) -> HealthResponse:
    """Call the server health endpoint and return the parsed status."""
    url = f"{_get_base_url(base_url)}/health"
    resp = requests.get(url, timeout=30)
    resp.raise_for_status()
    return HealthResponse(**resp.json())


def list_books(base_url: Optional[str] = None) -> list[BookNames]:
    """Return the English and Telugu names of every book served by the API."""
    url = f"{_get_base_url(base_url)}/api/books"
    resp = requests.get(url, timeout=30)
    resp.raise_for_status()
    data = resp.json()
    if not isinstance(data, list):
        raise ValueError(f"Unexpected response format: {data}")
    return [BookNames(**item) for item in data]


def get_passage(
    book: str,
    chapter: Optional[str] = None,
    verse: Optional[str] = None,
    base_url: Optional[str] = None,
) -> Any:
    """Fetch a whole book, a chapter's verses or a single verse.

    Returns the decoded JSON payload:
      book only            -> {"chapters": [...]}
      book + chapter       -> [{"verse": ..., "text": ...}, ...]
      book + chapter+verse -> {"verse": ..., "text": ...}
    """
    if not book or not book.strip():
        raise ValueError("book must be a non-empty string")
    if verse is not None and chapter is None:
        raise ValueError("a verse requires a chapter")

    parts = [book, chapter, verse]
    path = "/".join(quote(str(p), safe="") for p in parts if p is not None)
    url = f"{_get_base_url(base_url)}/api/books/{path}"

    resp = requests.get(url, timeout=60)
    # Raise for non-2xx; the server's {"error": ...} payload is available on the HTTPError response
    resp.raise_for_status()
    return resp.json()
