import asyncio
import logging

from telugu_bible.helpers.fetcher import DocumentFetcher
from telugu_bible.helpers.models import BookEntry

logger = logging.getLogger(__name__)


class BooksIndexCache:
    """
    Populate-once, in-memory cache of the books metadata document.

    The index is fetched on first use and kept for the lifetime of the owner
    (the application lifespan). It never expires and is never refreshed.
    Concurrent first callers await one shared population task and all get its
    result or its error. A failed population is not stored, so a later caller
    tries again.
    """

    def __init__(self, fetcher: DocumentFetcher):
        self._fetcher = fetcher
        self._index: tuple[BookEntry, ...] | None = None
        self._populating: asyncio.Task | None = None
        self._fetch_count = 0

    @property
    def is_loaded(self) -> bool:
        return self._index is not None

    @property
    def fetch_count(self) -> int:
        """Number of underlying metadata fetches attempted so far."""
        return self._fetch_count

    async def _populate(self) -> tuple[BookEntry, ...]:
        try:
            self._index = await self._fetcher.fetch_books_index()
            return self._index
        finally:
            self._populating = None

    async def get_index(self) -> tuple[BookEntry, ...]:
        if self._index is not None:
            return self._index

        if self._populating is None:
            self._fetch_count += 1
            logger.info("Populating books index cache")
            self._populating = asyncio.ensure_future(self._populate())
        # A cancelled caller must not cancel the fetch other callers are waiting on
        return await asyncio.shield(self._populating)
