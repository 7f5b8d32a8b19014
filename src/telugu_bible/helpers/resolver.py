"""
Resolution pipeline: book identifier (English or Telugu name), chapter label
and verse label to structured content.
"""

import logging
from typing import Iterable

from telugu_bible.helpers.books_index import BooksIndexCache
from telugu_bible.helpers.errors import FetchError, NotFoundError
from telugu_bible.helpers.fetcher import DocumentFetcher
from telugu_bible.helpers.models import BookContent, BookEntry, BookNames, Chapter, Verse

logger = logging.getLogger(__name__)


class NameResolver:
    """Maps a user-supplied book identifier to a candidate English book key."""

    def __init__(self, cache: BooksIndexCache):
        self.cache = cache

    @staticmethod
    def lookup(index: Iterable[BookEntry], identifier: str) -> str:
        """
        Resolve ``identifier`` against an already loaded index.

        A Telugu name (exact, case-sensitive match) gives its English name.
        Anything else is returned verbatim as an English name candidate.
        """
        for entry in index:
            if entry.telugu == identifier:
                return entry.english
        return identifier

    async def resolve(self, identifier: str) -> str:
        """Never fails: if the index is unavailable the identifier is echoed back."""
        try:
            index = await self.cache.get_index()
        except FetchError as e:
            logger.warning(
                f"Books index unavailable, treating '{identifier}' as an English name: {e.message}"
            )
            return identifier
        return self.lookup(index, identifier)


class ContentResolver:
    """
    Resolves books, chapters and verses.

    Book content is fetched on every call and never cached. Name resolution
    and the existence check share the cached books index.
    """

    def __init__(self, fetcher: DocumentFetcher, cache: BooksIndexCache):
        self.fetcher = fetcher
        self.cache = cache
        self.names = NameResolver(cache)

    async def list_books(self) -> list[BookNames]:
        index = await self.cache.get_index()
        return [entry.book for entry in index]

    async def find_book(self, identifier: str) -> BookEntry:
        candidate = (await self.names.resolve(identifier)).casefold()
        # Unlike name resolution, the existence check propagates index failures
        index = await self.cache.get_index()
        book = next((b for b in index if b.english.casefold() == candidate), None)
        if book is None:
            logger.info(f"Book not found: {identifier}")
            raise NotFoundError("book")
        return book

    async def resolve_book(self, identifier: str) -> BookContent:
        book = await self.find_book(identifier)
        content = await self.fetcher.fetch_book_content(book.english)
        if content is None:
            raise NotFoundError("book content")
        return content

    async def _resolve_chapter(self, identifier: str, chapter_label: str) -> Chapter:
        content = await self.resolve_book(identifier)
        chapter = content.find_chapter(chapter_label)
        if chapter is None:
            raise NotFoundError("chapter", chapter_label)
        return chapter

    async def resolve_chapter(self, identifier: str, chapter_label: str) -> list[Verse]:
        chapter = await self._resolve_chapter(identifier, chapter_label)
        return chapter.verses

    async def resolve_verse(
        self, identifier: str, chapter_label: str, verse_label: str
    ) -> Verse:
        chapter = await self._resolve_chapter(identifier, chapter_label)
        verse = chapter.find_verse(verse_label)
        if verse is None:
            raise NotFoundError("verse", verse_label)
        return verse
