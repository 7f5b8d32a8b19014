import logging
from typing import Any
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from telugu_bible.constants import BOOK_DOCUMENT_SUFFIX, BOOKS_METADATA_DOCUMENT
from telugu_bible.helpers.errors import DocumentKind, DocumentSchemaError, FetchError
from telugu_bible.helpers.models import BookContent, BookEntry, BooksIndex

logger = logging.getLogger(__name__)


class DocumentFetcher:
    """
    Fetches JSON documents of the Telugu Bible dataset from a fixed origin.

    One GET per call, no retries. Every transport, status or decoding failure
    is raised as a FetchError tagged with the class of document that failed.

    Usage:
        async with httpx.AsyncClient() as client:
            fetcher = DocumentFetcher(client, base_url)
            books = await fetcher.fetch_books_index()
            genesis = await fetcher.fetch_book_content("Genesis")
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        base_url: str,
        metadata_document: str = BOOKS_METADATA_DOCUMENT,
    ):
        self.client = client
        self.base_url = base_url.rstrip("/")
        self.metadata_document = metadata_document

    def document_url(self, name: str) -> str:
        return f"{self.base_url}/{quote(name)}"

    async def fetch_document(self, name: str, kind: DocumentKind) -> Any:
        """
        Fetch and decode one JSON document.

        Args:
            name: Document file name relative to the base URL
            kind: Document class, reported in errors

        Returns:
            The decoded JSON value
        """
        url = self.document_url(name)
        logger.debug(f"Fetching {kind.value} document: {url}")
        try:
            response = await self.client.get(url)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPError as e:
            logger.error(f"Failed to fetch {kind.value} from {url}: {str(e)}")
            raise FetchError(
                kind, f"Failed to fetch {kind.value} from {url}: {str(e)}"
            ) from e
        except ValueError as e:
            # JSONDecodeError and UnicodeDecodeError
            logger.error(f"Malformed {kind.value} document at {url}: {str(e)}")
            raise FetchError(
                kind, f"Malformed {kind.value} document at {url}: {str(e)}"
            ) from e

    async def fetch_books_index(self) -> tuple[BookEntry, ...]:
        data = await self.fetch_document(self.metadata_document, DocumentKind.METADATA)
        try:
            index = BooksIndex.model_validate(data)
        except ValidationError as e:
            raise DocumentSchemaError(
                DocumentKind.METADATA,
                f"Books metadata document does not match the expected schema: {str(e)}",
            ) from e
        logger.info(f"Loaded books metadata with {len(index.root)} books")
        return tuple(index.root)

    async def fetch_book_content(self, book_key: str) -> BookContent | None:
        """
        Fetch the document of one book by its canonical English name.

        Returns None when the origin serves an empty document.
        """
        data = await self.fetch_document(
            f"{book_key}{BOOK_DOCUMENT_SUFFIX}", DocumentKind.BOOK_CONTENT
        )
        if not data:
            return None
        try:
            return BookContent.model_validate(data)
        except ValidationError as e:
            raise DocumentSchemaError(
                DocumentKind.BOOK_CONTENT,
                f"Book document for {book_key} does not match the expected schema: {str(e)}",
            ) from e
