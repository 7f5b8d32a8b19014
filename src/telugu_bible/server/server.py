import logging
import sys
from contextlib import asynccontextmanager

import httpx
from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from telugu_bible import __version__
from telugu_bible.config import telugu_bible_settings
from telugu_bible.constants import (
    API_ENDPOINT_NOT_FOUND,
    APP_DESCRIPTION,
    APP_TITLE,
    AVAILABLE_ENDPOINTS,
    BOOK_CONTENT_FAILURE,
    BOOKS_METADATA_FAILURE,
    CHAPTER_CONTENT_FAILURE,
    VERSE_CONTENT_FAILURE,
    WELCOME_MESSAGE,
)
from telugu_bible.helpers.books_index import BooksIndexCache
from telugu_bible.helpers.errors import FetchError, NotFoundError
from telugu_bible.helpers.fetcher import DocumentFetcher
from telugu_bible.helpers.models import (
    BookContent,
    BookNames,
    ErrorResponse,
    HealthResponse,
    Verse,
    WelcomeResponse,
)
from telugu_bible.helpers.resolver import ContentResolver

logging.basicConfig(stream=sys.stdout, level=telugu_bible_settings.logging.level)

logger = logging.getLogger(__name__)

ERROR_RESPONSES = {404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def get_content_resolver(request: Request) -> ContentResolver:
    resolver = getattr(request.app.state, "content_resolver", None)
    if resolver is None:
        raise HTTPException(status_code=503, detail="Content resolver not initialized.")
    return resolver


def build_content_resolver(client: httpx.AsyncClient) -> ContentResolver:
    fetcher = DocumentFetcher(
        client,
        base_url=telugu_bible_settings.data_source.base_url,
        metadata_document=telugu_bible_settings.data_source.metadata_document,
    )
    return ContentResolver(fetcher, BooksIndexCache(fetcher))


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Create the shared HTTP client and the books index cache once at application startup.
    """
    logger.info("Starting server initialization...")
    logger.info(f"Using data source: {telugu_bible_settings.data_source.base_url}")

    timeout = telugu_bible_settings.data_source.request_timeout
    client_kwargs = {} if timeout is None else {"timeout": timeout}
    async with httpx.AsyncClient(**client_kwargs) as client:
        app.state.content_resolver = build_content_resolver(client)
        logger.info("Server initialization complete. Ready to accept requests.")

        yield

        logger.info("Server shutting down...")


app = FastAPI(
    title=APP_TITLE,
    description=APP_DESCRIPTION,
    version=__version__,
    lifespan=lifespan,
)


@app.get("/", response_model=WelcomeResponse)
async def root():
    return WelcomeResponse(
        message=WELCOME_MESSAGE, availableEndpoints=AVAILABLE_ENDPOINTS
    )


@app.get("/health", response_model=HealthResponse)
async def health_check(resolver: ContentResolver = Depends(get_content_resolver)):
    """
    Health check endpoint to verify the server is running.
    """
    return HealthResponse(
        status="healthy", books_index_loaded=resolver.cache.is_loaded
    )


@app.get(
    "/api/books", response_model=list[BookNames], responses=ERROR_RESPONSES
)
async def list_books(resolver: ContentResolver = Depends(get_content_resolver)):
    """
    List every book with its English and Telugu names.
    """
    try:
        return await resolver.list_books()
    except FetchError as e:
        logger.error(f"Error listing books: {e.message}")
        return error_response(500, BOOKS_METADATA_FAILURE)


async def _resolve(failure_message: str, coro):
    try:
        return await coro
    except NotFoundError as e:
        return error_response(404, e.message)
    except FetchError as e:
        logger.error(f"{failure_message}: {e.message}")
        return error_response(500, failure_message)
    except Exception as e:
        logger.error(f"{failure_message}: unexpected error: {str(e)}")
        return error_response(500, failure_message)


@app.get(
    "/api/books/{book_name}", response_model=BookContent, responses=ERROR_RESPONSES
)
async def get_book(
    book_name: str, resolver: ContentResolver = Depends(get_content_resolver)
):
    """
    Return the chapters and verses of a book, looked up by English or Telugu name.
    """
    return await _resolve(BOOK_CONTENT_FAILURE, resolver.resolve_book(book_name))


@app.get(
    "/api/books/{book_name}/{chapter}",
    response_model=list[Verse],
    responses=ERROR_RESPONSES,
)
async def get_chapter(
    book_name: str,
    chapter: str,
    resolver: ContentResolver = Depends(get_content_resolver),
):
    """
    Return all verses of one chapter.
    """
    return await _resolve(
        CHAPTER_CONTENT_FAILURE, resolver.resolve_chapter(book_name, chapter)
    )


@app.get(
    "/api/books/{book_name}/{chapter}/{verse}",
    response_model=Verse,
    responses=ERROR_RESPONSES,
)
async def get_verse(
    book_name: str,
    chapter: str,
    verse: str,
    resolver: ContentResolver = Depends(get_content_resolver),
):
    """
    Return a single verse.
    """
    return await _resolve(
        VERSE_CONTENT_FAILURE, resolver.resolve_verse(book_name, chapter, verse)
    )


@app.api_route(
    "/api/{path:path}",
    methods=["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"],
    include_in_schema=False,
)
async def api_endpoint_not_found(path: str):
    return error_response(404, API_ENDPOINT_NOT_FOUND)
