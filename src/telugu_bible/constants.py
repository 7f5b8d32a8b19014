"""
Constants for the Telugu Bible application.
Contains truly immutable values that never change across environments.
"""

# Application metadata
APP_TITLE = "Telugu Bible API"
APP_DESCRIPTION = "Read-only API over the Telugu Bible books, chapters and verses"
WELCOME_MESSAGE = "Welcome to the Telugu Bible API!"

# Remote dataset
DEFAULT_DATA_SOURCE_BASE_URL = (
    "https://raw.githubusercontent.com/Telugu-Bible/all-books/main"
)
BOOKS_METADATA_DOCUMENT = "Books.json"
BOOK_DOCUMENT_SUFFIX = ".json"

# Endpoint listing served on the root path
AVAILABLE_ENDPOINTS = [
    {
        "method": "GET",
        "path": "/api/books",
        "description": "Returns a list of all books (English and Telugu names)",
    },
    {
        "method": "GET",
        "path": "/api/books/:bookName",
        "description": "Returns the content (chapters and verses) of a specific book",
    },
    {
        "method": "GET",
        "path": "/api/books/:bookName/:chapter",
        "description": "Returns all verses for a specific chapter in a book",
    },
    {
        "method": "GET",
        "path": "/api/books/:bookName/:chapter/:verse",
        "description": "Returns a specific verse from a chapter of a book",
    },
]

# Client-facing error messages
API_ENDPOINT_NOT_FOUND = "API endpoint not found"
BOOKS_METADATA_FAILURE = "Failed to fetch books metadata"
BOOK_CONTENT_FAILURE = "Failed to fetch book content"
CHAPTER_CONTENT_FAILURE = "Failed to fetch chapter content"
VERSE_CONTENT_FAILURE = "Failed to fetch verse content"

# FASTAPI server settings
TELUGU_BIBLE_SERVER_HOST = "localhost"
TELUGU_BIBLE_SERVER_PORT = 3000
TELUGU_BIBLE_SERVER_DEFAULT_BASE_URL = (
    f"http://{TELUGU_BIBLE_SERVER_HOST}:{TELUGU_BIBLE_SERVER_PORT}"
)
