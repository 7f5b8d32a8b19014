from enum import Enum


class DocumentKind(str, Enum):
    """Class of remote document, used to tell metadata failures from content failures."""

    METADATA = "books metadata"
    BOOK_CONTENT = "book content"


class BibleApiError(Exception):
    """Base exception for Telugu Bible API errors."""

    pass


class FetchError(BibleApiError):
    """Raised when a remote document cannot be fetched or parsed."""

    def __init__(self, kind: DocumentKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message


class DocumentSchemaError(FetchError):
    """Raised when a fetched document does not match its expected schema."""

    pass


class NotFoundError(BibleApiError):
    """Raised when a book, its content, a chapter or a verse is absent.

    ``stage`` is one of ``"book"``, ``"book content"``, ``"chapter"`` or ``"verse"``;
    ``label`` is the unmatched chapter/verse label where one applies.
    """

    def __init__(self, stage: str, label: str | None = None):
        self.stage = stage
        self.label = label
        super().__init__(self.message)

    @property
    def message(self) -> str:
        if self.label is None:
            return f"{self.stage.capitalize()} not found"
        return f"{self.stage.capitalize()} {self.label} not found"
