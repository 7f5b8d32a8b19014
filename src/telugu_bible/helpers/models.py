"""
Schemas for the remote dataset documents and the API payloads.
"""

from pydantic import BaseModel, ConfigDict, RootModel

# Chapter and verse labels are kept exactly as the dataset stores them
Label = str | int | float


class BookNames(BaseModel):
    """English and Telugu names of one book."""

    model_config = ConfigDict(frozen=True)

    english: str
    telugu: str


class BookEntry(BaseModel):
    """One element of the books metadata document."""

    model_config = ConfigDict(frozen=True)

    book: BookNames

    @property
    def english(self) -> str:
        return self.book.english

    @property
    def telugu(self) -> str:
        return self.book.telugu


class BooksIndex(RootModel[list[BookEntry]]):
    """The books metadata document: an ordered list of book entries."""

    pass


class Verse(BaseModel):
    # Any extra per-verse fields in the dataset are passed through untouched
    model_config = ConfigDict(extra="allow")

    verse: Label
    text: str


class Chapter(BaseModel):
    model_config = ConfigDict(extra="allow")

    chapter: Label
    verses: list[Verse]

    def find_verse(self, label: str) -> Verse | None:
        """Return the first verse whose label equals ``label`` exactly.

        No coercion: a numeric label never matches a string such as ``"1"``.
        """
        return next((v for v in self.verses if v.verse == label), None)


class BookContent(BaseModel):
    """A whole book document, as served for one canonical English key."""

    model_config = ConfigDict(extra="allow")

    chapters: list[Chapter]

    def find_chapter(self, label: str) -> Chapter | None:
        """Return the first chapter whose label equals ``label`` exactly.

        No coercion: a numeric label never matches a string such as ``"1"``.
        """
        return next((ch for ch in self.chapters if ch.chapter == label), None)


class ErrorResponse(BaseModel):
    error: str


class HealthResponse(BaseModel):
    status: str
    books_index_loaded: bool


class EndpointDescription(BaseModel):
    method: str
    path: str
    description: str


class WelcomeResponse(BaseModel):
    message: str
    availableEndpoints: list[EndpointDescription]
