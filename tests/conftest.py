import os
from pathlib import Path

import httpx
import pytest

# Set the environment variable to 'test' before any other imports happen.
# This ensures that when config.py is imported, it sees TELUGU_BIBLE_ENV=test
os.environ["TELUGU_BIBLE_ENV"] = "test"
os.environ.setdefault(
    "TELUGU_BIBLE_CONFIG_DIR", str(Path(__file__).parents[1] / "config")
)

BOOKS_METADATA = [
    {"book": {"english": "Genesis", "telugu": "ఆదికాండము"}},
    {"book": {"english": "Exodus", "telugu": "నిర్గమకాండము"}},
    {"book": {"english": "Song of Solomon", "telugu": "పరమగీతము"}},
    {"book": {"english": "Jude", "telugu": "యూదా"}},
]

GENESIS = {
    "chapters": [
        {
            "chapter": "1",
            "verses": [
                {"verse": "1", "text": "In the beginning..."},
                {
                    "verse": "2",
                    "text": "And the earth was without form...",
                    "id": "GEN.1.2",
                },
            ],
        },
        {
            "chapter": "01",
            "verses": [{"verse": "01", "text": "Zero padded chapter"}],
        },
    ]
}

EXODUS = {
    "chapters": [
        {
            "chapter": 1,
            "verses": [{"verse": 1, "text": "Now these are the names..."}],
        }
    ]
}

SONG_OF_SOLOMON = {
    "chapters": [
        {"chapter": "1", "verses": [{"verse": "1", "text": "The song of songs..."}]}
    ]
}


class FakeBibleOrigin:
    """In-memory stand-in for the remote dataset, served through httpx.MockTransport."""

    def __init__(self, documents: dict | None = None):
        self.documents = (
            documents
            if documents is not None
            else {
                "Books.json": BOOKS_METADATA,
                "Genesis.json": GENESIS,
                "Exodus.json": EXODUS,
                "Song of Solomon.json": SONG_OF_SOLOMON,
                "Jude.json": None,
            }
        )
        self.requests: list[str] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        name = request.url.path.rsplit("/", 1)[-1]
        self.requests.append(name)
        if name not in self.documents:
            return httpx.Response(404, text="404: Not Found")
        return httpx.Response(200, json=self.documents[name])

    def count(self, name: str) -> int:
        return self.requests.count(name)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))


@pytest.fixture
def origin() -> FakeBibleOrigin:
    return FakeBibleOrigin()
