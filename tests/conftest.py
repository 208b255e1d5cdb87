from typing import Iterable, List, Optional

import pytest

from docsite.errors import DocumentNotFound
from docsite.models.document import Document
from docsite.routers.pages import limiter
from docsite.services.decoder import encode
from docsite.services.store import ContentStore


class _StaticStore(ContentStore):
    """In-memory store returning fixed documents, or raising *error* on every call."""

    def __init__(self, documents: Iterable[Document] = (), error: Optional[Exception] = None):
        self._documents = list(documents)
        self._error = error

    async def fetch_all(self) -> List[Document]:
        if self._error is not None:
            raise self._error
        return list(self._documents)

    async def fetch_by_id(self, doc_id: str) -> Document:
        if self._error is not None:
            raise self._error
        for doc in self._documents:
            if doc.id == doc_id:
                return doc
        raise DocumentNotFound(doc_id)


def make_document(doc_id: str = "d1", body: str = "# Title\n\nBody", **overrides) -> Document:
    fields = {
        "id": doc_id,
        "title": doc_id.upper(),
        "description": f"About {doc_id}",
        "category": "General",
        "tags": ["one", "two"],
        "updated_at": "2026-01-20",
        "content_encoded": encode(body.encode("utf-8")),
        "cover_image": "",
    }
    fields.update(overrides)
    return Document(**fields)


@pytest.fixture
def make_store():
    return _StaticStore


@pytest.fixture
def document_factory():
    return make_document


@pytest.fixture(autouse=True)
def reset_rate_limits():
    """Clear the slowapi in-memory counter before every test."""
    limiter._storage.reset()
    yield
