from datetime import datetime, timezone
from typing import List

from pydantic import BaseModel, ConfigDict, Field

_DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"


class Document(BaseModel):
    """A read-only document record: metadata plus a base64 markdown body."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(pattern=r"^[A-Za-z0-9][A-Za-z0-9_\-]*$")
    title: str
    description: str = ""
    category: str
    tags: List[str] = []
    updated_at: str = Field(pattern=_DATE_PATTERN)
    content_encoded: str
    cover_image: str = ""


class CatalogEntry(BaseModel):
    """Hardcoded metadata for a locally stored document.

    ``path`` points at the markdown resource relative to the content root.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    description: str = ""
    category: str
    tags: List[str] = []
    updated_at: str = Field(pattern=_DATE_PATTERN)
    path: str
    cover_image: str = ""


class RemoteDocument(BaseModel):
    """Document as returned by the remote document service."""

    id: str
    title: str
    description: str = ""
    category: str
    tags: List[str] = []
    updated_at: datetime
    content_b64: str
    cover_image: str = ""

    def to_document(self) -> Document:
        updated = self.updated_at
        if updated.tzinfo is not None:
            updated = updated.astimezone(timezone.utc)
        return Document(
            id=self.id,
            title=self.title,
            description=self.description,
            category=self.category,
            tags=list(self.tags),
            updated_at=updated.date().isoformat(),
            content_encoded=self.content_b64,
            cover_image=self.cover_image,
        )


class RemoteDocumentList(BaseModel):
    documents: List[RemoteDocument] = []


class RemoteDocumentEnvelope(BaseModel):
    document: RemoteDocument
