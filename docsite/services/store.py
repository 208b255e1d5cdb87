"""Content stores: where document records come from.

Two interchangeable implementations of :class:`ContentStore` exist:

:class:`LocalCatalog`
    A fixed list of catalog entries whose markdown bodies live under a content
    root on disk.  Bodies are re-read on every call.

:class:`RemoteCatalog`
    A read-only JSON document service reached over HTTP.  Every call is
    bounded by a single timeout and is never retried.
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional, Sequence
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from docsite.catalog import CATALOG
from docsite.config import DEFAULT_STORE_TIMEOUT, Settings
from docsite.errors import DocumentNotFound, StoreUnavailable
from docsite.models.document import (
    CatalogEntry,
    Document,
    RemoteDocumentEnvelope,
    RemoteDocumentList,
)
from docsite.services.decoder import encode

logger = logging.getLogger(__name__)


class ContentStore(ABC):
    """Read-only source of :class:`Document` records."""

    @abstractmethod
    async def fetch_all(self) -> List[Document]:
        """Return every available document.

        Raises:
            StoreUnavailable: if the backing source cannot be read.
        """

    @abstractmethod
    async def fetch_by_id(self, doc_id: str) -> Document:
        """Return the document identified by *doc_id*.

        Raises:
            DocumentNotFound: if the store is reachable but has no such document.
            StoreUnavailable: if the backing source cannot be read.
        """


class LocalCatalog(ContentStore):
    def __init__(self, content_root: Path, entries: Sequence[CatalogEntry] = CATALOG) -> None:
        self._root = Path(content_root)
        self._entries = tuple(entries)

    async def _load(self, entry: CatalogEntry) -> Optional[Document]:
        """Read and encode *entry*'s body, or return None when it cannot be read."""
        path = self._root / entry.path
        try:
            raw = await asyncio.to_thread(path.read_bytes)
        except OSError as exc:
            logger.warning(
                "Skipping document %s: resource unreadable (%s)",
                entry.id,
                exc,
                extra={"doc_id": entry.id, "path": str(path)},
            )
            return None

        return Document(
            id=entry.id,
            title=entry.title,
            description=entry.description,
            category=entry.category,
            tags=list(entry.tags),
            updated_at=entry.updated_at,
            content_encoded=encode(raw),
            cover_image=entry.cover_image,
        )

    async def fetch_all(self) -> List[Document]:
        documents = []
        for entry in self._entries:
            doc = await self._load(entry)
            if doc is not None:
                documents.append(doc)
        return documents

    async def fetch_by_id(self, doc_id: str) -> Document:
        for entry in self._entries:
            if entry.id == doc_id:
                doc = await self._load(entry)
                if doc is None:
                    break
                return doc
        raise DocumentNotFound(doc_id)


class RemoteCatalog(ContentStore):
    def __init__(
        self,
        base_url: str,
        timeout: float = DEFAULT_STORE_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    async def _get(self, path: str) -> httpx.Response:
        """GET *path* from the document service within the per-call timeout.

        The httpx timeout only bounds individual connect/read operations, so the
        whole exchange is additionally wrapped in :func:`asyncio.wait_for`.
        """
        url = f"{self._base_url}{path}"
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport
            ) as client:
                return await asyncio.wait_for(client.get(url), timeout=self._timeout)
        except asyncio.TimeoutError as exc:
            logger.error("Timeout after %ss fetching %s", self._timeout, url)
            raise StoreUnavailable(f"Documents service timed out after {self._timeout}s.") from exc
        except httpx.HTTPError as exc:
            logger.error("Error reaching documents service at %s: %s", url, exc)
            raise StoreUnavailable(f"Failed to reach documents service: {exc}") from exc

    @staticmethod
    def _check(response: httpx.Response) -> None:
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise StoreUnavailable(
                f"Documents service returned HTTP {response.status_code}."
            ) from exc

    async def fetch_all(self) -> List[Document]:
        response = await self._get("/documents")
        self._check(response)
        try:
            payload = RemoteDocumentList.model_validate(response.json())
            return [item.to_document() for item in payload.documents]
        except (ValidationError, ValueError) as exc:
            raise StoreUnavailable(f"Malformed documents payload: {exc}") from exc

    async def fetch_by_id(self, doc_id: str) -> Document:
        response = await self._get(f"/documents/{quote(doc_id, safe='')}")
        if response.status_code == 404:
            raise DocumentNotFound(doc_id)
        self._check(response)
        try:
            payload = RemoteDocumentEnvelope.model_validate(response.json())
            return payload.document.to_document()
        except (ValidationError, ValueError) as exc:
            raise StoreUnavailable(f"Malformed document payload: {exc}") from exc


def build_store(settings: Settings) -> ContentStore:
    """Construct the content store selected by *settings*."""
    if settings.store_backend == "remote":
        logger.info("Using remote documents service at %s", settings.docs_service_url)
        return RemoteCatalog(settings.docs_service_url, timeout=settings.store_timeout)
    logger.info("Using local document catalog at %s", settings.content_root)
    return LocalCatalog(settings.content_root)
