"""Page assembly: fills the view-data for each page and renders it.

Each assembler is a stateless coroutine.  The store, renderer and composer
are passed in explicitly by the caller.
"""

import logging
from typing import Iterable, List

from markupsafe import Markup

from docsite.models.document import Document
from docsite.services.composer import HOME_PAGE, LISTING_PAGE, VIEW_PAGE, TemplateComposer
from docsite.services.decoder import decode
from docsite.services.outline import extract_outline
from docsite.services.renderer import MarkdownRenderer
from docsite.services.store import ContentStore

logger = logging.getLogger(__name__)

ALL_CATEGORIES = "All"

# Number of recently updated documents featured on the home page
FEATURED_COUNT = 3


def derive_categories(documents: Iterable[Document]) -> List[str]:
    """Return ``"All"`` followed by each distinct category in first-seen order."""
    categories = [ALL_CATEGORIES]
    seen = set()
    for doc in documents:
        if doc.category not in seen:
            seen.add(doc.category)
            categories.append(doc.category)
    return categories


async def assemble_home(store: ContentStore, composer: TemplateComposer) -> str:
    documents = await store.fetch_all()
    featured = sorted(documents, key=lambda doc: doc.updated_at, reverse=True)[:FEATURED_COUNT]
    view_data = {
        "page_class": "home-page",
        "title": "Home",
        "active_section": "home",
        "document_count": len(documents),
        "featured": [doc.model_dump() for doc in featured],
    }
    return composer.render(HOME_PAGE, view_data)


async def assemble_listing(store: ContentStore, composer: TemplateComposer) -> str:
    """Render the documentation dashboard.

    Bodies stay base64 encoded; the listing script decodes them on demand.
    """
    documents = await store.fetch_all()
    view_data = {
        "page_class": "docs-page",
        "title": "Documentation Dashboard",
        "active_section": "docs",
        "documents": [doc.model_dump() for doc in documents],
        "categories": derive_categories(documents),
    }
    logger.debug("Assembled listing", extra={"documents": len(documents)})
    return composer.render(LISTING_PAGE, view_data)


async def assemble_document(
    doc_id: str,
    store: ContentStore,
    renderer: MarkdownRenderer,
    composer: TemplateComposer,
) -> str:
    """Render a single document page.

    Raises:
        DocumentNotFound: if *doc_id* is unknown to the store.
        StoreUnavailable: if the store cannot be reached.
        DecodeError: if the stored body is not valid base64.
        RenderError: if the decoded body is not valid UTF-8.
        CompositionError: if the view templates do not fit the view-data.
    """
    doc = await store.fetch_by_id(doc_id)
    html = renderer.render(decode(doc.content_encoded))

    view_data = {
        "page_class": "docs-view-page",
        "title": doc.title,
        "active_section": "docs",
        "id": doc.id,
        "category": doc.category,
        "description": doc.description,
        "tags": list(doc.tags),
        "updated_at": doc.updated_at,
        "cover_image": doc.cover_image,
        # Rendered markdown is trusted content from the store
        "content": Markup(html),
        "outline": extract_outline(html),
    }
    return composer.render(VIEW_PAGE, view_data)
