"""Exception hierarchy for the document content pipeline.

Each exception maps to one outcome the HTTP layer has to tell apart:

``StoreUnavailable``
    The content store could not be reached or answered with garbage.
``DocumentNotFound``
    The store answered but has no document with the requested id.
``DecodeError``
    A stored body is not valid base64.
``RenderError``
    A decoded body could not be turned into HTML.
``CompositionError``
    Templates and view-data do not fit together.  Always a programming error.
"""


class DocsiteError(Exception):
    """Base class for every pipeline error."""


class StoreUnavailable(DocsiteError):
    """Transport, timeout or protocol failure while talking to a content store."""


class DocumentNotFound(DocsiteError):
    def __init__(self, doc_id: str) -> None:
        super().__init__(f"Document '{doc_id}' not found.")
        self.doc_id = doc_id


class DecodeError(DocsiteError):
    pass


class RenderError(DocsiteError):
    pass


class CompositionError(DocsiteError):
    pass
