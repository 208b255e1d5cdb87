"""Markdown to HTML conversion.

The renderer enables, all at once: GFM tables, strikethrough, task lists and
bare URL autolinks, automatic heading ids, hard line breaks and XHTML-style
void elements.

Raw HTML inside the markdown (for example a YouTube ``<iframe>``) is passed
through unescaped.  Markdown bodies come from the content store, never from
request data, and are treated as trusted.  If a store could ever serve
user-supplied markdown this must be replaced with an allow-list sanitizer.
"""

import re
import unicodedata

from markdown_it import MarkdownIt
from mdit_py_plugins.anchors import anchors_plugin
from mdit_py_plugins.tasklists import tasklists_plugin

from docsite.errors import RenderError

_CHECKBOX_PREFIX = '<input class="task-list-item-checkbox"'

# Anchor for headings without any ASCII letters or digits
_FALLBACK_SLUG = "heading"


def slugify(text: str) -> str:
    """Turn heading text into an anchor id (``"Hello World"`` -> ``"hello-world"``)."""
    slug = unicodedata.normalize("NFKD", text)
    slug = "".join(ch for ch in slug if not unicodedata.combining(ch))
    slug = re.sub(r"[^a-z0-9\s-]", "", slug.lower()).strip()
    slug = re.sub(r"\s+", "-", slug)
    slug = re.sub(r"-+", "-", slug).strip("-")
    return slug or _FALLBACK_SLUG


def _xhtml_checkboxes(state) -> None:
    """Close the task list ``<input>`` tags so every void element is XHTML."""
    for token in state.tokens:
        if token.type != "inline" or not token.children:
            continue
        for child in token.children:
            if (
                child.type == "html_inline"
                and child.content.startswith(_CHECKBOX_PREFIX)
                and not child.content.endswith("/>")
            ):
                child.content = child.content[:-1].rstrip() + " />"


def create_markdown() -> MarkdownIt:
    md = MarkdownIt(
        "commonmark",
        {"html": True, "xhtmlOut": True, "breaks": True, "linkify": True},
    ).enable(["table", "strikethrough", "linkify"])
    md.use(tasklists_plugin)
    md.use(anchors_plugin, min_level=1, max_level=6, slug_func=slugify)
    md.core.ruler.push("xhtml_checkboxes", _xhtml_checkboxes)
    return md


class MarkdownRenderer:
    """Renders markdown bytes into HTML.

    Parsing never fails on malformed markdown; it degrades to best-effort
    HTML.  The only rejected input is a body that is not valid UTF-8.
    """

    def __init__(self) -> None:
        self._md = create_markdown()

    def render(self, markdown: bytes) -> str:
        try:
            text = markdown.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise RenderError(f"Markdown body is not valid UTF-8: {exc}") from exc
        return self._md.render(text)
