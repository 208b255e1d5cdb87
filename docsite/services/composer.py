"""Template composition: base layout + shared partials + one page bundle.

A page is built from a list of :class:`Fragment` objects.  Template fragments
share a single Jinja2 namespace and reference each other by name; the entry
point is ``base.html``.  Fragments bound to a *slot* are style or script
blocks: they are not parsed as templates but injected into the view-data as
trusted :class:`~markupsafe.Markup`.  Slot fragments must only ever come from
the template directory, never from request data.
"""

import logging
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Sequence

from jinja2 import DictLoader, Environment, TemplateError
from markupsafe import Markup
from pydantic import BaseModel, ConfigDict

from docsite.errors import CompositionError

logger = logging.getLogger(__name__)

ENTRY_TEMPLATE = "base.html"

HOME_PAGE = "home/index"
LISTING_PAGE = "docs/index"
VIEW_PAGE = "docs/view"
PAGES = (HOME_PAGE, LISTING_PAGE, VIEW_PAGE)

_SHARED_DIR = "shared"
_SHARED_PARTIALS = ("head.html", "navbar.html", "sidebar.html", "scripts.html")
# (file name, view-data slot) for raw style/script blocks
_SHARED_BLOCKS = (("styles.css", "shared_styles"), ("common.js", "shared_script"))
_PAGE_CONTENT = "content.html"
_PAGE_BLOCKS = (("styles.css", "page_styles"), ("script.js", "page_script"))


class Fragment(BaseModel):
    """A named chunk of template markup, or a raw block bound to a view-data slot."""

    model_config = ConfigDict(frozen=True)

    name: str
    source: str
    slot: Optional[str] = None


class Composition:
    """A parsed set of fragments, ready to be rendered any number of times."""

    def __init__(self, parts: Sequence[Fragment], entry: str = ENTRY_TEMPLATE) -> None:
        templates: Dict[str, str] = {}
        blocks: Dict[str, Markup] = {}
        for part in parts:
            if part.slot is not None:
                if part.slot in blocks:
                    raise CompositionError(f"Slot '{part.slot}' is provided twice.")
                blocks[part.slot] = Markup(part.source)
                continue
            if part.name in templates:
                raise CompositionError(f"Fragment '{part.name}' is provided twice.")
            templates[part.name] = part.source

        if entry not in templates:
            raise CompositionError(f"Entry fragment '{entry}' is missing.")

        self._env = Environment(
            loader=DictLoader(templates),
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self._blocks = blocks
        self._entry = entry
        try:
            # Compile every fragment up front so syntax errors surface at load time
            for name in templates:
                self._env.get_template(name)
        except TemplateError as exc:
            raise CompositionError(f"Cannot parse fragment: {exc}") from exc

    def render(self, view_data: Mapping[str, object]) -> str:
        """Render the entry template with *view_data*.

        Missing top-level keys render as empty.  Missing fragments and
        attribute lookups on undefined values raise :class:`CompositionError`.
        """
        context = {**view_data, **self._blocks}
        try:
            return self._env.get_template(self._entry).render(context)
        except TemplateError as exc:
            raise CompositionError(f"Cannot render '{self._entry}': {exc}") from exc


def compose(parts: Sequence[Fragment], view_data: Mapping[str, object]) -> str:
    """Merge *parts* into one namespace and render its entry point with *view_data*."""
    return Composition(parts).render(view_data)


def _read(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise CompositionError(f"Fragment file missing: {path}") from exc


def load_bundle(template_root: Path, page: str) -> List[Fragment]:
    """Collect the base layout, the shared partials and *page*'s own fragments."""
    shared = template_root / _SHARED_DIR
    page_dir = template_root / page

    parts = [Fragment(name=ENTRY_TEMPLATE, source=_read(shared / ENTRY_TEMPLATE))]
    parts.extend(Fragment(name=name, source=_read(shared / name)) for name in _SHARED_PARTIALS)
    parts.extend(
        Fragment(name=f"{_SHARED_DIR}/{name}", source=_read(shared / name), slot=slot)
        for name, slot in _SHARED_BLOCKS
    )
    parts.append(Fragment(name=_PAGE_CONTENT, source=_read(page_dir / _PAGE_CONTENT)))
    parts.extend(
        Fragment(name=f"{page}/{name}", source=_read(page_dir / name), slot=slot)
        for name, slot in _PAGE_BLOCKS
    )
    return parts


class TemplateComposer:
    """Holds one parsed :class:`Composition` per page.

    Compositions are built once and only read afterwards, so a single
    instance is shared by all requests.
    """

    def __init__(self, compositions: Mapping[str, Composition]) -> None:
        self._compositions = dict(compositions)

    @classmethod
    def from_directory(cls, template_root: Path, pages: Sequence[str] = PAGES) -> "TemplateComposer":
        compositions = {}
        for page in pages:
            compositions[page] = Composition(load_bundle(Path(template_root), page))
            logger.info("Loaded page templates for %s", page)
        return cls(compositions)

    def render(self, page: str, view_data: Mapping[str, object]) -> str:
        composition = self._compositions.get(page)
        if composition is None:
            raise CompositionError(f"No templates loaded for page '{page}'.")
        return composition.render(view_data)
