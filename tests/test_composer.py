"""Tests for template composition."""

import pytest
from markupsafe import Markup

from docsite.config import CONTENT_ROOT
from docsite.errors import CompositionError
from docsite.services.composer import (
    LISTING_PAGE,
    PAGES,
    Composition,
    Fragment,
    TemplateComposer,
    compose,
    load_bundle,
)

_BASE = Fragment(
    name="base.html",
    source="<html><style>{{ page_styles }}</style>{% include 'content.html' %}</html>",
)
_CONTENT = Fragment(name="content.html", source="<h1>{{ title }}</h1>")
_STYLES = Fragment(name="page/styles.css", source="a > b { color: red; }", slot="page_styles")


class TestCompose:
    def test_base_includes_fragments_by_name(self):
        out = compose([_BASE, _CONTENT], {"title": "Hello"})
        assert "<h1>Hello</h1>" in out

    def test_view_data_is_escaped(self):
        out = compose([_BASE, _CONTENT], {"title": "<script>x</script>"})
        assert "&lt;script&gt;" in out
        assert "<script>x</script>" not in out

    def test_markup_is_not_escaped(self):
        out = compose([_BASE, _CONTENT], {"title": Markup("<em>trusted</em>")})
        assert "<h1><em>trusted</em></h1>" in out

    def test_slot_blocks_are_injected_raw(self):
        out = compose([_BASE, _CONTENT, _STYLES], {"title": "x"})
        assert "<style>a > b { color: red; }</style>" in out

    def test_view_data_cannot_replace_slot_blocks(self):
        out = compose([_BASE, _CONTENT, _STYLES], {"title": "x", "page_styles": "body{}"})
        assert "a > b { color: red; }" in out
        assert "body{}" not in out

    def test_missing_optional_keys_render_empty(self):
        content = Fragment(
            name="content.html",
            source="[{{ subtitle }}]{% for tag in tags %}<i>{{ tag }}</i>{% endfor %}",
        )
        out = compose([_BASE, content], {})
        assert "[]" in out
        assert "<i>" not in out


class TestCompositionErrors:
    def test_missing_entry_point(self):
        with pytest.raises(CompositionError):
            compose([_CONTENT], {})

    def test_missing_included_fragment(self):
        with pytest.raises(CompositionError):
            compose([_BASE], {"title": "x"})

    def test_unresolved_attribute_reference(self):
        content = Fragment(name="content.html", source="{{ doc.title }}")
        with pytest.raises(CompositionError):
            compose([_BASE, content], {})

    def test_duplicate_fragment_names(self):
        with pytest.raises(CompositionError):
            Composition([_BASE, _CONTENT, _CONTENT])

    def test_duplicate_slots(self):
        with pytest.raises(CompositionError):
            Composition([_BASE, _CONTENT, _STYLES, _STYLES])

    def test_syntax_error_fails_at_load(self):
        broken = Fragment(name="content.html", source="{% if %}")
        with pytest.raises(CompositionError):
            Composition([_BASE, broken])


class TestComposition:
    def test_renders_repeatedly(self):
        composition = Composition([_BASE, _CONTENT])
        assert "<h1>a</h1>" in composition.render({"title": "a"})
        assert "<h1>b</h1>" in composition.render({"title": "b"})


class TestTemplateComposer:
    def test_loads_every_page_bundle(self):
        composer = TemplateComposer.from_directory(CONTENT_ROOT)
        for page in PAGES:
            out = composer.render(page, {"title": "Smoke"})
            assert out.startswith("<!DOCTYPE html>")
            assert "Smoke" in out

    def test_bundle_contains_layout_partials_and_page_blocks(self):
        parts = load_bundle(CONTENT_ROOT, LISTING_PAGE)
        names = [p.name for p in parts if p.slot is None]
        slots = [p.slot for p in parts if p.slot is not None]
        assert names == [
            "base.html",
            "head.html",
            "navbar.html",
            "sidebar.html",
            "scripts.html",
            "content.html",
        ]
        assert slots == ["shared_styles", "shared_script", "page_styles", "page_script"]

    def test_shared_styles_are_embedded_unescaped(self):
        composer = TemplateComposer.from_directory(CONTENT_ROOT)
        out = composer.render(LISTING_PAGE, {})
        assert "--accent" in out
        assert "(e) =>" in out

    def test_unknown_page(self):
        composer = TemplateComposer.from_directory(CONTENT_ROOT, pages=[LISTING_PAGE])
        with pytest.raises(CompositionError):
            composer.render("nope/index", {})

    def test_missing_template_file(self, tmp_path):
        with pytest.raises(CompositionError):
            load_bundle(tmp_path, LISTING_PAGE)
