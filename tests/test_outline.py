"""Tests for outline.extract_outline."""

from docsite.services.outline import OutlineHeading, extract_outline
from docsite.services.renderer import MarkdownRenderer


class TestExtractOutline:
    def test_collects_h2_and_h3_in_order(self):
        html = MarkdownRenderer().render(
            b"# Guide\n\n## Install\n\n### On Linux\n\n## Configure\n\n#### Details\n"
        )
        assert extract_outline(html) == [
            OutlineHeading(level=2, id="install", text="Install"),
            OutlineHeading(level=3, id="on-linux", text="On Linux"),
            OutlineHeading(level=2, id="configure", text="Configure"),
        ]

    def test_skips_headings_without_id(self):
        html = '<h2>No anchor</h2><h2 id="kept">Kept</h2>'
        assert [h.id for h in extract_outline(html)] == ["kept"]

    def test_normalises_whitespace_in_text(self):
        html = '<h3 id="x">Using   <code>kubectl</code>\n apply</h3>'
        assert extract_outline(html)[0].text == "Using kubectl apply"

    def test_empty_document(self):
        assert extract_outline("") == []
