"""Unit tests for Markdown rendering of slotted attribute text."""

import pytest

from bvmarkup.rendering import MarkdownContentRenderer


@pytest.fixture(scope="module")
def renderer():
    """Create a shared renderer."""
    return MarkdownContentRenderer()


@pytest.mark.unit
class TestMarkdownContentRenderer:
    """Tests for MarkdownContentRenderer."""

    def test_inline_strips_paragraph(self, renderer):
        """Test that inline rendering has no wrapping paragraph."""
        assert renderer.render("**Hi**") == "<strong>Hi</strong>"

    def test_block_keeps_paragraph(self, renderer):
        """Test that block rendering keeps the paragraph."""
        assert renderer.render("Hi", inline=False) == "<p>Hi</p>"

    def test_inline_multiple_paragraphs_kept(self, renderer):
        """Test that multi-paragraph text is not mangled."""
        html = renderer.render("one\n\ntwo")
        assert html.count("<p>") == 2

    def test_raw_html_preserved(self, renderer):
        """Test that embedded HTML is not escaped."""
        assert renderer.render("<b>x</b> and *y*") == "<b>x</b> and <em>y</em>"

    def test_empty_text(self, renderer):
        """Test rendering empty text."""
        assert renderer.render("") == ""
