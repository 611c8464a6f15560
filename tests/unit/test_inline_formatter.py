"""Unit tests for inline span formatting."""

import pytest

from resumesync.contexts.markdown.inline_formatter import format_inline


@pytest.mark.unit
def test_bold_italic_and_link():
    """All three span types are converted in one line."""
    result = format_inline("**Bold** and *italic* and [x](http://y)")

    assert result == (
        '<strong>Bold</strong> and <em>italic</em> and <a href="http://y">x</a>'
    )


@pytest.mark.unit
def test_underscore_markers():
    """Double and single underscores behave like asterisks."""
    assert format_inline("__strong__ _soft_") == "<strong>strong</strong> <em>soft</em>"


@pytest.mark.unit
def test_bold_is_non_greedy():
    """Each bold pair wraps only its own run."""
    assert format_inline("**a** and **b**") == "<strong>a</strong> and <strong>b</strong>"


@pytest.mark.unit
def test_raw_bold_bullet_is_returned_unchanged():
    """Lines starting with '- **' are passed through as raw markdown."""
    assert format_inline("- **Foo**") == "- **Foo**"
    assert format_inline("- **Foo** with *more*") == "- **Foo** with *more*"


@pytest.mark.unit
def test_plain_dash_line_is_formatted():
    """Only the '- **' prefix triggers the passthrough."""
    assert format_inline("- *Foo*") == "- <em>Foo</em>"


@pytest.mark.unit
def test_plain_text_untouched():
    assert format_inline("Nothing to do here.") == "Nothing to do here."


@pytest.mark.unit
def test_no_block_wrapping():
    """Output never gets paragraph or list tags."""
    result = format_inline("A [link](https://example.com) only")
    assert not result.startswith("<p>")
    assert result == 'A <a href="https://example.com">link</a> only'
