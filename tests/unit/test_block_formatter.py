"""Unit tests for block formatting and the list-run state machine."""

import pytest

from resumesync.contexts.markdown.block_formatter import ListRunMachine, ListState, format_blocks
from resumesync.utils.text_processing import separate_bullet_lines


class TestListRunMachine:
    """Tests for the NO_LIST / IN_LIST transitions."""

    @pytest.mark.unit
    def test_starts_without_list(self):
        machine = ListRunMachine()
        assert machine.state is ListState.NO_LIST
        assert machine.finish() == []

    @pytest.mark.unit
    def test_bullets_accumulate_into_one_list(self):
        machine = ListRunMachine()
        machine.feed("- a")
        machine.feed("- b")

        assert machine.state is ListState.IN_LIST
        assert machine.finish() == ["<ul><li>a</li><li>b</li></ul>"]

    @pytest.mark.unit
    def test_break_flushes_list_then_emits_paragraph(self):
        machine = ListRunMachine()
        machine.feed("- a")
        machine.feed("Trailing line")

        assert machine.state is ListState.NO_LIST
        assert machine.blocks == ["<ul><li>a</li></ul>", "<p>Trailing line</p>"]

    @pytest.mark.unit
    def test_blank_line_ends_list_without_paragraph(self):
        machine = ListRunMachine()
        machine.feed("- a")
        machine.feed("   ")
        machine.feed("- b")

        assert machine.finish() == ["<ul><li>a</li></ul>", "<ul><li>b</li></ul>"]

    @pytest.mark.unit
    def test_paragraph_before_list(self):
        machine = ListRunMachine()
        machine.feed("Intro")
        machine.feed("- a")

        assert machine.finish() == ["<p>Intro</p>", "<ul><li>a</li></ul>"]

    @pytest.mark.unit
    def test_items_get_inline_formatting(self):
        machine = ListRunMachine()
        machine.feed("- **Raft** deep dive")

        assert machine.finish() == ["<ul><li><strong>Raft</strong> deep dive</li></ul>"]


@pytest.mark.unit
def test_paragraphs_and_rules():
    """Blank-line separated text becomes paragraphs; --- is dropped."""
    html = format_blocks("First *one*\n\n---\n\nSecond")

    assert html == "<p>First <em>one</em></p><p>Second</p>"


@pytest.mark.unit
def test_headings():
    """### and #### paragraphs become h3 and h4."""
    html = format_blocks("### Topic\n\n#### Subtopic")

    assert html == "<h3>Topic</h3><h4>Subtopic</h4>"


@pytest.mark.unit
def test_list_followed_by_line_in_same_paragraph():
    """One paragraph candidate can yield a list and a trailing paragraph."""
    html = format_blocks("- a\n- b\nAfter the list")

    assert html == "<ul><li>a</li><li>b</li></ul><p>After the list</p>"


@pytest.mark.unit
def test_interior_bullet_triggers_list_handling():
    html = format_blocks("Intro line\n- item")

    assert html == "<p>Intro line</p><ul><li>item</li></ul>"


@pytest.mark.unit
def test_separated_bullets_render_as_sibling_lists():
    """After bullet separation each bullet is its own paragraph candidate."""
    body = separate_bullet_lines("Reading list:\n- One\n- Two")
    html = format_blocks(body, "learning")

    assert html == "<p>Reading list:</p><ul><li>One</li></ul><ul><li>Two</li></ul>"


@pytest.mark.unit
def test_empty_body():
    assert format_blocks("") == ""
    assert format_blocks("\n\n\n") == ""
