"""
Block formatting for free-form sections (summary, learning).

A section body is split on blank-line runs into paragraph candidates and each
candidate becomes one or more HTML blocks:

    ---                 -> dropped
    ### Heading         -> <h3>
    #### Heading        -> <h4>
    - item / mixed      -> <ul> runs interleaved with <p> lines
    anything else       -> <p> with inline spans

The list/paragraph interleaving is driven by ListRunMachine so the
"flush on break" rule can be exercised on its own.
"""

from enum import Enum
from typing import List

from resumesync.contexts.markdown.inline_formatter import format_inline
from resumesync.contexts.markdown.markdown_patterns import MarkdownPatterns
from resumesync.utils.text_processing import split_paragraphs


class ListState(Enum):
    """State of the list-run machine."""

    NO_LIST = "no_list"
    IN_LIST = "in_list"


def render_list(items: List[str]) -> str:
    return "<ul>" + "".join(f"<li>{item}</li>" for item in items) + "</ul>"


def render_paragraph(text: str) -> str:
    return f"<p>{format_inline(text)}</p>"


class ListRunMachine:
    """
    Turns the lines of one paragraph candidate into list and paragraph blocks.

    Transitions:
        NO_LIST + bullet line     -> IN_LIST, start a list with the item
        IN_LIST + bullet line     -> IN_LIST, append the item
        IN_LIST + other line      -> NO_LIST, emit the list, then the line as <p>
        NO_LIST + other line      -> NO_LIST, emit the line as <p>
        finish() while IN_LIST    -> emit the list

    Blank lines never produce a paragraph but still end an open list.
    """

    def __init__(self):
        self.state = ListState.NO_LIST
        self.items: List[str] = []
        self.blocks: List[str] = []

    def feed(self, line: str) -> None:
        if line.startswith(MarkdownPatterns.BULLET):
            self.state = ListState.IN_LIST
            self.items.append(format_inline(line[len(MarkdownPatterns.BULLET):].strip()))
            return

        if self.state is ListState.IN_LIST:
            self._flush()

        if line.strip():
            self.blocks.append(render_paragraph(line))

    def finish(self) -> List[str]:
        if self.state is ListState.IN_LIST and self.items:
            self._flush()
        return self.blocks

    def _flush(self) -> None:
        self.blocks.append(render_list(self.items))
        self.items = []
        self.state = ListState.NO_LIST


def format_blocks(markdown: str, section_id: str = "") -> str:
    """
    Render a section body as HTML blocks.

    Args:
        markdown: Section body. Callers are expected to have run
            separate_bullet_lines() on it first.
        section_id: Section the body belongs to (carried for callers, unused here)

    Returns:
        Concatenated HTML for all blocks, in source order
    """
    html = []

    for paragraph in split_paragraphs(markdown):
        paragraph = paragraph.strip()

        if not paragraph or paragraph == MarkdownPatterns.HORIZONTAL_RULE:
            continue

        if paragraph.startswith(MarkdownPatterns.HEADING_3):
            html.append(f"<h3>{paragraph[len(MarkdownPatterns.HEADING_3):]}</h3>")
        elif paragraph.startswith(MarkdownPatterns.HEADING_4):
            html.append(f"<h4>{paragraph[len(MarkdownPatterns.HEADING_4):]}</h4>")
        elif paragraph.startswith(MarkdownPatterns.BULLET) or f"\n{MarkdownPatterns.BULLET}" in paragraph:
            machine = ListRunMachine()
            for line in paragraph.split("\n"):
                machine.feed(line)
            html.extend(machine.finish())
        else:
            html.append(render_paragraph(paragraph))

    return "".join(html)
