"""Unit tests for heading-preserving replacement targets."""

import pytest
from bs4 import BeautifulSoup

from resumesync.contexts.site.targets import HeadingPreservingTarget, add_class, parse_fragment


def _soup(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


@pytest.mark.unit
def test_parse_fragment_returns_top_level_nodes():
    nodes = parse_fragment("<p>a</p><ul><li>b</li></ul>")

    assert [node.name for node in nodes] == ["p", "ul"]


@pytest.mark.unit
def test_replace_children_keeps_heading_first():
    soup = _soup('<section id="s"><p>old</p><h2>Title</h2><div>old</div></section>')
    section = soup.find(id="s")

    target = HeadingPreservingTarget.from_anchor(section, "h2")
    target.replace_with_html("<p>new</p>")

    assert str(section) == '<section id="s"><h2>Title</h2><p>new</p></section>'


@pytest.mark.unit
def test_heading_class_is_added_once():
    soup = _soup('<section id="s"><h2 class="section-divider big">T</h2></section>')
    section = soup.find(id="s")

    HeadingPreservingTarget.from_anchor(section, "h2", "section-divider")

    assert section.h2["class"] == ["section-divider", "big"]


@pytest.mark.unit
def test_without_heading_everything_is_replaced():
    soup = _soup('<ul class="skills-list"><li>old</li></ul>')
    skills = soup.find("ul")

    HeadingPreservingTarget(skills).replace_with_html("<li>new</li>")

    assert str(skills) == '<ul class="skills-list"><li>new</li></ul>'


@pytest.mark.unit
def test_nested_heading_is_lifted_to_container():
    """The first matching heading is kept even when it was nested deeper."""
    soup = _soup('<section id="s"><header><h2>T</h2></header><p>old</p></section>')
    section = soup.find(id="s")

    HeadingPreservingTarget.from_anchor(section, "h2").replace_children([])

    assert str(section) == '<section id="s"><h2>T</h2></section>'


@pytest.mark.unit
def test_add_class_to_tag_without_classes():
    soup = _soup("<h2>T</h2>")
    add_class(soup.h2, "section-divider")

    assert soup.h2["class"] == ["section-divider"]
